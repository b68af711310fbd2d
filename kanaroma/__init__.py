"""
kanaroma: Japanese script classification and kana romanization.
"""

__version__ = "0.1.0"

from kanaroma.characters import (
    CharKind,
    StrType,
    classify_char,
    classify_string,
    has_hiragana,
    has_japanese,
    has_kana,
    has_kanji,
    has_katakana,
    is_hiragana,
    is_japanese,
    is_kana,
    is_kanji,
    is_katakana,
    string_contains,
    to_hiragana,
    to_katakana,
)
from kanaroma.romanize import Convention, UnknownConventionError, romanize

__all__ = [
    'CharKind',
    'StrType',
    'Convention',
    'UnknownConventionError',
    'classify_char',
    'classify_string',
    'has_hiragana',
    'has_japanese',
    'has_kana',
    'has_kanji',
    'has_katakana',
    'is_hiragana',
    'is_japanese',
    'is_kana',
    'is_kanji',
    'is_katakana',
    'string_contains',
    'to_hiragana',
    'to_katakana',
    'romanize',
]
