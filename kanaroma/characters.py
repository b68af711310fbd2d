"""
Character handling and kana conversion for kanaroma.

Provides character classification (hiragana, katakana, kanji) over fixed
Unicode block ranges, string-level membership tests, string composition
classification, and hiragana/katakana shifting.
"""

from enum import Enum, IntEnum
from typing import Callable, Dict, Tuple, Union

# ============================================================================
# Unicode Block Ranges
# ============================================================================

# Inclusive (first, last) code point ranges
HIRAGANA_RANGE: Tuple[int, int] = (0x3040, 0x309F)
KATAKANA_RANGE: Tuple[int, int] = (0x30A0, 0x30FF)
KANJI_RANGES: Tuple[Tuple[int, int], ...] = (
    (0x4E00, 0x9FCF),   # CJK Unified Ideographs
    (0xF900, 0xFAFF),   # CJK Compatibility Ideographs
    (0x3400, 0x4DBF),   # CJK Extension A
)

# Offsets between the hiragana and katakana blocks
KATAKANA_HIRAGANA_SHIFT = ord("ぁ") - ord("ァ")
HIRAGANA_KATAKANA_SHIFT = ord("ァ") - ord("ぁ")

# Exclusive bounds of the shiftable code points
SHIFTABLE_KATAKANA = (0x30A0, 0x30F7)
SHIFTABLE_HIRAGANA = (0x3040, 0x3097)


class CharKind(Enum):
    """Script class of a single character."""
    HIRAGANA = "hiragana"
    KATAKANA = "katakana"
    KANJI = "kanji"
    OTHER = "other"


class StrType(IntEnum):
    """Composition of a whole string."""
    PURE_KANJI = 0
    MIXED = 1
    PURE_KANA = 2
    OTHER = 3


# ============================================================================
# Character Testing Functions
# ============================================================================

def _first_code_point(ch: str) -> int:
    # Callers may pass whole strings; only the leading code point counts.
    return ord(ch[0]) if ch else -1


def _in_range(cp: int, bounds: Tuple[int, int]) -> bool:
    return bounds[0] <= cp <= bounds[1]


def classify_char(ch: str) -> CharKind:
    """
    Get the script class of a character.

    Only the first code point of ``ch`` is examined, so combining sequences
    must be split by code point beforehand.

    Args:
        ch: A single character (longer strings use their first code point).

    Returns:
        The CharKind of the character. Empty input is CharKind.OTHER.
    """
    cp = _first_code_point(ch)
    if _in_range(cp, HIRAGANA_RANGE):
        return CharKind.HIRAGANA
    if _in_range(cp, KATAKANA_RANGE):
        return CharKind.KATAKANA
    if any(_in_range(cp, bounds) for bounds in KANJI_RANGES):
        return CharKind.KANJI
    return CharKind.OTHER


def is_hiragana(ch: str) -> bool:
    """Check if a character is hiragana."""
    return classify_char(ch) is CharKind.HIRAGANA


def is_katakana(ch: str) -> bool:
    """Check if a character is katakana."""
    return classify_char(ch) is CharKind.KATAKANA


def is_kana(ch: str) -> bool:
    """Check if a character is hiragana or katakana."""
    return classify_char(ch) in (CharKind.HIRAGANA, CharKind.KATAKANA)


def is_kanji(ch: str) -> bool:
    """Check if a character is kanji."""
    return classify_char(ch) is CharKind.KANJI


def is_japanese(ch: str) -> bool:
    """Check if a character is kana or kanji."""
    return classify_char(ch) is not CharKind.OTHER


def _is_other(ch: str) -> bool:
    return classify_char(ch) is CharKind.OTHER


# ============================================================================
# String Testing Functions
# ============================================================================

CHAR_PREDICATES: Dict[str, Callable[[str], bool]] = {
    'hiragana': is_hiragana,
    'katakana': is_katakana,
    'kana': is_kana,
    'kanji': is_kanji,
    'japanese': is_japanese,
    'other': _is_other,
}


def string_contains(text: str, kind: Union[CharKind, str]) -> bool:
    """
    Test if any character of a string belongs to a character class.

    Args:
        text: The string to scan.
        kind: A CharKind, or one of 'hiragana', 'katakana', 'kana', 'kanji',
              'japanese', 'other'.

    Returns:
        True on the first matching character, False otherwise.

    Raises:
        ValueError: If ``kind`` is not a known class name.
    """
    name = kind.value if isinstance(kind, CharKind) else str(kind).lower()
    predicate = CHAR_PREDICATES.get(name)
    if predicate is None:
        valid = ', '.join(CHAR_PREDICATES)
        raise ValueError(f"Unknown character class: {kind!r} (expected one of: {valid})")
    return any(predicate(char) for char in text)


def has_hiragana(text: str) -> bool:
    """Check if a string contains any hiragana."""
    return string_contains(text, CharKind.HIRAGANA)


def has_katakana(text: str) -> bool:
    """Check if a string contains any katakana."""
    return string_contains(text, CharKind.KATAKANA)


def has_kana(text: str) -> bool:
    """Check if a string contains any kana."""
    return string_contains(text, 'kana')


def has_kanji(text: str) -> bool:
    """Check if a string contains any kanji."""
    return string_contains(text, CharKind.KANJI)


def has_japanese(text: str) -> bool:
    """Check if a string contains any kana or kanji."""
    return string_contains(text, 'japanese')


def classify_string(text: str) -> StrType:
    """
    Classify the script composition of a string.

    Characters outside the kana and kanji blocks are ignored, so "漢字!"
    is still pure kanji.

    Args:
        text: The string to classify.

    Returns:
        StrType.PURE_KANJI, MIXED, PURE_KANA, or OTHER when the string holds
        neither kana nor kanji (including the empty string).
    """
    seen_kanji = False
    seen_kana = False

    for char in text:
        kind = classify_char(char)
        if kind is CharKind.KANJI:
            seen_kanji = True
        elif kind is not CharKind.OTHER:
            seen_kana = True

    if seen_kanji and seen_kana:
        return StrType.MIXED
    if seen_kanji:
        return StrType.PURE_KANJI
    if seen_kana:
        return StrType.PURE_KANA
    return StrType.OTHER


# ============================================================================
# Kana Conversion
# ============================================================================

def _shift(text: str, bounds: Tuple[int, int], offset: int) -> str:
    low, high = bounds
    result = []
    for char in text:
        cp = ord(char)
        if low < cp < high:
            result.append(chr(cp + offset))
        else:
            result.append(char)
    return ''.join(result)


def to_hiragana(text: str) -> str:
    """
    Convert katakana to hiragana.

    Code points from ァ (U+30A1) to ヶ (U+30F6) move to the hiragana block;
    everything else, including ー and the katakana-only ヷ..ヺ, is unchanged.

    Args:
        text: Text to convert.

    Returns:
        Text with katakana converted to hiragana.
    """
    return _shift(text, SHIFTABLE_KATAKANA, KATAKANA_HIRAGANA_SHIFT)


def to_katakana(text: str) -> str:
    """
    Convert hiragana to katakana.

    Args:
        text: Text to convert.

    Returns:
        Text with hiragana (ぁ U+3041 to ゖ U+3096) converted to katakana.
    """
    return _shift(text, SHIFTABLE_HIRAGANA, HIRAGANA_KATAKANA_SHIFT)
