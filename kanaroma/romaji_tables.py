"""
Kana to romaji conversion tables for kanaroma.

Each table maps a one- or two-character key to its Latin rendering.
Both conventions share the digits, symbols, plain kana and standard
digraphs; they differ on ヴ and on the loanword digraphs, which only
the Hepburn table defines.

The long-vowel mark ー and the small tsu っ/ッ are not keys: the
rewrite rules in romanize.py resolve them after lookup.
"""

from types import MappingProxyType
from typing import Dict, Mapping


# ============================================================================
# Digits and Symbols
# ============================================================================

SYMBOLS: Dict[str, str] = {
    "１": "1", "２": "2", "３": "3", "４": "4", "５": "5",
    "６": "6", "７": "7", "８": "8", "９": "9", "０": "0",
    "！": "!", "“": '"', "”": '"', "＃": "#", "＄": "$",
    "％": "%", "＆": "&", "’": "'", "（": "(", "）": ")",
    "＝": "=", "～": "~", "｜": "|", "＠": "@", "‘": "`",
    "＋": "+", "＊": "*", "；": ";", "：": ":", "＜": "<",
    "＞": ">", "、": ",", "。": ".", "／": "/", "？": "?",
    "＿": "_", "・": "･", "「": '"', "」": '"', "｛": "{",
    "｝": "}", "￥": "\\", "＾": "^",
    "　": " ",
}


# ============================================================================
# Kana
# ============================================================================

# Romaji -> (hiragana, katakana) rows, expanded into both scripts below
_BASIC_ROWS = {
    "a":  "あア",  "i":   "いイ",  "u":   "うウ",  "e":  "えエ",  "o":  "おオ",
    "ka": "かカ",  "ki":  "きキ",  "ku":  "くク",  "ke": "けケ",  "ko": "こコ",
    "sa": "さサ",  "shi": "しシ",  "su":  "すス",  "se": "せセ",  "so": "そソ",
    "ta": "たタ",  "chi": "ちチ",  "tsu": "つツ",  "te": "てテ",  "to": "とト",
    "na": "なナ",  "ni":  "にニ",  "nu":  "ぬヌ",  "ne": "ねネ",  "no": "のノ",
    "ha": "はハ",  "hi":  "ひヒ",  "fu":  "ふフ",  "he": "へヘ",  "ho": "ほホ",
    "ma": "まマ",  "mi":  "みミ",  "mu":  "むム",  "me": "めメ",  "mo": "もモ",
    "ya": "やヤ",                  "yu":  "ゆユ",                 "yo": "よヨ",
    "ra": "らラ",  "ri":  "りリ",  "ru":  "るル",  "re": "れレ",  "ro": "ろロ",
    "wa": "わワ",
    "ga": "がガ",  "gi":  "ぎギ",  "gu":  "ぐグ",  "ge": "げゲ",  "go": "ごゴ",
    "za": "ざザ",  "ji":  "じジ",  "zu":  "ずズ",  "ze": "ぜゼ",  "zo": "ぞゾ",
    "da": "だダ",                                  "de": "でデ",  "do": "どド",
    "ba": "ばバ",  "bi":  "びビ",  "bu":  "ぶブ",  "be": "べベ",  "bo": "ぼボ",
    "pa": "ぱパ",  "pi":  "ぴピ",  "pu":  "ぷプ",  "pe": "ぺペ",  "po": "ぽポ",
    "n":  "んン",
}

# Kana whose romaji collides with another row
_EXTRA_KANA = {
    "ゐ": "i", "ゑ": "e", "を": "o", "ヰ": "i", "ヱ": "e", "ヲ": "o",
    "ぢ": "ji", "づ": "zu", "ヂ": "ji", "ヅ": "zu",
}

# Small kana
_SMALL_KANA = {
    "ぁ": "a", "ぃ": "i", "ぅ": "u", "ぇ": "e", "ぉ": "o",
    "ゃ": "ya", "ゅ": "yu", "ょ": "yo", "ゎ": "wa",
    "ァ": "a", "ィ": "i", "ゥ": "u", "ェ": "e", "ォ": "o",
    "ャ": "ya", "ュ": "yu", "ョ": "yo", "ヮ": "wa",
    "ヵ": "ka", "ヶ": "ke",
}

# Yoon: base kana -> romaji stem for the ゃ/ゅ/ょ combinations
_YOON_STEMS = {
    "きキ": "ky", "しシ": "sh", "ちチ": "ch", "にニ": "ny", "ひヒ": "hy",
    "みミ": "my", "りリ": "ry", "ぎギ": "gy", "じジ": "j",  "ぢヂ": "j",
    "びビ": "by", "ぴピ": "py",
}
_YOON_VOWELS = {"ゃャ": "a", "ゅュ": "u", "ょョ": "o"}


def _expand_rows(rows: Dict[str, str]) -> Dict[str, str]:
    table = {}
    for romaji, chars in rows.items():
        for char in chars:
            table[char] = romaji
    return table


def _expand_yoon() -> Dict[str, str]:
    table = {}
    for bases, stem in _YOON_STEMS.items():
        for vowels, vowel in _YOON_VOWELS.items():
            # index 0 is hiragana, index 1 katakana
            for i in (0, 1):
                table[bases[i] + vowels[i]] = stem + vowel
    return table


COMMON_TABLE: Dict[str, str] = {
    **SYMBOLS,
    **_expand_rows(_BASIC_ROWS),
    **_EXTRA_KANA,
    **_expand_yoon(),
    **_SMALL_KANA,
}


# ============================================================================
# Convention-specific Entries
# ============================================================================

PASSPORT_EXTRAS: Dict[str, str] = {
    "ヴ": "b",
}

# Loanword digraphs (外来音)
HEPBURN_EXTRAS: Dict[str, str] = {
    "いぇ": "ye", "うぃ": "wi", "うぇ": "we", "うぉ": "wo", "きぇ": "kye",
    "くぁ": "kwa", "くぃ": "kwi", "くぇ": "kwe", "くぉ": "kwo",
    "ぐぁ": "gwa", "ぐぃ": "gwi", "ぐぇ": "gwe", "ぐぉ": "gwo",
    "イェ": "ye", "ウィ": "wi", "ウェ": "we", "ウォ": "wo",
    "ヴ": "vu", "ヴァ": "va", "ヴィ": "vi", "ヴェ": "ve", "ヴォ": "vo",
    "ヴュ": "vyu", "ヴョ": "vyo",
    # Not "kye", unlike hiragana きぇ
    "キェ": "kya",
    "クァ": "kwa", "クィ": "kwi", "クェ": "kwe", "クォ": "kwo",
    "グァ": "gwa", "グィ": "gwi", "グェ": "gwe", "グォ": "gwo",

    "しぇ": "she", "じぇ": "je", "ちぇ": "che",
    "つぁ": "tsa", "つぃ": "tsi", "つぇ": "tse", "つぉ": "tso",
    "てぃ": "ti", "てゅ": "tyu", "でぃ": "di", "でゅ": "dyu",
    "とぅ": "tu", "どぅ": "du", "にぇ": "nye", "ひぇ": "hye",
    "ふぁ": "fa", "ふぃ": "fi", "ふぇ": "fe", "ふぉ": "fo",
    "ふゅ": "fyu", "ふょ": "fyo",
    "シェ": "she", "ジェ": "je", "チェ": "che",
    "ツァ": "tsa", "ツィ": "tsi", "ツェ": "tse", "ツォ": "tso",
    "ティ": "ti", "テュ": "tyu", "ディ": "di", "デュ": "dyu",
    "トゥ": "tu", "ドゥ": "du", "ニェ": "nye", "ヒェ": "hye",
    "ファ": "fa", "フィ": "fi", "フェ": "fe", "フォ": "fo",
    "フュ": "fyu", "フョ": "fyo",
}


PASSPORT_TABLE: Mapping[str, str] = MappingProxyType({**COMMON_TABLE, **PASSPORT_EXTRAS})
HEPBURN_TABLE: Mapping[str, str] = MappingProxyType({**COMMON_TABLE, **HEPBURN_EXTRAS})

# Convention value -> table
TABLES: Mapping[str, Mapping[str, str]] = MappingProxyType({
    "passport": PASSPORT_TABLE,
    "hepburn": HEPBURN_TABLE,
})

# Longest key in any table; the tokenizer never looks past it
MAX_KEY_LENGTH = max(len(key) for table in TABLES.values() for key in table)
