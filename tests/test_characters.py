"""
Tests for characters.py - script classification and kana shifting.
"""

import pytest

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


class TestClassifyChar:
    """Tests for single character classification."""

    @pytest.mark.parametrize("char,expected", [
        ("あ", CharKind.HIRAGANA),
        ("ア", CharKind.KATAKANA),
        ("漢", CharKind.KANJI),
        ("a", CharKind.OTHER),
        ("1", CharKind.OTHER),
        ("。", CharKind.OTHER),
        ("ー", CharKind.KATAKANA),
    ])
    def test_basic(self, char, expected):
        assert classify_char(char) is expected

    @pytest.mark.parametrize("cp,expected", [
        (0x303F, CharKind.OTHER),
        (0x3040, CharKind.HIRAGANA),
        (0x309F, CharKind.HIRAGANA),
        (0x30A0, CharKind.KATAKANA),
        (0x30FF, CharKind.KATAKANA),
        (0x3100, CharKind.OTHER),
        (0x33FF, CharKind.OTHER),
        (0x3400, CharKind.KANJI),
        (0x4DBF, CharKind.KANJI),
        (0x4DC0, CharKind.OTHER),
        (0x4E00, CharKind.KANJI),
        (0x9FCF, CharKind.KANJI),
        (0x9FD0, CharKind.OTHER),
        (0xF8FF, CharKind.OTHER),
        (0xF900, CharKind.KANJI),
        (0xFAFF, CharKind.KANJI),
        (0xFB00, CharKind.OTHER),
    ])
    def test_range_boundaries(self, cp, expected):
        """Ranges are inclusive at both ends."""
        assert classify_char(chr(cp)) is expected

    def test_uses_first_code_point(self):
        assert classify_char("あa") is CharKind.HIRAGANA
        assert classify_char("aあ") is CharKind.OTHER

    def test_empty_is_other(self):
        assert classify_char("") is CharKind.OTHER

    def test_exactly_one_class(self):
        """Every code point falls in exactly one class."""
        for cp in range(0x3000, 0xFB10):
            char = chr(cp)
            matches = [is_hiragana(char), is_katakana(char), is_kanji(char)]
            assert sum(matches) <= 1
            assert (sum(matches) == 0) == (classify_char(char) is CharKind.OTHER)


class TestCharPredicates:
    """Tests for the derived per-character predicates."""

    def test_is_kana(self):
        assert is_kana("か")
        assert is_kana("カ")
        assert not is_kana("漢")
        assert not is_kana("k")

    def test_is_japanese(self):
        assert is_japanese("か")
        assert is_japanese("カ")
        assert is_japanese("漢")
        assert not is_japanese("k")
        assert not is_japanese("")


class TestStringContains:
    """Tests for string-level membership tests."""

    def test_has_functions(self):
        text = "abcカ"
        assert has_katakana(text)
        assert has_kana(text)
        assert has_japanese(text)
        assert not has_hiragana(text)
        assert not has_kanji(text)

    def test_kanji_only(self):
        assert has_kanji("東京")
        assert has_japanese("東京")
        assert not has_kana("東京")

    def test_empty_string(self):
        for kind in ("hiragana", "katakana", "kana", "kanji", "japanese", "other"):
            assert not string_contains("", kind)

    def test_accepts_char_kind(self):
        assert string_contains("xあ", CharKind.HIRAGANA)
        assert string_contains("xあ", CharKind.OTHER)
        assert not string_contains("あ", CharKind.OTHER)

    def test_name_is_case_insensitive(self):
        assert string_contains("漢", "KANJI")

    def test_unknown_kind(self):
        with pytest.raises(ValueError) as exc_info:
            string_contains("あ", "hangul")
        assert "hangul" in str(exc_info.value)


class TestClassifyString:
    """Tests for the four-way string composition classifier."""

    @pytest.mark.parametrize("text,expected", [
        ("漢字", StrType.PURE_KANJI),
        ("漢字かな", StrType.MIXED),
        ("カタカナ漢字", StrType.MIXED),
        ("ひらがなカタカナ", StrType.PURE_KANA),
        ("abc", StrType.OTHER),
        ("", StrType.OTHER),
        ("漢字!", StrType.PURE_KANJI),
        ("abc かな", StrType.PURE_KANA),
    ])
    def test_classify(self, text, expected):
        assert classify_string(text) is expected

    def test_codes(self):
        """Composition codes keep their numeric values."""
        assert classify_string("漢") == 0
        assert classify_string("漢か") == 1
        assert classify_string("か") == 2
        assert classify_string("") == 3


class TestKanaShift:
    """Tests for hiragana/katakana shifting."""

    def test_to_hiragana(self):
        assert to_hiragana("カタカナ") == "かたかな"
        assert to_hiragana("ァヴヵヶ") == "ぁゔゕゖ"

    def test_to_katakana(self):
        assert to_katakana("ひらがな") == "ヒラガナ"
        assert to_katakana("ぁゔゖ") == "ァヴヶ"

    def test_outside_range_unchanged(self):
        assert to_hiragana("漢字abcー゠ヷヺ") == "漢字abcー゠ヷヺ"
        assert to_katakana("漢字abc぀゙ゝ") == "漢字abc぀゙ゝ"

    def test_mixed_text(self):
        assert to_katakana("abc漢字ひら") == "abc漢字ヒラ"
        assert to_hiragana("コーヒー") == "こーひー"

    def test_round_trip(self):
        """Shifting is its own inverse within the shiftable range."""
        hiragana = "".join(chr(cp) for cp in range(0x3041, 0x3097))
        assert to_hiragana(to_katakana(hiragana)) == hiragana

        katakana = "".join(chr(cp) for cp in range(0x30A1, 0x30F7))
        assert to_katakana(to_hiragana(katakana)) == katakana

    def test_empty(self):
        assert to_hiragana("") == ""
        assert to_katakana("") == ""
