"""
Romanization module for kanaroma.

Converts kana text to romaji under the Passport or Hepburn convention.
Romanization runs in three phases:

1. Passport only: long-vowel marks (ー) are removed.
2. The text is tokenized by maximal munch against the convention's table
   (two-character digraphs before single characters; unknown characters
   are copied through).
3. The resulting buffer goes through an ordered list of rewrite rules that
   resolve small tsu, nasal assimilation, apostrophes and long vowels.

Rule order is significant: each rule sees the output of the previous one.
"""

import logging
import re
from dataclasses import dataclass
from enum import Enum
from typing import FrozenSet, Mapping, Optional, Tuple, Union

from kanaroma import settings
from kanaroma.romaji_tables import MAX_KEY_LENGTH, TABLES

logger = logging.getLogger(__name__)

LONG_VOWEL_MARK = "ー"


class Convention(Enum):
    """Romanization convention."""
    PASSPORT = "passport"
    HEPBURN = "hepburn"


class UnknownConventionError(ValueError):
    """Raised when a convention selector names no known convention."""

    def __init__(self, value):
        self.value = value
        valid = ', '.join(c.value for c in Convention)
        super().__init__(f"Unknown romanization convention: {value!r} (expected one of: {valid})")


def resolve_convention(value: Union[Convention, str, None] = None) -> Convention:
    """
    Get a convention from a Convention member or its name.

    Args:
        value: Convention, case-insensitive name, or None for the
               configured default (settings.DEFAULT_CONVENTION).

    Returns:
        Convention member.

    Raises:
        UnknownConventionError: If the value names no convention.
    """
    if value is None:
        value = settings.DEFAULT_CONVENTION

    if isinstance(value, Convention):
        return value

    if isinstance(value, str):
        name = value.strip().lower()
        for convention in Convention:
            if convention.value == name:
                return convention

    raise UnknownConventionError(value)


def get_table(convention: Union[Convention, str, None] = None) -> Mapping[str, str]:
    """Get the conversion table for a convention."""
    return TABLES[resolve_convention(convention).value]


# ============================================================================
# Rewrite Rules
# ============================================================================

ALL_CONVENTIONS = frozenset(Convention)
PASSPORT_ONLY = frozenset({Convention.PASSPORT})
HEPBURN_ONLY = frozenset({Convention.HEPBURN})


@dataclass(frozen=True)
class RewriteRule:
    """A global substitution applied to the romanized buffer."""
    name: str
    pattern: "re.Pattern[str]"
    replacement: str
    conventions: FrozenSet[Convention] = ALL_CONVENTIONS

    def applies_to(self, convention: Convention) -> bool:
        return convention in self.conventions

    def apply(self, text: str) -> str:
        return self.pattern.sub(self.replacement, text)


def _rule(name: str, pattern: str, replacement: str,
          conventions: FrozenSet[Convention] = ALL_CONVENTIONS,
          flags: int = 0) -> RewriteRule:
    return RewriteRule(name, re.compile(pattern, flags), replacement, conventions)


REWRITE_RULES: Tuple[RewriteRule, ...] = (
    # Small tsu doubles the following letter: っk -> kk
    _rule("gemination", r"[っッ]([bcdfghijklmnopqrstuvwyz])", r"\1\1"),
    # っち gives "cchi" above; spelled "tchi"
    _rule("tchi", r"cc", "tc", frozenset({Convention.PASSPORT, Convention.HEPBURN})),
    _rule("small_tsu", r"[っッ]", "tsu"),

    # Moraic n before labials
    _rule("nasal", r"nm", "mm", frozenset({Convention.PASSPORT, Convention.HEPBURN})),
    _rule("nasal", r"nb", "mb", frozenset({Convention.PASSPORT, Convention.HEPBURN})),
    _rule("nasal", r"np", "mp", frozenset({Convention.PASSPORT, Convention.HEPBURN})),

    # Also fires inside na/ni/.../nya produced by single table entries
    _rule("apostrophe", r"na", "n'a", HEPBURN_ONLY),
    _rule("apostrophe", r"ni", "n'i", HEPBURN_ONLY),
    _rule("apostrophe", r"nu", "n'u", HEPBURN_ONLY),
    _rule("apostrophe", r"ne", "n'e", HEPBURN_ONLY),
    _rule("apostrophe", r"no", "n'o", HEPBURN_ONLY),
    _rule("apostrophe", r"ny", "n'y", HEPBURN_ONLY),

    _rule("long_vowel", r"uu", "u", PASSPORT_ONLY),
    _rule("long_vowel", r"ou", "o", PASSPORT_ONLY),
    # "oo" is kept at the end of the text and before any line break
    _rule("long_vowel", r"oo(?![\r\n\u2028\u2029]|$)", "o", PASSPORT_ONLY, re.MULTILINE),

    _rule("macron", r"aー", "ā", HEPBURN_ONLY),
    _rule("macron", r"iー", "ī", HEPBURN_ONLY),
    _rule("macron", r"uー", "ū", HEPBURN_ONLY),
    _rule("macron", r"eー", "ē", HEPBURN_ONLY),
    _rule("macron", r"oー", "ō", HEPBURN_ONLY),
)


def apply_rewrite_rules(buffer: str, convention: Convention) -> str:
    """
    Apply every rewrite rule for a convention, in order.

    Args:
        buffer: Output of tokenize().
        convention: Active convention; rules for other conventions are skipped.

    Returns:
        The rewritten text.
    """
    for rule in REWRITE_RULES:
        if rule.applies_to(convention):
            buffer = rule.apply(buffer)
    return buffer


# ============================================================================
# Tokenization
# ============================================================================

def strip_long_vowels(text: str) -> str:
    """Remove every long-vowel mark (ー)."""
    return text.replace(LONG_VOWEL_MARK, "")


def tokenize(text: str, table: Mapping[str, str]) -> str:
    """
    Look up text in a conversion table by maximal munch.

    At each position the longest key is tried first, so digraphs such as
    きゃ are never split into き + ゃ. Characters with no entry are
    copied unchanged.

    Args:
        text: Kana text.
        table: Conversion table (see romaji_tables).

    Returns:
        The intermediate romanized buffer, before rewrite rules.
    """
    result = []
    pos = 0
    end = len(text)

    while pos < end:
        for size in range(MAX_KEY_LENGTH, 0, -1):
            chunk = text[pos:pos + size]
            if len(chunk) == size and chunk in table:
                result.append(table[chunk])
                pos += size
                break
        else:
            result.append(text[pos])
            pos += 1

    return ''.join(result)


# ============================================================================
# Main Romanization Function
# ============================================================================

def romanize(text: str, convention: Union[Convention, str, None] = None) -> str:
    """
    Romanize kana text.

    Args:
        text: Text to romanize. Kanji, Latin letters and other characters
              without a table entry pass through unchanged.
        convention: Convention member or name ('hepburn', 'passport').
                    Defaults to settings.DEFAULT_CONVENTION.

    Returns:
        Romanized string.

    Raises:
        UnknownConventionError: If the convention is not recognized.

    Example:
        >>> romanize("しんぶん")
        'shimbun'
        >>> romanize("ありがとう", "passport")
        'arigato'
    """
    convention = resolve_convention(convention)

    if convention is Convention.PASSPORT:
        text = strip_long_vowels(text)

    buffer = tokenize(text, TABLES[convention.value])
    result = apply_rewrite_rules(buffer, convention)

    logger.debug(f"romanize[{convention.value}] {text!r} -> {buffer!r} -> {result!r}")
    return result


def rule_names(convention: Optional[Convention] = None) -> Tuple[str, ...]:
    """
    List the distinct rule names in application order.

    Args:
        convention: Only include rules that apply to this convention.

    Returns:
        Tuple of rule names, each listed once.
    """
    names = []
    for rule in REWRITE_RULES:
        if convention is not None and not rule.applies_to(convention):
            continue
        if rule.name not in names:
            names.append(rule.name)
    return tuple(names)
