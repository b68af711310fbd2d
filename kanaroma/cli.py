"""
Command line interface for kanaroma.

Usage:
    python -m kanaroma.cli "しんぶん"                 # Hepburn romaji
    python -m kanaroma.cli -s passport "ありがとう"   # Passport romaji
    python -m kanaroma.cli classify "漢字とかな"
    python -m kanaroma.cli hiragana "カタカナ"
    python -m kanaroma.cli katakana "ひらがな"
    python -m kanaroma.cli rules -s hepburn
"""

import argparse
import logging
import sys
from typing import Optional

from kanaroma import __version__, settings
from kanaroma.characters import CharKind, classify_string, string_contains, to_hiragana, to_katakana
from kanaroma.romanize import Convention, UnknownConventionError, resolve_convention, romanize, rule_names

CONVENTION_CHOICES = [c.value for c in Convention]


def configure_logging(debug: bool) -> None:
    """Send DEBUG logging to stderr when requested."""
    if debug or settings.DEBUG:
        logging.basicConfig(level=logging.DEBUG, format=settings.LOG_FORMAT, stream=sys.stderr)


def main_classify(args: list) -> int:
    """CLI entry point for classify subcommand."""
    parser = argparse.ArgumentParser(
        description='Report which Japanese scripts a text contains',
        prog='kanaroma classify',
    )
    parser.add_argument('text', nargs='+', help='Text to classify')
    parsed = parser.parse_args(args)

    text = ' '.join(parsed.text)
    print(classify_string(text).name)
    for kind in (CharKind.HIRAGANA, CharKind.KATAKANA, CharKind.KANJI, 'japanese'):
        label = kind.value if isinstance(kind, CharKind) else kind
        print(f"  {label + ':':<10}{'yes' if string_contains(text, kind) else 'no'}")
    return 0


def main_shift(args: list, target: str) -> int:
    """CLI entry point for hiragana and katakana subcommands."""
    parser = argparse.ArgumentParser(
        description=f'Convert kana in a text to {target}',
        prog=f'kanaroma {target}',
    )
    parser.add_argument('text', nargs='+', help='Text to convert')
    parsed = parser.parse_args(args)

    text = ' '.join(parsed.text)
    print(to_hiragana(text) if target == 'hiragana' else to_katakana(text))
    return 0


def main_rules(args: list) -> int:
    """CLI entry point for rules subcommand."""
    parser = argparse.ArgumentParser(
        description='List the rewrite passes applied after table lookup',
        prog='kanaroma rules',
    )
    parser.add_argument(
        '-s', '--system',
        choices=CONVENTION_CHOICES,
        default=None,
        help='Only list passes used by this convention',
    )
    parsed = parser.parse_args(args)

    convention = resolve_convention(parsed.system) if parsed.system else None
    for i, name in enumerate(rule_names(convention), 1):
        print(f"{i}. {name}")
    return 0


SUBCOMMANDS = {
    'classify': main_classify,
    'hiragana': lambda args: main_shift(args, 'hiragana'),
    'katakana': lambda args: main_shift(args, 'katakana'),
    'rules': main_rules,
}


def main(args: Optional[list] = None) -> int:
    """Main CLI entry point."""
    args_list = args if args is not None else sys.argv[1:]

    if args_list and args_list[0] in SUBCOMMANDS:
        configure_logging(False)
        try:
            return SUBCOMMANDS[args_list[0]](args_list[1:])
        except UnknownConventionError as e:
            print(f"Error: {e}", file=sys.stderr)
            return 1

    parser = argparse.ArgumentParser(
        description='Command line interface for kanaroma (kana romanization)',
        prog='kanaroma',
        epilog=(
            'Subcommands:\n'
            '  kanaroma classify TEXT    Report the scripts used in TEXT\n'
            '  kanaroma hiragana TEXT    Convert katakana to hiragana\n'
            '  kanaroma katakana TEXT    Convert hiragana to katakana\n'
            '  kanaroma rules            List the rewrite passes'
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        'text',
        nargs='*',
        help='Kana text to romanize',
    )

    parser.add_argument(
        '-s', '--system',
        choices=CONVENTION_CHOICES,
        default=None,
        help=f'Romanization convention (default: {settings.DEFAULT_CONVENTION})',
    )

    parser.add_argument(
        '--debug',
        action='store_true',
        help='Log intermediate buffers to stderr',
    )

    parser.add_argument(
        '-v', '--version',
        action='store_true',
        help='Show version information',
    )

    parsed = parser.parse_args(args_list)

    if parsed.version:
        print(f'kanaroma {__version__}')
        return 0

    text = ' '.join(parsed.text)
    if not text:
        parser.print_help()
        return 1

    configure_logging(parsed.debug)

    try:
        print(romanize(text, parsed.system))
    except UnknownConventionError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == '__main__':
    sys.exit(main())
