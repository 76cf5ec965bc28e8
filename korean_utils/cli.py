from __future__ import annotations

"""Command-line front end: `korean-utils <command> ...`.

Search commands print true/false and exit with 0/1 so they can be used in
shell conditionals. Everything else prints its result on one line (ngram
prints one gram per line).
"""

import argparse
import logging
import sys
from typing import Callable, Optional, Sequence

from korean_utils.domain.composition import compose
from korean_utils.domain.decomposition import decompose
from korean_utils.domain.search import contains, ends_with, starts_with
from korean_utils.services.josa import Josa, attach_josa
from korean_utils.services.keyboard import english_typed_to_korean, korean_typed_to_english
from korean_utils.services.ngram import ngram
from korean_utils.services.settings_store import SettingsStore
from korean_utils.services.text_length import length

logger = logging.getLogger(__name__)

_SEARCHES: dict[str, Callable[[str, str], bool]] = {
    "contains": contains,
    "startswith": starts_with,
    "endswith": ends_with,
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="korean-utils", description="Hangul composition, decomposition and search.")
    parser.add_argument(
        "--log-level",
        choices=("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"),
        default=None,
        help="override the log_level setting",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    p = sub.add_parser("compose", help="compose jamo into syllables")
    p.add_argument("text")

    p = sub.add_parser("decompose", help="decompose syllables into jamo")
    p.add_argument("text")
    p.add_argument("--conjoining", action="store_true", help="emit conjoining jamo (U+1100..) instead of compatibility jamo")
    p.add_argument("--keep-compounds", action="store_true", help="do not split compound jamo (ㄺ, ㅘ)")

    for name in _SEARCHES:
        p = sub.add_parser(name, help="jamo-aware %s test" % name)
        p.add_argument("text")
        p.add_argument("query")

    p = sub.add_parser("typed-to-korean", help="read Latin keystrokes as two-set Hangul")
    p.add_argument("text")

    p = sub.add_parser("typed-to-english", help="show the two-set keystrokes for Hangul text")
    p.add_argument("text")

    p = sub.add_parser("josa", help="attach a particle")
    p.add_argument("text")
    p.add_argument("josa", choices=[j.name for j in Josa], type=str.upper)

    p = sub.add_parser("ngram", help="jamo N-grams")
    p.add_argument("text")
    p.add_argument("-n", "--length", type=int, default=2)
    p.add_argument("--split", action="store_true", help="emit raw jamo windows")

    p = sub.add_parser("length", help="display length")
    p.add_argument("text")
    p.add_argument("--hangul-width", type=int, default=None)

    return parser


def _configure_logging(level: Optional[str]) -> None:
    if level is None:
        level = SettingsStore().get_log_level()
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    _configure_logging(args.log_level)
    logger.debug("Running %s", args.command)

    if args.command in _SEARCHES:
        found = _SEARCHES[args.command](args.text, args.query)
        print("true" if found else "false")
        return 0 if found else 1

    try:
        if args.command == "compose":
            print(compose(args.text))
        elif args.command == "decompose":
            print(decompose(args.text, use_compatibility=not args.conjoining, split_compounds=not args.keep_compounds))
        elif args.command == "typed-to-korean":
            print(english_typed_to_korean(args.text))
        elif args.command == "typed-to-english":
            print(korean_typed_to_english(args.text))
        elif args.command == "josa":
            print(attach_josa(args.text, Josa[args.josa]))
        elif args.command == "ngram":
            for gram in ngram(args.text, args.length, split_compounds=args.split):
                print(gram)
        elif args.command == "length":
            print(length(args.text, args.hangul_width))
    except ValueError as e:
        parser.error(str(e))
    return 0


if __name__ == "__main__":
    sys.exit(main())
