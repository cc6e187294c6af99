#!/usr/bin/env python3
"""
Command-line interface for Tasrif.

Usage:
    tasrif past ك ت ب
    tasrif present كتب --native
    tasrif past ك-ت-ب --json
    tasrif irregular hollow
    tasrif pronouns
    tasrif serve --port 8000
"""

import argparse
import logging
import sys
from typing import List, Optional, Sequence, Tuple

from . import __version__
from .config import get_settings
from .conjugator import conjugate
from .irregular import UnknownVerbTypeError, get_irregular, list_irregular
from .paradigms import PRONOUN_TABLE
from .root_types import InvalidRootError, parse_root

logger = logging.getLogger(__name__)

EXIT_INVALID_INPUT = 2


def format_table(rows: Sequence[Tuple[str, str]]) -> str:
    """Two aligned columns: pronoun, verb."""
    width = max((len(pronoun) for pronoun, _ in rows), default=0)
    return "\n".join(f"  {pronoun:<{width}}  {verb}" for pronoun, verb in rows)


def _root_arg(letters: List[str]):
    # One argument ("كتب", "ك-ت-ب") or three separate letters
    return parse_root(letters[0] if len(letters) == 1 else letters)


def cmd_conjugate(args) -> int:
    try:
        result = conjugate(_root_arg(args.root), args.tense)
    except InvalidRootError as e:
        print(f"Error: {e.message}", file=sys.stderr)
        return EXIT_INVALID_INPUT

    if args.json:
        from .view import format_json
        from .web.models.schemas import ConjugationResponse
        print(format_json(ConjugationResponse.from_result(result, keys="native")))
        return 0

    rows = result.by_native_label() if args.native else result.by_label()
    print(f"Root: {result.root.display()}  ({result.tense.value})")
    print("-" * 40)
    print(format_table(rows))
    return 0


def cmd_irregular(args) -> int:
    if not args.category:
        for verb in list_irregular():
            print(f"  {verb.category:<14} {verb.type_name_ar:<6} {verb.root.display()}")
        return 0

    try:
        verb = get_irregular(args.category)
    except UnknownVerbTypeError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_INVALID_INPUT

    result = verb.conjugation()
    rows = result.by_native_label() if args.native else result.by_label()
    print(f"{verb.category} ({verb.type_name_ar})  Root: {verb.root.display()}")
    print(verb.rule)
    print("-" * 40)
    print(format_table(rows))
    return 0


def cmd_pronouns(args) -> int:
    rows = [
        (p.code, f"{p.label:<15} {p.native_label:<9} past: {p.past_suffix}  present: {p.present_prefix}...{p.present_suffix}")
        for p in PRONOUN_TABLE
    ]
    print(format_table(rows))
    return 0


def cmd_serve(args) -> int:
    import uvicorn
    settings = get_settings()
    host = args.host or settings.host
    port = args.port or settings.port
    logger.info("Serving on http://%s:%d", host, port)
    uvicorn.run("tasrif.web.main:app", host=host, port=port, reload=args.reload)
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tasrif",
        description="Arabic verb conjugation tables",
    )
    parser.add_argument('--version', action='version', version=f"%(prog)s {__version__}")
    parser.add_argument('--log-level', default=None, help='Logging level (default: TASRIF_LOG_LEVEL or INFO)')
    sub = parser.add_subparsers(dest='command', required=True)

    for tense in ('past', 'present'):
        p = sub.add_parser(tense, help=f'Conjugate a root in the {tense} tense')
        p.add_argument('root', nargs='+', help='Root as one word (كتب) or three letters (ك ت ب)')
        p.add_argument('--native', action='store_true', help='Key rows by the Arabic pronoun')
        p.add_argument('--json', action='store_true', help='Print the API response structure')
        p.set_defaults(func=cmd_conjugate, tense=tense)

    p = sub.add_parser('irregular', help='Show an irregular verb paradigm')
    p.add_argument('category', nargs='?', help='hollow, weak-final, weak-initial or doubled')
    p.add_argument('--native', action='store_true', help='Key rows by the Arabic pronoun')
    p.set_defaults(func=cmd_irregular)

    p = sub.add_parser('pronouns', help='Show the pronoun table')
    p.set_defaults(func=cmd_pronouns)

    p = sub.add_parser('serve', help='Run the web app')
    p.add_argument('--host', default=None)
    p.add_argument('--port', type=int, default=None)
    p.add_argument('--reload', action='store_true')
    p.set_defaults(func=cmd_serve)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=(args.log_level or get_settings().log_level).upper(),
        format='%(asctime)s [%(levelname)s] %(message)s'
    )

    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
