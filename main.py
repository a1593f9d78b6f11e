from __future__ import annotations

"""Command-line front end for the liaison transforms.

    python main.py pullup "초성 올려 쓰기"
    echo "입울 밖은 윟엄해!" | python main.py pushdown --extended

With no TEXT arguments each line of stdin is transformed separately.
"""

import argparse
import logging
import os
import sys
from typing import Callable, Final, Optional, Sequence, TextIO

from hangul_liaison.domain.errors import HangulError
from hangul_liaison.domain.flip import flip_horizontally
from hangul_liaison.domain.liaison import pullup_with_options, pushdown_with_options
from hangul_liaison.services.settings_store import SettingsStore

logger = logging.getLogger("hangul_liaison")

SETTINGS_PATH = os.path.join(os.path.dirname(os.path.abspath(__file__)), "settings.yaml")

# name -> transform(text, extended)
TRANSFORMS: Final[dict[str, Callable[[str, bool], str]]] = {
    "pullup": pullup_with_options,
    "pushdown": pushdown_with_options,
    "flip": lambda text, extended: flip_horizontally(text),
}


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Simulate Korean liaison (연음) on text.")
    parser.add_argument("transform", choices=sorted(TRANSFORMS), help="Transform to apply.")
    parser.add_argument("text", nargs="*", help="Text to transform (default: read lines from stdin).")
    parser.add_argument(
        "--extended",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Use the extended (non-phonetic) ruleset. Defaults to the 'extended' setting.",
    )
    parser.add_argument("--settings", default=None, help="Path to settings.yaml.")
    parser.add_argument("--set-default-extended", action="store_true", help="Persist extended=true.")
    parser.add_argument("--clear-default-extended", action="store_true", help="Persist extended=false.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging.")
    return parser


def _configure_logging(store: SettingsStore, verbose: bool) -> None:
    level = "DEBUG" if verbose else store.get_log_level()
    logging.basicConfig(level=level, format="[%(levelname)s] %(name)s: %(message)s", stream=sys.stderr)


def _run(transform: Callable[[str, bool], str], texts: Sequence[str], extended: bool,
         stdin: TextIO, stdout: TextIO) -> None:
    if texts:
        stdout.write(transform(" ".join(texts), extended) + "\n")
        return
    for line in stdin:
        stdout.write(transform(line.rstrip("\n"), extended) + "\n")


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = _build_parser().parse_args(argv)

    store = SettingsStore(args.settings or SETTINGS_PATH)
    _configure_logging(store, args.verbose)

    if args.set_default_extended and args.clear_default_extended:
        logger.error("--set-default-extended and --clear-default-extended are mutually exclusive")
        return 2
    if args.set_default_extended:
        store.set_extended(True)
    elif args.clear_default_extended:
        store.set_extended(False)

    extended = store.get_extended() if args.extended is None else args.extended
    logger.debug("transform=%s extended=%s settings=%s", args.transform, extended, store.path)

    try:
        _run(TRANSFORMS[args.transform], args.text, extended, sys.stdin, sys.stdout)
    except (HangulError, OSError) as e:
        logger.error("Transform failed: %s", e)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
