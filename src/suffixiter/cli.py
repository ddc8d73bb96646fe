from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from .errors import EncodingError
from .iter import SeqSuffixes, TextSuffixes


logger = logging.getLogger(__name__)


def _read_input(args: argparse.Namespace) -> bytes:
    if args.file is not None:
        p = Path(args.file).expanduser().resolve()
        logger.debug("reading %s", p)
        return p.read_bytes()
    if args.text is not None:
        return args.text.encode("utf-8")
    logger.debug("reading stdin")
    return sys.stdin.buffer.read()


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(prog="suffixiter", description="Print the suffixes of a text")
    ap.add_argument("text", nargs="?", help="Input text (default: stdin)")
    ap.add_argument("-f", "--file", help="Read the input from a file")
    ap.add_argument(
        "--seq",
        action="store_true",
        help="Treat the input as whitespace-separated tokens instead of text",
    )
    mode = ap.add_mutually_exclusive_group()
    mode.add_argument("--count", action="store_true", help="Print only the number of suffixes")
    mode.add_argument("--hint", action="store_true", help="Print the lower and upper size bounds")
    ap.add_argument(
        "--json",
        action="store_true",
        help="Print the result as JSON (unambiguous when suffixes contain newlines)",
    )
    ap.add_argument("--validate", action="store_true", help="Reject input that is not valid UTF-8")
    ap.add_argument("-v", "--verbose", action="store_true", help="Log progress to stderr")
    args = ap.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    data = _read_input(args)
    try:
        text_it = TextSuffixes(data, validate=args.validate)
    except EncodingError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    if args.seq:
        tokens = text_it.view.decode("replace").split()
        logger.debug("sequence mode: %d tokens", len(tokens))
        it: TextSuffixes | SeqSuffixes[str] = SeqSuffixes(tokens)
    else:
        logger.debug("text mode: %d bytes", len(data))
        it = text_it

    if args.count:
        n = it.count()
        print(json.dumps({"count": n}) if args.json else n)
        return 0
    if args.hint:
        lo, hi = it.size_hint()
        print(json.dumps({"lower": lo, "upper": hi}) if args.json else f"{lo} {hi}")
        return 0

    if args.seq:
        out = [" ".join(view) for view in it]
    else:
        out = [view.decode("replace") for view in it]
    logger.debug("produced %d suffixes", len(out))
    if args.json:
        print(json.dumps(out, ensure_ascii=False, indent=2))
    else:
        for line in out:
            print(line, end="" if line.endswith("\n") else "\n")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
