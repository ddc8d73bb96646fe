from __future__ import annotations

import argparse
from pathlib import Path

from suffixiter import TextSuffixes


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(prog="count_corpus")
    ap.add_argument("corpus_dir", help="Directory written by generate_corpus.py")
    args = ap.parse_args(argv)

    total = 0
    for p in sorted(Path(args.corpus_dir).glob("*.txt")):
        data = p.read_bytes()
        n = TextSuffixes(data).count()
        stepped = sum(1 for _ in TextSuffixes(data))
        if n != stepped:
            raise SystemExit(f"{p.name}: count() = {n}, stepping = {stepped}")
        print(f"{p.name} {len(data)} {n}")
        total += n

    print(f"total {total}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
