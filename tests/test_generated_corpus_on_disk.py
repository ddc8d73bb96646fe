from __future__ import annotations

import os
from pathlib import Path

from suffixiter import TextSuffixes
from suffixiter.testing import WIDTH_CLASSES, generate_corpus_files


def test_generated_corpus_on_disk_counts(tmp_path: Path) -> None:
    seed = int(os.environ.get("SUFFIXITER_CORPUS_SEED", "1"))
    count = int(os.environ.get("SUFFIXITER_CORPUS_CASES", "300"))

    corpus_dir = tmp_path / "corpus"
    corpus_dir.mkdir(parents=True, exist_ok=True)

    files = generate_corpus_files(seed=seed, count=count)
    for rel, text in files:
        (corpus_dir / rel).write_bytes(text.encode("utf-8"))

    seen_widths: set[int] = set()
    for rel, text in files:
        data = (corpus_dir / rel).read_bytes()
        stepped = sum(1 for _ in TextSuffixes(data))
        assert TextSuffixes(data).count() == stepped == len(text), rel
        seen_widths.update(len(ch.encode("utf-8")) for ch in text)

    assert seen_widths == set(WIDTH_CLASSES)


def test_corpus_is_deterministic() -> None:
    assert generate_corpus_files(seed=7, count=20) == generate_corpus_files(seed=7, count=20)


def test_corpus_respects_max_len() -> None:
    files = generate_corpus_files(seed=3, count=200, max_len=8)
    assert all(len(text) <= 8 for _, text in files)
    assert any(len(text) > 4 for _, text in files)
