from __future__ import annotations

from .corpus import WIDTH_CLASSES, generate_corpus_files, generate_texts

__all__ = ["WIDTH_CLASSES", "generate_corpus_files", "generate_texts"]
