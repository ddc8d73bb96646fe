from __future__ import annotations

from collections.abc import Sequence

from .iter import SeqSuffixes, TextSuffixes
from .views import TextView


def suffixes(obj: object) -> TextSuffixes | SeqSuffixes:
    """Iterate over the suffixes of ``obj``, treating ``obj`` as the first one.

    Text (``str`` and bytes-like objects, taken as UTF-8) advances one scalar
    value per step; any other sequence advances one element per step.
    """
    if isinstance(obj, str):
        return TextSuffixes.from_str(obj)
    if isinstance(obj, (bytes, bytearray, memoryview, TextView)):
        return TextSuffixes(obj)
    if isinstance(obj, Sequence):
        return SeqSuffixes(obj)
    raise TypeError(f"cannot iterate suffixes of {type(obj).__name__!r}")
