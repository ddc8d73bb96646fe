from __future__ import annotations

from .api import suffixes
from .errors import EncodingError
from .iter import SeqSuffixes, TextSuffixes
from .utf8 import char_width, count_scalars, is_char_boundary
from .views import SliceView, TextView

__all__ = [
    "EncodingError",
    "SeqSuffixes",
    "SliceView",
    "TextSuffixes",
    "TextView",
    "char_width",
    "count_scalars",
    "is_char_boundary",
    "suffixes",
]
