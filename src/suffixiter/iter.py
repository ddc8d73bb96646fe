from __future__ import annotations

from collections.abc import Sequence
from functools import total_ordering
from typing import Generic, TypeVar

from . import utf8
from .views import SliceView, TextView


T = TypeVar("T")


def _byte_view(data: object) -> memoryview:
    try:
        mv = memoryview(data)  # type: ignore[arg-type]
    except TypeError:
        raise TypeError(
            f"expected a bytes-like object, got {type(data).__name__!r}"
        ) from None
    if mv.ndim != 1 or mv.format != "B":
        mv = mv.cast("B")
    return mv


@total_ordering
class TextSuffixes:
    """Iterator over the suffixes of a UTF-8 buffer, one scalar value at a time.

    ``TextSuffixes(b"h\\xc3\\xa9!")`` yields views of ``b"h\\xc3\\xa9!"``,
    ``b"\\xc3\\xa9!"`` and ``b"!"``. Every item is a :class:`TextView` over the
    caller's buffer; the buffer is assumed to be valid UTF-8 unless
    ``validate=True`` is passed.
    """

    __slots__ = ("_view",)

    def __init__(self, data: object, *, validate: bool = False) -> None:
        if isinstance(data, TextView):
            view = data
        else:
            view = TextView(_byte_view(data))
        if validate:
            utf8.validate(view.data)
        self._view = view

    @classmethod
    def from_str(cls, s: str) -> TextSuffixes:
        # The only copy: str has no UTF-8 buffer to borrow.
        return cls(s.encode("utf-8"))

    @property
    def view(self) -> TextView:
        """The remaining suffix, i.e. the item the next step would return."""
        return self._view

    def __iter__(self) -> TextSuffixes:
        return self

    def __next__(self) -> TextView:
        view = self._view
        width = utf8.next_char_boundary(view.source, view.start)
        if width is None:
            raise StopIteration
        self._view = TextView(view.source, view.start + width)
        return view

    def size_hint(self) -> tuple[int, int]:
        """Bounds on the remaining item count, from the byte length alone."""
        n = len(self._view)
        return (n + 3) // 4, n

    def __length_hint__(self) -> int:
        return self.size_hint()[0]

    def count(self) -> int:
        """Number of remaining items. Consumes the iterator."""
        view = self._view
        n = utf8.count_scalars(view.source, view.start)
        self._view = TextView(view.source, view.end)
        return n

    def copy(self) -> TextSuffixes:
        return TextSuffixes(self._view)

    __copy__ = copy

    def __eq__(self, other: object) -> bool:
        if isinstance(other, TextSuffixes):
            return self._view == other._view
        return NotImplemented

    def __lt__(self, other: object) -> bool:
        if isinstance(other, TextSuffixes):
            return bytes(self._view) < bytes(other._view)
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"TextSuffixes({bytes(self._view)!r})"


@total_ordering
class SeqSuffixes(Generic[T]):
    """Iterator over the suffixes of a sequence, one element at a time."""

    __slots__ = ("_view",)

    def __init__(self, seq: Sequence[T]) -> None:
        if isinstance(seq, SliceView):
            view = seq
        elif isinstance(seq, Sequence):
            view = SliceView(seq)
        else:
            raise TypeError(f"expected a sequence, got {type(seq).__name__!r}")
        self._view: SliceView[T] = view

    @property
    def view(self) -> SliceView[T]:
        return self._view

    def __iter__(self) -> SeqSuffixes[T]:
        return self

    def __next__(self) -> SliceView[T]:
        view = self._view
        if len(view) < 1:
            raise StopIteration
        self._view = SliceView(view.source, view.start + 1)
        return view

    def __len__(self) -> int:
        return len(self._view)

    def size_hint(self) -> tuple[int, int]:
        n = len(self._view)
        return n, n

    def count(self) -> int:
        """Number of remaining items. Consumes the iterator."""
        n = len(self._view)
        self._view = SliceView(self._view.source, self._view.start + n)
        return n

    def copy(self) -> SeqSuffixes[T]:
        return SeqSuffixes(self._view)

    __copy__ = copy

    def __eq__(self, other: object) -> bool:
        if isinstance(other, SeqSuffixes):
            return self._view == other._view
        return NotImplemented

    def __lt__(self, other: object) -> bool:
        if isinstance(other, SeqSuffixes):
            return tuple(self._view) < tuple(other._view)
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"SeqSuffixes({list(self._view)!r})"
