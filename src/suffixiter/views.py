from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from typing import Generic, TypeVar


T = TypeVar("T")


@dataclass(frozen=True, slots=True, eq=False, repr=False)
class TextView:
    """A borrowed suffix ``[start, len(source))`` of a UTF-8 byte buffer.

    ``source`` is a 1-D unsigned-byte memoryview over the caller's buffer.
    Nothing is copied until ``bytes(view)`` or ``str(view)`` is asked for.
    """

    source: memoryview
    start: int = 0

    @property
    def end(self) -> int:
        return len(self.source)

    @property
    def data(self) -> memoryview:
        return self.source[self.start :]

    def decode(self, errors: str = "strict") -> str:
        return str(self.data, "utf-8", errors)

    def __len__(self) -> int:
        return len(self.source) - self.start

    def __bytes__(self) -> bytes:
        return self.data.tobytes()

    def __str__(self) -> str:
        return self.decode()

    def __eq__(self, other: object) -> bool:
        if isinstance(other, TextView):
            return self.data == other.data
        if isinstance(other, (bytes, bytearray, memoryview)):
            return self.data == other
        return NotImplemented

    def __hash__(self) -> int:
        if not self.source.readonly:
            raise ValueError("cannot hash a view over a writable buffer")
        # Same hash as the equal bytes object.
        return hash(bytes(self))

    def __repr__(self) -> str:
        return f"TextView({bytes(self)!r}, start={self.start})"


@dataclass(frozen=True, slots=True, eq=False, repr=False)
class SliceView(Sequence, Generic[T]):
    """A borrowed suffix ``[start, len(source))`` of an element sequence.

    Indexing reads through to ``source``; slicing materializes a list.
    """

    source: Sequence[T]
    start: int = 0

    @property
    def end(self) -> int:
        return len(self.source)

    def __len__(self) -> int:
        return max(len(self.source) - self.start, 0)

    def __getitem__(self, key):
        idx = range(self.start, len(self.source))[key]
        if isinstance(idx, range):
            return [self.source[i] for i in idx]
        return self.source[idx]

    def __iter__(self) -> Iterator[T]:
        for i in range(self.start, len(self.source)):
            yield self.source[i]

    def __eq__(self, other: object) -> bool:
        if isinstance(other, (SliceView, list, tuple)):
            return len(self) == len(other) and all(a == b for a, b in zip(self, other))
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"SliceView({list(self)!r}, start={self.start})"
