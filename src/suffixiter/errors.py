from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True)
class EncodingError(Exception):
    offset: int
    message: str
    hint: str | None = None

    def __str__(self) -> str:
        base = f"offset {self.offset}: {self.message}"
        if self.hint:
            return f"{base}\nhint: {self.hint}"
        return base
