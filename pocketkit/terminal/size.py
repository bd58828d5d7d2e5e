"""Width/height pair measured in character cells."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator


@dataclass(frozen=True)
class Size:
    width: int = 0
    height: int = 0

    @classmethod
    def from_tuple(cls, pair: tuple[int, int]) -> "Size":
        width, height = pair
        return cls(int(width), int(height))

    def __iter__(self) -> Iterator[int]:
        yield self.width
        yield self.height
