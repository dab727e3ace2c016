"""Credits record shown by the credits screen."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator


@dataclass(frozen=True)
class Credits:
    """Ordered, immutable list of credit lines.

    Attributes:
        lines: Credit lines in display order
    """

    lines: tuple[str, ...] = ()

    @classmethod
    def of(cls, *lines: str) -> "Credits":
        return cls(tuple(lines))

    def with_line(self, line: str) -> "Credits":
        """Return a new record with `line` appended."""
        return type(self)(self.lines + (line,))

    def __iter__(self) -> Iterator[str]:
        return iter(self.lines)

    def __len__(self) -> int:
        return len(self.lines)
