"""Square value type and coordinate helpers.

Board arena layout (FEN reading order):
    a8=0, b8=1, ..., h8=7
    a7=8, b7=9, ..., h7=15
    ...
    a1=56, b1=57, ..., h1=63
"""

from __future__ import annotations

from dataclasses import dataclass

FILE_NAMES = "abcdefgh"
RANK_NAMES = "12345678"


@dataclass(frozen=True, slots=True, order=True)
class Square:
    """A board square: *file* 0–7 (a–h) and *rank* 0–7 (1–8)."""

    file: int
    rank: int

    def __post_init__(self) -> None:
        if not (0 <= self.file < 8 and 0 <= self.rank < 8):
            raise ValueError(f"Square out of range: file={self.file}, rank={self.rank}")

    # ── Conversions ──────────────────────────────────────────────────────

    @classmethod
    def parse(cls, name: str) -> Square:
        """Parse square name, e.g. 'e4' → Square(4, 3)."""
        if len(name) != 2 or name[0] not in FILE_NAMES or name[1] not in RANK_NAMES:
            raise ValueError(f"Invalid square name: {name!r}")
        return cls(FILE_NAMES.index(name[0]), RANK_NAMES.index(name[1]))

    @classmethod
    def from_index(cls, index: int) -> Square:
        """Square for a board arena index (0 = a8, 63 = h1)."""
        if not (0 <= index < 64):
            raise ValueError(f"Invalid square index: {index}")
        row, file = divmod(index, 8)
        return cls(file, 7 - row)

    @property
    def index(self) -> int:
        """Board arena index: ``row * 8 + file`` with row 0 = rank 8."""
        return (7 - self.rank) * 8 + self.file

    @property
    def name(self) -> str:
        """Human-readable name, e.g. 'b6'."""
        return FILE_NAMES[self.file] + RANK_NAMES[self.rank]

    def offset(self, rank_delta: int) -> Square:
        """Square *rank_delta* ranks away on the same file."""
        return Square(self.file, self.rank + rank_delta)

    def __str__(self) -> str:
        return self.name


# ── Named square constants ──────────────────────────────────────────────────

A1, B1, C1, D1, E1, F1, G1, H1 = (Square(f, 0) for f in range(8))
A2, B2, C2, D2, E2, F2, G2, H2 = (Square(f, 1) for f in range(8))
A3, B3, C3, D3, E3, F3, G3, H3 = (Square(f, 2) for f in range(8))
A4, B4, C4, D4, E4, F4, G4, H4 = (Square(f, 3) for f in range(8))
A5, B5, C5, D5, E5, F5, G5, H5 = (Square(f, 4) for f in range(8))
A6, B6, C6, D6, E6, F6, G6, H6 = (Square(f, 5) for f in range(8))
A7, B7, C7, D7, E7, F7, G7, H7 = (Square(f, 6) for f in range(8))
A8, B8, C8, D8, E8, F8, G8, H8 = (Square(f, 7) for f in range(8))
