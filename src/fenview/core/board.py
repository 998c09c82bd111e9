"""Board - piece placement on an 8x8 board."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from fenview.core.enums import Color, PieceType
from fenview.core.piece import Piece
from fenview.core.types import FILE_NAMES, Square

_CELL_COUNT = 64

Cell = Piece | None


class Board:
    """Immutable 64-cell board stored in FEN reading order.

    Cell ``row * 8 + file`` holds the piece on that square, where row 0 is
    rank 8 and file 0 is the a-file.
    """

    __slots__ = ("_cells",)

    def __init__(self, cells: Iterable[Cell]) -> None:
        cells = tuple(cells)
        if len(cells) != _CELL_COUNT:
            raise ValueError(f"Board needs exactly 64 cells, got {len(cells)}")
        self._cells: tuple[Cell, ...] = cells

    # -- Element access -----------------------------------------------------

    def __getitem__(self, sq: Square) -> Cell:
        return self._cells[sq.index]

    def is_empty(self, sq: Square) -> bool:
        return self._cells[sq.index] is None

    def __iter__(self) -> Iterator[Cell]:
        return iter(self._cells)

    def __len__(self) -> int:
        return _CELL_COUNT

    def rows(self) -> Iterator[tuple[Cell, ...]]:
        """Rank-major rows, rank 8 first, each from file a to h."""
        for row in range(8):
            yield self._cells[row * 8 : row * 8 + 8]

    # -- Query helpers ------------------------------------------------------

    def pieces(self, color: Color, piece_type: PieceType) -> list[Square]:
        """Squares occupied by *color*'s *piece_type*."""
        target = Piece(color, piece_type)
        return [
            Square.from_index(idx)
            for idx, piece in enumerate(self._cells)
            if piece == target
        ]

    def occupied(self) -> int:
        """Number of non-empty cells."""
        return sum(1 for piece in self._cells if piece is not None)

    # -- Serialisation ------------------------------------------------------

    def to_placement(self) -> str:
        """FEN piece-placement field with runs of empty cells compressed."""
        rows: list[str] = []
        for cells in self.rows():
            empty = 0
            row = ""
            for piece in cells:
                if piece is None:
                    empty += 1
                    continue
                if empty:
                    row += str(empty)
                    empty = 0
                row += str(piece)
            if empty:
                row += str(empty)
            rows.append(row)
        return "/".join(rows)

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._cells == other._cells

    def __hash__(self) -> int:
        return hash(self._cells)

    def __repr__(self) -> str:
        rows: list[str] = []
        for row, cells in enumerate(self.rows()):
            text = " ".join(str(p) if p else "." for p in cells)
            rows.append(f"{8 - row} {text}")
        rows.append("  " + " ".join(FILE_NAMES))
        return "\n".join(rows)
