"""FEN error taxonomy.

Every failure of the parse/validate pipeline is a :class:`FenError`. Each
subclass is one variant of the taxonomy and carries only the data needed to
describe it: the FEN field it concerns (1–6, ``None`` for cross-field rules)
plus an offending token, character, square or count.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, ClassVar

if TYPE_CHECKING:
    from fenview.core.enums import CastlingRights, Color
    from fenview.core.types import Square

_TOKEN_PREVIEW = 20

_RIGHT_NAMES: dict[str, str] = {
    "WHITE_KINGSIDE": "K",
    "WHITE_QUEENSIDE": "Q",
    "BLACK_KINGSIDE": "k",
    "BLACK_QUEENSIDE": "q",
}


class FenError(ValueError):
    """Base class for all FEN parsing and validation errors."""

    kind: ClassVar[str] = "FenError"
    field: int | None = None

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


class FieldCountError(FenError):
    kind = "FieldCountError"

    def __init__(self, count: int) -> None:
        self.count = count
        super().__init__(f"FEN must contain 6 fields, found {count}")


class RankCountError(FenError):
    kind = "RankCountError"
    field = 1

    def __init__(self, count: int) -> None:
        self.count = count
        super().__init__(f"Piece placement must contain 8 ranks, found {count}")


class RankContentError(FenError):
    """Bad character or wrong width in one rank of the placement field.

    *rank_index* is the 0-based position of the rank in the field (0 is
    rank 8). *char* is set for an unexpected character; otherwise *width*
    holds the file count that overflowed or fell short of 8.
    """

    kind = "RankContentError"
    field = 1

    def __init__(
        self, rank_index: int, *, char: str | None = None, width: int | None = None
    ) -> None:
        self.rank_index = rank_index
        self.char = char
        self.width = width
        rank_label = 8 - rank_index
        if char is not None:
            message = f"Unexpected symbol {char!r} in rank {rank_label}"
        else:
            message = f"Rank {rank_label} describes {width} files instead of 8"
        super().__init__(message)


class ActiveColorError(FenError):
    kind = "ActiveColorError"
    field = 2

    def __init__(self, token: str) -> None:
        self.token = token
        super().__init__(f"Expected 'w' or 'b' for the side to move, got {token!r}")


class CastlingTokenError(FenError):
    kind = "CastlingTokenError"
    field = 3

    def __init__(self, char: str, *, duplicate: bool = False) -> None:
        self.char = char
        self.duplicate = duplicate
        if duplicate:
            message = f"Castling right {char!r} listed more than once"
        else:
            message = f"Unexpected symbol {char!r} in castling rights (expected KQkq or -)"
        super().__init__(message)


class EnPassantFormatError(FenError):
    kind = "EnPassantFormatError"
    field = 4

    def __init__(self, token: str) -> None:
        self.token = token
        super().__init__(
            f"En-passant target must be '-' or a square on rank 3 or 6, got {token!r}"
        )


class NumericFieldError(FenError):
    kind = "NumericFieldError"

    def __init__(self, field: int, token: str, minimum: int) -> None:
        self.field = field
        self.token = token
        self.minimum = minimum
        shown = token if len(token) <= _TOKEN_PREVIEW else token[:_TOKEN_PREVIEW] + "..."
        super().__init__(
            f"{self.field_name.capitalize()} must be an integer >= {minimum}, got {shown!r}"
        )

    @property
    def field_name(self) -> str:
        return "halfmove clock" if self.field == 5 else "fullmove number"


class CastlingPlausibilityError(FenError):
    kind = "CastlingPlausibilityError"

    def __init__(self, right: CastlingRights) -> None:
        self.right = right
        letter = _RIGHT_NAMES.get(right.name or "", str(int(right)))
        super().__init__(
            f"Castling right {letter!r} claimed but king or rook is not on its original square"
        )


class EnPassantPlausibilityError(FenError):
    kind = "EnPassantPlausibilityError"

    def __init__(self, square: Square, reason: str) -> None:
        self.square = square
        self.reason = reason
        super().__init__(f"En-passant target {square.name} is not plausible: {reason}")


class KingCountError(FenError):
    kind = "KingCountError"

    def __init__(self, color: Color, count: int) -> None:
        self.color = color
        self.count = count
        super().__init__(f"Expected exactly one {color.name.lower()} king, found {count}")
