# src/dropfour/errors.py

from __future__ import annotations


class GameError(ValueError):
    """Base class for every recoverable game error."""


class DimensionError(GameError):
    def __init__(self, msg: str = "Grid dimensions out of range.") -> None:
        super().__init__(msg)


class InvalidColumn(GameError):
    def __init__(self, column: int, width: int) -> None:
        super().__init__(f"Column {column} does not exist (choose 1-{width}).")
        self.column = column


class InvalidTile(GameError):
    def __init__(self, tile: object) -> None:
        super().__init__(f"Can't place tile of type {tile!r}.")
        self.tile = tile


class ColumnFull(GameError):
    def __init__(self, column: int) -> None:
        super().__init__(f"Column {column} is already full!")
        self.column = column


class NoUndo(GameError):
    def __init__(self) -> None:
        super().__init__("Nothing to undo.")


class NoLegalMove(GameError):
    def __init__(self) -> None:
        super().__init__("No legal move: every column is full.")


class InvalidInput(GameError):
    def __init__(self, raw: str, width: int | None = None) -> None:
        hint = f" Must be a number between 1 and {width}." if width else ""
        super().__init__(f"Invalid input: {raw.strip()!r}.{hint}")
        self.raw = raw
