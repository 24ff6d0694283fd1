"""Exceptions raised by the Minesweeper engine."""


class MinesweeperError(ValueError):
    """Base class for all engine errors."""


class InvalidConfiguration(MinesweeperError):
    """Board dimensions or mine count cannot form a valid field."""


class InvalidCell(MinesweeperError):
    """A supplied cell lies outside the board."""


class OutOfBounds(InvalidCell):
    """An open or mark target lies outside the board."""
