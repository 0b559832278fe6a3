"""Error types raised while loading and simulating lattice automata."""


class LatticeError(Exception):
    """Base class for every error raised by this package."""


class LayoutParseError(LatticeError, ValueError):
    """Input text could not be turned into a grid or seed."""

    def __init__(self, message: str, line: int = None, column: int = None):
        self.line = line
        self.column = column
        if line is not None:
            where = f"line {line}" if column is None else f"line {line}, column {column}"
            message = f"{message} ({where})"
        super().__init__(message)


class GridBoundsError(LatticeError, IndexError):
    """A cell outside the grid was read during simulation."""


class ConvergenceError(LatticeError, RuntimeError):
    """A fixed-point run did not settle within its generation limit."""

    def __init__(self, generations: int):
        self.generations = generations
        super().__init__(f"layout did not reach a steady state within {generations} generations")
