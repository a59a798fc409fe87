"""Rectangular grids of floating-point values and tectonic plate vectors."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field

__all__ = ["Grid", "TectonicVector"]


@dataclass(frozen=True)
class TectonicVector:
    """Drift direction of a plate and whether it carries land."""

    x: float
    y: float
    is_land: bool


@dataclass
class Grid:
    """A ``height`` by ``width`` grid of floats, indexed as ``grid[row, column]``."""

    height: int
    width: int
    cells: list[list[float]] = field(default_factory=list)

    def __post_init__(self) -> None:
        if self.height < 0 or self.width < 0:
            raise ValueError(f"invalid grid size {self.height}x{self.width}")
        if not self.cells and self.height:
            self.cells = [[0.0] * self.width for _ in range(self.height)]
        if len(self.cells) != self.height or any(len(row) != self.width for row in self.cells):
            raise ValueError("cells do not match the grid size")

    @classmethod
    def zeros(cls, height: int, width: int) -> Grid:
        """Create a grid filled with zeros."""
        return cls(height, width)

    def clear(self) -> None:
        """Set every cell to zero."""
        for row in self.cells:
            row[:] = [0.0] * self.width

    def copy(self) -> Grid:
        """Return an independent copy of this grid."""
        return Grid(self.height, self.width, [list(row) for row in self.cells])

    def __getitem__(self, index: tuple[int, int]) -> float:
        row, column = index
        return self.cells[row][column]

    def __setitem__(self, index: tuple[int, int], value: float) -> None:
        row, column = index
        self.cells[row][column] = value

    def __iter__(self) -> Iterator[list[float]]:
        return iter(self.cells)