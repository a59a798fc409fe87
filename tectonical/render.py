"""Text renderings of grids: ASCII art, value dumps and plain PPM (P3) images.

Every function returns the rendered text; writing it anywhere is up to the caller.
Integer arithmetic truncates toward zero, and remainders take the sign of the
dividend.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence

from .grid import Grid, TectonicVector

__all__ = [
    "render_ascii",
    "show_values",
    "render_plates_ppm",
    "render_grayscale_ppm",
    "render_realistic_ppm",
    "render_vectors_ppm",
    "render_bands_ppm",
    "render_bands_with_shadows_ppm",
]

_DENSITY = " .:-=+*#%@"

# (height above sea level it stays below, lit colour, shadowed colour)
_LAND_BANDS = (
    (1, "9 9 0", "6 6 0"),
    (6, "0 10 0", "0 7 0"),
    (16, "0 9 0", "0 6 0"),
    (25, "9 9 9", "6 6 6"),
)
_PEAK_LIT = "10 10 10"
_PEAK_SHADOWED = "7 7 7"
_BAND_MAX_VALUE = 10


def _tdiv(dividend: int, divisor: int) -> int:
    """Integer division truncating toward zero."""
    quotient = abs(dividend) // abs(divisor)
    return quotient if (dividend < 0) == (divisor < 0) else -quotient


def _tmod(dividend: int, divisor: int) -> int:
    """Remainder matching :func:`_tdiv`."""
    return dividend - divisor * _tdiv(dividend, divisor)


def _ppm(grid: Grid, max_value: int, pixel: Callable[[int, int, float], str]) -> str:
    lines = [f"P3\n{grid.width} {grid.height}\n{max_value}\n"]
    for i, row in enumerate(grid.cells):
        for j, value in enumerate(row):
            lines.append(pixel(i, j, value) + "\n")
    return "".join(lines)


def render_ascii(grid: Grid) -> str:
    """Draw the grid with one density character per cell; values above 9 saturate."""
    lines = []
    for row in grid.cells:
        chars = []
        for value in row:
            level = int(min(value, 9))
            if level < 0:
                raise ValueError(f"cannot draw negative value {value}")
            chars.append(_DENSITY[level] + " ")
        lines.append("".join(chars) + "\n")
    return "".join(lines)


def show_values(grid: Grid) -> str:
    """List each cell's value as a zero-padded two-digit integer."""
    return "".join(
        "".join(f"{int(value):02d} " for value in row) + "\n" for row in grid.cells
    )


def render_plates_ppm(grid: Grid, color_range: int) -> str:
    """Colour each plate number with a distinct RGB combination."""

    def pixel(_i: int, _j: int, value: float) -> str:
        val = int(value)
        val += _tdiv(val - 1, 7)
        channels = (_tmod(val, 2), _tmod(_tdiv(val, 2), 2), _tmod(_tdiv(val, 4), 2))
        return " ".join(
            str(_tmod(_tdiv(bit * (val + 6), 7), color_range)) for bit in channels
        )

    return _ppm(grid, color_range, pixel)


def render_grayscale_ppm(grid: Grid, color_range: int) -> str:
    """Grey level per cell, with negative values shown as black."""

    def pixel(_i: int, _j: int, value: float) -> str:
        val = max(int(value), 0)
        return f"{val} {val} {val}"

    return _ppm(grid, color_range, pixel)


def render_realistic_ppm(grid: Grid, color_range: int, sea_level: int) -> str:
    """Blue below ``sea_level``, green shading above it."""
    offset = _tdiv(color_range, 2)

    def pixel(_i: int, _j: int, value: float) -> str:
        val = max(int(value), 0)
        if val < sea_level:
            return f"0 0 {val + offset}"
        land = (val - sea_level) * 10
        return f"{land} {val + offset} {land}"

    return _ppm(grid, color_range, pixel)


def render_vectors_ppm(grid: Grid, vectors: Sequence[TectonicVector]) -> str:
    """Colour each cell by its plate's drift vector and land flag."""

    def pixel(_i: int, _j: int, value: float) -> str:
        vector = vectors[int(value)]
        return f"{int(vector.x * 255)} {int(vector.y * 255)} {255 if vector.is_land else 0}"

    return _ppm(grid, 256, pixel)


def _band_color(val: int, sea_level: int, shadowed: bool) -> str:
    if val < sea_level:
        depth = val - 5 if shadowed else val
        return f"0 0 {_tmod(4 + _tdiv(6 * depth, sea_level), 11)}"
    for limit, lit, dark in _LAND_BANDS:
        if val < sea_level + limit:
            return dark if shadowed else lit
    return _PEAK_SHADOWED if shadowed else _PEAK_LIT


def render_bands_ppm(grid: Grid, sea_level: int) -> str:
    """Colour cells by fixed height bands: sea, beach, lowland, hills, rock, snow."""

    def pixel(_i: int, _j: int, value: float) -> str:
        return _band_color(max(int(value), 0), sea_level, shadowed=False)

    return _ppm(grid, _BAND_MAX_VALUE, pixel)


def render_bands_with_shadows_ppm(grid: Grid, sea_level: int, sun: float) -> str:
    """Height bands, darkened where a cell down and to the right rises above the sun line.

    A cell is shadowed when some cell ``d`` steps along the diagonal is higher
    than the cell's own value plus ``d * sun``.
    """
    cells = grid.cells
    height, width = grid.height, grid.width

    def in_shadow(i: int, j: int) -> bool:
        base = cells[i][j]
        return any(
            cells[k][l] > base + (k - i) * sun
            for k, l in zip(range(i + 1, height), range(j + 1, width))
        )

    def pixel(i: int, j: int, value: float) -> str:
        return _band_color(max(int(value), 0), sea_level, shadowed=in_shadow(i, j))

    return _ppm(grid, _BAND_MAX_VALUE, pixel)