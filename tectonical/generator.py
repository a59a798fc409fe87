"""Map generation: plate growth, plate drift vectors, heightmaps and smoothing."""

from __future__ import annotations

import math
import sys
from itertools import accumulate
from operator import mul
from typing import TextIO

from .config import Config
from .grid import Grid, TectonicVector
from .hash import hash_in_range, random_hash

__all__ = [
    "diffuse",
    "generate_tectonic_vectors",
    "generate_tectonics",
    "generate_heightmap",
    "gaussian_blur",
]

# Neighbour bits used when a plate grows into an empty cell.
_RIGHT, _DOWN, _LEFT, _UP = 1, 2, 4, 8

# (row step, column step, sign, use cosine) for the four scan directions.
_DIRECTIONS = (
    (-1, 0, -1, False),
    (0, 1, -1, True),
    (1, 0, 1, False),
    (0, -1, 1, True),
)


def diffuse(grid: Grid, factor: float) -> Grid:
    """Spread ``factor`` of every cell's value evenly to its orthogonal neighbours.

    Factors above about 0.8 give unstable results. The total sum is preserved.
    """
    height, width = grid.height, grid.width
    result = Grid.zeros(height, width)
    cells = result.cells
    share = factor / 4
    for i, row in enumerate(grid.cells):
        for j, value in enumerate(row):
            portion = value * share
            cells[i][j] += value
            for ni, nj in ((i - 1, j), (i, j - 1), (i + 1, j), (i, j + 1)):
                if 0 <= ni < height and 0 <= nj < width:
                    cells[ni][nj] += portion
                    cells[i][j] -= portion
    return result


def generate_tectonic_vectors(count: int, seed: int, config: Config) -> list[TectonicVector]:
    """Create ``count`` plate drift vectors with components in ``[-0.5, 0.5)``."""
    rng = seed + random_hash(seed)
    land_threshold = int(config.land_rate * 1000)
    vectors = []
    for _ in range(count):
        is_land = hash_in_range(1000, rng) < land_threshold
        x = (hash_in_range(1000, rng + 1) - 500) / 1000
        y = (hash_in_range(1000, rng + 2) - 500) / 1000
        vectors.append(TectonicVector(x, y, is_land))
        rng += 3
    return vectors


def generate_tectonics(grid: Grid, count: int, seed: int, config: Config) -> Grid:
    """Seed up to ``count`` plates on a grid of ``grid``'s size and grow them until it is full.

    Returns a new grid whose cells hold plate numbers. Plate 0 marks an empty
    cell, so it never grows; a ``ValueError`` is raised when no other plate
    could be seeded, as the grid could then never be filled.
    """
    height, width = grid.height, grid.width
    plates = Grid.zeros(height, width)
    rng = seed
    for plate in range(count):
        i = hash_in_range(height, rng)
        j = hash_in_range(width, rng + 1)
        if plates[i, j]:
            rng += 1
            continue
        plates[i, j] = float(plate)
        rng += 2

    cells = plates.cells
    if not any(value for row in cells for value in row):
        raise ValueError("no plate other than plate 0 was seeded; the map cannot be filled")

    volatility = config.tectonic_volatility
    while any(value == 0 for row in cells for value in row):
        grown = []
        for i, row in enumerate(cells):
            new_row = []
            for j, value in enumerate(row):
                if value != 0:
                    new_row.append(value)
                    continue
                roll = random_hash(rng)
                rng += 1
                if roll < volatility:
                    new_row.append(0.0)
                    continue
                neighbours = {}
                if i > 0 and cells[i - 1][j] != 0:
                    neighbours[_UP] = cells[i - 1][j]
                if j > 0 and row[j - 1] != 0:
                    neighbours[_LEFT] = row[j - 1]
                if i + 1 < height and cells[i + 1][j] != 0:
                    neighbours[_DOWN] = cells[i + 1][j]
                if j + 1 < width and row[j + 1] != 0:
                    neighbours[_RIGHT] = row[j + 1]
                if not neighbours:
                    new_row.append(0.0)
                    continue
                choice = 0
                while choice not in neighbours:
                    choice = 1 << hash_in_range(4, rng)
                    rng += 1
                new_row.append(neighbours[choice])
            grown.append(new_row)
        cells = grown
    return Grid(height, width, cells)


def generate_heightmap(
    tectonic_map: Grid,
    vectors: list[TectonicVector],
    seed: int,
    config: Config,
    out: TextIO | None = None,
) -> Grid:
    """Build a heightmap from plate numbers and their drift vectors.

    Each cell starts at its plate's base height and is raised or lowered by
    every foreign plate seen along the four axes within the impact range.
    Progress is written to ``out`` (standard output by default). ``seed`` is
    accepted for symmetry with the other generators and is not used.
    """
    if out is None:
        out = sys.stdout
    height, width = tectonic_map.height, tectonic_map.width
    plates = tectonic_map.cells
    result = Grid.zeros(height, width)
    max_range = config.tectonic_impact_max_range
    impact = config.tectonic_impact_factor
    falloff = [1.0] + [k**config.tectonic_impact_diminishing_factor for k in range(1, max_range)]
    trig_cache: dict[tuple[int, int], tuple[float, float]] = {}

    def trig(own: int, target: int) -> tuple[float, float]:
        key = (own, target)
        if key not in trig_cache:
            angle = math.atan2(vectors[target].y - vectors[own].y, vectors[target].x - vectors[own].x)
            trig_cache[key] = (math.sin(angle), math.cos(angle))
        return trig_cache[key]

    print("╔ Heightmap Generation: 0%", file=out)
    step = height // 5
    for i in range(height):
        if step and i > 0 and i % step == 0:
            print(f"╠ Heightmap Generation: {i // step * 20}%", file=out)
        for j in range(width):
            own = int(plates[i][j])
            value = config.land_plate_height if vectors[own].is_land else config.sea_plate_height
            for di, dj, sign, use_cos in _DIRECTIONS:
                for k in range(1, max_range):
                    ti, tj = i + di * k, j + dj * k
                    if not (0 <= ti < height and 0 <= tj < width):
                        break
                    target = int(plates[ti][tj])
                    if target == own:
                        continue
                    sin_a, cos_a = trig(own, target)
                    value += impact * sign * (cos_a if use_cos else sin_a) / falloff[k]
            result.cells[i][j] = value
    print("╚ Heightmap Generation: 100%", file=out)
    return result


def _blur_rows(rows: list[list[float]], weights: list[float]) -> list[list[float]]:
    """Weighted average of each cell with neighbours along its row."""
    span = len(weights)
    totals = [0.0, *accumulate(weights)]
    blurred = []
    for row in rows:
        new_row = []
        for j, value in enumerate(row):
            right = row[j + 1 : j + 1 + span]
            left = row[max(0, j - span) : j][::-1]
            total = value + sum(map(mul, right, weights)) + sum(map(mul, left, weights))
            count = 1 + totals[len(right)] + totals[len(left)]
            new_row.append(total / count)
        blurred.append(new_row)
    return blurred


def gaussian_blur(grid: Grid, intensity: float, config: Config) -> Grid:
    """Blur horizontally then vertically; a neighbour ``k`` cells away weighs ``k ** intensity``."""
    weights = [float(k) ** intensity for k in range(1, config.gaussian_range)]
    horizontal = _blur_rows(grid.cells, weights)
    columns = [list(column) for column in zip(*horizontal)]
    vertical = _blur_rows(columns, weights)
    cells = [list(row) for row in zip(*vertical)] if grid.height and grid.width else [
        [] for _ in range(grid.height)
    ]
    return Grid(grid.height, grid.width, cells)