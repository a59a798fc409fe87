"""Command-line entry point: generate a map and write its renderings."""

from __future__ import annotations

import sys
from collections.abc import Sequence
from pathlib import Path
from typing import TextIO

from .config import CONFIG_FILENAME, ensure_config, load_config
from .generator import gaussian_blur, generate_heightmap, generate_tectonic_vectors, generate_tectonics
from .grid import Grid
from .render import (
    render_bands_ppm,
    render_bands_with_shadows_ppm,
    render_grayscale_ppm,
    render_plates_ppm,
    render_realistic_ppm,
)

__all__ = ["generate", "main"]

HELP_TEXT = (
    "Tectonical version 1.0.0\n\n"
    "Use generate to generate a map based on the settings located at \n"
    f"`{CONFIG_FILENAME}`\n\n"
    "If this file is not present, it will be generated with some default values\n"
)

SUN_SLOPE = 0.60


def generate(directory: str | Path = ".", out: TextIO | None = None) -> list[Path]:
    """Generate a map from the configuration in ``directory`` and write its images there.

    The configuration file is created with default values if missing.
    Returns the paths of the written images.
    """
    if out is None:
        out = sys.stdout
    directory = Path(directory)
    config = load_config(ensure_config(directory / CONFIG_FILENAME))

    print("▶ Starting Generation", file=out)

    # The grid's row count comes from the configured width and vice versa.
    base = Grid.zeros(config.width, config.height)
    count = config.tectonic_count
    plates = generate_tectonics(base, count, config.seed, config)
    print("✔ Tectonics Generated", file=out)

    vectors = generate_tectonic_vectors(count, config.seed, config)
    print("✔ Vectors Generated", file=out)

    heights = generate_heightmap(plates, vectors, config.seed, config, out)
    print("✔ Heightmap Generated", file=out)

    heights = gaussian_blur(heights, config.gaussian_diminishing_factor, config)
    print("✔ Blur Completed", file=out)

    color_range = (count - 1) // 7 + 1 if count >= 1 else 1
    images = {
        "output-bw.ppm": render_grayscale_ppm(heights, 100),
        "output-real.ppm": render_realistic_ppm(heights, 100, config.sea_level),
        "output-real-bands.ppm": render_bands_ppm(heights, config.sea_level),
        "output.ppm": render_plates_ppm(plates, color_range),
        "output-real-bands-shadow.ppm": render_bands_with_shadows_ppm(
            heights, config.sea_level, SUN_SLOPE
        ),
    }
    written = []
    for name, text in images.items():
        path = directory / name
        path.write_text(text, encoding="utf-8")
        written.append(path)

    print("✔ ALL Completed", file=out)
    return written


def main(argv: Sequence[str] | None = None) -> int:
    """Run the ``help``, ``config`` or ``generate`` command."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        print("⚠ No arguments passed. Use the command help for help", file=sys.stderr)
        return 0
    command = args[0]
    if command == "config":
        print("⚠ Fill out later", file=sys.stderr)
        return 0
    if command == "help":
        print(HELP_TEXT, end="")
        return 0
    if command != "generate":
        print("⚠ Unknown command", file=sys.stderr)
        return 0
    try:
        generate(".")
    except (OSError, ValueError) as exc:
        print(f"⚠ {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())