# tectonical

A small terrain generator. It scatters tectonic plates across a grid using a
deterministic integer hash and grows them until they fill the grid. Each plate
gets a drift vector. Land rises or falls wherever plates push against or pull
away from each other. The heightmap is then smoothed and written out as several
plain-text PPM (P3) images.

The same settings always give the same images.

## Installation

```
pip install .
```

## Command line

```
tectonical help
tectonical generate
```

- `help` prints a short usage note.
- `generate` reads `.tectonical.config` from the current directory and writes
  the images into the same directory. A missing config file is first created
  with the default values shown below. Progress messages go to standard output.
  A file that cannot be read or parsed, or settings that cannot produce a map,
  print a `⚠` message to standard error and exit with status 1.
- `config` exists only as a placeholder. It prints `⚠ Fill out later` and does
  nothing else.
- Any other command prints `⚠ Unknown command`. Running with no command prints
  a hint to use `help`.

### Configuration file

Each entry is `key=value`. The entries must appear in exactly this order,
separated by whitespace. Anything after the last entry is ignored.

```
seed=100
width=256
height=256
land-rate=0.3
tectonic-volatility=128
tectonic-impact-max-range=50
tectonic-impact-diminishing-factor=0.4
sea-plate-height=10
land-plate-height=20
tectonic-impact-factor=1.5
sea-level=20
gaussian-range=85
gaussian-diminishing-factor=-2
tectonic-count=11
```

Within `generate`, the grid is built with `width` rows and `height` columns.
For square maps this makes no difference.

### Output images

| File                           | Content                                          |
|--------------------------------|--------------------------------------------------|
| `output-bw.ppm`                | grayscale heightmap (negative heights are black) |
| `output-real.ppm`              | blue sea, green shading above sea level          |
| `output-real-bands.ppm`        | fixed elevation colour bands                     |
| `output.ppm`                   | plate layout, one colour per plate number        |
| `output-real-bands-shadow.ppm` | elevation bands, darkened where a shadow falls   |

## Library use

```python
from tectonical.config import Config
from tectonical.grid import Grid
from tectonical.generator import (
    generate_tectonics,
    generate_tectonic_vectors,
    generate_heightmap,
    gaussian_blur,
)
from tectonical.render import render_bands_ppm

with open(".tectonical.config", encoding="utf-8") as handle:
    config = Config.parse(handle.read())

plates = generate_tectonics(Grid.zeros(config.height, config.width),
                            config.tectonic_count, config.seed, config)
vectors = generate_tectonic_vectors(config.tectonic_count, config.seed, config)
heights = generate_heightmap(plates, vectors, config.seed, config)
heights = gaussian_blur(heights, config.gaussian_diminishing_factor, config)
ppm_text = render_bands_ppm(heights, config.sea_level)
```

### Modules

- `tectonical.hash`
  - `random_hash(value)`: the deterministic hash used as the random source.
  - `hash_in_range(maximum, value)`: maps a value into `0 <= result < maximum`.
    Raises `ValueError` if `maximum` is not positive.
- `tectonical.config`
  - `Config`: a frozen dataclass. Its defaults match the file above.
  - `Config.parse(text)`: parses config text. Raises `ConfigError` (a
    `ValueError`) on text that does not follow the layout.
  - `ensure_config(path)`: writes the default file if `path` is missing.
  - `load_config(path)`: reads and parses a config file.
- `tectonical.grid`
  - `Grid`: a height × width grid of floats, indexed as `grid[row, column]`.
    Provides `Grid.zeros`, `clear` and `copy`.
  - `TectonicVector`: a plate's drift `x`, `y` and its `is_land` flag.
- `tectonical.generator`
  - `generate_tectonics`: returns a new grid of plate numbers. Plate 0 marks
    empty cells and never grows. If no other plate could be seeded, it raises
    `ValueError`.
  - `generate_tectonic_vectors`: returns one drift vector per plate.
  - `generate_heightmap`: builds heights from plates and vectors. It writes
    progress lines to `out`, which defaults to standard output.
  - `gaussian_blur`: a horizontal then vertical weighted blur.
  - `diffuse`: spreads part of each cell's value to its neighbours.
  - Every function here returns a new `Grid` or a list. None of them changes
    its input.
- `tectonical.render`: each function returns text and writes nothing itself.
  - `render_ascii`: raises `ValueError` on negative values.
  - `show_values`
  - `render_plates_ppm`
  - `render_grayscale_ppm`
  - `render_realistic_ppm`
  - `render_vectors_ppm`
  - `render_bands_ppm`
  - `render_bands_with_shadows_ppm`
- `tectonical.cli`
  - `generate(directory, out)`: runs the whole pipeline in `directory` and
    returns the paths of the images it wrote.
  - `main(argv)`: the command-line entry point.

## What it does not do

- There is no interactive way to edit settings. The `config` command is a
  placeholder, so change `.tectonical.config` by hand.
- Images are written only as plain-text PPM. There is no PNG or other format,
  and no viewer.

## Tests

```
pip install .[test]
pytest
```