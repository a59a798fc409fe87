import pytest

from tectonical.grid import Grid, TectonicVector
from tectonical.render import (
    render_ascii,
    render_bands_ppm,
    render_bands_with_shadows_ppm,
    render_grayscale_ppm,
    render_plates_ppm,
    render_realistic_ppm,
    render_vectors_ppm,
    show_values,
)


def grid_of(rows):
    return Grid(len(rows), len(rows[0]), [[float(v) for v in row] for row in rows])


def pixels(text):
    return text.splitlines()[3:]


def test_ascii_uses_density_characters_and_saturates():
    assert render_ascii(grid_of([[0, 5, 12]])) == "  + @ \n"


def test_ascii_rejects_negative_values():
    with pytest.raises(ValueError):
        render_ascii(grid_of([[-3]]))


def test_show_values_pads_and_truncates():
    assert show_values(grid_of([[3.7, 12.0], [0.2, 9.9]])) == "03 12 \n00 09 \n"


def test_grayscale_header_and_clamping():
    text = render_grayscale_ppm(grid_of([[-3.5, 7.9]]), 100)
    assert text == "P3\n2 1\n100\n0 0 0\n7 7 7\n"


def test_header_uses_width_then_height():
    text = render_grayscale_ppm(Grid.zeros(2, 3), 100)
    assert text.splitlines()[:3] == ["P3", "3 2", "100"]
    assert len(pixels(text)) == 6


def test_realistic_sea_is_blue_only():
    text = render_realistic_ppm(grid_of([[0, 5, 19]]), 100, 20)
    for line in pixels(text):
        red, green, _blue = line.split()
        assert red == "0" and green == "0"


def test_realistic_land_red_equals_blue():
    text = render_realistic_ppm(grid_of([[20, 25, 31]]), 100, 20)
    for line in pixels(text):
        red, _green, blue = line.split()
        assert red == blue


def test_plates_zero_is_black_and_channels_in_range():
    rows = [[0, 1, 2, 3], [4, 5, 6, 7], [8, 9, 10, 11]]
    text = render_plates_ppm(grid_of(rows), 2)
    lines = pixels(text)
    assert lines[0] == "0 0 0"
    for line in lines:
        assert all(0 <= int(c) < 2 for c in line.split())


def test_plates_distinct_colors_for_first_seven():
    text = render_plates_ppm(grid_of([[1, 2, 3, 4, 5, 6, 7]]), 2)
    assert len(set(pixels(text))) == 7


def test_vectors_truncate_toward_zero():
    vectors = [TectonicVector(0.5, -0.5, True), TectonicVector(0.0, 0.0, False)]
    text = render_vectors_ppm(grid_of([[0, 1]]), vectors)
    assert text.splitlines()[:3] == ["P3", "2 1", "256"]
    assert pixels(text) == ["127 -127 255", "0 0 0"]


def test_bands_land_colors():
    text = render_bands_ppm(grid_of([[20, 23, 30, 40, 50]]), 20)
    assert text.splitlines()[2] == "10"
    assert pixels(text) == ["9 9 0", "0 10 0", "0 9 0", "9 9 9", "10 10 10"]


def test_bands_sea_blue_within_range():
    text = render_bands_ppm(grid_of([[0, 5, 10, 19, -4]]), 20)
    for line in pixels(text):
        red, green, blue = line.split()
        assert red == green == "0"
        assert 0 <= int(blue) <= 10


def test_shadows_match_plain_bands_when_sun_is_high():
    rows = [[0, 25, 40], [10, 50, 22], [30, 20, 5]]
    grid = grid_of(rows)
    assert render_bands_with_shadows_ppm(grid, 20, 1000.0) == render_bands_ppm(grid, 20)


def test_tall_cell_casts_shadow_up_left():
    text = render_bands_with_shadows_ppm(grid_of([[20, 20], [20, 50]]), 20, 0.6)
    assert pixels(text) == ["6 6 0", "9 9 0", "9 9 0", "10 10 10"]


def test_shadow_only_darkens():
    grid = grid_of([[21, 22, 30], [23, 40, 45], [24, 60, 80]])
    plain = pixels(render_bands_ppm(grid, 20))
    shaded = pixels(render_bands_with_shadows_ppm(grid, 20, 0.6))
    for lit, dark in zip(plain, shaded):
        assert all(int(d) <= int(p) for p, d in zip(lit.split(), dark.split()))