import numpy as np
import pytest

from category_palette.colorspace import (
    format_number,
    hcl_to_hex,
    hex_to_hcl,
    hsl_string,
    sample_colormap,
    srgb_to_hcl,
    srgb_to_lab,
)


def test_white_and_black_lab():
    lab = srgb_to_lab([[1.0, 1.0, 1.0], [0.0, 0.0, 0.0]])
    np.testing.assert_allclose(lab[0], [100.0, 0.0, 0.0], atol=0.05)
    np.testing.assert_allclose(lab[1], [0.0, 0.0, 0.0], atol=1e-9)


def test_red_hcl():
    hue, chroma, lightness = srgb_to_hcl([[1.0, 0.0, 0.0]])[0]
    assert hue == pytest.approx(40.0, abs=0.5)
    assert chroma == pytest.approx(104.6, abs=0.5)
    assert lightness == pytest.approx(53.2, abs=0.5)


def test_hcl_hex_round_trip():
    hcl = hex_to_hcl(["#1f77b4", "#ff7f0e"])
    assert hcl_to_hex(hcl) == ["#1f77b4", "#ff7f0e"]


def test_out_of_gamut_is_clipped():
    (color,) = hcl_to_hex([[264.0, 300.0, 50.0]])
    assert color.startswith("#") and len(color) == 7


def test_sample_colormap():
    rgb = sample_colormap("turbo", np.array([0.0, 0.5, 1.0]))
    assert rgb.shape == (3, 3)
    assert np.all((rgb >= 0.0) & (rgb <= 1.0))


@pytest.mark.parametrize(
    "value, expected",
    [(288.0, "288"), (302.4, "302.4"), (0, "0"), (13.333333333333334, "13.333333333333334")],
)
def test_format_number(value, expected):
    assert format_number(value) == expected


def test_hsl_string():
    assert hsl_string(288.0, 70, 45) == "hsl(288, 70%, 45%)"
