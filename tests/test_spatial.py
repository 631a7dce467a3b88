import logging
import math
import re

import numpy as np
import pytest

from category_palette import (
    OUTLIER_COLOR,
    spatial_category_colors,
    spatial_category_colors_for_labels,
    spatial_category_hcl,
)
from category_palette.spatial import angular_weights, polar_coordinates

HEX_RE = re.compile(r"^#[0-9a-f]{6}$")

SQUARE = [(1.0, 1.0), (-1.0, 1.0), (-1.0, -1.0), (1.0, -1.0)]


def test_empty_inputs_give_empty_palette():
    assert spatial_category_colors(0, []) == []
    assert spatial_category_colors(5, []) == []
    assert spatial_category_colors(0, [(1.0, 2.0)]) == []


def test_single_position():
    colors = spatial_category_colors(1, [(3.0, -2.0)])
    assert len(colors) == 1
    assert HEX_RE.match(colors[0])


def test_output_follows_input_order():
    points = [(0.0, 0.0), (10.0, 0.0), (0.0, 10.0), (10.0, 10.0), (5.0, 2.0)]
    colors = spatial_category_colors(len(points), points)
    assert all(HEX_RE.match(c) for c in colors)

    perm = [3, 0, 4, 1, 2]
    permuted = spatial_category_colors(len(points), [points[i] for i in perm])
    assert permuted == [colors[i] for i in perm]


def test_accepts_numpy_positions():
    points = np.array(SQUARE)
    assert spatial_category_colors(4, points) == spatial_category_colors(4, SQUARE)


def test_symmetric_points_respect_min_lightness():
    hcl = spatial_category_hcl(4, SQUARE, min_lightness=60.0)
    assert not np.isnan(hcl).any()
    assert np.all(hcl[:, 2] >= 60.0)


def test_coincident_points_spaced_evenly():
    colors = spatial_category_colors(4, [(2.0, 2.0)] * 4)
    assert len(colors) == 4
    assert len(set(colors)) == 4


def test_radius_drives_chroma_and_lightness():
    # center point and (-1, -1) land on the same colormap position
    points = [(0.0, 0.0), (-1.0, -1.0), (1.0, 1.0)]
    hcl = spatial_category_hcl(3, points, min_lightness=0.0)
    assert hcl[0, 0] == pytest.approx(hcl[1, 0])
    assert hcl[1, 1] == pytest.approx(hcl[0, 1] * 1.3 / 0.7)
    assert hcl[1, 2] == pytest.approx(hcl[0, 2] * 0.65)


def test_full_turn_hue_shift_is_identity():
    base = spatial_category_colors(4, SQUARE, radius_weight_power=0.0)
    shifted = spatial_category_colors(4, SQUARE, hue_shift=360, radius_weight_power=0.0)
    half_turn = spatial_category_colors(4, SQUARE, hue_shift=180, radius_weight_power=0.0)
    assert shifted == base
    assert half_turn != base


def test_other_colormap():
    colors = spatial_category_colors(4, SQUARE, colormap="twilight")
    assert colors != spatial_category_colors(4, SQUARE)


def test_count_mismatch_logs_warning(caplog):
    with caplog.at_level(logging.WARNING):
        colors = spatial_category_colors(3, SQUARE)
    assert len(colors) == 4
    assert "category_count=3" in caplog.text


@pytest.mark.parametrize("positions", [[1.0, 2.0, 3.0], [(1.0, 2.0, 3.0)]])
def test_bad_position_shape(positions):
    with pytest.raises(ValueError):
        spatial_category_colors(1, positions)


def test_polar_coordinates_use_bounding_box_center():
    points = np.array([(0.0, 0.0), (1.0, 0.0), (10.0, 0.0)])
    radius, theta = polar_coordinates(points)
    np.testing.assert_allclose(radius, [5.0, 4.0, 5.0])
    np.testing.assert_allclose(theta, [math.pi, math.pi, 0.0])


def test_angular_weights():
    radius = np.array([1.0, 1.0, 2.0])
    theta = np.array([0.5, -1.0, 2.0])
    np.testing.assert_allclose(angular_weights(radius, theta), [0.5, 0.25, 1.0])
    np.testing.assert_allclose(
        angular_weights(radius, theta, radius_weight_power=0.0), [2 / 3, 1 / 3, 1.0]
    )


def test_angular_weights_duplicate_points_tracked_by_index():
    points = np.array([(1.0, 0.0), (1.0, 0.0), (-1.0, 0.0)])
    radius, theta = polar_coordinates(points)
    np.testing.assert_allclose(angular_weights(radius, theta), [1 / 3, 2 / 3, 1.0])


def test_angular_weights_zero_radius_fallback():
    weights = angular_weights(np.zeros(4), np.zeros(4))
    np.testing.assert_allclose(weights, [0.25, 0.5, 0.75, 1.0])


def test_colors_for_labels():
    rng = np.random.default_rng(0)
    centers = np.array([(0.0, 0.0), (5.0, 0.0), (0.0, 5.0)])
    points = np.concatenate([c + rng.normal(scale=0.1, size=(20, 2)) for c in centers])
    labels = np.repeat([0, 1, 2], 20)
    labels[:3] = -1

    color_map = spatial_category_colors_for_labels(points, labels)
    assert set(color_map) == {0, 1, 2, -1}
    assert color_map[-1] == OUTLIER_COLOR
    assert len({color_map[k] for k in (0, 1, 2)}) == 3


def test_colors_for_labels_rejects_unknown_option():
    with pytest.raises(ValueError):
        spatial_category_colors_for_labels([(0.0, 0.0)], [0], options={"saturation": 2})
