"""Spatially-aware category palettes.

Categories that sit at similar angles around the center of a 2-D embedding
get neighbouring positions on a colormap, so adjacent clusters share related
hues. Distance from the center drives saturation and darkness: outer
categories are more saturated and darker, central ones stay soft.

Hue always comes from the colormap (turbo by default); it is never derived
directly from the angle.
"""

import logging
from typing import Dict, Optional, Sequence, Tuple

import numpy as np

from .centroids import category_centroids
from .colorspace import hcl_to_hex, sample_colormap, srgb_to_hcl
from .config import (
    CHROMA_SCALE,
    DEFAULT_SPATIAL_PARAMS,
    LIGHTNESS_DROP,
    OUTLIER_COLOR,
    OUTLIER_LABEL,
)

logger = logging.getLogger(__name__)


def _as_points(positions) -> np.ndarray:
    """Coerce positions to a float array of shape (n, 2)."""
    points = np.asarray(positions, dtype=np.float64)
    if points.size == 0:
        return np.empty((0, 2))
    if points.ndim != 2 or points.shape[1] != 2:
        raise ValueError(f"Expected positions of shape (n, 2), got {points.shape}")
    return points


def polar_coordinates(points: np.ndarray) -> Tuple[np.ndarray, np.ndarray]:
    """Radius and angle of each point around the bounding-box center.

    The center is the midpoint of the axis-aligned bounding box, not the
    mean of the points.

    Returns:
        tuple: (radius, theta) arrays, theta in radians from atan2
    """
    center = (points.min(axis=0) + points.max(axis=0)) / 2
    delta = points - center
    radius = np.hypot(delta[:, 0], delta[:, 1])
    theta = np.arctan2(delta[:, 1], delta[:, 0])
    return radius, theta


def angular_weights(
    radius: np.ndarray,
    theta: np.ndarray,
    radius_weight_power: float = 1.0,
) -> np.ndarray:
    """Cumulative radius-weighted position of each point in angular order.

    Points are sorted by angle (stable, so equal angles keep input order) and
    each contributes radius ** power to a running sum. The result is indexed
    like the input and increases along the angular order, ending at 1.0.

    When every weight is zero (all points on the center) the result falls
    back to even spacing: (rank + 1) / n.
    """
    n = len(theta)
    order = np.argsort(theta, kind="stable")

    with np.errstate(divide="ignore", invalid="ignore"):
        weights = radius[order] ** radius_weight_power
    total = weights.sum()

    normalized = np.empty(n, dtype=np.float64)
    if total > 0 and np.isfinite(total):
        normalized[order] = np.cumsum(weights) / total
    else:
        logger.debug("Total angular weight is zero, spacing categories evenly")
        normalized[order] = np.arange(1, n + 1) / n
    return normalized


def spatial_category_hcl(
    category_count: int,
    positions: Sequence,
    hue_shift: float = DEFAULT_SPATIAL_PARAMS["hue_shift"],
    min_lightness: float = DEFAULT_SPATIAL_PARAMS["min_lightness"],
    radius_weight_power: float = DEFAULT_SPATIAL_PARAMS["radius_weight_power"],
    colormap: str = DEFAULT_SPATIAL_PARAMS["colormap"],
) -> np.ndarray:
    """Compute per-category hue/chroma/lightness from 2-D positions.

    Args:
        category_count: Number of categories; 0 yields no colors
        positions: One (x, y) per category, in category order
        hue_shift: Degrees added to the colormap parameter (360 = full turn)
        min_lightness: Lower bound on output lightness (0-100)
        radius_weight_power: Exponent on radius when spacing hues by angle
        colormap: Registered matplotlib colormap name

    Returns:
        Array (n x 3) of [hue, chroma, lightness] rows in input order
    """
    points = _as_points(positions)
    if category_count == 0 or len(points) == 0:
        return np.empty((0, 3))

    if category_count != len(points):
        logger.warning(
            f"category_count={category_count} but {len(points)} positions given, "
            f"producing one color per position"
        )

    radius, theta = polar_coordinates(points)
    normalized_weight = angular_weights(radius, theta, radius_weight_power)

    t = (normalized_weight + hue_shift / 360.0) % 1.0
    hcl = srgb_to_hcl(sample_colormap(colormap, t))

    max_radius = radius.max()
    if max_radius > 0:
        normalized_radius = radius / max_radius
    else:
        logger.debug("All positions coincide, using normalized radius 0")
        normalized_radius = np.zeros_like(radius)

    chroma_base, chroma_gain = CHROMA_SCALE
    hcl[:, 1] *= chroma_base + chroma_gain * normalized_radius
    hcl[:, 2] = np.maximum(hcl[:, 2] * (1 - LIGHTNESS_DROP * normalized_radius), min_lightness)
    return hcl


def spatial_category_colors(
    category_count: int,
    positions: Sequence,
    hue_shift: float = DEFAULT_SPATIAL_PARAMS["hue_shift"],
    min_lightness: float = DEFAULT_SPATIAL_PARAMS["min_lightness"],
    radius_weight_power: float = DEFAULT_SPATIAL_PARAMS["radius_weight_power"],
    colormap: str = DEFAULT_SPATIAL_PARAMS["colormap"],
) -> list:
    """Generate hex colors for categories placed in a 2-D embedding.

    See spatial_category_hcl for the arguments.

    Returns:
        List of '#rrggbb' strings, one per position, in input order

    Examples:
        >>> spatial_category_colors(0, [])
        []
        >>> len(spatial_category_colors(1, [(0.5, 0.5)]))
        1
    """
    hcl = spatial_category_hcl(
        category_count,
        positions,
        hue_shift=hue_shift,
        min_lightness=min_lightness,
        radius_weight_power=radius_weight_power,
        colormap=colormap,
    )
    if len(hcl) == 0:
        return []
    return hcl_to_hex(hcl)


def spatial_category_colors_for_labels(
    points: np.ndarray,
    labels: Sequence,
    options: Optional[Dict] = None,
) -> Dict:
    """Assign spatial colors to labelled points via their category centroids.

    Args:
        points: Embedding coordinates (n_samples x 2)
        labels: Category label per point; -1 marks outliers
        options: Overrides for DEFAULT_SPATIAL_PARAMS

    Returns:
        Dict mapping each label to a hex color. Outliers map to OUTLIER_COLOR.
    """
    params = {**DEFAULT_SPATIAL_PARAMS, **(options or {})}
    unknown = set(params) - set(DEFAULT_SPATIAL_PARAMS)
    if unknown:
        raise ValueError(f"Unknown spatial palette options: {sorted(unknown)}")

    centroids = category_centroids(points, labels)
    colors = spatial_category_colors(
        len(centroids),
        centroids[["x", "y"]].to_numpy(),
        **params,
    )

    color_map = dict(zip(centroids.index, colors))
    if OUTLIER_LABEL in list(labels):
        color_map[OUTLIER_LABEL] = OUTLIER_COLOR
    return color_map
