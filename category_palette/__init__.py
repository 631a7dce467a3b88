"""Deterministic color palettes for categorical data visualization.

This package contains:
- color_palette: Fixed category10/category20 palettes and their HSL extension
- spatial: Palettes that give nearby clusters of a 2-D embedding related hues
- parsing: Color string parsing to normalized sRGB + alpha
- centroids: Per-category centroids of labelled embedding points
- colorspace: sRGB / Lab / HCL conversions and colormap sampling
"""

from .centroids import category_centroids
from .color_palette import (
    category_color_map,
    default_category_colors,
    get_category_color,
    get_category_colorscale,
)
from .config import CATEGORY10, CATEGORY20, OUTLIER_COLOR
from .parsing import ColorSample, parse_color_normalized_rgb
from .spatial import (
    spatial_category_colors,
    spatial_category_colors_for_labels,
    spatial_category_hcl,
)

__version__ = "0.1.0"

__all__ = [
    # Fixed palettes
    "CATEGORY10",
    "CATEGORY20",
    "OUTLIER_COLOR",
    "default_category_colors",
    "get_category_color",
    "category_color_map",
    "get_category_colorscale",
    # Spatial palettes
    "spatial_category_colors",
    "spatial_category_hcl",
    "spatial_category_colors_for_labels",
    "category_centroids",
    # Parsing
    "ColorSample",
    "parse_color_normalized_rgb",
]
