"""Centralized configuration for category palettes.

Single source of truth for the fixed category tables and the default
parameters used by the procedural and spatial palette generators.
"""

from typing import Any, Dict, Tuple

# =============================================================================
# FIXED CATEGORY TABLES
# =============================================================================

# Qualitative 10-color table (one hue per category)
CATEGORY10: Tuple[str, ...] = (
    "#1f77b4",  # blue
    "#ff7f0e",  # orange
    "#2ca02c",  # green
    "#d62728",  # red
    "#9467bd",  # purple
    "#8c564b",  # brown
    "#e377c2",  # pink
    "#7f7f7f",  # gray
    "#bcbd22",  # olive
    "#17becf",  # cyan
)

# 20-color table: each primary hue followed by its lighter tint
CATEGORY20: Tuple[str, ...] = (
    "#1f77b4", "#aec7e8",  # blue
    "#ff7f0e", "#ffbb78",  # orange
    "#2ca02c", "#98df8a",  # green
    "#d62728", "#ff9896",  # red
    "#9467bd", "#c5b0d5",  # purple
    "#8c564b", "#c49c94",  # brown
    "#e377c2", "#f7b6d2",  # pink
    "#7f7f7f", "#c7c7c7",  # gray
    "#bcbd22", "#dbdb8d",  # olive
    "#17becf", "#9edae5",  # cyan
)

# Light gray for outlier points (label -1)
OUTLIER_COLOR = "#cccccc"
OUTLIER_LABEL = -1


# =============================================================================
# PROCEDURAL EXTENSION (> 20 categories)
# =============================================================================

# HSL parameters for colors appended after CATEGORY20
HSL_EXTENSION_PARAMS: Dict[str, Any] = {
    "saturation_even": 70,   # % for even indices
    "saturation_odd": 85,    # % for odd indices
    "lightness_base": 45,    # % at i mod 3 == 0
    "lightness_step": 10,    # % added per (i mod 3)
}


# =============================================================================
# SPATIAL PALETTE CONFIGURATION
# =============================================================================

DEFAULT_COLORMAP = "turbo"

# Default keyword arguments for spatial_category_colors
DEFAULT_SPATIAL_PARAMS: Dict[str, Any] = {
    "hue_shift": 0.0,             # degrees, added to the colormap parameter
    "min_lightness": 15.0,        # floor on HCL lightness (0-100)
    "radius_weight_power": 1.0,   # exponent on radius for angular spacing
    "colormap": DEFAULT_COLORMAP,
}

# Chroma multiplier = base + gain * normalized_radius
# Center categories keep 70% of the colormap chroma, outer ones reach 130%
CHROMA_SCALE: Tuple[float, float] = (0.7, 0.6)

# Lightness multiplier = 1 - drop * normalized_radius
LIGHTNESS_DROP: float = 0.35
