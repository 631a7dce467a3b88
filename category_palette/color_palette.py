"""Fixed category palettes.

Color Consistency Guarantee:
- Category 0 is ALWAYS #1f77b4 (blue) for palettes of up to 20 categories
- Palettes for more than 20 categories always start with the full CATEGORY20
  table, so existing assignments never move when categories are added
- Outliers (label -1) are ALWAYS #cccccc (light gray)
"""

from typing import Dict, Iterable, List, Optional

import plotly.colors as pcolors

from .colorspace import hsl_string
from .config import (
    CATEGORY10,
    CATEGORY20,
    HSL_EXTENSION_PARAMS,
    OUTLIER_COLOR,
    OUTLIER_LABEL,
)
from .parsing import parse_color_rgb255


def default_category_colors(count: int) -> List[str]:
    """Get the default palette for a number of categories.

    Args:
        count: Number of categories. Values below 1 are treated as 1.

    Returns:
        List of exactly max(count, 1) color strings. Up to 10 categories use
        CATEGORY10, up to 20 use CATEGORY20, beyond that CATEGORY20 is
        extended with evenly spaced HSL hues.

    Examples:
        >>> default_category_colors(3)
        ['#1f77b4', '#ff7f0e', '#2ca02c']
        >>> default_category_colors(25)[20]
        'hsl(288, 70%, 45%)'
    """
    count = max(int(count), 1)

    if count <= len(CATEGORY10):
        return list(CATEGORY10[:count])
    if count <= len(CATEGORY20):
        return list(CATEGORY20[:count])

    colors = list(CATEGORY20)
    for i in range(len(CATEGORY20), count):
        # Hues spread evenly around the wheel
        hue = (i * 360 / count) % 360
        if i % 2 == 0:
            saturation = HSL_EXTENSION_PARAMS["saturation_even"]
        else:
            saturation = HSL_EXTENSION_PARAMS["saturation_odd"]
        lightness = (
            HSL_EXTENSION_PARAMS["lightness_base"]
            + (i % 3) * HSL_EXTENSION_PARAMS["lightness_step"]
        )
        colors.append(hsl_string(hue, saturation, lightness))
    return colors


def get_category_color(index: int, count: Optional[int] = None) -> str:
    """Get the color for one category index.

    Args:
        index: Category index (0-based). Use -1 for outliers.
        count: Total number of categories the palette is built for.
            Defaults to index + 1 (smallest palette containing the index).

    Returns:
        Color string (hex, or hsl() beyond 20 categories)
    """
    if index == OUTLIER_LABEL:
        return OUTLIER_COLOR
    if index < 0:
        raise ValueError(f"Category index must be >= 0 or -1, got {index}")

    if count is None:
        count = index + 1
    if index >= count:
        raise ValueError(f"Category index {index} out of range for {count} categories")

    return default_category_colors(count)[index]


def category_color_map(labels: Iterable) -> Dict:
    """Map each unique label to a palette color.

    Labels are sorted before assignment so the mapping does not depend on
    row order. The outlier label (-1) maps to OUTLIER_COLOR and does not
    consume a palette slot.
    """
    labels = list(labels)
    unique_labels = sorted(set(labels) - {OUTLIER_LABEL})

    palette = default_category_colors(len(unique_labels))
    color_map = {label: palette[i] for i, label in enumerate(unique_labels)}
    if OUTLIER_LABEL in labels:
        color_map[OUTLIER_LABEL] = OUTLIER_COLOR
    return color_map


def get_category_colorscale(colors: List[str]) -> List[List]:
    """Build a discrete colorscale for Plotly continuous color parameters.

    Each color occupies an equal band [i/n, (i+1)/n], so a numeric category
    column renders with hard steps instead of blended gradients.

    Returns:
        List of [position, 'rgb(r, g, b)'] pairs
    """
    if not colors:
        raise ValueError("Cannot build a colorscale from an empty palette")

    n = len(colors)
    colorscale = []
    for i, color in enumerate(colors):
        r, g, b, _ = parse_color_rgb255(color)
        label = pcolors.label_rgb((round(r), round(g), round(b)))
        colorscale.append([i / n, label])
        colorscale.append([(i + 1) / n, label])
    return colorscale
