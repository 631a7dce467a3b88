"""Color space conversions used by the palette generators.

sRGB <-> CIE Lab (D65) <-> HCL, where HCL is the polar form of Lab
(hue in degrees, chroma, lightness 0-100). All conversions are vectorised
over arrays of shape (n, 3) and operate on unit-interval sRGB.
"""

from typing import List, Sequence

import matplotlib
import matplotlib.colors as mcolors
import numpy as np

# =============================================================================
# Constants
# =============================================================================

# D65 reference white
XN, YN, ZN = 0.95047, 1.0, 1.08883

EPSILON = 0.008856
KAPPA = 903.3

RGB_TO_XYZ = np.array([
    [0.4124564, 0.3575761, 0.1804375],
    [0.2126729, 0.7151522, 0.0721750],
    [0.0193339, 0.1191920, 0.9503041],
])

XYZ_TO_RGB = np.array([
    [3.2404542, -1.5371385, -0.4985314],
    [-0.9692660, 1.8760108, 0.0415560],
    [0.0556434, -0.2040259, 1.0572252],
])


# =============================================================================
# sRGB <-> Lab
# =============================================================================

def srgb_to_lab(rgb: np.ndarray) -> np.ndarray:
    """Convert unit sRGB array (n x 3) to CIE Lab."""
    rgb = np.atleast_2d(np.asarray(rgb, dtype=np.float64))

    # Undo gamma
    mask = rgb > 0.04045
    linear = np.where(mask, ((rgb + 0.055) / 1.055) ** 2.4, rgb / 12.92)

    xyz = linear @ RGB_TO_XYZ.T
    xyz = xyz / np.array([XN, YN, ZN])

    f = np.where(xyz > EPSILON, np.cbrt(xyz), (KAPPA * xyz + 16) / 116)
    fx, fy, fz = f[:, 0], f[:, 1], f[:, 2]

    L = 116 * fy - 16
    a = 500 * (fx - fy)
    b = 200 * (fy - fz)
    return np.column_stack([L, a, b])


def lab_to_srgb(lab: np.ndarray) -> np.ndarray:
    """Convert Lab array (n x 3) to unit sRGB, clipped into gamut."""
    lab = np.atleast_2d(np.asarray(lab, dtype=np.float64))
    L, a, b = lab[:, 0], lab[:, 1], lab[:, 2]

    fy = (L + 16) / 116
    fx = a / 500 + fy
    fz = fy - b / 200

    x = np.where(fx ** 3 > EPSILON, fx ** 3, (116 * fx - 16) / KAPPA)
    y = np.where(L > KAPPA * EPSILON, fy ** 3, L / KAPPA)
    z = np.where(fz ** 3 > EPSILON, fz ** 3, (116 * fz - 16) / KAPPA)

    xyz = np.column_stack([x * XN, y * YN, z * ZN])
    linear = xyz @ XYZ_TO_RGB.T

    mask = linear > 0.0031308
    rgb = np.where(
        mask,
        1.055 * np.power(np.clip(linear, 0, None), 1 / 2.4) - 0.055,
        12.92 * linear,
    )
    return np.clip(rgb, 0.0, 1.0)


# =============================================================================
# Lab <-> HCL
# =============================================================================

def lab_to_hcl(lab: np.ndarray) -> np.ndarray:
    """Lab -> (hue degrees [0, 360), chroma, lightness)."""
    lab = np.atleast_2d(np.asarray(lab, dtype=np.float64))
    L, a, b = lab[:, 0], lab[:, 1], lab[:, 2]
    hue = np.degrees(np.arctan2(b, a)) % 360
    chroma = np.hypot(a, b)
    return np.column_stack([hue, chroma, L])


def hcl_to_lab(hcl: np.ndarray) -> np.ndarray:
    """(hue degrees, chroma, lightness) -> Lab."""
    hcl = np.atleast_2d(np.asarray(hcl, dtype=np.float64))
    h = np.radians(hcl[:, 0])
    c, L = hcl[:, 1], hcl[:, 2]
    return np.column_stack([L, c * np.cos(h), c * np.sin(h)])


def srgb_to_hcl(rgb: np.ndarray) -> np.ndarray:
    return lab_to_hcl(srgb_to_lab(rgb))


def hcl_to_srgb(hcl: np.ndarray) -> np.ndarray:
    return lab_to_srgb(hcl_to_lab(hcl))


def hcl_to_hex(hcl: np.ndarray) -> List[str]:
    """Convert HCL rows to '#rrggbb' strings."""
    return [mcolors.to_hex(rgb) for rgb in hcl_to_srgb(hcl)]


def hex_to_hcl(colors: Sequence[str]) -> np.ndarray:
    """Read hue/chroma/lightness of any matplotlib-parseable colors."""
    rgb = np.array([mcolors.to_rgb(c) for c in colors], dtype=np.float64)
    return srgb_to_hcl(rgb.reshape(-1, 3))


# =============================================================================
# Colormaps and HSL strings
# =============================================================================

def sample_colormap(name: str, t: np.ndarray) -> np.ndarray:
    """Sample a registered matplotlib colormap at t in [0, 1].

    Returns:
        Unit sRGB array (n x 3), alpha dropped
    """
    cmap = matplotlib.colormaps[name]
    t = np.asarray(t, dtype=np.float64)
    return np.atleast_2d(cmap(t))[:, :3]


def format_number(value: float) -> str:
    """Shortest plain representation: 288.0 -> '288', 302.4 -> '302.4'."""
    value = float(value)
    if value.is_integer():
        return str(int(value))
    return repr(value)


def hsl_string(hue: float, saturation: float, lightness: float) -> str:
    """Encode as a CSS 'hsl(h, s%, l%)' string."""
    return (
        f"hsl({format_number(hue)}, "
        f"{format_number(saturation)}%, "
        f"{format_number(lightness)}%)"
    )
