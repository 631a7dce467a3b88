"""Per-category centroids of labelled 2-D points."""

import logging
from typing import Sequence

import numpy as np
import pandas as pd

from .config import OUTLIER_LABEL

logger = logging.getLogger(__name__)


def category_centroids(
    points: np.ndarray,
    labels: Sequence,
    exclude_outliers: bool = True,
) -> pd.DataFrame:
    """Compute the mean position of each category.

    Args:
        points: Embedding coordinates (n_samples x 2), e.g. a 2D UMAP
        labels: Category label per point (same length as points)
        exclude_outliers: Drop points labelled -1 before grouping

    Returns:
        DataFrame indexed by label (sorted) with columns 'x', 'y' and 'count'

    Raises:
        ValueError: If points is not (n, 2) or lengths differ
    """
    points = np.asarray(points, dtype=np.float64)
    if points.ndim != 2 or points.shape[1] != 2:
        raise ValueError(f"Expected points of shape (n, 2), got {points.shape}")

    labels = pd.Series(np.asarray(labels), name="label")
    if len(labels) != len(points):
        raise ValueError(
            f"Got {len(points)} points but {len(labels)} labels"
        )

    df = pd.DataFrame({"x": points[:, 0], "y": points[:, 1], "label": labels})
    if exclude_outliers:
        n_outliers = int((df["label"] == OUTLIER_LABEL).sum())
        if n_outliers:
            logger.debug(f"Excluding {n_outliers} outlier points from centroids")
        df = df[df["label"] != OUTLIER_LABEL]

    grouped = df.groupby("label", sort=True)
    centroids = grouped[["x", "y"]].mean()
    centroids["count"] = grouped.size()
    return centroids
