"""
Random points in the unit disc.
"""

from __future__ import annotations

import numpy as np

from .kernels import TWO_PI
from .value import Complex


def uniform_sample(rng: np.random.Generator | None = None) -> Complex:
    """
    Random point with |z| < 1.

    The radius is drawn uniformly from [0, 1) and the angle uniformly from
    [0, 2 pi). Because the radius is not square-rooted, points cluster
    toward the origin: this is not an area-uniform disc sample.

    Parameters
    ----------
    rng : numpy.random.Generator, optional
        Source of randomness. A fresh default_rng() is used when omitted,
        so no global random state is read or advanced.
    """
    if rng is None:
        rng = np.random.default_rng()
    r = float(rng.random())
    theta = float(rng.uniform(0.0, TWO_PI))
    return Complex.from_polar(r, theta)
