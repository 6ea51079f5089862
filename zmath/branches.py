"""
Branch index validation.

log, pow/sqrt and the inverse functions pick one member of a family of
valid results through an integer index. Anything integral that fits the
kernels' int64 is accepted (2, numpy.int64(2), 2.0); bools, out-of-range
values and everything else raise InvalidBranchIndex before any
arithmetic runs.
"""

import math
import numbers

import numpy as np

from .errors import InvalidBranchIndex

INT64_MIN = -(2 ** 63)
INT64_MAX = 2 ** 63 - 1


def check_branch(k, name: str = "k") -> int:
    # bool is Integral
    if isinstance(k, (bool, np.bool_)):
        raise InvalidBranchIndex(name, k)
    if isinstance(k, numbers.Integral):
        v = int(k)
    elif isinstance(k, numbers.Real):
        x = float(k)
        if not (math.isfinite(x) and x.is_integer()):
            raise InvalidBranchIndex(name, k)
        v = int(x)
    else:
        raise InvalidBranchIndex(name, k)
    if not INT64_MIN <= v <= INT64_MAX:
        raise InvalidBranchIndex(name, k)
    return v
