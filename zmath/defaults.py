"""
Default values for complex evaluation and display.

DEFAULT_SQRT_EXPONENT and DEFAULT_ZERO_POW_ZERO are read when the numba
kernels are compiled and are frozen into the cached machine code;
rebinding them at runtime has no effect on results.
"""

DEFAULT_BRANCH = 0
DEFAULT_SQRT_EXPONENT = 0.5
DEFAULT_ZERO_POW_ZERO = (1.0, 0.0)  # 0**0, as in Python's own arithmetic
DEFAULT_DISPLAY_FORMAT = ".14g"
