"""
Text form of complex values: "<re>+<im>i" / "<re>-<im>i".
"""

from .defaults import DEFAULT_DISPLAY_FORMAT


def format_complex(re: float, im: float, fmt: str = DEFAULT_DISPLAY_FORMAT) -> str:
    # the imaginary part always carries its own sign
    return f"{re:{fmt}}{im:+{fmt}}i"
