"""Pure Python utilities for habitgrid.

Submodules:
    - dt_utils: Calendar-day normalization and week/month arithmetic
    - math_utils: Clamping, progress ratios and interpolation

Usage:
    from . import dt_utils
    from .math_utils import progress_ratio
"""

from . import dt_utils, math_utils

__all__ = ["dt_utils", "math_utils"]
