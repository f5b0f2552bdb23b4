"""
config.py

Central tolerance settings for geomeasure.

Contents:
---------
1. POINT_EQUALITY_EPSILON:
   - Absolute tolerance used by `contains.points_equal` when deciding that
     two points coincide. Matches single-precision machine epsilon.

2. POINT_EQUALITY_DTYPE:
   - Scalar type the point-to-point distance is cast to before the
     tolerance test. The default is single precision regardless of the
     coordinate type, so float64 coordinates closer than ~1e-7 compare
     equal. Pass `epsilon=` / `dtype=` per call to tighten it.

Usage:
------
    from geomeasure.config import POINT_EQUALITY_EPSILON
"""
import numpy as np

# float32 machine epsilon, 1.1920929e-07
POINT_EQUALITY_EPSILON = float(np.finfo(np.float32).eps)

POINT_EQUALITY_DTYPE = np.float32
