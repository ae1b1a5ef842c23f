"""
Fixed-size vectors and square matrices for graphics and geometry code.
"""

from .compare import abs_diff_eq, relative_eq, ulps_eq
from .matrix import (
    Matrix2, Matrix3, Matrix4,
    adjugate, cofactor_matrix, determinant, identity, inverse, transpose,
)
from .vector import (
    Vector2, Vector3, Vector4,
    cross, dot, length, normalize,
)

__version__ = "0.1.0"
