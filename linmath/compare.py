"""
Approximate equality for scalars, vectors and matrices.

Three flavours, matching what graphics test suites usually need:

  abs_diff_eq   |a - b| <= epsilon
  relative_eq   absolute check, then relative to the larger magnitude
  ulps_eq       absolute check, then distance in representable doubles

Vectors and matrices are compared component by component (matrices
recurse through their columns).  Sequences of different length or
nesting are never equal, and NaN is never equal to anything.
"""

import math
import struct
import sys


DEFAULT_EPSILON = sys.float_info.epsilon
DEFAULT_MAX_RELATIVE = sys.float_info.epsilon
DEFAULT_MAX_ULPS = 4


def _items(value):
    """Components of *value*, or None for a scalar."""
    if isinstance(value, (str, bytes)):
        return None
    try:
        return list(value)
    except TypeError:
        return None


def _pairwise(a, b, scalar_eq):
    items_a = _items(a)
    items_b = _items(b)
    if items_a is None and items_b is None:
        return scalar_eq(a, b)
    # A scalar never matches a vector or matrix.
    if items_a is None or items_b is None:
        return False
    if len(items_a) != len(items_b):
        return False
    return all(_pairwise(p, q, scalar_eq) for p, q in zip(items_a, items_b))


def _abs_diff_eq(a, b, epsilon):
    return abs(a - b) <= epsilon


def _relative_eq(a, b, epsilon, max_relative):
    if a == b:
        return True
    if math.isinf(a) or math.isinf(b):
        return False
    diff = abs(a - b)
    if diff <= epsilon:
        return True
    largest = max(abs(a), abs(b))
    return diff <= largest * max_relative


def _bits(value):
    return struct.unpack("<Q", struct.pack("<d", value))[0]


def _ulps_eq(a, b, epsilon, max_ulps):
    if _abs_diff_eq(a, b, epsilon):
        return True
    if math.isnan(a) or math.isnan(b):
        return False
    if math.copysign(1.0, a) != math.copysign(1.0, b):
        return False
    bits_a, bits_b = _bits(a), _bits(b)
    return abs(bits_a - bits_b) <= max_ulps


def abs_diff_eq(a, b, epsilon=DEFAULT_EPSILON):
    """True when every pair of components differs by at most *epsilon*."""
    return _pairwise(a, b, lambda p, q: _abs_diff_eq(p, q, epsilon))


def relative_eq(a, b, epsilon=DEFAULT_EPSILON, max_relative=DEFAULT_MAX_RELATIVE):
    """True when every pair is within *epsilon* or within *max_relative*
    of the larger magnitude.  Infinities only match themselves."""
    return _pairwise(a, b, lambda p, q: _relative_eq(p, q, epsilon, max_relative))


def ulps_eq(a, b, epsilon=DEFAULT_EPSILON, max_ulps=DEFAULT_MAX_ULPS):
    """True when every pair is within *epsilon* or at most *max_ulps*
    representable doubles apart (same sign only)."""
    return _pairwise(a, b, lambda p, q: _ulps_eq(float(p), float(q), epsilon, max_ulps))
