"""
Fixed-size vectors: Vector2, Vector3 and Vector4.

Vectors are immutable values.  Components are stored exactly as given, so
ints, floats and Fractions all work; every operation returns a new vector.
Division by exact zero follows IEEE-754 (inf / nan) instead of raising.
"""

import math


def _divide(a, b):
    """a / b with IEEE-754 results for an exact-zero divisor."""
    try:
        return a / b
    except ZeroDivisionError:
        if a == 0 or a != a:
            return math.nan
        return math.copysign(math.inf, a) * math.copysign(1.0, b)


def _component(index, name):
    def getter(self):
        return self._values[index]
    getter.__name__ = name
    return property(getter, doc=f"Component {index} ({name}).")


class _Vector:
    """Shared machinery for the fixed-arity vector types."""

    __slots__ = ("_values",)

    FIELDS = ()

    def __init__(self, *components):
        if len(components) != len(self.FIELDS):
            raise TypeError(
                f"{type(self).__name__} takes {len(self.FIELDS)} components, "
                f"got {len(components)}"
            )
        self._values = tuple(components)

    @classmethod
    def from_scalar(cls, scalar):
        """Broadcast *scalar* into every component."""
        return cls(*([scalar] * len(cls.FIELDS)))

    def __setattr__(self, name, value):
        if name != "_values" or hasattr(self, "_values"):
            raise AttributeError(f"{type(self).__name__} is immutable")
        object.__setattr__(self, name, value)

    def __len__(self):
        return len(self._values)

    def __iter__(self):
        return iter(self._values)

    def __getitem__(self, index):
        return self._values[index]

    def __eq__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return all(a == b for a, b in zip(self._values, other._values))

    def __hash__(self):
        return hash((type(self).__name__, self._values))

    def __repr__(self):
        args = ", ".join(repr(c) for c in self._values)
        return f"{type(self).__name__}({args})"

    def _combine(self, other, op):
        if type(other) is type(self):
            return type(self)(*(op(a, b) for a, b in zip(self._values, other._values)))
        if isinstance(other, _Vector):
            return NotImplemented
        try:
            other + 0
        except TypeError:
            return NotImplemented
        return type(self)(*(op(a, other) for a in self._values))

    def __add__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return add(self, other)

    def __sub__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return sub(self, other)

    def __mul__(self, other):
        return self._combine(other, lambda a, b: a * b)

    def __rmul__(self, other):
        # Only reached for scalar * vector; vector * vector uses __mul__.
        return self._combine(other, lambda a, b: b * a)

    def __truediv__(self, other):
        return self._combine(other, _divide)

    def __neg__(self):
        return type(self)(*(-c for c in self._values))

    def __pos__(self):
        return self

    def dot(self, other):
        return dot(self, other)

    def length(self):
        return length(self)

    def normalize(self):
        return normalize(self)


class Vector2(_Vector):
    __slots__ = ()
    FIELDS = ("x", "y")

    x = _component(0, "x")
    y = _component(1, "y")


class Vector3(_Vector):
    __slots__ = ()
    FIELDS = ("x", "y", "z")

    x = _component(0, "x")
    y = _component(1, "y")
    z = _component(2, "z")

    def cross(self, other):
        return cross(self, other)


class Vector4(_Vector):
    __slots__ = ()
    FIELDS = ("x", "y", "z", "w")

    x = _component(0, "x")
    y = _component(1, "y")
    z = _component(2, "z")
    w = _component(3, "w")


def _check_same(a, b, name):
    if type(a) is not type(b) or not isinstance(a, _Vector):
        raise TypeError(
            f"{name} requires two vectors of the same size, "
            f"got {type(a).__name__} and {type(b).__name__}"
        )


def add(a, b):
    """Elementwise a + b."""
    _check_same(a, b, "add")
    return type(a)(*(p + q for p, q in zip(a._values, b._values)))


def sub(a, b):
    """Elementwise a - b."""
    _check_same(a, b, "sub")
    return type(a)(*(p - q for p, q in zip(a._values, b._values)))


def mul(a, b):
    """Componentwise product; *b* may be a scalar."""
    result = a._combine(b, lambda p, q: p * q)
    if result is NotImplemented:
        raise TypeError(f"cannot multiply {type(a).__name__} by {type(b).__name__}")
    return result


def div(a, b):
    """Componentwise quotient; *b* may be a scalar."""
    result = a._combine(b, _divide)
    if result is NotImplemented:
        raise TypeError(f"cannot divide {type(a).__name__} by {type(b).__name__}")
    return result


def dot(a, b):
    """Sum of the componentwise products, accumulated right to left."""
    _check_same(a, b, "dot")
    products = [p * q for p, q in zip(a._values, b._values)]
    total = products[-1]
    for p in reversed(products[:-1]):
        total = p + total
    return total


def cross(a, b):
    """Cross product of two Vector3."""
    if type(a) is not Vector3 or type(b) is not Vector3:
        raise TypeError("cross is only defined for Vector3")
    return Vector3(
        a.y * b.z - a.z * b.y,
        a.z * b.x - a.x * b.z,
        a.x * b.y - a.y * b.x,
    )


def length(v):
    return math.sqrt(dot(v, v))


def normalize(v):
    """Return *v* scaled to unit length.  A zero vector gives NaNs."""
    return v * _divide(1.0, length(v))
