"""
Square matrices: Matrix2, Matrix3 and Matrix4.

A matrix is a tuple of column vectors (OpenGL convention): ``m.x`` is
column 0, ``m.y`` column 1 and so on, and ``m * v`` treats *v* as a
column.  Products go through the transpose of the left operand so every
entry is a dot product of two vectors.

Determinants and adjugates use closed-form cofactor formulas per size.
``inverse()`` returns None when the determinant is exactly zero.
"""

import logging
import math

from .vector import Vector2, Vector3, Vector4, _Vector, cross, dot, normalize


logger = logging.getLogger(__name__)


def _column(index, name):
    def getter(self):
        return self._columns[index]
    getter.__name__ = name
    return property(getter, doc=f"Column {index} ({name}).")


def _is_scalar(value):
    if isinstance(value, (_Vector, _Matrix)):
        return False
    try:
        value + 0
    except TypeError:
        return False
    return True


class _Matrix:
    """Shared machinery for the fixed-size matrix types."""

    __slots__ = ("_columns",)

    SIZE = 0
    VECTOR = None

    def __init__(self, *columns):
        if len(columns) != self.SIZE:
            raise TypeError(
                f"{type(self).__name__} takes {self.SIZE} columns, got {len(columns)}"
            )
        for column in columns:
            if type(column) is not self.VECTOR:
                raise TypeError(
                    f"{type(self).__name__} columns must be {self.VECTOR.__name__}, "
                    f"got {type(column).__name__}"
                )
        self._columns = tuple(columns)

    @classmethod
    def identity(cls):
        """Return the identity matrix."""
        return cls.from_scalar(1)

    @classmethod
    def from_scalar(cls, scalar):
        """Identity scaled by *scalar*."""
        n = cls.SIZE
        return cls(*(
            cls.VECTOR(*(scalar if row == col else 0 for row in range(n)))
            for col in range(n)
        ))

    @classmethod
    def from_rows(cls, *rows):
        """Build a matrix from rows, e.g. as written on paper."""
        if len(rows) != cls.SIZE:
            raise TypeError(f"{cls.__name__} takes {cls.SIZE} rows, got {len(rows)}")
        for row in rows:
            if len(row) != cls.SIZE:
                raise TypeError(
                    f"{cls.__name__} rows take {cls.SIZE} entries, got {len(row)}"
                )
        return cls(*(cls.VECTOR(*column) for column in zip(*rows)))

    def __setattr__(self, name, value):
        if name != "_columns" or hasattr(self, "_columns"):
            raise AttributeError(f"{type(self).__name__} is immutable")
        object.__setattr__(self, name, value)

    def __len__(self):
        return self.SIZE

    def __iter__(self):
        return iter(self._columns)

    def __getitem__(self, index):
        return self._columns[index]

    def __eq__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return all(a == b for a, b in zip(self._columns, other._columns))

    def __hash__(self):
        return hash((type(self).__name__, self._columns))

    def __repr__(self):
        args = ", ".join(repr(c) for c in self._columns)
        return f"{type(self).__name__}({args})"

    def to_list(self):
        """Column-major flat list of entries, ready for glUniformMatrix*."""
        return [c for column in self._columns for c in column]

    def rows(self):
        return list(self.transpose())

    def __add__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return type(self)(*(a + b for a, b in zip(self._columns, other._columns)))

    def __sub__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return type(self)(*(a - b for a, b in zip(self._columns, other._columns)))

    def __neg__(self):
        return type(self)(*(-c for c in self._columns))

    def __mul__(self, other):
        if type(other) is type(self):
            return self._mul_matrix(other)
        if type(other) is self.VECTOR:
            return self._mul_vector(other)
        if _is_scalar(other):
            return self._mul_scalar(other)
        return NotImplemented

    def __rmul__(self, other):
        if _is_scalar(other):
            return self._mul_scalar(other)
        return NotImplemented

    def _mul_matrix(self, other):
        t = self.transpose()
        return type(self)(*(
            self.VECTOR(*(dot(row, column) for row in t._columns))
            for column in other._columns
        ))

    def _mul_vector(self, v):
        t = self.transpose()
        return self.VECTOR(*(dot(row, v) for row in t._columns))

    def _mul_scalar(self, scalar):
        return type(self)(*(column * scalar for column in self._columns))

    def transpose(self):
        n = self.SIZE
        return type(self)(*(
            self.VECTOR(*(column[i] for column in self._columns))
            for i in range(n)
        ))

    def determinant(self):
        raise NotImplementedError

    def adjugate(self):
        raise NotImplementedError

    def cofactor_matrix(self):
        """Signed minors; entry (row r, col c) sits at ``self[c][r]``."""
        return self.adjugate().transpose()

    def inverse(self):
        """Return the inverse, or None if the determinant is exactly zero."""
        det = self.determinant()
        if det == 0:
            logger.debug("%s is singular, no inverse", type(self).__name__)
            return None
        return self.adjugate() * (1 / det)


class Matrix2(_Matrix):
    __slots__ = ()
    SIZE = 2
    VECTOR = Vector2

    x = _column(0, "x")
    y = _column(1, "y")

    def determinant(self):
        m = self
        return m.x.x * m.y.y - m.x.y * m.y.x

    def adjugate(self):
        m = self
        return Matrix2(Vector2(m.y.y, -m.x.y), Vector2(-m.y.x, m.x.x))

    @staticmethod
    def rotate(angle):
        """Counter-clockwise rotation by *angle* radians."""
        s, c = math.sin(angle), math.cos(angle)
        return Matrix2(Vector2(c, s), Vector2(-s, c))

    @staticmethod
    def scale(v):
        return Matrix2(Vector2(v.x, 0), Vector2(0, v.y))


class Matrix3(_Matrix):
    __slots__ = ()
    SIZE = 3
    VECTOR = Vector3

    x = _column(0, "x")
    y = _column(1, "y")
    z = _column(2, "z")

    def determinant(self):
        # Scalar triple product of the rows.
        t = self.transpose()
        return dot(cross(t.x, t.y), t.z)

    def adjugate(self):
        t = self.transpose()
        return Matrix3(cross(t.y, t.z), cross(t.z, t.x), cross(t.x, t.y))

    @staticmethod
    def translate(v):
        """Homogeneous 2D translation by Vector2 *v*."""
        return Matrix3(
            Vector3(1, 0, 0),
            Vector3(0, 1, 0),
            Vector3(v.x, v.y, 1),
        )

    @staticmethod
    def rotate(angle):
        """Homogeneous 2D rotation by *angle* radians."""
        s, c = math.sin(angle), math.cos(angle)
        return Matrix3(
            Vector3(c, s, 0),
            Vector3(-s, c, 0),
            Vector3(0, 0, 1),
        )

    @staticmethod
    def scale(v):
        return Matrix3(
            Vector3(v.x, 0, 0),
            Vector3(0, v.y, 0),
            Vector3(0, 0, 1),
        )

    @staticmethod
    def ortho(left, right, bottom, top):
        return Matrix3(
            Vector3(2 / (right - left), 0, 0),
            Vector3(0, 2 / (top - bottom), 0),
            Vector3(0, 0, -1),
        )


def _minor(m, row, col):
    """3x3 minor of a Matrix4 with *row* and *col* removed."""
    keep = [i for i in range(4) if i != row]
    return Matrix3(*(
        Vector3(*(column[i] for i in keep))
        for j, column in enumerate(m) if j != col
    ))


class Matrix4(_Matrix):
    __slots__ = ()
    SIZE = 4
    VECTOR = Vector4

    x = _column(0, "x")
    y = _column(1, "y")
    z = _column(2, "z")
    w = _column(3, "w")

    def determinant(self):
        """Laplace expansion over the first row."""
        m = self
        return (
            m.x.x * _minor(m, 0, 0).determinant()
            - m.y.x * _minor(m, 0, 1).determinant()
            + m.z.x * _minor(m, 0, 2).determinant()
            - m.w.x * _minor(m, 0, 3).determinant()
        )

    def cofactor_matrix(self):
        columns = []
        for col in range(4):
            entries = []
            for row in range(4):
                d = _minor(self, row, col).determinant()
                entries.append(-d if (row + col) % 2 else d)
            columns.append(Vector4(*entries))
        return Matrix4(*columns)

    def adjugate(self):
        return self.cofactor_matrix().transpose()

    @staticmethod
    def translate(v):
        """Translation by Vector3 *v*; leaves directions (w == 0) alone."""
        return Matrix4(
            Vector4(1, 0, 0, 0),
            Vector4(0, 1, 0, 0),
            Vector4(0, 0, 1, 0),
            Vector4(v.x, v.y, v.z, 1),
        )

    @staticmethod
    def scale(v):
        return Matrix4(
            Vector4(v.x, 0, 0, 0),
            Vector4(0, v.y, 0, 0),
            Vector4(0, 0, v.z, 0),
            Vector4(0, 0, 0, 1),
        )

    @staticmethod
    def rotate(angle, axis):
        """Rotation by *angle* radians around *axis* (need not be unit)."""
        s, c = math.sin(angle), math.cos(angle)
        a = normalize(axis)
        t = a * (1 - c)
        return Matrix4(
            Vector4(c + t.x * a.x, t.x * a.y + s * a.z, t.x * a.z - s * a.y, 0),
            Vector4(t.y * a.x - s * a.z, c + t.y * a.y, t.y * a.z + s * a.x, 0),
            Vector4(t.z * a.x + s * a.y, t.z * a.y - s * a.x, c + t.z * a.z, 0),
            Vector4(0, 0, 0, 1),
        )

    @staticmethod
    def rotate_x(angle):
        s, c = math.sin(angle), math.cos(angle)
        return Matrix4(
            Vector4(1, 0, 0, 0),
            Vector4(0, c, s, 0),
            Vector4(0, -s, c, 0),
            Vector4(0, 0, 0, 1),
        )

    @staticmethod
    def rotate_y(angle):
        s, c = math.sin(angle), math.cos(angle)
        return Matrix4(
            Vector4(c, 0, -s, 0),
            Vector4(0, 1, 0, 0),
            Vector4(s, 0, c, 0),
            Vector4(0, 0, 0, 1),
        )

    @staticmethod
    def rotate_z(angle):
        s, c = math.sin(angle), math.cos(angle)
        return Matrix4(
            Vector4(c, s, 0, 0),
            Vector4(-s, c, 0, 0),
            Vector4(0, 0, 1, 0),
            Vector4(0, 0, 0, 1),
        )

    @staticmethod
    def ortho(left, right, bottom, top, near, far):
        """OpenGL orthographic projection."""
        return Matrix4(
            Vector4(2 / (right - left), 0, 0, 0),
            Vector4(0, 2 / (top - bottom), 0, 0),
            Vector4(0, 0, -2 / (far - near), 0),
            Vector4(
                -(right + left) / (right - left),
                -(top + bottom) / (top - bottom),
                -(far + near) / (far - near),
                1,
            ),
        )

    @staticmethod
    def perspective(fovy, aspect, near, far):
        """OpenGL perspective projection; *fovy* is in radians."""
        f = 1.0 / math.tan(fovy / 2.0)
        nf = near - far
        return Matrix4(
            Vector4(f / aspect, 0, 0, 0),
            Vector4(0, f, 0, 0),
            Vector4(0, 0, (far + near) / nf, -1),
            Vector4(0, 0, (2 * far * near) / nf, 0),
        )

    @staticmethod
    def look_at(eye, center, up):
        """Right-handed view matrix looking from *eye* towards *center*."""
        f = normalize(center - eye)
        s = normalize(cross(f, up))
        u = cross(s, f)
        return Matrix4(
            Vector4(s.x, u.x, -f.x, 0),
            Vector4(s.y, u.y, -f.y, 0),
            Vector4(s.z, u.z, -f.z, 0),
            Vector4(-dot(s, eye), -dot(u, eye), dot(f, eye), 1),
        )


MATRIX_TYPES = {2: Matrix2, 3: Matrix3, 4: Matrix4}


def identity(size):
    """Identity matrix of the given size (2, 3 or 4)."""
    try:
        return MATRIX_TYPES[size].identity()
    except KeyError:
        raise TypeError(f"no matrix type of size {size}") from None


def _check(m, name):
    if not isinstance(m, _Matrix):
        raise TypeError(f"{name} expects a matrix, got {type(m).__name__}")


def transpose(m):
    _check(m, "transpose")
    return m.transpose()


def determinant(m):
    _check(m, "determinant")
    return m.determinant()


def adjugate(m):
    """Transpose of the cofactor matrix: ``m * adjugate(m) == det(m) * I``."""
    _check(m, "adjugate")
    return m.adjugate()


def cofactor_matrix(m):
    _check(m, "cofactor_matrix")
    return m.cofactor_matrix()


def inverse(m):
    """Inverse of *m*, or None when *m* is singular."""
    _check(m, "inverse")
    return m.inverse()

