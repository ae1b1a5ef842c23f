"""
OpenGL uniform upload for linmath values.

PyOpenGL is imported on first use so the rest of the package works
without it (install the ``gl`` extra to get it).
"""

import ctypes
import logging

from .matrix import Matrix2, Matrix3, Matrix4, _Matrix
from .vector import Vector2, Vector3, Vector4, _Vector


logger = logging.getLogger(__name__)

_gl = None


def _load_gl():
    """Import OpenGL.GL lazily; raises RuntimeError if PyOpenGL is missing."""
    global _gl
    if _gl is None:
        try:
            from OpenGL import GL
        except ImportError as exc:
            raise RuntimeError("PyOpenGL is required for uniform upload") from exc
        _gl = GL
    return _gl


def as_ctypes(value):
    """Column-major c_float array for a matrix, component array for a vector."""
    if isinstance(value, _Matrix):
        data = value.to_list()
    elif isinstance(value, _Vector):
        data = list(value)
    else:
        raise TypeError(f"cannot convert {type(value).__name__} to a float array")
    return (ctypes.c_float * len(data))(*data)


_MATRIX_UPLOADERS = {
    Matrix2: "glUniformMatrix2fv",
    Matrix3: "glUniformMatrix3fv",
    Matrix4: "glUniformMatrix4fv",
}

_VECTOR_UPLOADERS = {
    Vector2: "glUniform2f",
    Vector3: "glUniform3f",
    Vector4: "glUniform4f",
}


def upload_uniform(location, value):
    """Set the uniform at *location* from a matrix or vector."""
    kind = type(value)
    if kind not in _MATRIX_UPLOADERS and kind not in _VECTOR_UPLOADERS:
        raise TypeError(f"no uniform upload for {kind.__name__}")

    gl = _load_gl()
    if kind in _MATRIX_UPLOADERS:
        name = _MATRIX_UPLOADERS[kind]
        logger.debug("%s(%s)", name, location)
        getattr(gl, name)(location, 1, gl.GL_FALSE, as_ctypes(value))
    else:
        name = _VECTOR_UPLOADERS[kind]
        logger.debug("%s(%s)", name, location)
        getattr(gl, name)(location, *(float(c) for c in value))
