"""
Projection helpers: object space <-> window space, and mouse picking rays.

Pipeline for picking:
  1. Mouse coords -> normalized device coords (NDC)
  2. Near/far clip-space points -> eye space via inverse(projection)
  3. Perspective divide
  4. Eye space -> world space via inverse(view)
"""

import logging

from .matrix import Matrix4
from .vector import Vector3, Vector4, length


logger = logging.getLogger(__name__)

EPSILON = 1e-12


def project(point, model_view, projection, viewport):
    """
    Map object-space Vector3 *point* to window coordinates.
    *viewport* is (x, y, width, height); depth lands in [0, 1].
    """
    clip = projection * (model_view * Vector4(point.x, point.y, point.z, 1.0))
    ndc = clip / clip.w
    vx, vy, vw, vh = viewport
    return Vector3(
        (ndc.x * 0.5 + 0.5) * vw + vx,
        (ndc.y * 0.5 + 0.5) * vh + vy,
        ndc.z * 0.5 + 0.5,
    )


def unproject(window, model_view, projection, viewport):
    """
    Inverse of project().  Returns None when projection * model_view is
    singular or the point maps to infinity.
    """
    inv = (projection * model_view).inverse()
    if inv is None:
        logger.debug("unproject: singular projection * model_view")
        return None

    vx, vy, vw, vh = viewport
    ndc = Vector4(
        2.0 * (window.x - vx) / vw - 1.0,
        2.0 * (window.y - vy) / vh - 1.0,
        2.0 * window.z - 1.0,
        1.0,
    )
    obj = inv * ndc
    if abs(obj.w) < EPSILON:
        logger.debug("unproject: point at infinity")
        return None
    return Vector3(obj.x / obj.w, obj.y / obj.w, obj.z / obj.w)


def pick_ray(mx, my, viewport_w, viewport_h, projection, view):
    """
    Convert widget coords (mx, my), origin top-left, to a world-space ray.
    Returns (origin, direction) with a unit direction, or None.
    """
    ndc_x = (2.0 * mx / viewport_w) - 1.0
    ndc_y = 1.0 - (2.0 * my / viewport_h)

    inv_proj = projection.inverse()
    inv_view = view.inverse()
    if inv_proj is None or inv_view is None:
        logger.debug("pick_ray: singular projection or view matrix")
        return None

    near_eye = inv_proj * Vector4(ndc_x, ndc_y, -1.0, 1.0)
    far_eye = inv_proj * Vector4(ndc_x, ndc_y, 1.0, 1.0)
    if abs(near_eye.w) < EPSILON or abs(far_eye.w) < EPSILON:
        logger.debug("pick_ray: clip point at infinity")
        return None
    near_eye = near_eye / near_eye.w
    far_eye = far_eye / far_eye.w

    near_world = inv_view * near_eye
    far_world = inv_view * far_eye

    origin = Vector3(near_world.x, near_world.y, near_world.z)
    direction = Vector3(far_world.x, far_world.y, far_world.z) - origin
    dl = length(direction)
    if dl < EPSILON:
        logger.debug("pick_ray: degenerate ray")
        return None
    return origin, direction / dl


def view_projection(fovy, aspect, near, far, eye, center, up):
    """Convenience: (projection, view) for a perspective camera."""
    return (
        Matrix4.perspective(fovy, aspect, near, far),
        Matrix4.look_at(eye, center, up),
    )
