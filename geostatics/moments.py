"""Moment signs and moments of planar forces about the origin."""


def get_moment_sign(point, force, cw_is_positive=True):
    """Return the moment signs ``(horizontal, vertical)`` of ``force`` at ``point``.

    The origin is the pivot. Clockwise is 1, counterclockwise -1 and
    collinear 0; ``cw_is_positive=False`` flips both signs.
    """
    x, y = point[0], point[1]
    fx, fy = force[0], force[1]

    if (y > 0 and fx > 0) or (y < 0 and fx < 0):
        horizontal = 1
    elif (y > 0 and fx < 0) or (y < 0 and fx > 0):
        horizontal = -1
    else:
        horizontal = 0

    if (x > 0 and fy < 0) or (x < 0 and fy > 0):
        vertical = 1
    elif (x < 0 and fy < 0) or (x > 0 and fy > 0):
        vertical = -1
    else:
        vertical = 0

    if not cw_is_positive:
        return -horizontal, -vertical
    return horizontal, vertical


def get_moment(point, force):
    """Return the moments ``(Mfx, Mfy)`` of the force components about the origin."""
    sign = get_moment_sign(point, force)
    x, y = point[0], point[1]
    fx, fy = force[0], force[1]
    moment_fy = fy * x * sign[0]
    moment_fx = fx * y * sign[1]
    return moment_fx, moment_fy