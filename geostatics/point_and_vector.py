"""Moments of planar forces about the origin by Varignon's theorem."""


def moment_component_signs_varignon(point, vector):
    """Return the moment signs ``(x, y)`` of a force's x and y components.

    The force ``vector`` acts at ``point``; the origin is the pivot.
    1 means counterclockwise, -1 clockwise, 0 when the component has no arm
    or no magnitude.
    """
    x, y = point[0], point[1]
    fx, fy = vector[0], vector[1]

    if (fx > 0 and y > 0) or (fx < 0 and y < 0):
        sign_x = -1
    elif (fx > 0 and y < 0) or (fx < 0 and y > 0):
        sign_x = 1
    else:
        sign_x = 0

    if (fy < 0 and x > 0) or (fy > 0 and x < 0):
        sign_y = -1
    elif (fy < 0 and x < 0) or (fy > 0 and x > 0):
        sign_y = 1
    else:
        sign_y = 0

    return sign_x, sign_y


def moment_varignon(point, force):
    """Return the moment of ``force`` applied at ``point`` about the origin.

    Counterclockwise moments are positive.
    """
    x_component = abs(force[0]) * abs(point[1])
    y_component = abs(force[1]) * abs(point[0])
    sign_x, sign_y = moment_component_signs_varignon(point, force)
    return sign_x * x_component + sign_y * y_component


def moments_varignon_sum(origins, forces):
    """Return the sum of the moments of ``forces`` applied at ``origins``.

    A positive sum turns counterclockwise. Raises ValueError when there are
    fewer origins than forces.
    """
    origins = list(origins)
    forces = list(forces)
    if len(origins) < len(forces):
        raise ValueError("Every force needs a point of application.")
    return sum(moment_varignon(origin, force) for origin, force in zip(origins, forces))