"""Planar projection shadow matrices."""


def shadow_matrix(plane, light_position):
    """Matrix that flattens geometry onto ``plane`` as seen from the light.

    ``plane`` is (a, b, c, d) for a*x + b*y + c*z + d = 0 and the light is a
    homogeneous point. The result is indexed ``[column][row]``, the layout a
    column-major 4x4 matrix uses.
    """
    plane = tuple(float(v) for v in plane)
    light = tuple(float(v) for v in light_position)
    if len(plane) != 4 or len(light) != 4:
        raise ValueError("plane and light position need four components each")
    dot = sum(p * l for p, l in zip(plane, light))
    return tuple(
        tuple(
            (dot if column == row else 0.0) - light[row] * plane[column]
            for row in range(4)
        )
        for column in range(4)
    )