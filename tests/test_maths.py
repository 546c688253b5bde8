import math

import numpy as np
import pytest

from scenekit.maths import (
    Quaternion,
    cross,
    length,
    normalize,
    perspective,
    radians,
    rotate,
    scale,
    slerp,
    translate,
)


def _apply(m, p):
    return (m @ np.append(np.asarray(p, dtype=float), 1.0))[:3]


def _qvec(q):
    return np.array([q.w, q.x, q.y, q.z])


def test_translate_moves_point():
    v = (1.5, -2.0, 3.25)
    p = (0.5, 0.5, -4.0)
    assert np.allclose(_apply(translate(v), p), np.add(p, v))


def test_translate_leaves_directions_alone():
    d = np.array([1.0, 2.0, 3.0, 0.0])
    assert np.allclose(translate((5.0, 6.0, 7.0)) @ d, d)


def test_scale_multiplies_components():
    v = (2.0, 0.5, -3.0)
    p = (1.0, 4.0, 2.0)
    assert np.allclose(_apply(scale(v), p), np.multiply(p, v))


def test_translate_rejects_wrong_shape():
    with pytest.raises(ValueError):
        translate((1.0, 2.0))


def test_perspective_maps_near_and_far_planes():
    near, far = 0.2, 100.0
    m = perspective(radians(45.0), 4.0 / 3.0, near, far)
    for depth, expected in ((near, -1.0), (far, 1.0)):
        clip = m @ np.array([0.0, 0.0, -depth, 1.0])
        assert clip[2] / clip[3] == pytest.approx(expected)


def test_perspective_w_row_is_minus_z():
    m = perspective(1.0, 1.0, 1.0, 10.0)
    assert np.allclose(m[3], [0.0, 0.0, -1.0, 0.0])


def test_perspective_aspect_ratio():
    m = perspective(1.0, 2.0, 1.0, 10.0)
    assert m[1, 1] == pytest.approx(2.0 * m[0, 0])


def test_length_squared_matches_dot():
    v = np.array([1.2, -3.4, 5.6])
    assert length(v) ** 2 == pytest.approx(float(np.dot(v, v)))


def test_normalize_gives_unit_vector_in_same_direction():
    v = np.array([3.0, -1.0, 2.0])
    n = normalize(v)
    assert length(n) == pytest.approx(1.0)
    assert np.allclose(n * length(v), v)


def test_normalize_zero_vector():
    assert np.array_equal(normalize((0.0, 0.0, 0.0)), np.zeros(3))


def test_cross_of_basis_vectors():
    assert np.allclose(cross((1, 0, 0), (0, 1, 0)), (0, 0, 1))


def test_cross_is_orthogonal_and_anticommutative():
    a = np.array([1.0, 2.0, -0.5])
    b = np.array([-3.0, 0.25, 4.0])
    c = cross(a, b)
    assert np.dot(c, a) == pytest.approx(0.0)
    assert np.dot(c, b) == pytest.approx(0.0)
    assert np.allclose(cross(b, a), -c)


def test_radians_uses_source_pi():
    assert radians(180.0) == pytest.approx(3.1416)


def test_rotate_is_proper_rotation():
    m = rotate(0.7, (1.0, 2.0, 3.0))
    r = m[:3, :3]
    assert np.allclose(r @ r.T, np.identity(3))
    assert np.linalg.det(r) == pytest.approx(1.0)


def test_rotate_keeps_axis_fixed():
    axis = np.array([1.0, 2.0, 3.0])
    assert np.allclose(_apply(rotate(1.3, axis), axis), axis)


def test_rotate_ignores_axis_length():
    assert np.allclose(rotate(0.9, (0, 4, 0)), rotate(0.9, (0, 1, 0)))


def test_rotate_quarter_turn_about_y():
    m = rotate(math.pi / 2, (0.0, 1.0, 0.0))
    assert np.allclose(_apply(m, (1.0, 0.0, 0.0)), (0.0, 0.0, -1.0))


def test_from_euler_zero_is_identity():
    assert np.allclose(Quaternion.from_euler(0.0, 0.0).matrix(), np.identity(4))


def test_from_euler_yaw_matches_rotate_about_y():
    yaw = 0.8
    assert np.allclose(Quaternion.from_euler(0.0, yaw).matrix(), rotate(yaw, (0, 1, 0)))


def test_from_euler_pitch_matches_rotate_about_x():
    pitch = -0.4
    assert np.allclose(
        Quaternion.from_euler(pitch, 0.0).matrix(), rotate(pitch, (1, 0, 0))
    )


def test_from_euler_is_unit():
    q = Quaternion.from_euler(0.3, 1.1)
    assert np.linalg.norm(_qvec(q)) == pytest.approx(1.0)


def test_matrix_of_zero_quaternion_raises():
    with pytest.raises(ZeroDivisionError):
        Quaternion(0.0, 0.0, 0.0, 0.0).matrix()


def test_slerp_close_quaternions_returns_second():
    q1 = Quaternion.from_euler(0.0, 0.0)
    q2 = Quaternion.from_euler(0.0, 0.001)
    assert slerp(q1, q2, 0.2) is q2


def test_slerp_endpoints():
    q1 = Quaternion.from_euler(0.2, 0.1)
    q2 = Quaternion.from_euler(-0.5, 1.4)
    assert np.allclose(_qvec(slerp(q1, q2, 0.0)), _qvec(q1))
    assert np.allclose(_qvec(slerp(q1, q2, 1.0)), _qvec(q2))


def test_slerp_result_is_unit_and_between():
    q1 = Quaternion.from_euler(0.0, 0.0)
    q2 = Quaternion.from_euler(0.0, 1.0)
    mid = slerp(q1, q2, 0.5)
    assert np.linalg.norm(_qvec(mid)) == pytest.approx(1.0)
    assert np.allclose(mid.matrix(), Quaternion.from_euler(0.0, 0.5).matrix())


def test_slerp_takes_short_path():
    q1 = Quaternion.from_euler(0.0, 0.0)
    q2 = Quaternion.from_euler(0.0, 1.0)
    negated = Quaternion(-q2.w, -q2.x, -q2.y, -q2.z)
    assert np.allclose(_qvec(slerp(q1, negated, 1.0)), _qvec(q2))