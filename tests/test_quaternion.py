import math

import numpy as np
import pytest

from vrpose.math3d import transform
from vrpose.math3d.quaternion import (
    YPR,
    matrix_to_ypr,
    quaternion_from_matrix,
    quaternion_to_ypr,
    transform_from_ypr,
)


def _rotate_by_quaternion(q, v):
    # v' = q * (0, v) * conj(q), written out with the Hamilton product
    def mul(a, b):
        aw, ax, ay, az = a
        bw, bx, by, bz = b
        return np.array(
            [
                aw * bw - ax * bx - ay * by - az * bz,
                aw * bx + ax * bw + ay * bz - az * by,
                aw * by - ax * bz + ay * bw + az * bx,
                aw * bz + ax * by - ay * bx + az * bw,
            ]
        )

    conj = np.array([q[0], -q[1], -q[2], -q[3]])
    return mul(mul(q, np.concatenate([[0.0], v])), conj)[1:]


def test_identity_matrix_to_quaternion():
    q = quaternion_from_matrix(transform.identity())
    np.testing.assert_allclose(q, np.array([1.0, 0.0, 0.0, 0.0], dtype=np.float64), atol=1e-12)


def test_quaternion_rotates_like_matrix():
    m = transform_from_ypr(YPR(yaw=0.4, pitch=-0.3, roll=0.2))
    q = quaternion_from_matrix(m)
    assert float(np.linalg.norm(q)) == pytest.approx(1.0)
    for v in ([1.0, 0.0, 0.0], [0.0, 1.0, 0.0], [0.3, -0.8, 0.5]):
        v = np.array(v, dtype=np.float64)
        np.testing.assert_allclose(_rotate_by_quaternion(q, v), m[:, :3] @ v, atol=1e-12)


def test_single_axis_rotations_map_to_named_angles():
    ypr = matrix_to_ypr(transform.rotation_y(30.0))
    assert math.degrees(ypr.yaw) == pytest.approx(30.0)
    assert ypr.pitch == pytest.approx(0.0)
    assert ypr.roll == pytest.approx(0.0)

    # rotation about X is reported as pitch, about Z as roll
    assert math.degrees(matrix_to_ypr(transform.rotation_x(30.0)).pitch) == pytest.approx(30.0)
    assert math.degrees(matrix_to_ypr(transform.rotation_z(30.0)).roll) == pytest.approx(30.0)


def test_north_pole_branch():
    q = quaternion_from_matrix(transform.rotation_z(90.0))
    assert q[1] * q[2] + q[3] * q[0] > 0.499
    ypr = quaternion_to_ypr(q)
    assert ypr.pitch == 0.0
    assert ypr.roll == pytest.approx(math.pi / 2.0)
    assert ypr.yaw == pytest.approx(0.0)


def test_south_pole_branch():
    q = quaternion_from_matrix(transform.rotation_z(-90.0))
    assert q[1] * q[2] + q[3] * q[0] < -0.499
    ypr = quaternion_to_ypr(q)
    assert ypr.pitch == 0.0
    assert ypr.roll == pytest.approx(-math.pi / 2.0)
    assert ypr.yaw == pytest.approx(0.0)


def test_north_pole_folds_remaining_rotation_into_yaw():
    m = transform.multiply(transform.rotation_y(40.0), transform.rotation_z(90.0))
    ypr = matrix_to_ypr(m)
    assert ypr.pitch == 0.0
    assert ypr.roll == pytest.approx(math.pi / 2.0)
    assert math.degrees(ypr.yaw) == pytest.approx(40.0)


def test_quaternion_ypr_roundtrip_through_builder():
    cases = [
        YPR(yaw=0.5, pitch=0.3, roll=0.2),
        YPR(yaw=-1.0, pitch=0.7, roll=-0.4),
        YPR(yaw=1.2, pitch=-0.5, roll=0.6),
    ]
    for ypr in cases:
        m = transform_from_ypr(ypr)
        assert np.trace(m[:, :3]) > -0.9
        back = matrix_to_ypr(m)
        assert back.yaw == pytest.approx(ypr.yaw)
        assert back.pitch == pytest.approx(ypr.pitch)
        assert back.roll == pytest.approx(ypr.roll)
        np.testing.assert_allclose(transform_from_ypr(back), m, atol=1e-9)


def test_direct_and_quaternion_paths_agree_on_pure_yaw():
    m = transform.rotation_y(-65.0)
    direct = YPR.from_vector(transform.euler_angles(m))
    via_q = matrix_to_ypr(m)
    assert direct.yaw == pytest.approx(via_q.yaw)
    assert direct.pitch == pytest.approx(via_q.pitch, abs=1e-12)
    assert direct.roll == pytest.approx(via_q.roll, abs=1e-12)


def test_ypr_vector_layout():
    ypr = YPR.from_vector([0.1, 0.2, 0.3])
    assert (ypr.pitch, ypr.yaw, ypr.roll) == (0.1, 0.2, 0.3)
    np.testing.assert_allclose(ypr.as_vector(), [0.1, 0.2, 0.3])
    assert YPR(yaw=math.pi).degrees() == pytest.approx((180.0, 0.0, 0.0))


def test_half_turn_returns_nan_instead_of_raising():
    rng = np.random.default_rng(7)
    axes = [np.array([0.189, -0.198, 0.962])] + list(rng.normal(size=(200, 3)))
    with np.errstate(invalid="ignore", divide="ignore"):
        for a in axes:
            a = a / np.linalg.norm(a)
            m = np.zeros((3, 4))
            m[:, :3] = 2.0 * np.outer(a, a) - np.eye(3)
            assert quaternion_from_matrix(m).shape == (4,)

    # trace rounded just below -1
    m = transform.rotation_x(180.0)
    m[2, 2] -= 1e-9
    with pytest.warns(RuntimeWarning):
        q = quaternion_from_matrix(m)
    assert np.isnan(q).all()
    ypr = quaternion_to_ypr(q)
    assert math.isnan(ypr.yaw)
