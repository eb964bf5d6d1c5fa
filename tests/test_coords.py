import numpy as np

from vrpose.math3d import transform
from vrpose.math3d.coords import to_engine_pose, to_engine_position, to_engine_rotation
from vrpose.math3d.quaternion import quaternion_from_matrix


def test_translation_z_is_negated():
    m = transform.translation_matrix([0.0, 0.0, 5.0])
    np.testing.assert_allclose(to_engine_position(m), [0.0, 0.0, -5.0])
    np.testing.assert_allclose(to_engine_rotation(m), [1.0, 0.0, 0.0, 0.0])


def test_position_keeps_x_and_y_in_place():
    m = transform.translation_matrix([1.0, 2.0, 3.0])
    np.testing.assert_allclose(to_engine_position(m), [1.0, 2.0, -3.0])


def test_rotation_about_z_flips_x_and_y_only():
    m = transform.rotation_z(90.0)
    native = quaternion_from_matrix(m)
    engine = to_engine_rotation(m)
    np.testing.assert_allclose(engine, [native[0], -native[1], -native[2], native[3]])
    np.testing.assert_allclose(engine[[0, 3]], [np.sqrt(0.5), np.sqrt(0.5)])


def test_rotation_about_x_changes_sign():
    m = transform.rotation_x(60.0)
    native = quaternion_from_matrix(m)
    engine = to_engine_rotation(m)
    assert native[1] > 0.0
    np.testing.assert_allclose(engine[1], -native[1])
    np.testing.assert_allclose(engine[1], -0.5, atol=1e-12)


def test_engine_pose_bundles_both():
    m = transform.add_vector(transform.rotation_y(30.0), [0.5, 1.0, -2.0])
    pose = to_engine_pose(m)
    np.testing.assert_allclose(pose.position, [0.5, 1.0, 2.0])
    np.testing.assert_allclose(pose.quaternion, to_engine_rotation(m))
