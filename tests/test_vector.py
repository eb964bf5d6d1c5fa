import math

import numpy as np
import pytest

from vrpose.math3d import transform, vector


def test_componentwise_ops():
    a = vector.vec3(1.0, -2.0, 3.0)
    b = vector.vec3(0.5, 0.5, -1.0)
    np.testing.assert_allclose(vector.add(a, b), [1.5, -1.5, 2.0])
    np.testing.assert_allclose(vector.scale(a, 2.0), [2.0, -4.0, 6.0])
    np.testing.assert_allclose(vector.negate(a), [-1.0, 2.0, -3.0])


def test_length_and_dot():
    assert vector.length([3.0, 4.0, 0.0]) == pytest.approx(5.0)
    assert vector.length([1.0, 2.0, 2.0]) == pytest.approx(3.0)
    assert vector.dot([1.0, 2.0, 3.0], [4.0, -5.0, 6.0]) == pytest.approx(12.0)


def test_rotate_ignores_translation():
    m = transform.add_vector(transform.rotation_z(90.0), [10.0, 20.0, 30.0])
    v = vector.rotate([1.0, 0.0, 0.0], m)
    np.testing.assert_allclose(v, [0.0, 1.0, 0.0], atol=1e-12)


def test_rotate_preserves_length():
    m = transform.rotate(transform.identity(), 20.0, -35.0, 70.0)
    v = np.array([0.3, -1.2, 2.5])
    assert vector.length(vector.rotate(v, m)) == pytest.approx(vector.length(v))


def test_as_vec3_rejects_wrong_size():
    with pytest.raises(ValueError, match="3-component"):
        vector.as_vec3([1.0, 2.0])


def test_ops_do_not_mutate_inputs():
    a = np.array([1.0, 2.0, 3.0])
    vector.add(a, a)
    vector.negate(a)
    vector.scale(a, math.pi)
    np.testing.assert_allclose(a, [1.0, 2.0, 3.0])
