import numpy as np
import pytest

from gravity_sims.core import Vector2D, add, scale


def test_add_and_scale_return_new_values():
    a = Vector2D(1.0, 2.0)
    b = Vector2D(-3.0, 0.5)
    assert add(a, b) == Vector2D(-2.0, 2.5)
    assert scale(a, 3.0) == Vector2D(3.0, 6.0)
    assert a == Vector2D(1.0, 2.0)


def test_operators_match_functions():
    a = Vector2D(1.5, -2.0)
    b = Vector2D(0.5, 4.0)
    assert a + b == add(a, b)
    assert a - b == Vector2D(1.0, -6.0)
    assert -a == Vector2D(-1.5, 2.0)
    assert 2 * a == a * 2 == scale(a, 2)


def test_vector_is_immutable():
    v = Vector2D(1.0, 1.0)
    with pytest.raises(AttributeError):
        v.x = 2.0


def test_array_conversion():
    v = Vector2D.from_array(np.array([3.0, 4.0]))
    assert v == Vector2D(3.0, 4.0)
    assert v.norm() == pytest.approx(5.0)
    np.testing.assert_array_equal(v.to_array(), [3.0, 4.0])
