# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BUSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

import math
import warnings

import numpy as np
import pytest

from vecmath.utils import approx_eq
from vecmath.vector2 import Vector2
from vecmath.vector3 import Vector3


def test_vector2_construction():
    v = Vector2(2.0, 5.0)
    assert v.x == 2.0
    assert v.y == 5.0


def test_vector2_length():
    assert approx_eq(Vector2(3.0, 3.0).length(), 4.24, epsilon=0.01)
    assert Vector2(3.0, 4.0).length() == 5.0


def test_vector2_dot_product():
    assert Vector2(3.0, 7.0).dot_product(Vector2(4.0, 9.0)) == 75.0


def test_vector2_scalar_multiplication():
    v = Vector2(1.0, 2.0).scalar_multiplication(5.0)
    assert v == Vector2(5.0, 10.0)


def test_vector2_add_sub():
    assert Vector2(1.0, 2.0) + Vector2(1.0, 1.0) == Vector2(2.0, 3.0)
    assert Vector2(2.0, 3.0) - Vector2(1.0, 3.0) == Vector2(1.0, 0.0)


def test_vector2_is_immutable():
    v = Vector2(1.0, 2.0)
    with pytest.raises(AttributeError):
        v.x = 3.0


def test_vector3_construction():
    v = Vector3(1.0, 2.0, 3.0)
    assert (v.x, v.y, v.z) == (1.0, 2.0, 3.0)


def test_vector3_from_vector2():
    v = Vector3.from_vector2(Vector2(1.0, 2.0))
    assert v == Vector3(1.0, 2.0, 0.0)


def test_vector3_length():
    assert approx_eq(Vector3(1.0, 2.0, 3.0).length(), 3.74, epsilon=0.01)
    assert math.isclose(Vector3(4.0, 0.0, 0.0).length(), 4.0)


def test_vector3_dot_product():
    assert Vector3(1.0, 2.0, 1.0).dot_product(Vector3(2.0, 1.0, 3.0)) == 7.0


def test_vector3_scalar_multiplication():
    v = Vector3(2.0, 3.0, 4.0).scalar_multiplication(2.0)
    assert v == Vector3(4.0, 6.0, 8.0)


def test_vector3_add_sub():
    assert Vector3(1.0, 2.0, 3.0) + Vector3(2.0, 3.0, 4.0) == Vector3(3.0, 5.0, 7.0)
    assert Vector3(2.0, 3.0, 4.0) - Vector3(2.0, 1.0, 3.0) == Vector3(0.0, 2.0, 1.0)


def test_mixed_vector_addition_is_rejected():
    with pytest.raises(TypeError):
        Vector2(1.0, 2.0) + Vector3(1.0, 2.0, 3.0)


def test_vector_repr():
    assert repr(Vector2(1.0, 2.5)) == "Vector2(1.0, 2.5)"


def test_vector2_fields_are_float32():
    v = Vector2(0.1, 0.2)
    assert v.x == np.float32(0.1)
    assert v.y == np.float32(0.2)
    assert float(v.x) != 0.1


def test_vector2_arithmetic_stays_float32():
    x, y = np.float32(0.1), np.float32(0.2)
    v = Vector2(0.1, 0.2)

    length = v.length()
    assert length == float(np.sqrt(x * x + y * y))
    assert length == float(np.float32(length))

    scaled = v.scalar_multiplication(0.3)
    assert scaled.x == x * np.float32(0.3)
    assert scaled.y == y * np.float32(0.3)

    assert v.dot_product(Vector2(0.3, 0.7)) == float(
        x * np.float32(0.3) + y * np.float32(0.7)
    )


def test_vector3_arithmetic_stays_float32():
    x, y, z = np.float32(0.1), np.float32(0.2), np.float32(0.3)
    v = Vector3(0.1, 0.2, 0.3)
    assert (v.x, v.y, v.z) == (x, y, z)

    length = v.length()
    assert length == float(np.sqrt(x * x + y * y + z * z))
    assert length == float(np.float32(length))

    scaled = v.scalar_multiplication(0.7)
    assert scaled.z == z * np.float32(0.7)


def test_vector_overflow_gives_inf_without_warning():
    with warnings.catch_warnings():
        warnings.simplefilter("error")
        assert math.isinf(Vector2(1e30, 0.0).length())
        assert math.isinf(Vector3(0.0, 0.0, 1e30).length())
        assert math.isinf(Vector2(3e38, 0.0).scalar_multiplication(10.0).x)
        assert math.isinf(Vector2(3e38, 1.0).dot_product(Vector2(3e38, 1.0)))
