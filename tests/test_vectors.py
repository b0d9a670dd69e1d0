import numpy as np
import pytest

from dualdiff.dual import Dual, component, dual
from dualdiff.vectors import DualArray, DualVector


def test_size_constructor_fills_zeros():
    v = DualVector(4)
    assert len(v) == 4
    assert np.array_equal(v.asarray(), np.zeros(4))


def test_empty_constructor():
    assert len(DualArray()) == 0


def test_negative_size_rejected():
    with pytest.raises(ValueError):
        DualVector(-1)


def test_copy_constructor_is_independent():
    a = DualVector([1.0, 2.0])
    b = DualVector(a)
    b[0] = 5.0
    assert a[0] == 1.0
    assert b[0] == 5.0


def test_getitem_setitem_and_bounds():
    v = DualVector([1.0, 2.0, 3.0])
    v[1] = dual(7.0, 2)
    assert v[1] == 7.0
    with pytest.raises(IndexError):
        v[3]
    with pytest.raises(IndexError):
        v[-1]
    with pytest.raises(IndexError):
        v[3] = 1.0


def test_setitem_rejects_non_numbers():
    v = DualVector([1.5, 2.5])
    with pytest.raises(TypeError):
        v[0] = "x"
    assert v[0] == 1.5
    assert np.array_equal(v.asarray(), np.array([1.5, 2.5]))


def test_iteration_matches_indexing():
    items = [1.0, 2.0, 3.0]
    v = DualVector(items)
    assert list(v) == items


def test_str_is_right_aligned_column():
    v = DualVector([1.0, 2.0, 10.0])
    assert str(v) == " 1\n 2\n10"


def test_repr_names_class_and_values():
    assert repr(DualArray([1.0, 2.5])) == "DualArray([1, 2.5])"


def test_negation_and_addition_roundtrip():
    a = DualVector([1.0, -2.0, 3.0])
    b = DualVector([0.5, 4.0, -1.0])
    assert -(-a) == a
    assert (a + b) - b == a
    assert a + (-a) == DualVector(3)


def test_length_mismatch_raises():
    with pytest.raises(ValueError):
        DualVector([1.0]) + DualVector([1.0, 2.0])
    with pytest.raises(ValueError):
        DualArray([1.0]) * DualArray([1.0, 2.0])


def test_vector_does_not_mix_with_array():
    with pytest.raises(TypeError):
        DualVector([1.0]) + DualArray([1.0])


def test_vector_equality():
    a = DualVector([1.0, 2.0])
    assert a == DualVector([1.0, 2.0])
    assert a != DualVector([1.0, 3.0])
    assert a != DualVector([1.0])


def test_vector_inplace_scaling():
    a = DualVector([1.0, 2.0])
    b = DualVector(a)
    b *= 2.0
    assert b == a + a
    b /= 2.0
    assert b == a
    b += a
    b -= a
    assert b == a


def test_vector_has_no_elementwise_product():
    with pytest.raises(TypeError):
        DualVector([1.0]) * DualVector([1.0])


def test_array_elementwise_roundtrips():
    a = DualArray([1.0, 2.0, 4.0])
    b = DualArray([2.0, 8.0, 0.5])
    assert (a * b) / b == a
    assert 2.0 * a == a + a
    assert a * 2.0 == a + a
    assert a / 2.0 * 2.0 == a
    assert (1.0 + a) - 1.0 == a
    assert 1.0 - (1.0 - a) == a
    assert 1.0 / (1.0 / a) == a


def test_array_inplace_operations():
    a = DualArray([1.0, 2.0, 4.0])
    b = DualArray(a)
    b *= a
    b /= a
    assert b == a
    b += 3.0
    b -= 3.0
    assert b == a


def test_array_equality_with_numpy():
    a = DualArray([1.0, 2.0, 3.0])
    assert a == np.array([1.0, 2.0, 3.0])
    assert a != np.array([1.0, 2.0, 4.0])
    assert not (a == np.array([1.0, 2.0]))


def test_asarray_uses_innermost_values():
    items = [dual(1.5, 2), Dual(2.5, 1.0), 3.5]
    v = DualArray(items)
    assert np.array_equal(v.asarray(), np.array([1.5, 2.5, 3.5]))


def test_array_product_propagates_derivatives():
    x = Dual(3.0, 1.0)
    a = DualArray([x, x])
    b = DualArray([x, 2.0])
    p = a * b
    assert component(p[0], 1) == 2 * x.val
    assert component(p[1], 1) == 2.0


def test_scalar_dual_times_array_propagates_derivative():
    s = Dual(2.0, 1.0)
    a = DualArray([1.0, 5.0])
    r = s * a
    assert [component(item, 1) for item in r] == [1.0, 5.0]
    assert np.array_equal(r.asarray(), 2.0 * a.asarray())


def test_vectors_are_unhashable():
    with pytest.raises(TypeError):
        hash(DualVector([1.0]))