import pytest

from mclmath.vector import VectorN


def test_default_is_zero():
    v = VectorN(3)
    assert len(v) == 3
    assert list(v) == [0, 0, 0]


def test_construct_with_values():
    v = VectorN(3, [1, 2, 3])
    assert [v[0], v[1], v[2]] == [1, 2, 3]


def test_wrong_value_count_raises():
    with pytest.raises(ValueError):
        VectorN(3, [1, 2])


def test_dimension_limits():
    with pytest.raises(ValueError):
        VectorN(256)
    with pytest.raises(ValueError):
        VectorN(-1)


def test_setitem_and_getitem():
    v = VectorN(2)
    v[1] = 5
    assert v[1] == 5
    assert v[0] == 0


def test_index_out_of_range():
    v = VectorN(2, [3, 4])
    assert v[1] == 4
    with pytest.raises(IndexError):
        _ = v[2]
    assert list(v) == [3, 4]


def test_assign_replaces_values():
    v = VectorN(2)
    result = v.assign(4, 7)
    assert result is v
    assert list(v) == [4, 7]
    with pytest.raises(ValueError):
        v.assign(1, 2, 3)


def test_add_and_sub_round_trip():
    a = VectorN(3, [1, 2, 3])
    b = VectorN(3, [10, 20, 30])
    total = a + b
    assert list(total) == [11, 22, 33]
    assert total - b == a
    assert list(a) == [1, 2, 3]


def test_inplace_add_sub():
    a = VectorN(2, [1, 2])
    b = VectorN(2, [3, 4])
    original = a
    a += b
    assert a is original
    assert list(a) == [4, 6]
    a -= b
    assert a == VectorN(2, [1, 2])


def test_mismatched_dimensions_raise():
    with pytest.raises(ValueError):
        VectorN(2) + VectorN(3)


def test_scalar_multiply():
    v = VectorN(3, [1, 2, 3])
    scaled = v * 2
    assert list(scaled) == [2, 4, 6]
    assert list(v) == [1, 2, 3]
    v *= 3
    assert list(v) == [3, 6, 9]


def test_repr_contains_values():
    v = VectorN(2, [1, 2])
    assert repr(v) == "VectorN(2, [1, 2])"