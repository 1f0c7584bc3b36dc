import pytest

np = pytest.importorskip('numpy')

from addrange import add_range, insert


def test_insert_ndarray_read_only():
    x = np.array([1, 2, 3])
    with pytest.raises(TypeError) as exc:
        insert(x, 4)
    assert 'ndarray' in str(exc.value)


def test_add_range_ndarray_unchanged():
    x = np.array([1, 2, 3])
    with pytest.raises(TypeError):
        add_range(x, [4, 5])
    assert x.tolist() == [1, 2, 3]


def test_add_range_from_ndarray():
    L = [0]
    add_range(L, np.arange(1, 4))
    assert L == [0, 1, 2, 3]
