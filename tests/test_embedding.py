import pytest

from voiceprint.embedding import average_pool, dense, transpose


def test_average_pool_of_constant_groups():
    output = [7] * 64 + [3] * 64
    assert average_pool(output, 64, 1.0, 0.0) == pytest.approx([7.0, 3.0])


def test_average_pool_applies_scale_and_bias():
    output = [10, 20, 30, 40]
    plain = average_pool(output, 2, 1.0, 0.0)
    scaled = average_pool(output, 2, 0.5, 1.25)
    assert scaled == pytest.approx([p * 0.5 + 1.25 for p in plain])


def test_average_pool_length_must_divide():
    with pytest.raises(ValueError):
        average_pool([1, 2, 3], 2, 1.0, 0.0)


def test_average_pool_rejects_zero_pool():
    with pytest.raises(ValueError):
        average_pool([1, 2], 0, 1.0, 0.0)


def test_transpose_moves_values():
    values = [1, 2, 3, 4, 5, 6]  # two channels of height three
    assert transpose(values, 2, 3) == [1, 4, 2, 5, 3, 6]


def test_transpose_round_trip():
    values = list(range(12))
    assert transpose(transpose(values, 3, 4), 4, 3) == values


def test_transpose_size_checked():
    with pytest.raises(ValueError):
        transpose([1, 2, 3], 2, 2)


def test_dense_identity_adds_bias():
    vector = [1.5, -2.0, 3.0]
    identity = [[1.0 if i == j else 0.0 for j in range(3)] for i in range(3)]
    bias = [0.5, 0.5, -1.0]
    assert dense(vector, identity, bias) == pytest.approx([v + b for v, b in zip(vector, bias)])


def test_dense_output_length_follows_rows():
    result = dense([1.0, 1.0], [[1.0, 2.0]] * 5, [0.0] * 5)
    assert len(result) == 5
    assert all(value == pytest.approx(3.0) for value in result)


def test_dense_shape_errors():
    with pytest.raises(ValueError):
        dense([1.0, 2.0], [[1.0]], [0.0])
    with pytest.raises(ValueError):
        dense([1.0], [[1.0]], [0.0, 1.0])