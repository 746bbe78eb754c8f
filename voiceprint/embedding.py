"""Post-processing of the speaker model's output into an embedding vector."""

from __future__ import annotations

from collections.abc import Sequence


def average_pool(
    output: Sequence[int], pool_size: int, scale: float, bias: float
) -> list[float]:
    """Average consecutive groups of ``pool_size`` quantised outputs.

    Each group's mean is multiplied by ``scale`` and shifted by ``bias``,
    turning the 8-bit model output back into real values.
    """
    if pool_size <= 0:
        raise ValueError("pool size must be positive")
    if len(output) % pool_size:
        raise ValueError(f"output length {len(output)} is not a multiple of {pool_size}")
    factor = scale / pool_size
    return [
        sum(output[start:start + pool_size]) * factor + bias
        for start in range(0, len(output), pool_size)
    ]


def transpose(values: Sequence[float], channels: int, height: int) -> list[float]:
    """Reorder a flat channels-by-height array into height-by-channels order."""
    if channels <= 0 or height <= 0:
        raise ValueError("dimensions must be positive")
    if len(values) != channels * height:
        raise ValueError(f"expected {channels * height} values, got {len(values)}")
    return [values[i * height + j] for j in range(height) for i in range(channels)]


def dense(
    vector: Sequence[float], matrix: Sequence[Sequence[float]], bias: Sequence[float]
) -> list[float]:
    """Fully connected layer: one dot product per matrix row, plus its bias."""
    if len(matrix) != len(bias):
        raise ValueError("matrix rows and bias lengths differ")
    result = []
    for row, offset in zip(matrix, bias):
        if len(row) != len(vector):
            raise ValueError("matrix row length does not match the vector")
        result.append(sum(w * x for w, x in zip(row, vector)) + offset)
    return result