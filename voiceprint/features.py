"""Frame-level speech features: pre-emphasis, padding and log mel energies."""

from __future__ import annotations

import math
from collections.abc import Sequence

from voiceprint.fft import power_spectrum
from voiceprint.vadmath import _to_int16

MIN_MEL_ENERGY = 1e-10
NORM_CLIP = 8.0
NORM_SCALE = 16.0


def pre_emphasise(
    samples: Sequence[int], last_value: int, coef: float
) -> tuple[list[int], int]:
    """Apply ``y[t] = x[t] - coef * x[t-1]`` to 16-bit samples.

    ``last_value`` is the sample preceding ``samples``. Returns the filtered
    samples and the last input sample, to carry into the next call.
    """
    output = []
    for sample in samples:
        output.append(_to_int16(int(float(sample) - coef * float(last_value))))
        last_value = sample
    return output, last_value


def pad_frame(samples: Sequence[int], size: int) -> list[int]:
    """Extend ``samples`` with zeros up to ``size`` values."""
    if len(samples) > size:
        raise ValueError(f"frame of {len(samples)} samples exceeds {size}")
    return list(samples) + [0] * (size - len(samples))


def clip(values: Sequence[float], low: float, high: float, scale: float) -> list[float]:
    """Clamp each value to ``[low, high]`` and multiply it by ``scale``."""
    return [min(max(value, low), high) * scale for value in values]


def normalize(feature_map: Sequence[Sequence[float]]) -> list[list[float]]:
    """Standardise a feature map by its global mean and deviation.

    Each value becomes ``(x - mean) / std``, clipped to [-8, 8] and scaled
    by 16.
    """
    values = [value for row in feature_map for value in row]
    if not values:
        raise ValueError("feature map is empty")
    mean = sum(values) / len(values)
    std = math.sqrt(sum((value - mean) ** 2 for value in values) / len(values))
    if std == 0:
        raise ValueError("feature map has zero deviation")
    return [
        clip([(value - mean) / std for value in row], -NORM_CLIP, NORM_CLIP, NORM_SCALE)
        for row in feature_map
    ]


def mel_log_energy(
    frame: Sequence[float], mel_bank: Sequence[Sequence[float]]
) -> list[float]:
    """Natural log of the mel filter bank energies of one frame.

    The power spectrum of ``frame`` is weighted by each filter row; only the
    first ``len(frame) // 2`` weights of a row are used. Energies are floored
    at 1e-10 before the logarithm.
    """
    power = power_spectrum(frame)
    half = len(power)
    result = []
    for row in mel_bank:
        if len(row) < half:
            raise ValueError(f"mel filter rows need at least {half} weights")
        total = sum(weight * p for weight, p in zip(row[:half], power) if weight != 0)
        result.append(math.log(max(total, MIN_MEL_ENERGY)))
    return result