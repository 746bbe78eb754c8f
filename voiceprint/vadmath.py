"""Fixed-point helpers used by the voice activity detector."""

from __future__ import annotations

import struct
from collections.abc import Sequence

INT32_MAX = 0x7FFFFFFF


def _f32(value: float) -> float:
    """Round a Python float to single precision."""
    return struct.unpack("f", struct.pack("f", value))[0]


def _to_int16(value: int) -> int:
    value &= 0xFFFF
    return value - 0x10000 if value & 0x8000 else value


def _to_int32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - 0x100000000 if value & 0x80000000 else value


def _clz32(value: int) -> int:
    """Count leading zero bits of a 32-bit unsigned value (32 for zero)."""
    return 32 - (value & 0xFFFFFFFF).bit_length()


def div_w32_w16(num: int, den: int) -> int:
    """Divide a 32-bit value by a 16-bit one, truncating toward zero.

    Division by zero yields 0x7FFFFFFF instead of failing.
    """
    if den == 0:
        return INT32_MAX
    quotient = abs(num) // abs(den)
    if (num < 0) != (den < 0):
        quotient = -quotient
    return _to_int32(quotient)


def norm_u32(value: int) -> int:
    """Number of left shifts an unsigned 32-bit value takes without overflow."""
    value &= 0xFFFFFFFF
    if value == 0:
        return 0
    return _clz32(value)


def norm_w32(value: int) -> int:
    """Number of left shifts a signed 32-bit value takes without overflow."""
    value = _to_int32(value)
    if value == 0:
        return 0
    magnitude = ~value if value < 0 else value
    return _clz32(magnitude) - 1


def size_in_bits(value: int) -> int:
    """Number of significant bits of an unsigned 32-bit value."""
    return (value & 0xFFFFFFFF).bit_length()


def scaling_square(samples: Sequence[int], times: int) -> int:
    """Right shift needed so that ``times`` squared samples sum within 32 bits."""
    nbits = size_in_bits(times)
    smax = -1
    for sample in samples:
        sabs = sample if sample > 0 else _to_int16(-sample)
        smax = max(smax, sabs)
    if smax == 0:
        return 0
    shifts = norm_w32(smax * smax)
    return 0 if shifts > nbits else nbits - shifts


def energy(samples: Sequence[int]) -> tuple[int, int]:
    """Scaled energy of ``samples``.

    Returns ``(energy, scale_factor)`` where the true energy is about
    ``energy << scale_factor``.
    """
    scaling = scaling_square(samples, len(samples))
    total = sum((sample * sample) >> scaling for sample in samples)
    return _to_int32(total), scaling


def resample(samples: Sequence[int], rate: int, new_rate: int) -> list[int]:
    """Linearly resample 16-bit samples from ``rate`` to ``new_rate``."""
    if rate <= 0 or new_rate <= 0:
        raise ValueError("sample rates must be positive")
    if rate == new_rate:
        return list(samples)
    src_size = len(samples)
    if src_size == 0:
        return []
    last_pos = src_size - 1
    dst_size = int(_f32(src_size * _f32(_f32(float(new_rate)) / rate)))
    result = []
    for idx in range(dst_size):
        index = _f32(_f32(float(idx) * rate) / new_rate)
        p1 = int(index)
        coef = _f32(index - p1)
        p2 = last_pos if p1 >= last_pos else p1 + 1
        p1 = min(p1, last_pos)
        value = _f32(_f32((1.0 - coef) * samples[p1]) + _f32(coef * samples[p2]))
        result.append(_to_int16(int(value)))
    return result