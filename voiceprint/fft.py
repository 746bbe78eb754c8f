"""Table-driven radix-2 FFT and power spectrum."""

from __future__ import annotations

import math
from collections.abc import Sequence
from functools import lru_cache

MIN_SIZE = 4
MAX_SIZE = 2048


@lru_cache(maxsize=None)
def _cached_table(size: int) -> tuple[float, ...]:
    return tuple(round(math.sin(2.0 * math.pi * i / size), 6) for i in range(size))


def sine_table(size: int) -> list[float]:
    """One period of sine sampled at ``size`` points, rounded to six decimals."""
    if size <= 0:
        raise ValueError("table size must be positive")
    return list(_cached_table(size))


def _check_size(size: int) -> int:
    if size < MIN_SIZE or size > MAX_SIZE or size & (size - 1):
        raise ValueError(
            f"FFT size must be a power of two between {MIN_SIZE} and {MAX_SIZE}, got {size}"
        )
    return size.bit_length() - 1


def _bit_reverse(index: int, bits: int) -> int:
    return int(format(index, f"0{bits}b")[::-1], 2)


def fft(samples: Sequence[float]) -> list[complex]:
    """Forward discrete Fourier transform of real ``samples``.

    The length must be a power of two from 4 to 2048. Twiddle factors come
    from the rounded sine table, so results carry its precision.
    """
    size = len(samples)
    bits = _check_size(size)
    table = _cached_table(size)
    quarter = size // 4

    re = [0.0] * size
    im = [0.0] * size
    for index, value in enumerate(samples):
        re[_bit_reverse(index, bits)] = float(value)

    half = 1
    while half < size:
        step = size // (2 * half)
        for j in range(half):
            tsin = table[(step * j) % size]
            tcos = table[(step * j + quarter) % size]
            for k in range(j, size, 2 * half):
                upper_re, upper_im = re[k], im[k]
                lower_re, lower_im = re[k + half], im[k + half]
                rot_re = lower_re * tcos + lower_im * tsin
                rot_im = lower_im * tcos - lower_re * tsin
                re[k] = upper_re + rot_re
                im[k] = upper_im + rot_im
                re[k + half] = upper_re - rot_re
                im[k + half] = upper_im - rot_im
        half *= 2

    return [complex(r, i) for r, i in zip(re, im)]


def power_spectrum(samples: Sequence[float]) -> list[float]:
    """Power of the first half of the spectrum, ``|X[k]|**2 / len(samples)``."""
    spectrum = fft(samples)
    size = len(samples)
    return [(x.real * x.real + x.imag * x.imag) / size for x in spectrum[: size // 2]]