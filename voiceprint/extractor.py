"""Sliding-window log mel feature extraction feeding the speaker model."""

from __future__ import annotations

from collections.abc import Sequence

from voiceprint.features import mel_log_energy, normalize, pad_frame, pre_emphasise

INPUT_SCALE = 1.0
INPUT_BIAS = -128.0
_UINT8_MAX = 255


def quantize(feature_map: Sequence[Sequence[float]]) -> list[list[int]]:
    """Turn a normalised feature map into the model's 8-bit input.

    Each value becomes ``(x + 128) / 1``, truncated and clamped to 0..255.
    The result is transposed: one row per mel band, one column per frame.
    """
    if not feature_map:
        raise ValueError("feature map is empty")
    width = len(feature_map[0])
    if any(len(row) != width for row in feature_map):
        raise ValueError("feature map rows differ in length")
    return [
        [
            min(max(int((row[band] - INPUT_BIAS) / INPUT_SCALE), 0), _UINT8_MAX)
            for row in feature_map
        ]
        for band in range(width)
    ]


def _fft_size_for(frame_size: int) -> int:
    size = 1
    while size < frame_size:
        size *= 2
    return size


class FeatureExtractor:
    """Collects audio steps into frames and emits model input blocks.

    Each pushed step of ``step_size`` samples is pre-emphasised and slid into
    a window of ``frame_size`` samples, whose log mel energies are appended to
    a feature map. Every ``features_step`` frames once ``features_num`` frames
    are known, the map is normalised and quantised for the model.
    """

    def __init__(
        self,
        mel_bank: Sequence[Sequence[float]],
        frame_size: int,
        step_size: int,
        features_num: int,
        features_step: int,
        preemphasis: float,
    ) -> None:
        if frame_size <= 0 or step_size <= 0:
            raise ValueError("frame and step sizes must be positive")
        if features_num <= 0 or features_step <= 0:
            raise ValueError("feature counts must be positive")
        if not mel_bank:
            raise ValueError("mel filter bank is empty")
        self.fft_size = _fft_size_for(frame_size)
        half = self.fft_size // 2
        if any(len(row) < half for row in mel_bank):
            raise ValueError(f"mel filter rows need at least {half} weights")
        self.mel_bank = [list(row) for row in mel_bank]
        self.frame_size = frame_size
        self.step_size = step_size
        self.features_num = features_num
        self.features_step = features_step
        self.preemphasis = preemphasis
        self.reset()

    def reset(self) -> None:
        """Clear the audio window, the feature map and the pre-emphasis memory."""
        self._window = [0] * (self.frame_size + self.step_size)
        dimension = len(self.mel_bank)
        self._feature_map = [
            [0.0] * dimension for _ in range(self.features_num + self.features_step)
        ]
        self._feature_index = self.features_step
        self._last_value = 0

    def push(self, samples: Sequence[int], first_frame: bool = False) -> list[list[int]] | None:
        """Add one step of 16-bit samples.

        With ``first_frame`` the pre-emphasis memory is cleared and the window
        is primed by repeating this step. Returns the quantised model input
        when a new block is complete, otherwise None.
        """
        if len(samples) != self.step_size:
            raise ValueError(f"expected {self.step_size} samples, got {len(samples)}")
        if first_frame:
            self._last_value = 0
        step, self._last_value = pre_emphasise(samples, self._last_value, self.preemphasis)

        window = self._window
        if first_frame:
            for i in range(min(self.step_size * 3, len(window))):
                window[i] = step[i % self.step_size]
        window[self.frame_size:] = step
        window[: self.frame_size] = window[self.step_size:self.step_size + self.frame_size]

        frame = pad_frame(window[: self.frame_size], self.fft_size)
        self._feature_map[self._feature_index] = mel_log_energy(frame, self.mel_bank)
        self._feature_index += 1

        if self._feature_index < self.features_num + self.features_step:
            return None
        self._feature_map[: self.features_num] = [
            list(row)
            for row in self._feature_map[self.features_step:self.features_step + self.features_num]
        ]
        self._feature_index -= self.features_step
        return quantize(normalize(self._feature_map[: self.features_num]))