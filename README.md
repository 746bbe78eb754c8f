# voiceprint

Building blocks for a small speaker-verification pipeline, in pure Python
with no third-party dependencies.

- `voiceprint.fft`: a table-driven radix-2 FFT and a power spectrum helper.
- `voiceprint.features`: pre-emphasis, zero padding, clipping,
  normalisation and log mel energies of a frame.
- `voiceprint.extractor`: a sliding-window `FeatureExtractor` that turns
  audio steps into quantised 8-bit blocks for a speaker model.
- `voiceprint.embedding`: average pooling, transposition and a dense
  layer to turn model output into an embedding vector.
- `voiceprint.matching`: cosine similarity, Euclidean distance, text
  serialisation of vectors and ranking of stored voiceprints.
- `voiceprint.vadmath`: 16/32-bit fixed-point helpers (normalisation
  shifts, scaled energy, division) and linear resampling.

## Installation

```
pip install .
```

Tests run with:

```
pip install .[test]
pytest
```

## Spectral analysis

```python
from voiceprint.fft import fft, power_spectrum, sine_table

spectrum = fft(samples)          # list of complex, len(samples) must be 2**n, 4..2048
power = power_spectrum(samples)  # |X[k]|**2 / N for the first N // 2 bins
```

Twiddle factors come from `sine_table(size)`, a sine period rounded to six
decimals, so results carry that precision. Other lengths raise
`ValueError`.

## Frame features

```python
from voiceprint.features import pre_emphasise, pad_frame, normalize, mel_log_energy

filtered, last = pre_emphasise(chunk, last_value=0, coef=0.97)
frame = pad_frame(filtered, 512)
energies = mel_log_energy(frame, mel_bank)   # natural log, floored at 1e-10
```

`mel_bank` is a list of filters, each a list of weights over at least
`len(frame) // 2` power-spectrum bins. `normalize(feature_map)` standardises
a whole map by its mean and deviation, clips to [-8, 8] and scales by 16;
`clip(values, low, high, scale)` does the clamping and scaling on its own.

## Feature extraction

```python
from voiceprint.extractor import FeatureExtractor

extractor = FeatureExtractor(mel_bank, frame_size=400, step_size=160,
                             features_num=64, features_step=8, preemphasis=0.97)
for index, chunk in enumerate(chunks):          # exactly 160 samples per chunk
    block = extractor.push(chunk, first_frame=(index == 0))
    if block is not None:
        ...  # 8-bit input: one row per mel band, one column per frame
```

The FFT size is the smallest power of two not below `frame_size`. `push`
returns `None` until `features_num + features_step` frames have been seen,
then a new block every `features_step` steps. `reset()` clears all state.
`quantize(feature_map)` is the step that maps values to `x + 128`,
truncated and clamped to 0..255, transposed.

## Embeddings

```python
from voiceprint.embedding import average_pool, transpose, dense

pooled = average_pool(model_output, pool_size=64, scale=scale, bias=bias)
ordered = transpose(pooled, channels=128, height=8)
vector = dense(ordered, weights, offsets)
```

## Matching

```python
from voiceprint.matching import (
    cosine_similarity, euclidean_distance, format_feature, parse_feature, rank_matches,
)

text = format_feature(vector)                 # "%f, " items, eight per line
restored = parse_feature(text, len(vector))
score = cosine_similarity(vector, restored)
ranked = rank_matches([(score, euclidean_distance(vector, restored))], 6)
```

`rank_matches` takes one `(cosine, distance)` pair per stored voiceprint and
returns `Match(index, cosine, distance)` tuples with 1-based indices: the
first half the highest similarities, the second half the lowest. The input
is padded with zero entries to at least `count`.

## What this package does not do

- It gives no voice activity decision: `voiceprint.vadmath` holds only the
  fixed-point arithmetic and resampling helpers, not the band-splitting
  filters or the speech/noise model.
- It does not run the speaker model; it prepares its input and
  post-processes its output.
- It stores nothing: serialising vectors to text is provided, reading and
  writing files is left to the caller.
- It has no command-line program.