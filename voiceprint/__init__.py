"""Feature extraction, FFT, fixed-point helpers, embeddings and voiceprint matching."""

__version__ = "0.1.0"

__all__ = [
    "embedding",
    "extractor",
    "features",
    "fft",
    "matching",
    "vadmath",
]