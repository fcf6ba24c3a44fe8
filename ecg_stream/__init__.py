from .api_models import (
    BetaShapeParams,
    PeakShapeParams,
    SegmentShapeParams,
    SkewedSineShapeParams,
    WaveformConfig,
)
from .waveform_generator import Sample, WaveformGenerator

__all__ = [
    "BetaShapeParams",
    "PeakShapeParams",
    "SegmentShapeParams",
    "SkewedSineShapeParams",
    "WaveformConfig",
    "Sample",
    "WaveformGenerator",
]
