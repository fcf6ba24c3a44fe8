# // ecg_stream/api_models.py
import math
from typing import Dict

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .constants import (
    PARAMS_P,
    PARAMS_Q,
    PARAMS_R,
    PARAMS_S,
    PARAMS_T,
    PQRST_WAVE_WIDTH_RATIOS,
    SAMPLES_PER_SEGMENT,
    SEGMENT_ORDER,
)


class SegmentShapeParams(BaseModel):
    model_config = ConfigDict(allow_inf_nan=False)

    amplitude: float = Field(..., description="Peak scale of the segment before jitter.")
    epsilon: float = Field(0.0, ge=0, description="Jitter bound as a percentage of amplitude. 0 disables jitter.")


class BetaShapeParams(SegmentShapeParams):
    """P and T waves: amplitude * u^swelling * (unswelling - u)."""
    swelling: float = Field(..., ge=0)
    unswelling: float = Field(...)


class SkewedSineShapeParams(SegmentShapeParams):
    """Q and S waves: amplitude * second^sin(u*pi) + third."""
    second: float = Field(..., gt=0)
    third: float = Field(...)


class PeakShapeParams(SegmentShapeParams):
    """R wave: amplitude^sin(u*pi) - second."""
    amplitude: float = Field(..., gt=0, description="Base of the power, must stay positive.")
    second: float = Field(...)


class WaveformConfig(BaseModel):
    model_config = ConfigDict(allow_inf_nan=False)

    width_ratios: Dict[str, float] = Field(
        default_factory=lambda: dict(PQRST_WAVE_WIDTH_RATIOS),
        description="Relative duration of each segment, normalized against their sum.",
    )
    samples_per_segment: int = Field(SAMPLES_PER_SEGMENT, ge=1, description="Normalized positions evaluated per segment.")

    p: BetaShapeParams = Field(default_factory=lambda: BetaShapeParams(**PARAMS_P))
    q: SkewedSineShapeParams = Field(default_factory=lambda: SkewedSineShapeParams(**PARAMS_Q))
    r: PeakShapeParams = Field(default_factory=lambda: PeakShapeParams(**PARAMS_R))
    s: SkewedSineShapeParams = Field(default_factory=lambda: SkewedSineShapeParams(**PARAMS_S))
    t: BetaShapeParams = Field(default_factory=lambda: BetaShapeParams(**PARAMS_T))

    @field_validator("width_ratios")
    @classmethod
    def check_width_ratios(cls, value: Dict[str, float]) -> Dict[str, float]:
        missing = [name for name in SEGMENT_ORDER if name not in value]
        unknown = [name for name in value if name not in SEGMENT_ORDER]
        if missing or unknown:
            raise ValueError(f"width ratios must name exactly {SEGMENT_ORDER}; missing={missing} unknown={unknown}")
        non_finite = [name for name in SEGMENT_ORDER if not math.isfinite(value[name])]
        if non_finite:
            raise ValueError(f"width ratios must be finite: {non_finite}")
        negative = [name for name in SEGMENT_ORDER if value[name] < 0]
        if negative:
            raise ValueError(f"width ratios must be non-negative: {negative}")
        if sum(value.values()) <= 0:
            raise ValueError("width ratios must sum to a positive total")
        # Keep the canonical segment order regardless of input order
        return {name: value[name] for name in SEGMENT_ORDER}

    @property
    def total_weight(self) -> float:
        return float(sum(self.width_ratios.values()))

    @property
    def samples_per_cycle(self) -> int:
        return len(SEGMENT_ORDER) * self.samples_per_segment
