# // ecg_stream/waveform_generator.py
import logging
from collections import deque
from typing import Deque, Dict, Mapping, NamedTuple, Optional, Tuple, Union

import numpy as np

from .api_models import WaveformConfig
from .constants import SEGMENT_ORDER, ZERO_SEGMENTS
from .waveform_primitives import (
    beta_bump,
    draw_amplitude,
    normalized_positions,
    skewed_sine_peak,
    skewed_sine_wave,
    zero_segment,
)

logger = logging.getLogger(__name__)


class Sample(NamedTuple):
    x: float
    y: float


class WaveformGenerator:
    """
    Pull-based stream of synthetic PQRST samples.

    One full cycle is synthesized whenever the lookahead buffer runs dry and
    is then handed out one sample per call. The stream is infinite and cannot
    be restarted; create a new generator for a new stream.

    Args:
        config: WaveformConfig or a plain dict validated into one.
            Defaults to the values in constants.py.
        rng: Source of the per-cycle amplitude jitter. A fresh
            np.random.default_rng() is used when omitted.
    """

    def __init__(
        self,
        config: Optional[Union[WaveformConfig, Mapping]] = None,
        rng: Optional[np.random.Generator] = None,
    ):
        if config is None:
            config = WaveformConfig()
        elif not isinstance(config, WaveformConfig):
            config = WaveformConfig.model_validate(config)

        self.config = config
        self._rng = rng if rng is not None else np.random.default_rng()
        self._norm_positions = normalized_positions(config.samples_per_segment)
        self._step_size = 1.0 / (len(SEGMENT_ORDER) * config.samples_per_segment)
        self._samples_emitted = 0
        self._buffer: Deque[Sample] = deque()
        self._cycles_generated = 0

        logger.debug(
            "WaveformGenerator created: %d samples/segment, total width %.3f",
            config.samples_per_segment, config.total_weight,
        )

    @classmethod
    def from_seed(cls, seed: int, config: Optional[Union[WaveformConfig, Mapping]] = None) -> "WaveformGenerator":
        return cls(config=config, rng=np.random.default_rng(seed))

    # --- Read operations ---
    def current_cursor(self) -> float:
        return self._cursor_at(self._samples_emitted)

    def step_size(self) -> float:
        return self._step_size

    @property
    def cursor(self) -> float:
        return self._cursor_at(self._samples_emitted)

    @property
    def samples_per_cycle(self) -> int:
        return self.config.samples_per_cycle

    @property
    def cycles_generated(self) -> int:
        return self._cycles_generated

    def _cursor_at(self, samples_emitted: int) -> float:
        # Whole cycles count as exact integers so cycle k is anchored at k.
        whole_cycles, position = divmod(samples_emitted, self.samples_per_cycle)
        return float(whole_cycles) + position * self._step_size

    # --- Advancing operations ---
    def next_sample(self) -> Sample:
        """
        Creates a single, discrete movement of the data cursor.

        Returns:
            The next Sample(x, y) of the stream.
        """
        if not self._buffer:
            self._buffer.extend(self._generate_pqrst_cycle())

        self._samples_emitted += 1

        return self._buffer.popleft()

    def next_samples(self, count: int) -> Tuple[np.ndarray, np.ndarray]:
        """
        Pull several samples at once.

        Returns:
            (x_axis, signal) arrays of length count
        """
        if count < 0:
            raise ValueError(f"count must be non-negative, got {count}")
        x_axis = np.empty(count)
        signal = np.empty(count)
        for i in range(count):
            x_axis[i], signal[i] = self.next_sample()
        return x_axis, signal

    def __iter__(self):
        return self

    def __next__(self) -> Sample:
        return self.next_sample()

    # --- Cycle synthesis ---
    def _draw_cycle_amplitudes(self) -> Dict[str, float]:
        amplitudes = {}
        for name in SEGMENT_ORDER:
            if name in ZERO_SEGMENTS:
                continue
            params = getattr(self.config, name)
            amplitudes[name] = draw_amplitude(params.amplitude, params.epsilon, self._rng)
        return amplitudes

    def _segment_values(self, name: str, amplitude: Optional[float]) -> np.ndarray:
        u = self._norm_positions
        if name in ZERO_SEGMENTS:
            return zero_segment(u)
        params = getattr(self.config, name)
        if name in ("p", "t"):
            return beta_bump(u, amplitude, params.swelling, params.unswelling)
        if name in ("q", "s"):
            return skewed_sine_wave(u, amplitude, params.second, params.third)
        return skewed_sine_peak(u, amplitude, params.second)

    def _generate_pqrst_cycle(self):
        """
        Generate one PQRST cycle anchored at the current cursor.

        Segments are laid out back to back in SEGMENT_ORDER, each spanning
        width/total_weight of a unit-length cycle.
        """
        amplitudes = self._draw_cycle_amplitudes()
        total_weight = self.config.total_weight

        x_segments = []
        y_segments = []
        segment_offset = self.current_cursor()
        for name in SEGMENT_ORDER:
            segment_width = self.config.width_ratios[name] / total_weight
            x_segments.append(self._norm_positions * segment_width + segment_offset)
            y_segments.append(self._segment_values(name, amplitudes.get(name)))
            segment_offset += segment_width

        x_axis = np.concatenate(x_segments)
        signal = np.concatenate(y_segments)

        self._cycles_generated += 1
        logger.debug("Generated PQRST cycle %d at offset %.6f", self._cycles_generated, x_axis[0])

        return [Sample(float(x), float(y)) for x, y in zip(x_axis, signal)]
