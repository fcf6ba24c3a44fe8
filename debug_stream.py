#!/usr/bin/env python3
"""
Debug one PQRST cycle to inspect segment layout and amplitudes.
"""
import logging
import sys
sys.path.append('.')

from ecg_stream.constants import SEGMENT_ORDER
from ecg_stream.waveform_generator import WaveformGenerator

def debug_pqrst_cycle(seed=None):
    """Print every sample of the first cycle grouped by segment."""
    generator = WaveformGenerator.from_seed(seed) if seed is not None else WaveformGenerator()
    per_segment = generator.config.samples_per_segment

    print("=== Stream Settings ===")
    print(f"Step size: {generator.step_size():.5f}")
    print(f"Samples per cycle: {generator.samples_per_cycle}")
    print(f"Total width: {generator.config.total_weight:.1f}")
    print()

    print("=== First PQRST Cycle ===")
    print("Segment\tx\t\ty")
    print("-" * 40)

    for name in SEGMENT_ORDER:
        for _ in range(per_segment):
            x, y = generator.next_sample()
            print(f"{name}\t{x:.5f}\t\t{y:7.3f}")

    print()
    print(f"Cursor after one cycle: {generator.current_cursor():.5f}")
    print(f"Next cycle starts at:   {generator.next_sample().x:.5f}")

if __name__ == "__main__":
    logging.basicConfig(level=logging.DEBUG)
    debug_pqrst_cycle(int(sys.argv[1]) if len(sys.argv) > 1 else None)
