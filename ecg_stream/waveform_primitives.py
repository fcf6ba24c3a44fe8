# // ecg_stream/waveform_primitives.py
import numpy as np

# --- Segment Shape Functions ---
# Every shape takes the segment-local normalized positions u in [0, 1] and
# returns one amplitude per position.

def beta_bump(u_points, amplitude, swelling, unswelling):
    """
    Beta-distribution-like bump used for the P and T waves.

    y = amplitude * u^swelling * (unswelling - u)

    Args:
        u_points: Segment-local normalized positions
        amplitude: Peak scale (already jittered for the current cycle)
        swelling: Exponent controlling how late the bump rises
        unswelling: Position at which the bump returns to zero

    Returns:
        Array of amplitudes, one per position
    """
    u_points = np.asarray(u_points, dtype=float)
    return amplitude * np.power(u_points, swelling) * (unswelling - u_points)


def skewed_sine_wave(u_points, amplitude, second, third):
    """
    Skewed sine dip used for the Q and S waves.

    y = amplitude * second^sin(u*pi) + third
    """
    u_points = np.asarray(u_points, dtype=float)
    return amplitude * np.power(second, np.sin(u_points * np.pi)) + third


def skewed_sine_peak(u_points, amplitude, second):
    """Skewed sine peak for the R wave: y = amplitude^sin(u*pi) - second."""
    u_points = np.asarray(u_points, dtype=float)
    return np.power(amplitude, np.sin(u_points * np.pi)) - second


def zero_segment(u_points):
    # pq, st and tp segments mimic y=0
    return np.zeros_like(np.asarray(u_points, dtype=float))


def normalized_positions(samples_per_segment: int) -> np.ndarray:
    """Uniform positions k/n for k in 0..n-1, spanning [0, 1)."""
    return np.arange(samples_per_segment, dtype=float) / samples_per_segment


# --- Amplitude Jitter ---
def draw_amplitude(amplitude: float, epsilon: float, rng: np.random.Generator) -> float:
    """
    Draw the jittered amplitude for one segment of one cycle.

    The jitter bound is eps = amplitude * epsilon and the drawn offset
    uniform(-eps, +eps) is divided by 100, so epsilon acts as a percentage.
    With epsilon == 0 the base amplitude is returned and rng is not touched.
    """
    if not epsilon:
        return float(amplitude)
    eps = abs(amplitude * epsilon)
    return float(amplitude + rng.uniform(-eps, eps) / 100)
