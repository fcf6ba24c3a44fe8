# // ecg_stream/constants.py
# --- Segment Layout ---
# Fixed order in which the segments of one PQRST cycle are laid out.
SEGMENT_ORDER = ("p", "pq", "q", "r", "s", "st", "t", "tp")
ZERO_SEGMENTS = ("pq", "st", "tp")

# Relative durations of each segment. Normalized against their sum, so only
# the proportions matter.
PQRST_WAVE_WIDTH_RATIOS = {
    "p": 12,
    "pq": 2,
    "q": 2,
    "r": 6,
    "s": 3,
    "st": 2,
    "t": 12,
    "tp": 2,
}

# Normalized positions evaluated per segment: 0.0, 0.1, ..., 0.9
SAMPLES_PER_SEGMENT = 10

# --- Segment Shape Definitions ---
# epsilon is the jitter bound as a percentage of amplitude (0 disables jitter).

# P mimics a beta distribution
PARAMS_P = {
    "amplitude": 2.0,
    "epsilon": 0.0,
    "swelling": 3.0,
    "unswelling": 1.0,
}

# Q mimics the -ve part of a skewed sine wave
PARAMS_Q = {
    "amplitude": -1.0,
    "epsilon": 0.0,
    "second": 1.1,
    "third": 1.0,
}

# R mimics the +ve part of a skewed sine wave
PARAMS_R = {
    "amplitude": 7.0,
    "epsilon": 0.0,
    "second": 1.0,
}

# S mimics the -ve part of a skewed sine wave
PARAMS_S = {
    "amplitude": -1.0,
    "epsilon": 0.0,
    "second": 1.5,
    "third": 1.0,
}

# T mimics a beta distribution
PARAMS_T = {
    "amplitude": 5.0,
    "epsilon": 0.0,
    "swelling": 2.0,
    "unswelling": 1.0,
}
