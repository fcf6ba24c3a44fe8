"""
Pytest configuration and shared fixtures for ECG stream tests.
"""
import pytest
import numpy as np
from ecg_stream.api_models import WaveformConfig
from ecg_stream.waveform_generator import WaveformGenerator

@pytest.fixture
def default_config():
    """Default PQRST configuration (no jitter)."""
    return WaveformConfig()

@pytest.fixture
def jittered_config():
    """Configuration with amplitude jitter on every active segment."""
    return WaveformConfig(
        p={"amplitude": 2.0, "epsilon": 50.0, "swelling": 3.0, "unswelling": 1.0},
        q={"amplitude": -1.0, "epsilon": 50.0, "second": 1.1, "third": 1.0},
        r={"amplitude": 7.0, "epsilon": 50.0, "second": 1.0},
        s={"amplitude": -1.0, "epsilon": 50.0, "second": 1.5, "third": 1.0},
        t={"amplitude": 5.0, "epsilon": 50.0, "swelling": 2.0, "unswelling": 1.0},
    )

@pytest.fixture
def generator(default_config):
    """Deterministic generator with default configuration."""
    return WaveformGenerator(config=default_config, rng=np.random.default_rng(0))

@pytest.fixture
def jittered_generator(jittered_config):
    """Seeded generator with jitter enabled."""
    return WaveformGenerator.from_seed(1234, config=jittered_config)

@pytest.fixture
def tolerance_config():
    """Standard tolerance values for numerical comparisons."""
    return {
        'time_tolerance': 1e-9,
        'amplitude_tolerance': 1e-9,
    }
