"""
Test configuration and fixtures for pytest.

This file contains fixtures and configuration that will be available to all tests.
"""
import numpy as np
import pytest

from tswarp.series import Dataset, LabeledSeries

# Set random seed for reproducibility
np.random.seed(42)


# Common test data fixtures
@pytest.fixture
def pair_01_02():
    """The two-point series used in the worked example: cost 1.0."""
    return LabeledSeries("a", [0.0, 1.0]), LabeledSeries("b", [0.0, 2.0])


@pytest.fixture
def sample_time_series():
    """Generate a sample time series for testing."""
    return np.random.randn(50)


@pytest.fixture
def sample_dataset():
    """Six random series of 30 points each."""
    rng = np.random.default_rng(7)
    return Dataset.from_arrays(rng.normal(size=(6, 30)), labels=list("abcdef"))


@pytest.fixture
def write_csv(tmp_path):
    """Write text to a CSV file in a temp dir and return its path."""
    def _write(text, name="series.csv"):
        path = tmp_path / name
        path.write_text(text)
        return path
    return _write
