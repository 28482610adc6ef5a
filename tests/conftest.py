import pytest

from pi_estimator import EstimatorConfig, UniformSource


@pytest.fixture
def small_config():
    return EstimatorConfig(iterations=10_000, seed=12345, block_size=1_000)


@pytest.fixture
def source():
    return UniformSource(12345)
