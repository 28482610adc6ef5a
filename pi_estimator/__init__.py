"""Monte Carlo estimation of pi."""

from .config import EstimatorConfig, configure_logging
from .errors import EstimatorError, InvalidArgumentError, StartupError
from .estimator import Estimator, estimate_pi, format_result, is_inside_quarter_circle
from .generator import RAW_RANGE, UniformSource
from .state import SampleCounter

__version__ = "0.1.0"

__all__ = [
    "Estimator",
    "EstimatorConfig",
    "EstimatorError",
    "InvalidArgumentError",
    "RAW_RANGE",
    "SampleCounter",
    "StartupError",
    "UniformSource",
    "configure_logging",
    "estimate_pi",
    "format_result",
    "is_inside_quarter_circle",
]
