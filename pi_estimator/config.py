# config.py
"""Run parameters and logging setup."""

import logging
import os

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .errors import InvalidArgumentError

DEFAULT_ITERATIONS = 10_000_000
DEFAULT_SEED = 35791246
DEFAULT_BLOCK_SIZE = 1_000_000

LOG_FORMAT = '%(asctime)s - %(levelname)s - %(message)s'


class EstimatorConfig(BaseModel):
    """Parameters of one estimation run.

    Defaults reproduce the reference run: ten million iterations seeded with
    35791246. ``block_size`` only bounds memory; it never changes the result.
    """

    model_config = ConfigDict(frozen=True)

    iterations: int = Field(DEFAULT_ITERATIONS, gt=0)
    seed: int = Field(DEFAULT_SEED, ge=0)
    block_size: int = Field(DEFAULT_BLOCK_SIZE, gt=0)

    def __init__(self, **data):
        try:
            super().__init__(**data)
        except ValidationError as e:
            err = e.errors()[0]
            field = ".".join(str(part) for part in err["loc"]) or "config"
            raise InvalidArgumentError(f"Invalid {field}: {err['msg']}") from e


def configure_logging() -> None:
    """Install a root handler from PI_ESTIMATOR_LOG_LEVEL / PI_ESTIMATOR_LOG_FILE.

    Without a log file, records go to stderr so stdout only carries the result.
    """
    level_name = os.environ.get("PI_ESTIMATOR_LOG_LEVEL", "WARNING").upper()
    level = logging.getLevelName(level_name)
    if not isinstance(level, int):
        raise InvalidArgumentError(f"Unknown log level: {level_name}")

    log_file = os.environ.get("PI_ESTIMATOR_LOG_FILE")
    if log_file:
        logging.basicConfig(filename=log_file, level=level, format=LOG_FORMAT)
    else:
        logging.basicConfig(level=level, format=LOG_FORMAT)
    logging.debug("Logging configured at level %s", level_name)
