# estimator.py
"""Monte Carlo estimate of pi from points sampled in the unit square."""

from __future__ import annotations

import logging
import sys
import time
from typing import Optional, TextIO

import numpy as np

from .config import DEFAULT_ITERATIONS, DEFAULT_SEED, EstimatorConfig
from .generator import UniformSource
from .state import SampleCounter

RESULT_LABEL = "estimate of pi is"


def is_inside_quarter_circle(x: float, y: float) -> bool:
    """Check whether (x, y) lies within distance 1 of the origin."""
    z = x * x + y * y
    return z <= 1.0


def format_result(estimate: float) -> str:
    """Render the result line (without newline), %g formatting, trailing space."""
    return "%s %g " % (RESULT_LABEL, estimate)


class Estimator:
    """Counts points of the unit square falling inside the quarter circle.

    The source is created from ``config.seed`` for every run unless one is
    passed in, in which case the injected source is consumed as-is. Draws
    are taken in x, y, x, y order from a single stream.
    """

    def __init__(self, config: Optional[EstimatorConfig] = None, source: Optional[UniformSource] = None):
        self.config = config or EstimatorConfig()
        self._source = source
        self.counter: Optional[SampleCounter] = None

    def _make_source(self) -> UniformSource:
        if self._source is not None:
            return self._source
        return UniformSource(self.config.seed)

    def count_inside(self) -> int:
        """Run the sampling loop and return the number of hits."""
        source = self._make_source()
        counter = SampleCounter()
        remaining = self.config.iterations
        while remaining > 0:
            n = min(self.config.block_size, remaining)
            values = source.uniform_block(2 * n)
            x = values[0::2]
            y = values[1::2]
            z = x * x + y * y
            inside = int(np.count_nonzero(z <= 1.0))
            counter.record(n, inside)
            remaining -= n
            logging.debug("Block of %d samples: %d inside (%d/%d done)",
                          n, inside, counter.samples, self.config.iterations)
        self.counter = counter
        return counter.inside

    def estimate(self) -> float:
        """Return (hits / iterations) * 4."""
        self.count_inside()
        return self.counter.ratio() * 4

    def run(self, out: Optional[TextIO] = None) -> float:
        """Estimate pi and print the result line to ``out`` (stdout by default)."""
        if out is None:
            out = sys.stdout
        start = time.perf_counter()
        pi = self.estimate()
        elapsed = time.perf_counter() - start
        logging.info("Estimated pi=%r from %d samples (seed=%d) in %.3fs",
                     pi, self.config.iterations, self.config.seed, elapsed)
        print(format_result(pi), file=out)
        return pi


def estimate_pi(iterations: int = DEFAULT_ITERATIONS, seed: int = DEFAULT_SEED) -> float:
    """Estimate pi with ``iterations`` samples drawn from a source seeded with ``seed``."""
    config = EstimatorConfig(iterations=iterations, seed=seed)
    return Estimator(config).estimate()
