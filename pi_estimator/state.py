# state.py
"""Hit counter owned by a single estimation run."""

from .errors import EstimatorError


class SampleCounter:
    """Tracks how many samples were classified and how many fell inside."""

    def __init__(self):
        self.samples: int = 0
        self.inside: int = 0

    def record(self, samples: int, inside: int):
        """Add a classified block of samples and its hits."""
        if samples < 0 or inside < 0:
            raise EstimatorError(f"Counts must be non-negative (samples={samples}, inside={inside})")
        if inside > samples:
            raise EstimatorError(f"Cannot record {inside} hits for {samples} samples")
        self.samples += samples
        self.inside += inside

    def ratio(self) -> float:
        """Fraction of classified samples that fell inside."""
        if self.samples == 0:
            raise EstimatorError("No samples recorded")
        return self.inside / self.samples
