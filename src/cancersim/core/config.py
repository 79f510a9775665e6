"""Configuration for seeding and driving simulations."""

from dataclasses import dataclass, field
from typing import Optional, Tuple


@dataclass
class InitialMix:
    """Fractions of each cell type used when seeding a grid."""

    tissue: float = 0.70
    cancer: float = 0.05
    immune: float = 0.05
    dead: float = 0.20

    def weights(self) -> Tuple[float, float, float, float]:
        """Get the weights as (tissue, cancer, immune, dead)."""
        return (self.tissue, self.cancer, self.immune, self.dead)

    def thresholds(self) -> Tuple[float, float, float]:
        """Cumulative upper bounds for tissue, cancer and immune.

        A draw at or above the last threshold seeds a dead cell.
        """
        return (
            self.tissue,
            self.tissue + self.cancer,
            self.tissue + self.cancer + self.immune,
        )

    def validate(self) -> None:
        """Check the mix is a probability distribution.

        Raises:
            ValueError: If a weight is outside 0.0-1.0 or the weights don't sum to 1
        """
        if not all(0.0 <= w <= 1.0 for w in self.weights()):
            raise ValueError(f"Mix weights must be between 0.0 and 1.0: {self.weights()}")
        total = sum(self.weights())
        if not abs(total - 1.0) <= 1e-9:
            raise ValueError(f"Mix weights must sum to 1.0, got {total:.6f}")

    @classmethod
    def parse(cls, text: str) -> "InitialMix":
        """Parse a 'tissue,cancer,immune,dead' string such as '0.7,0.05,0.05,0.2'."""
        parts = [p.strip() for p in text.split(",")]
        if len(parts) != 4:
            raise ValueError(f"Mix needs 4 comma-separated values, got {len(parts)}")
        mix = cls(*(float(p) for p in parts))
        mix.validate()
        return mix


@dataclass
class SimulationConfig:
    """Configuration for a single simulation run."""

    size: int = 20
    iterations: int = 50
    delay: float = 0.3
    seed: Optional[int] = None
    mix: InitialMix = field(default_factory=InitialMix)

    def validate(self) -> None:
        """Check the run settings and the mix.

        Raises:
            ValueError: If any setting is out of range
        """
        if self.size <= 0:
            raise ValueError("Grid size must be positive")
        if self.iterations <= 0:
            raise ValueError("Iterations must be positive")
        if self.delay < 0:
            raise ValueError("Delay must be non-negative")
        self.mix.validate()
