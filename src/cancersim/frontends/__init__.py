"""Frontend interfaces for the cancer automaton."""

from .cli import CLICancerSimulation

__all__ = ["CLICancerSimulation"]
