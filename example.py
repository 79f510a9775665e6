#!/usr/bin/env python3
"""
Example usage of the cancersim package.
"""

import numpy as np

from cancersim import Cell, Grid, Simulation


def main():
    """Demonstrate programmatic usage of the cancersim package."""
    # A tumour in a small patch of tissue, flanked by two immune cells
    grid = Grid.from_string(
        """
        T T T T T T T
        T T T T T T T
        T T W C T T T
        T T C C C T T
        T T T C W T T
        T T T T T T T
        T T T T T T T
        """
    )
    grid.set_cell(3, 3, Cell.cancer(age=4))

    sim = Simulation(grid, np.random.default_rng(2024))

    print("Initial state:")
    print(sim.grid)
    print()

    for _ in range(15):
        sim.step()
        counts = sim.get_statistics()["counts"]
        print(f"Generation {sim.generation}:")
        print(sim.grid)
        print(f"Cancer: {counts['cancer']}, Dead: {counts['dead']}")

        if sim.is_stable:
            print("Remission: no cancer cells left")
            break

        print()

    # Show statistics
    stats = sim.get_statistics()
    print("Final statistics:")
    for key, value in stats.items():
        print(f"  {key}: {value}")


if __name__ == "__main__":
    main()
