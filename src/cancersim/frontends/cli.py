"""Command-line interface for the cancer automaton."""

import argparse
import sys
import time
from typing import Optional, Tuple

from ..core.config import InitialMix, SimulationConfig
from ..core.grid import Grid
from ..core.simulation import Simulation

HEADER = "==== Cancer Simulation ===="


class CLICancerSimulation:
    """Command-line driver that seeds, steps and renders a simulation."""

    def run_simulation(
        self,
        size: int,
        iterations: int,
        delay: float = 0.0,
        seed: Optional[int] = None,
        mix: Optional[InitialMix] = None,
        until_remission: bool = False,
        render: bool = True,
        verbose: bool = False,
    ) -> Tuple[int, str, dict]:
        """Run a simulation, rendering each generation before it is advanced.

        One frame is printed per iteration; the final generation is
        summarised by the statistics rather than rendered.

        Args:
            size: Grid side length
            iterations: Number of generations to advance
            delay: Seconds to pause after each generation
            seed: Seed for the random source (random if None)
            mix: Initial fractions of each cell type
            until_remission: Stop early once no cancer remains
            render: Print every generation to the console
            verbose: Print progress updates

        Returns:
            Tuple of (final_generation, finish_reason, statistics)
        """
        config = SimulationConfig(
            size=size,
            iterations=iterations,
            delay=delay,
            seed=seed,
            mix=mix if mix is not None else InitialMix(),
        )
        simulation = Simulation.from_config(config)

        if verbose:
            print(f"Initializing {size}x{size} grid (seed: {seed})")

        initial_counts = simulation.get_statistics()["counts"]
        if verbose:
            print("Initial population: " + ", ".join(f"{name} {count}" for name, count in initial_counts.items()))

        start_time = time.time()
        reason = "max_generations"

        for _ in range(iterations):
            if until_remission and simulation.is_stable:
                reason = "remission"
                break
            if render:
                print(self._format_generation(simulation.grid))
            simulation.step()
            if delay > 0:
                time.sleep(delay)
        else:
            if until_remission and simulation.is_stable:
                reason = "remission"

        duration = time.time() - start_time

        stats = simulation.get_statistics()
        stats["initial_counts"] = initial_counts
        stats["duration_seconds"] = duration

        return simulation.generation, reason, stats

    def _format_generation(self, grid: Grid) -> str:
        """Format one generation as a header, the grid rows and a blank line."""
        return f"{HEADER}\n{grid}\n"


def create_parser() -> argparse.ArgumentParser:
    """Create command-line argument parser.

    Returns:
        Configured ArgumentParser
    """
    parser = argparse.ArgumentParser(
        description="Run a cellular automaton of tissue, cancer, immune and dead cells",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Run the default 20x20 grid for 50 generations
  cancersim-cli

  # Reproducible run without pauses between generations
  cancersim-cli --seed 42 --delay 0

  # Stop as soon as the cancer is gone, showing only the summary
  cancersim-cli --until-remission --iterations 500 --quiet --verbose

  # More immune cells, fewer dead ones
  cancersim-cli --mix 0.7,0.05,0.15,0.1
        """,
    )

    parser.add_argument("-s", "--size", type=int, default=20, help="Grid side length (default: 20)")

    parser.add_argument(
        "-n",
        "--iterations",
        type=int,
        default=50,
        help="Number of generations to simulate (default: 50)",
    )

    parser.add_argument(
        "-d",
        "--delay",
        type=float,
        default=0.3,
        help="Seconds to pause between generations (default: 0.3)",
    )

    parser.add_argument("--seed", type=int, default=None, help="Random seed for reproducible runs")

    parser.add_argument(
        "--mix",
        type=str,
        default="0.7,0.05,0.05,0.2",
        help="Initial tissue,cancer,immune,dead fractions (default: 0.7,0.05,0.05,0.2)",
    )

    parser.add_argument(
        "-r",
        "--until-remission",
        action="store_true",
        help="Stop early once no cancer cells remain",
    )

    parser.add_argument(
        "-q",
        "--quiet",
        action="store_true",
        help="Don't render each generation",
    )

    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Print detailed progress information",
    )

    return parser


def format_finish_reason(reason: str, stats: dict) -> str:
    """Format the finish reason for display."""
    if reason == "remission":
        return f"Remission (no cancer cells left at generation {stats['generation']})"
    elif reason == "max_generations":
        return "Reached iteration limit"
    return reason


def print_results(final_generation: int, reason: str, stats: dict, verbose: bool) -> None:
    """Print simulation results.

    Args:
        final_generation: Final generation number
        reason: Finish reason
        stats: Statistics dictionary
        verbose: Whether to show detailed statistics
    """
    print(f"\nSimulation completed after {final_generation} generations")
    print(f"Finish reason: {format_finish_reason(reason, stats)}")

    counts = stats["counts"]
    if verbose:
        print("\nDetailed Statistics:")
        print(f"  Grid size: {stats['grid_size'][0]}x{stats['grid_size'][1]}")
        for name, count in counts.items():
            initial = stats["initial_counts"][name]
            print(f"  {name.capitalize()}: {initial} -> {count} ({stats['densities'][name]:.2%})")
        print(f"  Cancer age: mean {stats['cancer_mean_age']:.2f}, max {stats['cancer_max_age']}")
        print(f"  Tissue at risk: {stats['tissue_at_risk']}")
        print(f"  Cancer in immune contact: {stats['cancer_in_immune_contact']}")
        if "duration_seconds" in stats:
            print(f"  Duration: {stats['duration_seconds']:.3f} seconds")
    else:
        print(
            "Tissue: {}, Cancer: {}, Immune: {}, Dead: {}".format(
                counts["tissue"], counts["cancer"], counts["immune"], counts["dead"]
            )
        )


def validate_args(args: argparse.Namespace) -> bool:
    """Validate command-line arguments.

    Args:
        args: Parsed arguments

    Returns:
        True if arguments are valid
    """
    errors = []

    if args.size <= 0:
        errors.append("Size must be positive")

    if args.iterations <= 0:
        errors.append("Iterations must be positive")

    if args.delay < 0:
        errors.append("Delay must be non-negative")

    try:
        InitialMix.parse(args.mix)
    except ValueError as e:
        errors.append(f"Invalid mix: {e}")

    if errors:
        print("Error: Invalid arguments:")
        for error in errors:
            print(f"  - {error}")
        return False

    return True


def main() -> int:
    """Main entry point for CLI interface.

    Returns:
        Exit code (0 for success, 1 for error)
    """
    parser = create_parser()
    args = parser.parse_args()

    if not validate_args(args):
        return 1

    cli = CLICancerSimulation()

    try:
        final_generation, reason, stats = cli.run_simulation(
            size=args.size,
            iterations=args.iterations,
            delay=args.delay,
            seed=args.seed,
            mix=InitialMix.parse(args.mix),
            until_remission=args.until_remission,
            render=not args.quiet,
            verbose=args.verbose,
        )

        print_results(final_generation, reason, stats, args.verbose)
        return 0

    except KeyboardInterrupt:
        print("\nSimulation interrupted by user")
        return 1
    except Exception as e:
        print(f"Error: {e}")
        if args.verbose:
            import traceback

            traceback.print_exc()
        return 1


if __name__ == "__main__":
    sys.exit(main())
