"""
Command-line interface for the particle growth simulator.
"""

import argparse
import logging
import sys
from dataclasses import replace

from .config import GrowthConfig, load_config
from .constants import M_TO_NM
from .output import GrowthCurveOutput
from .simulator import GrowthSimulator

# argparse destination -> GrowthConfig field
_OVERRIDES = {
    "radius": "particle_radius",
    "particle_density": "particle_density",
    "molar_mass": "vapor_molar_mass",
    "vapor_density": "vapor_density",
    "diffusion_volume": "vapor_diffusion_volume",
    "concentration": "vapor_concentration",
    "pressure": "pressure",
    "temperature": "temperature",
    "duration": "duration",
    "time_step": "time_step",
    "output": "output",
}


def progress_callback(time: float, radius: float):
    """Print simulation progress."""
    print(f"Time: {time/3600:.2f} hours, Diameter: {2*radius*M_TO_NM:.4f} nm")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Single particle growth by vapor condensation"
    )

    parser.add_argument(
        "-c", "--config",
        type=str,
        help="Configuration file (JSON)"
    )

    parser.add_argument(
        "--radius",
        type=float,
        help="Initial particle radius in m (default: 1.5e-9)"
    )

    parser.add_argument(
        "--particle-density",
        type=float,
        help="Particle density in kg/m^3 (default: 1830)"
    )

    parser.add_argument(
        "--molar-mass",
        type=float,
        help="Vapor molar mass in kg/mol (default: 0.098079)"
    )

    parser.add_argument(
        "--vapor-density",
        type=float,
        help="Vapor condensed-phase density in kg/m^3 (default: 1830)"
    )

    parser.add_argument(
        "--diffusion-volume",
        type=float,
        help="Vapor Fuller diffusion volume (default: 51.96)"
    )

    parser.add_argument(
        "--concentration",
        type=float,
        help="Vapor number concentration in 1/m^3 (default: 1e13)"
    )

    parser.add_argument(
        "--pressure",
        type=float,
        help="Ambient pressure in atm (default: 1.0)"
    )

    parser.add_argument(
        "--temperature",
        type=float,
        help="Ambient temperature in K (default: 293.15)"
    )

    parser.add_argument(
        "--duration",
        type=float,
        help="Simulation duration in seconds (default: 3600)"
    )

    parser.add_argument(
        "--time-step",
        type=float,
        help="Time step in seconds, keep around 1 (default: 1.0)"
    )

    parser.add_argument(
        "-o", "--output",
        type=str,
        help="Output filename prefix (default: growth_output)"
    )

    parser.add_argument(
        "--log-level",
        type=str,
        default="WARNING",
        help="Logging level (default: WARNING)"
    )

    return parser


def resolve_config(args: argparse.Namespace) -> GrowthConfig:
    """Combine the optional config file with command-line overrides."""
    config = load_config(args.config) if args.config else GrowthConfig()

    overrides = {
        field: getattr(args, dest)
        for dest, field in _OVERRIDES.items()
        if getattr(args, dest) is not None
    }
    return replace(config, **overrides)


def main(argv=None):
    """Main entry point for CLI."""
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level.upper(), logging.WARNING),
        format="%(asctime)s | %(levelname)s | %(message)s"
    )

    try:
        config = resolve_config(args)
        atmosphere = config.build_atmosphere()
        simulator = GrowthSimulator(atmosphere, time_step=config.time_step)
    except (OSError, ValueError) as e:
        print(f"Error: {e}")
        sys.exit(1)

    print("=" * 60)
    print("Particle Growth Simulator")
    print("=" * 60)
    print(f"Particle: {config.particle_name}, d = {2*config.particle_radius*M_TO_NM:.3f} nm, "
          f"rho = {config.particle_density} kg/m^3")
    print(f"Vapor: {config.vapor_name}, C = {config.vapor_concentration:.2e} 1/m^3")
    print(f"Ambient: {config.pressure} atm, {config.temperature} K")
    print(f"Duration: {config.duration/3600:.2f} hours, step {config.time_step} s")
    print("=" * 60)

    print("\nRunning simulation...")
    simulator.run(duration=config.duration, progress_callback=progress_callback)

    stats = simulator.get_statistics()
    print("\nSimulation complete!")
    print(f"Final diameter: {2*stats['final_radius']*M_TO_NM:.4f} nm")
    print(f"Mean growth rate: {stats['mean_diameter_growth_nm_per_h']:.4f} nm/h")

    print(f"\nGenerating output: {config.output}.png, {config.output}.csv")
    curve = GrowthCurveOutput(simulator.get_history())
    curve.save_plot(config.output)
    curve.save_csv(config.output)

    print("\nOutput files created successfully!")


if __name__ == "__main__":
    main()
