"""
Example script demonstrating the Python API.
"""

from aerosol_growth import Atmosphere, Gas, GrowthCurveOutput, GrowthSimulator, Particle


def main():
    """Run example simulation."""
    print("Creating particle and vapor...")
    particle = Particle("seed", radius=1.5e-9, density=1830.0)
    vapor = Gas(
        "sulfuric acid",
        molar_mass=0.098079,
        density=1830.0,
        temperature=293.15,
        diffusion_volume=51.96,
        concentration=1e13
    )

    print("Initializing atmosphere...")
    atmosphere = Atmosphere(particle, vapor, pressure=1.0, temperature=293.15)
    simulator = GrowthSimulator(atmosphere, time_step=1.0, progress_interval=600)

    print("Running simulation...")

    def progress(time, radius):
        print(f"  Time: {time/60:.0f} min, Diameter: {2*radius*1e9:.4f} nm")

    simulator.run(duration=2*3600, progress_callback=progress)

    print("\nWarming the air by 10 K and continuing...")
    atmosphere.set_temperature(303.15)
    simulator.run(duration=3600, progress_callback=progress)

    print("\nGenerating output...")
    curve = GrowthCurveOutput(simulator.get_history())
    curve.save_plot("example_api_output")
    curve.save_csv("example_api_output")

    print("\nSimulation statistics:")
    for key, value in simulator.get_statistics().items():
        print(f"  {key}: {value}")

    print("\nDone! Check example_api_output.png and example_api_output.csv")


if __name__ == "__main__":
    main()
