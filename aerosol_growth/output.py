"""
Output module for particle growth curves.

Writes the recorded radius history as a PNG plot and a CSV table.
"""

import numpy as np

from .constants import M_TO_NM, S_TO_H


class GrowthCurveOutput:
    """Plot and export the diameter of the particle over time."""

    def __init__(self, history: dict):
        """
        Initialize growth curve output.

        Args:
            history: Dictionary with "time" (s) and "radius" (m) arrays,
                as returned by GrowthSimulator.get_history()
        """
        self.time = np.asarray(history["time"], dtype=float)
        self.radius = np.asarray(history["radius"], dtype=float)

        if self.time.shape != self.radius.shape:
            raise ValueError(
                f"time and radius must have the same shape, got "
                f"{self.time.shape} and {self.radius.shape}"
            )
        if self.time.size == 0:
            raise ValueError("history is empty")

    @property
    def diameter_nm(self) -> np.ndarray:
        return 2.0 * self.radius * M_TO_NM

    def save_plot(
        self,
        filename: str,
        title: str = "Particle Growth by Condensation"
    ):
        """
        Save the growth curve as PNG.

        Args:
            filename: Output filename (without extension)
            title: Plot title
        """
        import matplotlib
        matplotlib.use("Agg")
        import matplotlib.pyplot as plt

        fig, ax = plt.subplots(figsize=(8, 5))
        ax.plot(self.time * S_TO_H, self.diameter_nm, color="tab:blue", linewidth=1.5)

        ax.set_xlabel('Time (h)')
        ax.set_ylabel('Diameter (nm)')
        ax.set_title(title)
        ax.grid(True, alpha=0.3)

        plt.savefig(f"{filename}.png", dpi=150, bbox_inches='tight')
        plt.close(fig)

    def save_csv(self, filename: str):
        """
        Save the growth curve as CSV with columns time_s, radius_m, diameter_nm.

        Args:
            filename: Output filename (without extension)
        """
        table = np.column_stack([self.time, self.radius, self.diameter_nm])
        np.savetxt(
            f"{filename}.csv",
            table,
            delimiter=",",
            header="time_s,radius_m,diameter_nm",
            comments=""
        )

    def get_curve_statistics(self) -> dict:
        """
        Get statistics about the growth curve.

        Returns:
            Dictionary with statistics
        """
        elapsed_h = (self.time[-1] - self.time[0]) * S_TO_H
        growth_nm = self.diameter_nm[-1] - self.diameter_nm[0]

        return {
            "initial_diameter_nm": self.diameter_nm[0],
            "final_diameter_nm": self.diameter_nm[-1],
            "diameter_growth_nm": growth_nm,
            "growth_rate_nm_per_h": growth_nm / elapsed_h if elapsed_h > 0 else 0.0,
            "duration_h": elapsed_h,
            "samples": int(self.time.size),
        }
