"""
Batch driver for the growth engine.

Repeatedly advances an Atmosphere and records the radius history.
"""

import logging
from typing import Callable, Optional

import numpy as np

from .atmosphere import Atmosphere
from .constants import M_TO_NM
from .validation import require_non_negative, require_positive

logger = logging.getLogger(__name__)


class GrowthSimulator:
    """
    Fixed-step growth simulation of a single particle.

    The atmosphere is driven in place; the simulator only keeps the history.
    """

    def __init__(
        self,
        atmosphere: Atmosphere,
        time_step: float = 1.0,
        progress_interval: int = 10
    ):
        """
        Initialize growth simulator.

        Args:
            atmosphere: Growth engine to drive
            time_step: Default time step in seconds
            progress_interval: Steps between progress callbacks
        """
        self.atmosphere = atmosphere
        self.time_step = require_positive("time_step", time_step)
        self.progress_interval = max(int(progress_interval), 1)

        self.times = [atmosphere.simulation_time]
        self.radii = [atmosphere.radius]

    def step(self, dt: Optional[float] = None) -> float:
        """
        Advance simulation by one time step.

        Args:
            dt: Time step in seconds (uses default if None)

        Returns:
            Particle radius after the step (m)
        """
        if dt is None:
            dt = self.time_step

        radius = self.atmosphere.advance(dt)

        self.times.append(self.atmosphere.simulation_time)
        self.radii.append(radius)
        return radius

    def run(
        self,
        duration: float,
        progress_callback: Optional[Callable[[float, float], None]] = None
    ):
        """
        Run simulation for specified duration.

        Args:
            duration: Simulation duration in seconds
            progress_callback: Optional callback function(time, radius)
        """
        duration = require_non_negative("duration", duration)
        steps = int(duration / self.time_step)

        logger.info(
            "Running %d steps of %g s from r=%.4e m",
            steps, self.time_step, self.atmosphere.radius
        )

        for step_num in range(steps):
            radius = self.step()

            if progress_callback and (step_num % self.progress_interval == 0):
                progress_callback(self.atmosphere.simulation_time, radius)

        logger.info(
            "Finished at t=%g s with r=%.4e m",
            self.atmosphere.simulation_time, self.atmosphere.radius
        )

    def get_history(self) -> dict:
        """
        Get the recorded history.

        Returns:
            Dictionary of arrays: time (s), radius (m), diameter (m)
        """
        radius = np.array(self.radii)
        return {
            "time": np.array(self.times),
            "radius": radius,
            "diameter": 2.0 * radius,
        }

    def get_statistics(self) -> dict:
        """
        Get simulation statistics.

        Returns:
            Dictionary with statistics
        """
        initial_radius = self.radii[0]
        final_radius = self.radii[-1]
        elapsed = self.times[-1] - self.times[0]
        growth = final_radius - initial_radius
        rate = growth / elapsed if elapsed > 0 else 0.0

        return {
            "initial_radius": initial_radius,
            "final_radius": final_radius,
            "radius_growth": growth,
            "mean_growth_rate": rate,
            "mean_diameter_growth_nm_per_h": 2.0 * rate * M_TO_NM * 3600.0,
            "simulation_time": self.atmosphere.simulation_time,
            "steps": len(self.radii) - 1,
        }
