"""Adapters between a reaction system and SciPy ODE solvers.

SciPy expects a derivative function that returns a new array, with the
argument order depending on the solver. These adapters wrap the system's
three-argument callback (state, output buffer, time) so the system itself
stays independent of any integration library.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Sequence

import numpy as np
from scipy.integrate import solve_ivp

from massaction.errors import IntegrationError
from massaction.system import ReactionSystem

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SolverSettings:
    """Options forwarded to ``scipy.integrate.solve_ivp``.

    Attributes:
        method: Integration method name (``"LSODA"``, ``"BDF"``, ``"RK45"``...).
        points: Number of evenly spaced output times, both ends included.
        rtol: Relative tolerance.
        atol: Absolute tolerance.
    """

    method: str = "LSODA"
    points: int = 100
    rtol: float = 1e-6
    atol: float = 1e-9


@dataclass(frozen=True)
class Trajectory:
    time: np.ndarray
    species_names: Sequence[str]
    concentrations: np.ndarray  # shape (n_species, n_points)

    def series(self, name: str) -> np.ndarray:
        return self.concentrations[list(self.species_names).index(name)]

    def final(self) -> dict[str, float]:
        return {
            name: float(value)
            for name, value in zip(self.species_names, self.concentrations[:, -1])
        }


def build_rhs(system: ReactionSystem) -> Callable[[float, np.ndarray], np.ndarray]:
    """Build ``rhs(t, y)`` compatible with ``scipy.integrate.solve_ivp``."""

    def rhs(t: float, state: np.ndarray) -> np.ndarray:
        derivative = np.empty(len(system), dtype=float)
        system(state, derivative, t)
        return derivative

    return rhs


def build_odeint_rhs(system: ReactionSystem) -> Callable[[np.ndarray, float], np.ndarray]:
    """Build ``rhs(y, t)`` compatible with ``scipy.integrate.odeint``."""
    rhs = build_rhs(system)

    def odeint_rhs(state: np.ndarray, t: float) -> np.ndarray:
        return rhs(t, state)

    return odeint_rhs


def integrate(
    system: ReactionSystem,
    t_end: float,
    settings: SolverSettings = SolverSettings(),
    t_start: float = 0.0,
) -> Trajectory:
    """Integrate the system from its current concentrations.

    On success the species are left holding the concentrations at ``t_end``.

    Raises:
        IntegrationError: If the solver reports failure.
    """
    if t_end <= t_start:
        raise ValueError("t_end must be greater than t_start")
    if settings.points < 2:
        raise ValueError("points must be >= 2")

    initial_state = system.get_concentrations()
    evaluation_times = np.linspace(t_start, t_end, settings.points)
    logger.info(
        "Integrating %d species over [%g, %g] with %s",
        len(system),
        t_start,
        t_end,
        settings.method,
    )

    result = solve_ivp(
        build_rhs(system),
        (t_start, t_end),
        initial_state,
        t_eval=evaluation_times,
        method=settings.method,
        rtol=settings.rtol,
        atol=settings.atol,
    )
    if not result.success:
        system.set_concentrations(initial_state)
        raise IntegrationError(f"Integration failed: {result.message}")

    logger.debug("Solver finished after %d evaluations", result.nfev)
    system.set_concentrations(result.y[:, -1])
    return Trajectory(
        time=result.t,
        species_names=system.species_names,
        concentrations=result.y,
    )
