"""massaction core package."""

import logging

from massaction.errors import ConcentrationLengthError, IntegrationError, NetworkFormatError
from massaction.integrators import SolverSettings, Trajectory, build_odeint_rhs, build_rhs, integrate
from massaction.kinetics import ArrheniusKinetics, mass_action_rate
from massaction.models import Reaction, Species
from massaction.system import ReactionSystem

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "ArrheniusKinetics",
    "ConcentrationLengthError",
    "IntegrationError",
    "NetworkFormatError",
    "Reaction",
    "ReactionSystem",
    "SolverSettings",
    "Species",
    "Trajectory",
    "build_odeint_rhs",
    "build_rhs",
    "integrate",
    "mass_action_rate",
]
