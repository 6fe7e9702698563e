"""Kinetics helpers and rate expressions."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

import numpy as np

from massaction.constants import R_GAS


def mass_action_rate(rate_constant: float, concentrations: Iterable[float]) -> float:
    """Return ``k * prod(c_i)``; an empty product leaves ``k`` unchanged."""
    rate = rate_constant
    for concentration in concentrations:
        rate *= concentration
    return rate


@dataclass(frozen=True)
class ArrheniusKinetics:
    pre_exponential: float
    activation_energy: float

    def rate_constant(self, temperature: float) -> float:
        return float(
            self.pre_exponential * np.exp(-self.activation_energy / (R_GAS * temperature))
        )
