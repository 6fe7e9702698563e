"""Reaction system assembly and rate-of-change evaluation.

A :class:`ReactionSystem` collects reactions and derives a canonical species
order from them: species added directly come first, in the order added,
followed by species first seen while scanning each reaction's reactants and
then its products, in registration order. Every vector the system reads or
writes uses this order.

The system keeps references to the caller's :class:`~massaction.models.Species`
objects, so writing a concentration vector updates those objects in place.
"""

from __future__ import annotations

import logging
from typing import MutableSequence, Sequence

import numpy as np

from massaction.errors import ConcentrationLengthError
from massaction.models import Reaction, Species

logger = logging.getLogger(__name__)


class ReactionSystem:
    """Mass-action reaction network evaluated over shared species state."""

    def __init__(self) -> None:
        self._reactions: list[Reaction] = []
        self._species: list[Species] = []
        self._index: dict[Species, int] = {}

    def add_reaction(self, reaction: Reaction) -> None:
        self._reactions.append(reaction)
        for species in reaction.participants():
            self._fold(species)
        logger.debug(
            "Registered reaction %d (k=%g); %d species known",
            len(self._reactions) - 1,
            reaction.rate_constant,
            len(self._species),
        )

    def add_species(self, species: Species) -> None:
        self._fold(species)

    def _fold(self, species: Species) -> None:
        if species in self._index:
            return
        self._index[species] = len(self._species)
        self._species.append(species)
        logger.debug("Discovered species %r at position %d", species.name, self._index[species])

    def _sync(self) -> None:
        # Picks up entries added to a reaction after it was registered; they
        # are appended so existing positions never move.
        for reaction in self._reactions:
            for species in reaction.participants():
                self._fold(species)

    @property
    def reactions(self) -> tuple[Reaction, ...]:
        return tuple(self._reactions)

    @property
    def species(self) -> tuple[Species, ...]:
        self._sync()
        return tuple(self._species)

    @property
    def species_names(self) -> list[str]:
        self._sync()
        return [species.name for species in self._species]

    def __len__(self) -> int:
        self._sync()
        return len(self._species)

    def index_of(self, species: Species) -> int:
        """Canonical position of ``species``; raises ``KeyError`` if unknown."""
        self._sync()
        return self._index[species]

    def get_concentrations(self) -> np.ndarray:
        self._sync()
        return np.array([species.concentration for species in self._species], dtype=float)

    def set_concentrations(self, values: Sequence[float]) -> None:
        """Write ``values`` into the species in canonical order.

        Raises:
            ConcentrationLengthError: If ``len(values)`` differs from the
                number of species. No species is modified in that case.
        """
        self._sync()
        if len(values) != len(self._species):
            raise ConcentrationLengthError(len(self._species), len(values))
        for species, value in zip(self._species, values):
            species.concentration = float(value)

    def get_rates_of_change(self) -> np.ndarray:
        """Net rate of change of every species, summed over all reactions."""
        self._sync()
        rates = np.zeros(len(self._species), dtype=float)
        for reaction in self._reactions:
            for species, delta in reaction.contributions():
                rates[self._index[species]] += delta
        return rates

    def __call__(
        self,
        state: Sequence[float],
        out_derivative: MutableSequence[float],
        time: float,
    ) -> None:
        """Evaluate ``d(state)/dt`` into ``out_derivative``.

        ``time`` is ignored; the system is autonomous. The species are left
        holding ``state``. A plain ``list`` output is resized to fit, any
        other buffer must already have one slot per species.
        """
        resizable = isinstance(out_derivative, list)
        if not resizable and len(out_derivative) != len(self):
            raise ConcentrationLengthError(len(self), len(out_derivative))
        self.set_concentrations(state)
        rates = self.get_rates_of_change()
        if resizable:
            out_derivative[:] = rates.tolist()
        else:
            out_derivative[:] = rates
