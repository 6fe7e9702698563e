"""Data structures for species and reactions."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator

from massaction.kinetics import mass_action_rate


@dataclass(eq=False)
class Species:
    """A named chemical entity with a mutable concentration.

    Species compare and hash by identity: two objects with the same name are
    still distinct species.
    """

    name: str
    concentration: float = 0.0


@dataclass(eq=False)
class Reaction:
    """A mass-action reaction.

    A species listed ``n`` times among the reactants (or products) has a
    stoichiometric coefficient of ``n``. Entries are never merged.

    Attributes:
        rate_constant: Rate constant ``k``. Not validated.
        reactants: Reactant entries, in the order they were added.
        products: Product entries, in the order they were added.
    """

    rate_constant: float
    reactants: list[Species] = field(default_factory=list)
    products: list[Species] = field(default_factory=list)

    def add_reactant(self, species: Species) -> None:
        self.reactants.append(species)

    def add_product(self, species: Species) -> None:
        self.products.append(species)

    def rate(self) -> float:
        """Current reaction rate ``k * prod(reactant concentrations)``."""
        return mass_action_rate(
            self.rate_constant, (species.concentration for species in self.reactants)
        )

    def contributions(self) -> Iterator[tuple[Species, float]]:
        """Yield ``(species, delta)`` for every reactant and product entry.

        Reactant entries contribute ``-rate`` and product entries ``+rate``,
        so a species listed twice as a reactant receives ``-rate`` twice.
        """
        rate = self.rate()
        for species in self.reactants:
            yield species, -rate
        for species in self.products:
            yield species, rate

    def participants(self) -> Iterator[Species]:
        """Reactant entries followed by product entries, duplicates included."""
        yield from self.reactants
        yield from self.products
