"""Build reaction systems from JSON network descriptions."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Mapping

from massaction.errors import NetworkFormatError
from massaction.integrators import SolverSettings
from massaction.kinetics import ArrheniusKinetics
from massaction.models import Reaction, Species
from massaction.system import ReactionSystem

logger = logging.getLogger(__name__)

_REACTION_KEYS = {"reactants", "products", "rate", "name"}
DEFAULT_TEMPERATURE = 298.15  # K
DEFAULT_T_END = 1.0


@dataclass
class Network:
    system: ReactionSystem
    species: Dict[str, Species]
    settings: SolverSettings = field(default_factory=SolverSettings)
    t_end: float = DEFAULT_T_END
    temperature: float = DEFAULT_TEMPERATURE


def load_network(path: str | Path) -> Network:
    """Read a JSON network file."""
    with open(path, "r") as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as exc:
            raise NetworkFormatError(f"{path}: invalid JSON ({exc})") from exc
    return network_from_dict(data)


def network_from_dict(data: Mapping[str, Any]) -> Network:
    if not isinstance(data, Mapping):
        raise NetworkFormatError("Network description must be a JSON object")

    temperature = _as_float(data.get("temperature", DEFAULT_TEMPERATURE), "temperature")
    species: Dict[str, Species] = {}
    system = ReactionSystem()

    initial = data.get("species", {})
    if not isinstance(initial, Mapping):
        raise NetworkFormatError("'species' must map names to concentrations")
    for name, concentration in initial.items():
        species[name] = Species(name, _as_float(concentration, f"species[{name!r}]"))
        system.add_species(species[name])

    reactions = data.get("reactions", [])
    if not isinstance(reactions, list):
        raise NetworkFormatError("'reactions' must be a list")
    for index, entry in enumerate(reactions):
        system.add_reaction(_parse_reaction(entry, index, species, temperature))

    settings, t_end = _parse_solver(data.get("solver", {}))
    logger.info(
        "Loaded network with %d species and %d reactions",
        len(system),
        len(system.reactions),
    )
    return Network(
        system=system,
        species=species,
        settings=settings,
        t_end=t_end,
        temperature=temperature,
    )


def _parse_reaction(
    entry: Any,
    index: int,
    species: Dict[str, Species],
    temperature: float,
) -> Reaction:
    label = f"reactions[{index}]"
    if not isinstance(entry, Mapping):
        raise NetworkFormatError(f"{label} must be an object")
    unknown = set(entry) - _REACTION_KEYS
    if unknown:
        raise NetworkFormatError(f"{label}: unknown keys {sorted(unknown)}")
    if "rate" not in entry:
        raise NetworkFormatError(f"{label}: missing 'rate'")

    name = entry.get("name", label)
    if not isinstance(name, str):
        raise NetworkFormatError(f"{label}: 'name' must be a string")

    reaction = Reaction(_parse_rate(entry["rate"], temperature, label))
    for reactant in _expand(entry.get("reactants", []), f"{label}.reactants"):
        reaction.add_reactant(_lookup(species, reactant))
    for product in _expand(entry.get("products", []), f"{label}.products"):
        reaction.add_product(_lookup(species, product))
    logger.debug(
        "Parsed reaction %r: %s -> %s (k=%g)",
        name,
        " + ".join(s.name for s in reaction.reactants) or "0",
        " + ".join(s.name for s in reaction.products) or "0",
        reaction.rate_constant,
    )
    return reaction


def _parse_rate(data: Any, temperature: float, label: str) -> float:
    if isinstance(data, Mapping):
        try:
            arrhenius = ArrheniusKinetics(
                pre_exponential=float(data["A"]),
                activation_energy=float(data.get("Ea", 0.0)),
            )
        except (KeyError, TypeError, ValueError) as exc:
            raise NetworkFormatError(f"{label}: invalid Arrhenius rate {data!r}") from exc
        return arrhenius.rate_constant(temperature)
    return _as_float(data, f"{label}.rate")


def _expand(entries: Any, label: str) -> List[str]:
    # {"A": 2} is shorthand for ["A", "A"]
    if isinstance(entries, Mapping):
        names: List[str] = []
        for name, coefficient in entries.items():
            if not isinstance(coefficient, int) or isinstance(coefficient, bool) or coefficient < 0:
                raise NetworkFormatError(
                    f"{label}: coefficient of {name!r} must be a non-negative integer"
                )
            names.extend([name] * coefficient)
        return names
    if isinstance(entries, list) and all(isinstance(name, str) for name in entries):
        return list(entries)
    raise NetworkFormatError(f"{label} must be a list of names or a name -> count object")


def _lookup(species: Dict[str, Species], name: str) -> Species:
    if name not in species:
        species[name] = Species(name)
    return species[name]


def _parse_solver(data: Any) -> tuple[SolverSettings, float]:
    if not isinstance(data, Mapping):
        raise NetworkFormatError("'solver' must be an object")
    defaults = SolverSettings()
    try:
        settings = SolverSettings(
            method=str(data.get("method", defaults.method)),
            points=_as_int(data.get("points", defaults.points), "solver.points"),
            rtol=float(data.get("rtol", defaults.rtol)),
            atol=float(data.get("atol", defaults.atol)),
        )
        t_end = float(data.get("t_end", DEFAULT_T_END))
    except (TypeError, ValueError) as exc:
        raise NetworkFormatError(f"Invalid solver settings: {exc}") from exc
    return settings, t_end


def _as_float(value: Any, label: str) -> float:
    if isinstance(value, bool):
        raise NetworkFormatError(f"{label} must be a number")
    try:
        return float(value)
    except (TypeError, ValueError) as exc:
        raise NetworkFormatError(f"{label} must be a number, got {value!r}") from exc


def _as_int(value: Any, label: str) -> int:
    # 7.0 is accepted, 7.9 and "7" are not
    if isinstance(value, bool) or not isinstance(value, (int, float)) or not float(value).is_integer():
        raise NetworkFormatError(f"{label} must be an integer, got {value!r}")
    return int(value)
