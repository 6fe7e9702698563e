"""Command-line entrypoints for massaction."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Annotated, Any, Dict

import typer

from massaction.errors import IntegrationError, NetworkFormatError
from massaction.integrators import SolverSettings, integrate
from massaction.loader import Network, load_network

app = typer.Typer(add_completion=False)

LOG_FORMAT = "[%(levelname)s][%(name)s] %(message)s"

NetworkFile = Annotated[
    Path, typer.Argument(help="Path to JSON reaction network file.", exists=True, dir_okay=False)
]


@app.callback()
def main(
    verbose: Annotated[
        bool, typer.Option("--verbose", "-v", help="Log progress to stderr.")
    ] = False,
) -> None:
    """Mass-action reaction network tools."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format=LOG_FORMAT,
        force=True,
    )


def _load(network_file: Path) -> Network:
    try:
        return load_network(network_file)
    except NetworkFormatError as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=1) from exc


def _echo_json(payload: Dict[str, Any]) -> None:
    typer.echo(json.dumps(payload, indent=2))


@app.command()
def species(network_file: NetworkFile) -> None:
    """Print the canonical species order."""
    network = _load(network_file)
    _echo_json({"species": network.system.species_names})


@app.command()
def rates(network_file: NetworkFile) -> None:
    """Print rates of change at the initial concentrations."""
    network = _load(network_file)
    system = network.system
    _echo_json(
        {
            "rates": {
                name: float(value)
                for name, value in zip(system.species_names, system.get_rates_of_change())
            }
        }
    )


@app.command()
def run(
    network_file: NetworkFile,
    t_end: Annotated[
        float | None, typer.Option(help="End time; overrides the file's solver.t_end.")
    ] = None,
    points: Annotated[
        int | None, typer.Option(help="Number of output points.")
    ] = None,
    method: Annotated[
        str | None, typer.Option(help="solve_ivp method, e.g. LSODA, BDF, RK45.")
    ] = None,
) -> None:
    """Integrate a reaction network and print the trajectory."""
    network = _load(network_file)
    file_settings = network.settings
    settings = SolverSettings(
        method=method or file_settings.method,
        points=points if points is not None else file_settings.points,
        rtol=file_settings.rtol,
        atol=file_settings.atol,
    )

    try:
        trajectory = integrate(
            network.system,
            t_end if t_end is not None else network.t_end,
            settings,
        )
    except (IntegrationError, ValueError) as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=1) from exc

    _echo_json(
        {
            "time": trajectory.time.tolist(),
            "species": {
                name: trajectory.concentrations[i].tolist()
                for i, name in enumerate(trajectory.species_names)
            },
            "final": trajectory.final(),
        }
    )
