# src/projcrs/cli/crs_tool.py
from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import typer
from pyproj.exceptions import CRSError
from rich import print

from projcrs.config.loader import load_crs_config
from projcrs.crs import ProjCRS
from projcrs.errors import DefinitionNotFound

app = typer.Typer(add_completion=False, help="Inspect a projected CRS defined in a YAML file.")

ConfigOpt = typer.Option(..., "--config", "-c", exists=True, dir_okay=False, help="YAML with a 'crs' section")


@app.callback()
def main(verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging")) -> None:
    logging.basicConfig(level=logging.DEBUG if verbose else logging.WARNING, format="%(levelname)s %(name)s: %(message)s")


def _load(config: Path) -> ProjCRS:
    try:
        return load_crs_config(config)
    except (DefinitionNotFound, CRSError, ValueError) as e:
        print(f"[red]error:[/red] {e}")
        raise typer.Exit(code=1)


@app.command()
def project(
    lat: float = typer.Argument(...),
    lng: float = typer.Argument(...),
    config: Path = ConfigOpt,
    zoom: Optional[float] = typer.Option(None, help="Also print the render point at this zoom"),
) -> None:
    crs = _load(config)
    p = crs.project((lat, lng))
    print(f"[bold]{crs.code}[/bold] x={p.x!r} y={p.y!r}")
    if zoom is not None:
        r = crs.lat_lng_to_point((lat, lng), zoom)
        print(f"render@{zoom:g} x={r.x!r} y={r.y!r}")


@app.command()
def unproject(
    x: float = typer.Argument(...),
    y: float = typer.Argument(...),
    config: Path = ConfigOpt,
) -> None:
    crs = _load(config)
    ll = crs.unproject((x, y))
    print(f"[bold]{crs.code}[/bold] lat={ll.lat!r} lng={ll.lng!r}")


@app.command()
def scale(zoom: float = typer.Argument(...), config: Path = ConfigOpt) -> None:
    crs = _load(config)
    print(repr(crs.scale(zoom)))


@app.command()
def zoom(scale: float = typer.Argument(...), config: Path = ConfigOpt) -> None:
    crs = _load(config)
    print(repr(crs.zoom(scale)))


@app.command()
def distance(
    lat1: float = typer.Argument(...),
    lng1: float = typer.Argument(...),
    lat2: float = typer.Argument(...),
    lng2: float = typer.Argument(...),
    config: Path = ConfigOpt,
) -> None:
    crs = _load(config)
    print(f"{crs.distance((lat1, lng1), (lat2, lng2)):.3f} m")


if __name__ == "__main__":
    app()
