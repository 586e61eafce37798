"""seedroom CLI.

Usage:
    python -m seedroom <command> <seed> [options]

Every command derives its output from the seed alone and prints JSON
(or Mermaid for ``graph --mermaid``) to stdout.
"""
from __future__ import annotations

import json
import logging
import sys

import typer

from seedroom.generators import (
    DEFAULT_ROOM_HEIGHT,
    DEFAULT_ROOM_WIDTH,
    generate_apartment,
    generate_single_room_layout,
    seeded_rng,
)
from seedroom.queries import apartment_to_mermaid, build_apartment_graph
from seedroom.validators import validate_apartment

app = typer.Typer(
    name="seedroom",
    help="seedroom — seed-based room and apartment layouts.",
    no_args_is_help=True,
)

MIN_ROOM_WIDTH = 120
MIN_ROOM_HEIGHT = 100


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _configure_logging(verbose: bool) -> None:
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            stream=sys.stderr,
            format="%(levelname)s %(name)s: %(message)s",
        )


def _output(data: dict) -> None:
    """Print JSON output to stdout."""
    typer.echo(json.dumps(data, indent=2, ensure_ascii=False))


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------

@app.command()
def room(
    seed: int = typer.Argument(..., help="Layout seed"),
    width: int = typer.Option(DEFAULT_ROOM_WIDTH, "--width", min=MIN_ROOM_WIDTH, help="Room width"),
    height: int = typer.Option(DEFAULT_ROOM_HEIGHT, "--height", min=MIN_ROOM_HEIGHT, help="Room height"),
    top_down: bool = typer.Option(False, "--top-down", help="No back wall strip"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log fallbacks to stderr"),
):
    """Generate a single-room layout."""
    _configure_logging(verbose)
    layout = generate_single_room_layout(seeded_rng(seed), width, height, top_down)
    _output({"ok": True, "seed": seed, "layout": layout.model_dump(mode="json")})


@app.command()
def apartment(
    seed: int = typer.Argument(..., help="Layout seed"),
    rooms: int = typer.Option(4, "--rooms", "-r", min=1, help="Number of rooms"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log fallbacks to stderr"),
):
    """Generate a multi-room apartment."""
    _configure_logging(verbose)
    apt = generate_apartment(seeded_rng(seed), rooms)
    _output({"ok": True, "seed": seed, "apartment": apt.model_dump(mode="json")})


@app.command()
def graph(
    seed: int = typer.Argument(..., help="Layout seed"),
    rooms: int = typer.Option(4, "--rooms", "-r", min=1, help="Number of rooms"),
    mermaid: bool = typer.Option(False, "--mermaid", "-m", help="Print a Mermaid flowchart"),
):
    """Show which rooms of an apartment connect."""
    apt = generate_apartment(seeded_rng(seed), rooms)
    g = build_apartment_graph(apt)

    if mermaid:
        typer.echo(apartment_to_mermaid(g))
        return

    home = apt.rooms[0].id
    _output({
        "ok": True,
        "seed": seed,
        "rooms": [
            {
                "id": node.room_id,
                "type": node.room_type,
                "neighbors": sorted(n for n, _ in g.neighbors(node.room_id)),
            }
            for node in g.nodes.values()
        ],
        "connected": g.is_connected(),
        "unreachable_from_home": g.isolated_rooms(home),
    })


@app.command()
def validate(
    seed: int = typer.Argument(..., help="Layout seed"),
    rooms: int = typer.Option(4, "--rooms", "-r", min=1, help="Number of rooms"),
):
    """Generate an apartment and check it against the layout invariants."""
    apt = generate_apartment(seeded_rng(seed), rooms)
    issues = validate_apartment(apt)
    errors = sum(1 for e in issues if e.severity == "error")

    _output({
        "ok": errors == 0,
        "seed": seed,
        "errors": errors,
        "warnings": sum(1 for e in issues if e.severity == "warning"),
        "details": [
            {"severity": e.severity, "element": e.element_id, "message": e.message}
            for e in issues
        ],
    })
    if errors:
        raise typer.Exit(1)


@app.command()
def version() -> None:
    """Show version."""
    from seedroom import __version__

    typer.echo(f"seedroom v{__version__}")


if __name__ == "__main__":
    app()
