"""
external-game-data — CLI entry point.

Invoked with no command, performs exactly two fetches and prints their debug
views: the full Hypixel achievement catalog, then the configured default
player's achievements. Fetch failures appear only in the rendered text; the
exit code stays 0.

All commands follow this pattern:
  1. Load ``AppConfig`` via ``load_config()`` (root ``--config`` option).
  2. Configure logging.
  3. Fetch through ``HypixelClient`` (never raises).
  4. Echo ``holder.render()`` to stdout.

Install and run::

    pip install -e .
    external-game-data
    external-game-data user f84c6a790a4e45e0879bcd49ebd4c4e2
    external-game-data games
    external-game-data validate-config --full
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Optional

import typer

app = typer.Typer(
    name="external-game-data",
    help="Fetch external achievement data into the intermediate model and print it.",
    add_completion=False,
)


# ── Helpers ───────────────────────────────────────────────────────────────────

def _load_config_or_exit(config_path: Optional[str] = None):
    """Load AppConfig, printing a friendly error and exiting on failure."""
    from external_game_data.config import load_config

    try:
        cfg_path = Path(config_path) if config_path else None
        return load_config(cfg_path)
    except FileNotFoundError as exc:
        typer.echo(f"[ERROR] {exc}", err=True)
        raise typer.Exit(code=1)
    except Exception as exc:
        typer.echo(f"[ERROR] Config validation failed: {exc}", err=True)
        raise typer.Exit(code=1)


def _configure_logging(config):
    """Set up logging from config."""
    from external_game_data.utils.logging import configure_logging
    configure_logging(config.logging)


def _client(config):
    from external_game_data.ingestion.hypixel_client import HypixelClient
    return HypixelClient.from_config(config.hypixel)


# ── Root ──────────────────────────────────────────────────────────────────────

@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    config_path: Optional[str] = typer.Option(
        None,
        "--config",
        help="Path to TOML config file (default: config/default.toml).",
    ),
) -> None:
    """Without a command: print the achievement catalog and the default player."""
    config = _load_config_or_exit(config_path)
    _configure_logging(config)
    ctx.obj = config

    if ctx.invoked_subcommand is None:
        client = _client(config)
        typer.echo(client.fetch_game().render())
        typer.echo(client.fetch_user(config.hypixel.default_player_uuid).render())


# ── Commands ──────────────────────────────────────────────────────────────────

@app.command("game")
def game(ctx: typer.Context) -> None:
    """Print the full one-time achievement catalog as one game."""
    typer.echo(_client(ctx.obj).fetch_game().render())


@app.command("games")
def games(
    ctx: typer.Context,
    show_games: bool = typer.Option(
        False,
        "--show-games",
        help="Also print every minigame's full achievement list.",
    ),
) -> None:
    """Print the achievement catalog grouped into one game per minigame."""
    game_list = _client(ctx.obj).fetch_game_list()
    typer.echo(game_list.render())
    if show_games and not game_list.has_error:
        for g in game_list.games:
            typer.echo(g.render())


@app.command("user")
def user(
    ctx: typer.Context,
    uuid: Optional[str] = typer.Argument(
        None,
        help="Player uuid (default: hypixel.default_player_uuid from config).",
    ),
) -> None:
    """Print one player's earned achievements."""
    config = ctx.obj
    target = uuid or config.hypixel.default_player_uuid
    typer.echo(_client(config).fetch_user(target).render())


@app.command("profile")
def profile(
    ctx: typer.Context,
    uuid: str = typer.Argument(..., help="Player uuid."),
) -> None:
    """Print a player's identity (uuid, display name)."""
    typer.echo(_client(ctx.obj).fetch_profile(uuid).render())


@app.command("validate-config")
def validate_config(
    ctx: typer.Context,
    show_full: bool = typer.Option(
        False,
        "--full",
        help="Print full config including all fields.",
    ),
) -> None:
    """Validate the configuration file and print parsed values.

    Exits with code 1 if the config fails validation.
    """
    config = ctx.obj

    typer.echo("Configuration validated successfully.")
    typer.echo("")
    typer.echo(f"  Hypixel base URL: {config.hypixel.base_url}")
    typer.echo(f"  API key set:      {bool(config.hypixel.api_key)}")
    typer.echo(f"  Default player:   {config.hypixel.default_player_uuid}")
    typer.echo(f"  Log level:        {config.logging.level}")
    typer.echo(f"  Debug mode:       {config.debug}")

    if show_full:
        dump = config.model_dump()
        if dump["hypixel"].get("api_key"):
            dump["hypixel"]["api_key"] = "***"
        typer.echo("")
        typer.echo("Full config (JSON):")
        typer.echo(json.dumps(dump, indent=2, default=str))

    typer.echo("")
    typer.echo("[OK] Config valid.")


if __name__ == "__main__":
    app()
