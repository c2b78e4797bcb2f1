"""CLI interface for sprite-invaders."""

import logging
import sys
from pathlib import Path

import typer
from dotenv import load_dotenv
from rich.console import Console
from rich.logging import RichHandler

from .animation_pipeline import encode_animation
from .config import ConfigError, GameConfig
from .game.atlas import SpriteAtlas
from .game.strategies import (
    DEFAULT_STRATEGY_NAME,
    create_strategy,
    supported_strategy_names,
)
from .game.strategies.base_strategy import BaseStrategy
from .output import resolve_output_provider, supported_output_formats

# Load environment variables from .env file
load_dotenv()

console = Console()
err_console = Console(stderr=True)
SUPPORTED_OUTPUT_FORMATS_TEXT = ", ".join(supported_output_formats()).upper()
DEFAULT_OUTPUT = "sprite-invaders.gif"


class CLIError(Exception):
    """Base exception for CLI errors with user-friendly messages."""
    pass


def main(
    out: str = typer.Option(
        DEFAULT_OUTPUT,
        "--output",
        "-out",
        "-o",
        help=f"Animated recording to write ({SUPPORTED_OUTPUT_FORMATS_TEXT})",
    ),
    strategy: str = typer.Option(
        DEFAULT_STRATEGY_NAME,
        "--strategy",
        "-s",
        help=f"Autopilot playing the session ({', '.join(supported_strategy_names())})",
    ),
    max_frames: int | None = typer.Option(
        None,
        "--max-frame",
        help="Maximum number of frames to generate",
    ),
    seed: int | None = typer.Option(
        None,
        "--seed",
        help="Seed for bomb drops and the autopilot (derived from the settings when omitted)",
    ),
    width: int | None = typer.Option(None, "--width", help="Frame width in pixels"),
    height: int | None = typer.Option(None, "--height", help="Frame height in pixels"),
    sprites: str | None = typer.Option(
        None,
        "--sprites",
        help="Sprite sheet image (flat-colour placeholders when omitted)",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logging"),
) -> None:
    """
    Record a session played by an autopilot as an animated image.

    Settings not given on the command line are read from INVADERS_* environment
    variables (a .env file is loaded first).

    Examples:
      # Record a full game with the default autopilot
      sprite-invaders -o game.gif

      # Short, reproducible WebP clip
      sprite-invaders -o clip.webp --max-frame 200 --seed 7
    """
    _configure_logging(verbose)
    try:
        config = _load_config(width, height)
        atlas = _load_atlas(sprites) if sprites else None
        _generate_output(config, out, _resolve_strategy(strategy), max_frames, seed, atlas)

    except CLIError as e:
        err_console.print(f"[bold red]Error:[/bold red] {e}")
        sys.exit(1)

    except Exception as e:
        err_console.print(f"[bold red]Unexpected error:[/bold red] {e}")
        sys.exit(1)


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )


def _load_config(width: int | None, height: int | None) -> GameConfig:
    try:
        return GameConfig.from_env(width=width, height=height)
    except ConfigError as e:
        raise CLIError(f"Invalid configuration: {e}")


def _load_atlas(file_path: str) -> SpriteAtlas:
    console.print(f"[bold blue]Loading sprites from {file_path}...[/bold blue]")
    try:
        return SpriteAtlas.from_file(file_path)
    except FileNotFoundError:
        raise CLIError(f"File '{file_path}' not found")
    except OSError as e:
        raise CLIError(f"Cannot decode '{file_path}': {e}")


def _generate_output(
    config: GameConfig,
    output_path: str,
    strategy: BaseStrategy,
    max_frames: int | None,
    seed: int | None,
    atlas: SpriteAtlas | None,
) -> None:
    """Record the session and save it in the format given by output_path."""
    ext = Path(output_path).suffix[1:].upper()
    console.print(f"\n[bold blue]Generating {ext} animation...[/bold blue]")

    try:
        provider = resolve_output_provider(output_path)
        encoded, animator = encode_animation(
            config,
            strategy,
            output_path,
            max_frames=max_frames,
            seed=seed,
            atlas=atlas,
            provider=provider,
        )
    except ValueError as e:
        raise CLIError(str(e))
    except Exception as e:
        raise CLIError(f"Failed to generate output: {e}")

    console.print(f"[bold blue]Saving to {output_path}...[/bold blue]")
    try:
        provider.write(encoded)
    except IOError as e:
        raise CLIError(f"Failed to save file '{output_path}': {e}")
    console.print(f"[green]✓[/green] {ext} saved to {output_path}")

    if animator.summary is not None:
        console.print(
            f"Final score: [bold]{animator.summary.score}[/bold] "
            f"after {animator.summary.ticks} ticks"
        )


def _resolve_strategy(strategy_name: str) -> BaseStrategy:
    try:
        return create_strategy(strategy_name)
    except ValueError as exc:
        raise CLIError(str(exc))


app = typer.Typer()
app.command()(main)

if __name__ == "__main__":
    app()
