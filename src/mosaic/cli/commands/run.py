from typing import Annotated, Optional

import typer

from mosaic.runtime.container import build_runtime_container
from mosaic.runtime.game_loop import GameLoop
from mosaic.utilities.logging import get_logger

logger = get_logger(__name__)


def run_command(
    width: Annotated[Optional[int], typer.Option("--width", min=1)] = None,
    height: Annotated[Optional[int], typer.Option("--height", min=1)] = None,
    fullscreen: Annotated[
        Optional[bool],
        typer.Option(
            "--fullscreen/--windowed",
            help="Open a fullscreen window instead of a sized one",
        ),
    ] = None,
    max_fps: Annotated[
        Optional[int],
        typer.Option("--max-fps", min=0, help="Frame cap, 0 for uncapped"),
    ] = None,
) -> None:
    window_size = None
    if width is not None or height is not None:
        if width is None or height is None:
            logger.error("--width and --height must be given together")
            raise typer.Exit(code=1)
        window_size = (width, height)

    resolver = build_runtime_container(
        window_size=window_size,
        fullscreen=fullscreen,
        max_fps=max_fps,
    )
    loop = resolver.resolve(GameLoop)
    loop.start()
