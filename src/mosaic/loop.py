import os

os.environ["PYGAME_HIDE_SUPPORT_PROMPT"] = "1"

import typer

from mosaic.cli.commands.run import run_command

app = typer.Typer()


@app.callback()
def callback() -> None:
    """Generative tile field animation."""


app.command(name="run")(run_command)


def main() -> None:
    app()


if __name__ == "__main__":
    main()
