from typing import Annotated

import typer

from ref_navigator.cli.lookup import lookup
from ref_navigator.cli.scan import scan
from ref_navigator.cli.serve import serve_app
from ref_navigator.cli.watch import watch
from ref_navigator.logging_config import setup_logging
from ref_navigator.settings import load_settings

app = typer.Typer(
    name="ref-navigator",
    help="Ref Navigator CLI: resolve and validate $ref pointers in JSON schemas.",
    no_args_is_help=True,
    context_settings={"help_option_names": ["-h", "--help"]},
)


@app.callback()
def _configure(
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Log debug output to stderr.")] = False,
) -> None:
    setup_logging(load_settings().log_level, verbose=verbose)


app.command("scan")(scan)
app.command("lookup")(lookup)
app.command("watch")(watch)
app.add_typer(serve_app, name="serve")


def main() -> None:
    app()
