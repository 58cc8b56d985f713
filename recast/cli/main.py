"""Main CLI application using Cyclopts."""

import cyclopts

from recast.cli.commands import preview, transforms
from recast.config import Config, configure_logging

app = cyclopts.App(
    name="recast",
    help="recast - transform index records before they are committed",
)

app.command(preview.app, name="preview")
app.command(transforms.app, name="transforms")


def main() -> None:
    configure_logging(Config().logging)
    app()
