"""List the transforms configured per index."""

import cyclopts

from recast.cli.console import Console
from recast.config import Config

app = cyclopts.App(name="transforms", help="List configured transforms")


@app.default
def transforms() -> None:
    """List configured transforms in invocation order."""
    config = Config()
    console = Console()

    if not config.transforms:
        console.print("[dim]No transforms configured[/dim]")
        return

    ordered = sorted(enumerate(config.transforms), key=lambda p: (p[1].index, p[1].priority, p[0]))
    rows = [
        {
            "index": t.index,
            "kind": t.kind,
            "categories": ", ".join(t.categories) or "*",
            "priority": t.priority,
            "on_error": "skip" if t.fail_open else "fail",
        }
        for _, t in ordered
    ]
    console.table(
        rows,
        [
            ("index", "Index"),
            ("kind", "Transform"),
            ("categories", "Categories"),
            ("priority", "Priority"),
            ("on_error", "On error"),
        ],
    )
