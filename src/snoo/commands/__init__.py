"""Click commands for the snoo CLI"""

from typing import Any, Callable

import click
import requests
from rich.progress import Progress, SpinnerColumn, TextColumn

from ..errors import RedditError
from ..reddit import Reddit
from ..utils.output import console


def get_reddit(ctx: click.Context) -> Reddit:
    """Return the Reddit instance for this invocation, building it on first use."""
    obj = ctx.ensure_object(dict)
    if "reddit" not in obj:
        obj["reddit"] = Reddit.from_config(obj.get("config"))
        ctx.call_on_close(obj["reddit"].close)
    return obj["reddit"]


def run_request(progress_label: str, call: Callable[..., Any], *args, **kwargs) -> Any:
    """Run one API call behind a spinner, turning failures into click.Abort."""
    with Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        console=console,
        transient=True,
    ) as progress:
        progress.add_task(progress_label, total=None)
        try:
            return call(*args, **kwargs)
        except (RedditError, requests.RequestException) as exc:
            progress.stop()
            console.print(f"[red]Error: {exc}[/red]")
            raise click.Abort()
