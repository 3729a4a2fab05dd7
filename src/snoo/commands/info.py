"""Look up things by fullname"""

from datetime import datetime
from typing import Optional

import click
from rich.markup import escape
from rich.table import Table

from ..services.things import CommentsLinksSubreddits
from ..utils.output import console, handle_output, resolve_pretty
from . import get_reddit, run_request


def format_number(n: Optional[int]) -> str:
    """Format a number for display (1.2K, 3.4M, etc.)."""
    if n is None:
        return "0"
    if n >= 1_000_000:
        return f"{n / 1_000_000:.1f}M"
    if n >= 1_000:
        return f"{n / 1_000:.1f}K"
    return f"{n:,}"


def format_date(dt: Optional[datetime]) -> str:
    if dt is None:
        return "unknown"
    return dt.strftime("%Y-%m-%d")


def _truncate(text: Optional[str], length: int = 80) -> str:
    """Truncate text to length."""
    if not text:
        return ""
    value = text.replace("\n", " ").strip()
    if len(value) <= length:
        return value
    return value[: length - 3] + "..."


def display_things(things: CommentsLinksSubreddits):
    """Display each non-empty bucket as a Rich table."""
    if things.links:
        table = Table(title="Links", show_header=True, header_style="bold")
        table.add_column("ID", style="dim")
        table.add_column("Sub", style="cyan", max_width=18)
        table.add_column("Author", style="blue", max_width=18)
        table.add_column("Score", justify="right", style="green")
        table.add_column("Cmt", justify="right", style="yellow")
        table.add_column("Title")
        for link in things.links:
            flags = []
            if link.nsfw:
                flags.append("[red]NSFW[/red]")
            if link.spoiler:
                flags.append("[magenta]spoiler[/magenta]")
            title = escape(_truncate(link.title, 70))
            table.add_row(
                link.full_id,
                f"r/{link.subreddit_name}",
                f"u/{link.author}",
                format_number(link.score),
                format_number(link.num_comments),
                " ".join(flags + [title]),
            )
        console.print(table)

    if things.comments:
        table = Table(title="Comments", show_header=True, header_style="bold")
        table.add_column("ID", style="dim")
        table.add_column("Sub", style="cyan", max_width=18)
        table.add_column("Author", style="blue", max_width=18)
        table.add_column("Score", justify="right", style="green")
        table.add_column("Body")
        for comment in things.comments:
            table.add_row(
                comment.full_id,
                f"r/{comment.subreddit_name}",
                f"u/{comment.author}",
                format_number(comment.score),
                escape(_truncate(comment.body, 70)),
            )
        console.print(table)

    if things.subreddits:
        table = Table(title="Subreddits", show_header=True, header_style="bold")
        table.add_column("ID", style="dim")
        table.add_column("Name", style="cyan")
        table.add_column("Subscribers", justify="right", style="green")
        table.add_column("Created", style="dim")
        table.add_column("Title")
        for sub in things.subreddits:
            table.add_row(
                sub.full_id,
                sub.name_prefixed or f"r/{sub.name}",
                format_number(sub.subscribers),
                format_date(sub.created),
                escape(_truncate(sub.title, 60)),
            )
        console.print(table)


@click.command(name="info")
@click.argument("ids", nargs=-1, required=True)
@click.option("-o", "--output", help="Save output to file")
@click.option("--json", "json_output", is_flag=True, help="Output as JSON")
@click.option("--pretty/--no-pretty", default=None, help="Pretty print output")
@click.pass_context
def info(
    ctx: click.Context,
    ids: tuple[str, ...],
    output: Optional[str],
    json_output: bool,
    pretty: Optional[bool],
):
    """Look up links, comments and subreddits by fullname.

    \b
    Examples:
        snoo info t3_abc123
        snoo info t3_abc123 t1_def456 t5_2qh1i --json
    """
    pretty = resolve_pretty(pretty)
    reddit = get_reddit(ctx)

    things = run_request(
        f"Fetching {len(ids)} thing(s)...", reddit.listings.get, *ids
    )

    if json_output or output:
        handle_output(things.to_dict(), output_file=output, pretty=pretty)
        return

    total = len(things.links) + len(things.comments) + len(things.subreddits)
    if not total:
        console.print("[yellow]Nothing found[/yellow]")
        return

    display_things(things)
