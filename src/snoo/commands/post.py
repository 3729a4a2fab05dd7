"""Submit and manage posts"""

from typing import Optional

import click

from ..services.posts import SubmitSelfOptions, SubmitURLOptions, Submitted
from ..utils.output import console, handle_output, resolve_pretty
from . import get_reddit, run_request


def _submit_options(func):
    """Options shared by submit-self and submit-url."""
    decorators = [
        click.option("--flair-id", default="", help="Flair template ID"),
        click.option("--flair-text", default="", help="Flair text"),
        click.option(
            "--send-replies/--no-send-replies",
            default=None,
            help="Send inbox replies (default: Reddit's choice)",
        ),
        click.option("--nsfw", is_flag=True, help="Mark the post NSFW"),
        click.option("--spoiler", is_flag=True, help="Mark the post as a spoiler"),
        click.option("--json", "json_output", is_flag=True, help="Output as JSON"),
        click.option("--pretty/--no-pretty", default=None, help="Pretty print output"),
    ]
    for decorator in reversed(decorators):
        func = decorator(func)
    return func


def _normalize_subreddit(name: str) -> str:
    """Normalize subreddit input to bare name."""
    value = name.strip().strip("/")
    if value.lower().startswith("r/"):
        value = value[2:]
    if not value:
        raise click.BadParameter("subreddit cannot be empty", param_hint="SUBREDDIT")
    return value


def _report_submitted(submitted: Optional[Submitted], json_output: bool, pretty: Optional[bool]):
    if submitted is None:
        console.print("[yellow]Reddit accepted the post but returned no details[/yellow]")
        return
    if json_output:
        handle_output(submitted.to_dict(), pretty=resolve_pretty(pretty))
        return
    console.print(f"[green]✓ Submitted {submitted.full_id}[/green]")
    if submitted.url:
        console.print(f"[blue]{submitted.url}[/blue]")


@click.command(name="submit-self")
@click.argument("subreddit")
@click.argument("title")
@click.option("--text", "-t", default="", help="Post body (markdown)")
@_submit_options
@click.pass_context
def submit_self(
    ctx: click.Context,
    subreddit: str,
    title: str,
    text: str,
    flair_id: str,
    flair_text: str,
    send_replies: Optional[bool],
    nsfw: bool,
    spoiler: bool,
    json_output: bool,
    pretty: Optional[bool],
):
    """Submit a self text post.

    \b
    Examples:
        snoo submit-self test "Hello" --text "First post"
        snoo submit-self r/test "Quiet one" --no-send-replies
    """
    opts = SubmitSelfOptions(
        subreddit=_normalize_subreddit(subreddit),
        title=title,
        text=text,
        flair_id=flair_id,
        flair_text=flair_text,
        send_replies=send_replies,
        nsfw=nsfw,
        spoiler=spoiler,
    )
    reddit = get_reddit(ctx)
    submitted = run_request(f"Submitting to r/{opts.subreddit}...", reddit.posts.submit_self, opts)
    _report_submitted(submitted, json_output, pretty)


@click.command(name="submit-url")
@click.argument("subreddit")
@click.argument("title")
@click.argument("url")
@click.option("--resubmit", is_flag=True, help="Allow a URL that was already submitted")
@_submit_options
@click.pass_context
def submit_url(
    ctx: click.Context,
    subreddit: str,
    title: str,
    url: str,
    resubmit: bool,
    flair_id: str,
    flair_text: str,
    send_replies: Optional[bool],
    nsfw: bool,
    spoiler: bool,
    json_output: bool,
    pretty: Optional[bool],
):
    """Submit a link post.

    \b
    Examples:
        snoo submit-url test "A link" https://example.com
        snoo submit-url test "Again" https://example.com --resubmit
    """
    opts = SubmitURLOptions(
        subreddit=_normalize_subreddit(subreddit),
        title=title,
        url=url,
        flair_id=flair_id,
        flair_text=flair_text,
        send_replies=send_replies,
        resubmit=resubmit,
        nsfw=nsfw,
        spoiler=spoiler,
    )
    reddit = get_reddit(ctx)
    submitted = run_request(f"Submitting to r/{opts.subreddit}...", reddit.posts.submit_url, opts)
    _report_submitted(submitted, json_output, pretty)


@click.command(name="replies")
@click.argument("id")
@click.option("--enable/--disable", required=True, help="Turn inbox replies on or off")
@click.pass_context
def replies(ctx: click.Context, id: str, enable: bool):
    """Enable or disable inbox replies for a post or comment."""
    posts = get_reddit(ctx).posts
    if enable:
        run_request(f"Enabling replies for {id}...", posts.enable_replies, id)
        console.print(f"[green]✓ Inbox replies enabled for {id}[/green]")
    else:
        run_request(f"Disabling replies for {id}...", posts.disable_replies, id)
        console.print(f"[green]✓ Inbox replies disabled for {id}[/green]")


@click.command(name="nsfw")
@click.argument("id")
@click.option("--undo", is_flag=True, help="Remove the NSFW mark instead")
@click.pass_context
def nsfw(ctx: click.Context, id: str, undo: bool):
    """Mark (or unmark) a post as NSFW."""
    posts = get_reddit(ctx).posts
    if undo:
        run_request(f"Unmarking {id}...", posts.unmark_nsfw, id)
        console.print(f"[green]✓ {id} is no longer NSFW[/green]")
    else:
        run_request(f"Marking {id}...", posts.mark_nsfw, id)
        console.print(f"[green]✓ {id} marked NSFW[/green]")


@click.command(name="spoiler")
@click.argument("id")
@click.option("--undo", is_flag=True, help="Remove the spoiler mark instead")
@click.pass_context
def spoiler(ctx: click.Context, id: str, undo: bool):
    """Mark (or unmark) a post as a spoiler."""
    posts = get_reddit(ctx).posts
    if undo:
        run_request(f"Unmarking {id}...", posts.unspoiler, id)
        console.print(f"[green]✓ {id} is no longer a spoiler[/green]")
    else:
        run_request(f"Marking {id}...", posts.spoiler, id)
        console.print(f"[green]✓ {id} marked as spoiler[/green]")


@click.command(name="hide")
@click.argument("ids", nargs=-1, required=True)
@click.pass_context
def hide(ctx: click.Context, ids: tuple[str, ...]):
    """Hide one or more links."""
    run_request(f"Hiding {len(ids)} link(s)...", get_reddit(ctx).posts.hide, *ids)
    console.print(f"[green]✓ Hidden: {', '.join(ids)}[/green]")


@click.command(name="unhide")
@click.argument("ids", nargs=-1, required=True)
@click.pass_context
def unhide(ctx: click.Context, ids: tuple[str, ...]):
    """Unhide one or more links."""
    run_request(f"Unhiding {len(ids)} link(s)...", get_reddit(ctx).posts.unhide, *ids)
    console.print(f"[green]✓ Unhidden: {', '.join(ids)}[/green]")
