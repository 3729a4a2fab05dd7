#!/usr/bin/env python3
"""
snoo - Reddit from your terminal
Look things up, submit posts and manage them
"""

import click

from .commands.info import info
from .commands.post import hide, nsfw, replies, spoiler, submit_self, submit_url, unhide
from .utils.config import load_config
from .utils.logging import setup_logging
from .utils.output import console


@click.group(invoke_without_command=True)
@click.option("--verbose", "-v", is_flag=True, help="Log requests to stderr")
@click.pass_context
@click.version_option(version='0.1.0', prog_name='snoo')
def cli(ctx, verbose):
    """
    snoo - Reddit API client

    Set REDDIT_ACCESS_TOKEN (or access_token in ~/.snoorc) before
    submitting or managing posts.

    Examples:
        snoo info t3_abc123 t1_def456
        snoo submit-self test "Hello" --text "First post"
        snoo hide t3_abc123 t3_def456
    """
    obj = ctx.ensure_object(dict)
    config = obj.setdefault("config", load_config())
    setup_logging("DEBUG" if verbose else config["log_level"])

    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())

# Register commands
cli.add_command(info)
cli.add_command(submit_self)
cli.add_command(submit_url)
cli.add_command(replies)
cli.add_command(nsfw)
cli.add_command(spoiler)
cli.add_command(hide)
cli.add_command(unhide)

@cli.command()
@click.pass_context
def config(ctx):
    """View current configuration"""
    config_data = ctx.obj["config"]
    console.print("[bold cyan]Current Configuration:[/bold cyan]")
    for key, value in config_data.items():
        if key == "access_token" and value:
            value = value[:4] + "..."
        console.print(f"  {key}: {value}")

if __name__ == '__main__':
    cli()
