"""Output handling utilities for snoo"""

import json
import sys
from pathlib import Path
from typing import Any, Optional
from rich.console import Console
from rich.syntax import Syntax

console = Console()


def resolve_pretty(pretty: Optional[bool]) -> bool:
    """Default to pretty output only when stdout is a terminal"""
    if pretty is None:
        return sys.stdout.isatty()
    return pretty


def display_json(content: Any, pretty: bool = True):
    """Print JSON to the terminal, highlighted when pretty"""
    text = json.dumps(content, indent=2 if pretty else None)
    if not pretty or not sys.stdout.isatty():
        # Plain output for pipes or non-interactive
        print(text)
        return
    console.print(Syntax(text, "json", theme="monokai"))


def save_to_file(content: Any, filepath: str):
    """Save JSON content to a file"""
    path = Path(filepath)

    # Create parent directories if they don't exist
    path.parent.mkdir(parents=True, exist_ok=True)

    with open(path, 'w') as f:
        if isinstance(content, str):
            f.write(content)
        else:
            json.dump(content, f, indent=2)

    console.print(f"[green]✓ Saved to {filepath}[/green]")


def handle_output(
    content: Any,
    output_file: Optional[str] = None,
    pretty: bool = True,
):
    """Write JSON content to a file and/or the terminal"""
    if output_file:
        save_to_file(content, output_file)

    if not output_file or sys.stdout.isatty():
        # Display in terminal if not saving to file, or if interactive
        display_json(content, pretty)
