# jewelry_design/cli/commands/examples.py

import typer

from jewelry_design.extraction.rules import EXAMPLE_PROMPTS


def examples():
    """
    Lists example descriptions the extractor understands.
    """
    for prompt in EXAMPLE_PROMPTS:
        typer.echo(prompt)
