# jewelry_design/cli/app.py

import typer
from jewelry_design.cli.commands.extract import extract
from jewelry_design.cli.commands.describe import describe
from jewelry_design.cli.commands.price import price
from jewelry_design.cli.commands.examples import examples

app = typer.Typer(help="Jewelry design CLI - text to selection, selection to prose and price")

app.command()(extract)
app.command()(describe)
app.command()(price)
app.command()(examples)

def main():
    app()

if __name__ == "__main__":
    main()
