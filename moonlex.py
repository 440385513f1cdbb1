import logging
import shutil
import sys
from typing import Optional

import click

from lexer.error import NumberLiteralError, format_error
from lexer.tokenizer import Tokenizer


def configure_logging(verbose: bool) -> None:
    logging.basicConfig(format="%(levelname)s %(message)s")
    logging.getLogger().setLevel(logging.DEBUG if verbose else logging.WARNING)


def print_tokens(source: str, filename: Optional[str] = None) -> None:
    try:
        tokens = Tokenizer(source).capture()
    except NumberLiteralError as e:
        e.filename = filename
        click.echo(format_error(e, source), err=True)
        sys.exit(1)

    for token in tokens:
        click.echo(repr(token))


@click.command()
@click.argument(
    "sourcefile", default="isolated.txt", type=click.Path(exists=True, dir_okay=False)
)
@click.option(
    "--print-source/--no-print-source",
    default=True,
    help="Whether or not to print the source before scanning.",
)
@click.option("--verbose", is_flag=True, help="Log every captured token.")
def scan(sourcefile: str, print_source: bool, verbose: bool) -> None:
    configure_logging(verbose)

    with open(sourcefile, "r", errors="replace") as f:
        source = f.read()

    if print_source:
        click.echo(source)
        click.echo("-" * shutil.get_terminal_size().columns + "\n")

    print_tokens(source, filename=sourcefile)


@click.command()
@click.argument("text")
@click.option("--verbose", is_flag=True, help="Log every captured token.")
def tokenize(text: str, verbose: bool) -> None:
    configure_logging(verbose)
    print_tokens(text)


@click.group()
def cli(): ...


cli.add_command(scan)
cli.add_command(tokenize)


if __name__ == "__main__":
    cli()
