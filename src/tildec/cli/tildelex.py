"""
tildelex - Lexer Command-Line Interface
=======================================

Reads a source file, tokenizes it, and optionally prints the token table.

Usage Examples
--------------
Check that a file lexes cleanly:
    $ tildelex factorial.tl

Print every token:
    $ tildelex -v factorial.tl
    Function:       fun
    Identifier:     factorial
    ...

Trace the scanner's character window:
    $ tildelex --trace factorial.tl
"""

import logging
import sys
from pathlib import Path
from typing import Optional

import click

from tildec import __version__
from tildec.cli.errors import ExitCode, handle_cli_exception
from tildec.lexer import Lexer, LexerOptions, Token, pad_source

logger = logging.getLogger(__name__)

DEFAULT_LABEL_WIDTH = 16


def format_token(token: Token, width: int = DEFAULT_LABEL_WIDTH) -> str:
    """
    Format a token as '<Kind>:<padding><lexeme>'.

    The 'Kind:' label is left-justified to `width` columns, with at least
    one space before the lexeme.
    """
    label = f"{token.kind.label}:"
    width = max(width, len(label) + 1)
    return f"{label:<{width}}{token.lexeme}"


def setup_logging(trace: bool) -> None:
    """Configure logging based on the trace flag."""
    logging.basicConfig(
        level=logging.DEBUG if trace else logging.WARNING,
        format="%(levelname)s: %(message)s",
    )


# =============================================================================
# CLI Definition
# =============================================================================

@click.command()
@click.argument(
    "input_file",
    required=False,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
)
@click.option(
    "-v", "--verbose",
    is_flag=True,
    help="Print every token as '<Kind>: <lexeme>'",
)
@click.option(
    "--trace",
    is_flag=True,
    help="Log the scanner's character window at every position",
)
@click.option(
    "-w", "--width",
    type=click.IntRange(min=1),
    default=DEFAULT_LABEL_WIDTH,
    show_default=True,
    help="Column width of the kind label in verbose output",
)
@click.version_option(version=__version__, prog_name="tildelex")
def main(
    input_file: Optional[Path],
    verbose: bool,
    trace: bool,
    width: int,
) -> None:
    """
    Tokenize a tildec source file.

    INPUT_FILE is the source file to scan. The whole file is read into
    memory and padded with trailing whitespace before scanning.

    \b
    Examples:
        tildelex hello.tl              # Check that the file lexes
        tildelex -v hello.tl           # Print the token table
        tildelex -v -w 20 hello.tl     # Wider kind column
    """
    # Historical behaviour: a missing file is reported but is not a failure
    if input_file is None:
        click.echo("Error: Please include a file", err=True)
        sys.exit(ExitCode.SUCCESS)

    setup_logging(trace)

    options = LexerOptions(filename=str(input_file), trace=trace)

    try:
        source = input_file.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        handle_cli_exception(e, verbose, error_type="Read")

    try:
        lexer = Lexer(pad_source(source, options.padding), options)
        tokens = lexer.tokenize()
    except Exception as e:
        handle_cli_exception(e, verbose)

    logger.info(f"Tokenized {input_file}: {len(tokens)} tokens")

    if verbose:
        for token in tokens:
            click.echo(format_token(token, width))


if __name__ == "__main__":
    main()
