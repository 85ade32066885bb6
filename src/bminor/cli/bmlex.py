"""
bmlex - B-Minor Lexer Command-Line Interface
============================================

Tokenizes a B-Minor source file and writes the token trace, one line per
token. Input defaults to stdin and output to stdout.

Usage Examples
--------------
Tokenize a file to stdout:
    $ bmlex program.bm

Write the trace to a file:
    $ bmlex program.bm program.tok

Read from a pipe:
    $ cat program.bm | bmlex

Show identifier table and counts:
    $ bmlex --summary program.bm
"""

import logging
import os
from typing import Optional, TextIO

import click

from bminor import __version__
from bminor.cli.errors import handle_cli_exception
from bminor.config import LexerConfig
from bminor.lexer.tokenizer import Tokenizer
from bminor.lexer.trace import write_trace

logger = logging.getLogger(__name__)


def setup_logging(verbose: bool) -> None:
    """Configure logging based on verbosity."""
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(levelname)s: %(message)s" if verbose else "%(message)s",
    )


def build_config(input_name: str, max_identifiers: Optional[int]) -> LexerConfig:
    """
    Build the run configuration: environment first, then command line.

    The input path names the source in diagnostics; for stdin the name
    from BMINOR_FILENAME is kept when set.
    """
    config = LexerConfig.from_env()
    if input_name != "<stdin>" or "BMINOR_FILENAME" not in os.environ:
        config.filename = input_name
    if max_identifiers is not None:
        config.max_identifiers = max_identifiers
    return config


# =============================================================================
# CLI Definition
# =============================================================================

@click.command()
@click.argument("input_file", type=click.File("r"), default="-")
@click.argument("output_file", type=click.File("w"), default="-")
@click.option(
    "--max-identifiers",
    type=click.IntRange(min=1),
    default=None,
    help="Maximum number of distinct identifiers (default: 1000, "
         "or BMINOR_MAX_IDENTIFIERS)",
)
@click.option(
    "--summary",
    is_flag=True,
    help="Print token count and identifier table to stderr",
)
@click.option(
    "-v", "--verbose",
    is_flag=True,
    help="Verbose output (debug logging of every token)",
)
@click.version_option(version=__version__, prog_name="bmlex")
def main(
    input_file: TextIO,
    output_file: TextIO,
    max_identifiers: Optional[int],
    summary: bool,
    verbose: bool,
) -> None:
    """
    Tokenize B-Minor source code.

    INPUT_FILE is the source to read (default: stdin).
    OUTPUT_FILE receives the token trace (default: stdout).

    \b
    Trace format:
        Keyword         <kind code>
        Identifier      ID: <id> ---> <name>
        Number          <value>
        String          <quote code> ---> Address of "<text>" in strings buffer
        Operand         <operator>
        Delimiter       <punctuation>

    The first lexical error stops the run; the trace written up to that
    point is kept and the error is reported on stderr.
    """
    setup_logging(verbose)
    config = build_config(input_file.name, max_identifiers)
    logger.debug(f"Tokenizing {config.filename} (max {config.max_identifiers} identifiers)")

    tokenizer = Tokenizer(input_file, config)
    try:
        write_trace(tokenizer.tokenize(), output_file)
    except Exception as e:
        output_file.flush()
        handle_cli_exception(e, verbose=verbose)

    if summary:
        click.echo(f"Tokens: {tokenizer.token_count}", err=True)
        click.echo(f"Identifiers: {len(tokenizer.identifiers)}", err=True)
        for symbol_id, spelling in tokenizer.identifiers:
            click.echo(f"  {symbol_id:4d}  {spelling}", err=True)


if __name__ == "__main__":
    main()
