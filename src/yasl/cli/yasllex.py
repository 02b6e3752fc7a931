"""
yasl-lex - Token Dump Command-Line Interface
============================================

Runs the scanner over a source file and prints one token per line,
with diagnostics on stderr. Useful for checking what the parser will
see.

Usage Examples
--------------
Dump tokens:
    $ yasl-lex demo.yasl
    1:1     PROGRAM
    1:9     IDENTIFIER  demo
    ...

Debug logging:
    $ yasl-lex -v demo.yasl

Exit status is 1 when any diagnostic was reported.
"""

import logging
import sys
from pathlib import Path

import click

from yasl import __version__
from yasl.scanner import (
    DiagnosticCollector,
    Scanner,
    ScannerOptions,
    StreamDiagnosticSink,
    TeeDiagnosticSink,
    Token,
)
from yasl.cli.errors import ExitCode, handle_cli_exception

logger = logging.getLogger(__name__)


def setup_logging(verbose: bool) -> None:
    """Configure logging based on verbosity."""
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(levelname)s: %(message)s" if verbose else "%(message)s",
    )


def format_token(token: Token) -> str:
    """Render a token as 'line:column  KIND  [text]'."""
    position = f"{token.line}:{token.column}"
    if token.text is None:
        return f"{position:<8}{token.kind.name}"
    return f"{position:<8}{token.kind.name:<12}{token.text}"


# =============================================================================
# CLI Definition
# =============================================================================

@click.command()
@click.argument(
    "input_file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
)
@click.option(
    "--summary/--no-summary",
    default=True,
    help="Print token and diagnostic counts to stderr (default: on)",
)
@click.option(
    "-v", "--verbose",
    is_flag=True,
    help="Verbose output",
)
@click.version_option(version=__version__, prog_name="yasl-lex")
def main(input_file: Path, summary: bool, verbose: bool) -> None:
    """
    Print the token stream of a YASL source file.

    INPUT_FILE is the YASL source file to scan.

    \b
    Examples:
        yasl-lex demo.yasl               # One token per line
        yasl-lex --no-summary demo.yasl  # Tokens only
    """
    setup_logging(verbose)
    logger.debug(f"Scanning {input_file}")

    options = ScannerOptions(filename=str(input_file))
    collector = DiagnosticCollector(max_errors=options.max_errors)
    sink = TeeDiagnosticSink(collector, StreamDiagnosticSink())

    try:
        count = 0
        with Scanner.from_file(input_file, options, sink) as scanner:
            for token in scanner.tokenize():
                click.echo(format_token(token))
                count += 1
                if collector.should_stop():
                    click.echo(
                        f"too many diagnostics ({collector.max_errors}), stopping",
                        err=True,
                    )
                    break

        if summary:
            click.echo(
                f"{count} tokens, {collector.error_count()} diagnostics",
                err=True,
            )
    except Exception as e:
        handle_cli_exception(e, verbose)

    if collector.has_errors():
        sys.exit(ExitCode.BUILD_ERROR)


if __name__ == "__main__":
    main()
