# zopfli_tool/cli/main.py
"""Main CLI entry point for zopfli-tool"""

import logging
import sys

import click
from click.shell_completion import get_completion_class
from rich.logging import RichHandler

from ..__version__ import __version__, LONG_VERSION
from ..api.exceptions import ConfigError, ZopfliToolError, exit_code_for
from ..constants import (
    APP_NAME,
    COMPLETION_SHELLS,
    DEFAULT_FORMAT,
    DEFAULT_ITERATIONS,
    DEFAULT_LOG_LEVEL,
    ExitCode,
    LOG_FORMAT,
    PACKAGE_LOGGER,
    PLAIN_LOG_FORMAT,
    TRACE,
    CompressionFormat,
    LogLevel,
)
from ..core.compression.adapters import FORMAT_ADAPTERS
from ..models import CompressConfig
from ..services import CompressService
from .utils.output import console, print_error

COMPLETE_VAR = "_ZOPFLI_TOOL_COMPLETE"


def setup_logging(level: LogLevel = LogLevel.INFO) -> None:
    """Setup logging configuration

    Uses a rich handler when stderr is a terminal, plain text otherwise.
    Called once per process before any job runs.

    Args:
        level: Minimum level to print
    """
    logging.addLevelName(TRACE, "TRACE")

    if console.is_terminal:
        handler = RichHandler(
            console=console,
            show_time=False,
            show_path=level.logging_level <= logging.DEBUG,
            rich_tracebacks=True,
            tracebacks_suppress=[click]
        )
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
    else:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(PLAIN_LOG_FORMAT))

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    for existing in list(package_logger.handlers):
        package_logger.removeHandler(existing)
    package_logger.addHandler(handler)
    package_logger.setLevel(level.logging_level)


def print_completion(ctx: click.Context, shell: str) -> None:
    """Print the shell completion script for this command"""
    completion_class = get_completion_class(shell)
    completion = completion_class(ctx.command, {}, APP_NAME, COMPLETE_VAR)
    click.echo(completion.source())


def _check_conflicts(stdout: bool, keep: bool, remove: bool, suffix) -> None:
    if stdout and remove:
        raise click.UsageError("--stdout cannot be used with --rm")
    if stdout and suffix is not None:
        raise click.UsageError("--stdout cannot be used with --suffix")
    if keep and remove:
        raise click.UsageError("--keep cannot be used with --rm")


@click.command(
    name=APP_NAME,
    context_settings={"help_option_names": ["-h", "--help"], "max_content_width": 100}
)
@click.option('-c', '--stdout', is_flag=True,
              help='Write to standard output, keep original files.')
@click.option('-f', '--force', is_flag=True,
              help='Force compression even if the output file already exists.')
@click.option('-k', '--keep', is_flag=True,
              help='Keep input files. This is the default behavior.')
@click.option('--rm', 'remove', is_flag=True,
              help='Remove input files after successful compression.')
@click.option(
    '-S', '--suffix',
    metavar='SUFFIX',
    help="Use SUFFIX as the suffix for the target file instead of '.gz', '.zlib', or '.deflate'."
)
@click.option(
    '-i', '--iteration', 'iterations',
    type=click.IntRange(min=1),
    default=DEFAULT_ITERATIONS,
    show_default=True,
    metavar='TIMES',
    help='Perform compression for the specified number of iterations.'
)
@click.option(
    '--format', 'output_format',
    type=click.Choice(list(FORMAT_ADAPTERS), case_sensitive=False),
    default=DEFAULT_FORMAT,
    show_default=True,
    help='Output to the specified format.'
)
@click.option(
    '--log-level',
    type=click.Choice([level.value for level in LogLevel], case_sensitive=False),
    default=DEFAULT_LOG_LEVEL,
    show_default=True,
    help='The minimum log level to print.'
)
@click.option(
    '--generate-completion',
    type=click.Choice(COMPLETION_SHELLS),
    metavar='SHELL',
    help='Generate shell completion and print it to standard output.'
)
@click.version_option(__version__, '-V', '--version', prog_name=APP_NAME,
                      message=f"%(prog)s {LONG_VERSION}")
@click.argument('files', nargs=-1, type=click.Path(), metavar='[FILE]...')
@click.pass_context
def cli(ctx, stdout, force, keep, remove, suffix, iterations, output_format,
        log_level, generate_completion, files):
    """Compress files with Zopfli into gzip, zlib, or raw deflate streams

    If no FILE is given, or FILE is "-", data is read from standard input.

    Examples:
        zopfli-tool README.md
        zopfli-tool -i 50 --format zlib data.json
        cat data.bin | zopfli-tool -c > data.bin.gz
    """
    if generate_completion:
        print_completion(ctx, generate_completion)
        return

    _check_conflicts(stdout, keep, remove, suffix)

    try:
        config = CompressConfig(
            inputs=tuple(files),
            stdout=stdout,
            force=force,
            remove=remove,
            suffix=suffix,
            format=CompressionFormat(output_format.lower()),
            iterations=iterations,
            log_level=LogLevel(log_level.upper()),
        )
    except ConfigError as e:
        raise click.UsageError(str(e)) from e

    setup_logging(config.log_level)

    service = CompressService(
        config,
        stdin=click.get_binary_stream('stdin'),
        stdout=click.get_binary_stream('stdout'),
    )
    try:
        service.run()
    except ZopfliToolError as e:
        print_error(e)
        ctx.exit(exit_code_for(e))


def main():
    """Main entry point for the CLI application

    This function handles:
    - Usage errors with click's own formatting
    - Keyboard interrupts
    - Unexpected exceptions with proper error display
    """
    try:
        exit_code = cli.main(prog_name=APP_NAME, standalone_mode=False)

    except click.ClickException as e:
        e.show()
        sys.exit(e.exit_code)

    except (KeyboardInterrupt, click.Abort):
        console.print("\n[yellow]Operation cancelled by user[/yellow]")
        sys.exit(ExitCode.INTERRUPTED)

    except Exception as e:
        print_error(e)
        if logging.getLogger(PACKAGE_LOGGER).isEnabledFor(logging.DEBUG):
            console.print_exception()
        sys.exit(exit_code_for(e))

    sys.exit(exit_code or ExitCode.SUCCESS)


if __name__ == "__main__":
    main()
