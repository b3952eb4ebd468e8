"""
Main entry point for the Hashculate CLI.
- Parses options with Click (rendered by rich-click), each option accepting its long and short spelling.
- Loads defaults from the config file and environment, then runs the digest engine.
- Maps every error to a specific message and exit code 1.
"""
import logging
import click
import rich_click as rclick
from click.core import ParameterSource
from services.algorithm_registry import resolve, supported_algorithms
from services.hashing_errors import ConfigError, HashingError
from services.hashing_service import HashingService
from utils.cli_helpers import display_error, display_hashing_error, progress_observer
from utils.hashculate_config import DEFAULT_CONFIG_PATH, get_config_value, load_configuration
from utils.logging_config import setup_logging
from utils.result_formatter import algorithm_display_name, describe, format_report_lines

logger = logging.getLogger(__name__)

SEPARATOR = "=" * 51
MIB = 1024 * 1024
USAGE = "Usage: hashculate [options] <file>"


class HashculateCommand(rclick.RichCommand):
    """Rich command whose usage errors exit with status 1 instead of Click's default 2."""

    def make_context(self, info_name, args, parent=None, **extra):
        try:
            return super().make_context(info_name, args, parent=parent, **extra)
        except click.UsageError as e:
            e.exit_code = 1
            raise


@click.command(
    cls=HashculateCommand,
    context_settings={"help_option_names": ["-h", "--help"]},
)
@click.option('--algorithm', '-a', default=None, metavar="NAME",
              help=f"Hash algorithm ({', '.join(supported_algorithms())}) [default: md5]")
@click.option('--chunk-size', '-c', type=int, default=None, metavar="MB",
              help="Chunk size in MB for processing large files [default: 4]")
@click.option('--progress/--no-progress', '-p/-P', default=True,
              help="Show progress during calculation [default: on]")
@click.option('--verbose', '-v', count=True, help="Set verbosity level (-v = INFO, -vv = DEBUG)")
@click.option('--logfile', '-l', type=click.Path(dir_okay=False, writable=True), default=None,
              help="Write logs to specified file (e.g. logs/hashculate.log)")
@click.option('--config', 'config_path', type=click.Path(dir_okay=False), default=DEFAULT_CONFIG_PATH,
              show_default=True, help="Path to configuration file")
@click.argument('files', nargs=-1, metavar="FILE")
@click.pass_context
def hashculate_cli(ctx: click.Context, algorithm, chunk_size, progress, verbose, logfile, config_path, files) -> None:
    """
    Hashculate - File Hash Calculator.

    Computes the digest of a single FILE in fixed-size chunks, so memory use does not
    grow with file size.

    Examples:
        hashculate myfile.txt
        hashculate --algorithm sha256 myfile.txt
        hashculate -a sha512 -c 8 largefile.bin
    """
    try:
        try:
            config = load_configuration(config_path)
            logfile = logfile or get_config_value(config, "logging", "logfile")
        finally:
            setup_logging(verbosity=verbose, logfile=logfile)

        if len(files) != 1:
            display_error("Please specify exactly one file to hash")
            click.echo(USAGE)
            click.echo(f"Try '{ctx.info_name} --help' for help.")
            ctx.exit(1)
        file_path = files[0]

        algorithm = algorithm or get_config_value(config, "hashing", "algorithm", fallback="md5")
        if chunk_size is None:
            chunk_size = get_config_value(config, "hashing", "chunk_size_mb", fallback=4, value_type=int)
        if ctx.get_parameter_source("progress") is ParameterSource.DEFAULT:
            progress = get_config_value(config, "hashing", "progress", fallback=True, value_type=bool)

        kind = resolve(algorithm)
        if chunk_size <= 0:
            raise ConfigError(f"Chunk size must be greater than zero, got {chunk_size} MB", chunk_size)
        service = HashingService(chunk_size=chunk_size * MIB)

        click.echo(f"Calculating {algorithm_display_name(kind)} hash for: {file_path}")
        click.echo(f"Chunk size: {chunk_size} MB")
        click.echo()

        if progress:
            with progress_observer() as observer:
                result = service.compute(file_path, kind, observer)
        else:
            result = service.compute(file_path, kind)
    except HashingError as e:
        logger.error(f"Hash calculation failed: {e}")
        display_hashing_error(e)
        ctx.exit(1)

    click.echo()
    click.echo("Hash calculation complete!")
    click.echo(SEPARATOR)
    for line in format_report_lines(result):
        click.echo(line)
    click.echo(SEPARATOR)
    click.echo()
    click.echo("Description:")
    click.echo(describe(result))


def main() -> None:
    """Console script entry point."""
    hashculate_cli()


if __name__ == "__main__":
    main()
