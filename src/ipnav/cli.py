"""
ipnav command-line entry point.
"""

import click

from ipnav import __version__
from ipnav.commands import AliasedGroup, conversion, operation, subnet, validation
from ipnav.config import CLIConfig
from ipnav.logging_config import configure_logging, get_logger

logger = get_logger(__name__)

EXAMPLES = """\b
Examples:
  ipnav validate-ip 192.168.1.1
  ipnav subnet-info 192.168.1.100 255.255.255.0
  ipnav convert 10.0.0.1
  ipnav classify 8.8.8.8
  ipnav range 192.168.1.1 192.168.1.10

For more information on a specific command:
  ipnav <command> --help
"""


@click.group(cls=AliasedGroup, epilog=EXAMPLES)
@click.version_option(__version__, "-v", "--version", prog_name="ipnav", message="%(version)s",
                      help="Display version number")
@click.option("--debug", is_flag=True, help="Enable debug logging on stderr")
@click.option("--log-file", type=click.Path(dir_okay=False, writable=True), help="Also write logs to a rotating file")
@click.pass_context
def main(ctx: click.Context, debug: bool, log_file: str | None):
    """CLI tool for IPv4 address operations."""
    try:
        config = CLIConfig.from_env()
    except ValueError as e:
        raise click.UsageError(str(e))

    try:
        configure_logging(level=config.log_level, debug=debug, log_file=log_file)
    except OSError as e:
        raise click.FileError(log_file, hint=str(e))
    logger.debug("ipnav %s invoked: %s", config.version, ctx.invoked_subcommand)

    ctx.obj = config


validation.register(main)
conversion.register(main)
subnet.register(main)
operation.register(main)


if __name__ == "__main__":
    main()
