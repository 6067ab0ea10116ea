"""testidentity CLI - main entry point and command registration."""
# ruff: noqa: E402 - commands imported after cli group definition

import click

from testidentity import __version__
from testidentity.utils.logging import configure_logging


@click.group()
@click.version_option(version=__version__, prog_name="testidentity")
@click.help_option("-h", "--help")
def cli():
    """Look up testing frameworks and the attribute names their tests use."""
    configure_logging()


from testidentity.commands.detect import detect
from testidentity.commands.list_frameworks import list_frameworks
from testidentity.commands.show import show

cli.add_command(list_frameworks)
cli.add_command(show)
cli.add_command(detect)


def main():
    """Main entry point for console script."""
    cli()


if __name__ == "__main__":
    main()
