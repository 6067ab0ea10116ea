"""Resolve a framework code name to its identifiers."""

import json

import click

from testidentity.framework_registry import get_for_framework_code_name
from testidentity.ui import print_identifiers_table
from testidentity.utils.error_handler import handle_exceptions
from testidentity.utils.exit_codes import ExitCodes


@click.command("show")
@click.argument("name")
@click.option("--json", "as_json", is_flag=True, help="Output JSON instead of a table")
@handle_exceptions
def show(name, as_json):
    """Show the identifiers of the framework with code name NAME.

    Matching is case-insensitive: nunit, NUNIT and NUnit are the same framework.
    Exits with code 2 when NAME is not a known framework.

    EXAMPLES:
      testidentity show xunit
      testidentity show MSTest --json
    """
    identifiers = get_for_framework_code_name(name)

    if identifiers is None:
        click.echo(f"Error: unknown testing framework '{name}'", err=True)
        raise click.exceptions.Exit(ExitCodes.UNKNOWN_FRAMEWORK)

    if as_json:
        click.echo(json.dumps(identifiers.to_dict(), indent=2))
        return

    print_identifiers_table([identifiers], title=identifiers.framework_name)
