"""List every registered testing framework."""

import json

import click

from testidentity.framework_registry import all_identifiers
from testidentity.ui import print_identifiers_table
from testidentity.utils.error_handler import handle_exceptions


@click.command("list")
@click.option("--json", "as_json", is_flag=True, help="Output JSON instead of a table")
@handle_exceptions
def list_frameworks(as_json):
    """List registered testing frameworks and their attribute identifiers.

    EXAMPLES:
      testidentity list
      testidentity list --json > frameworks.json
    """
    identifiers = all_identifiers()

    if as_json:
        click.echo(json.dumps([ids.to_dict() for ids in identifiers], indent=2))
        return

    print_identifiers_table(identifiers)
