"""Show the testing framework a project is configured for."""

import json

import click

from testidentity.config_runtime import resolve_configured_framework
from testidentity.ui import print_identifiers_table
from testidentity.utils.error_handler import handle_exceptions
from testidentity.utils.exit_codes import ExitCodes


@click.command("detect")
@click.option("--project-path", default=".", help="Project root containing pyproject.toml")
@click.option("--json", "as_json", is_flag=True, help="Output JSON instead of a table")
@handle_exceptions
def detect(project_path, as_json):
    """Show the framework configured in [tool.testidentity] or TESTIDENTITY_FRAMEWORK.

    Exits with code 2 when no recognized framework is configured.

    EXAMPLES:
      testidentity detect --project-path ./src/Api.Tests
      TESTIDENTITY_FRAMEWORK=nunit testidentity detect --json
    """
    identifiers = resolve_configured_framework(project_path)

    if identifiers is None:
        click.echo("No recognized testing framework configured.", err=True)
        raise click.exceptions.Exit(ExitCodes.UNKNOWN_FRAMEWORK)

    if as_json:
        click.echo(json.dumps(identifiers.to_dict(), indent=2))
        return

    print_identifiers_table([identifiers], title=identifiers.framework_name)
