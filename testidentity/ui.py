"""Central UI handler for testidentity.

Single Rich console for command output. Import this instead of
instantiating Console() in every command file.
"""

import sys

from rich.console import Console
from rich.table import Table
from rich.theme import Theme

THEME = Theme({
    "info": "bold cyan",
    "warning": "bold yellow",
    "error": "bold red",
    "success": "bold green",
    "dim": "dim white",
})

console = Console(
    theme=THEME,
    force_terminal=sys.stdout.isatty()
)


def print_identifiers_table(identifiers, title: str = "Testing frameworks") -> None:
    """Print framework identifiers as a Rich table."""
    table = Table(title=title)
    table.add_column("Framework", style="info")
    table.add_column("Code name")
    table.add_column("Attribute namespace")
    table.add_column("Inline data")
    table.add_column("Parameterized test")
    table.add_column("Test class", style="dim")

    for ids in identifiers:
        table.add_row(
            ids.framework_name,
            ids.code_framework_name,
            ids.attribute_namespace,
            ids.inline_data_attribute_name,
            ids.parameterized_test_attribute_name,
            ids.test_class_attribute_name or "-",
        )

    console.print(table)
