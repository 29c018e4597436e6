# Copyright 2026 Justin Cook
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

from typing import Any, Dict, List

import typer
from rich.console import Console
from rich.table import Table

from addlicense.core.formatters import format_data
from addlicense.core.licenses import BUILTIN_LICENSES
from addlicense.core.logger import get_logger
from addlicense.core.styles import COMMENT_STYLES, supported_extensions

console = Console()
logger = get_logger("commands.list")


def _print_rows(title: str, rows: List[Dict[str, Any]], output_format: str) -> None:
    if output_format == "pretty":
        table = Table(title=title)
        for i, column in enumerate(rows[0].keys() if rows else []):
            table.add_column(column, style="cyan" if i == 0 else "white", no_wrap=i == 0)
        for row in rows:
            table.add_row(*[str(v) for v in row.values()])
        console.print(table)
        return

    try:
        print(format_data(output_format, rows))
    except ValueError as e:
        console.print(f"[red]{e}[/red]")
        raise typer.Exit(code=1)


def list_licenses(
    output_format: str = typer.Option("pretty", "--format", "-f", help="Output format: pretty, json, csv, yaml, markdown, plain, tsv"),
):
    """
    List the built-in license templates.
    """
    logger.info(f"Listing licenses (format={output_format})")
    rows = [
        {"Name": name, "First line": template.text.splitlines()[0]}
        for name, template in BUILTIN_LICENSES.items()
    ]
    _print_rows("Licenses", rows, output_format)


def list_styles(
    output_format: str = typer.Option("pretty", "--format", "-f", help="Output format: pretty, json, csv, yaml, markdown, plain, tsv"),
):
    """
    List the supported file extensions and their comment syntax.
    """
    logger.info(f"Listing comment styles (format={output_format})")
    rows = []
    for ext in supported_extensions():
        style = COMMENT_STYLES[ext]
        rows.append({
            "Extension": ext,
            "Top": style.top,
            "Prefix": style.prefix,
            "Bottom": style.bottom,
        })
    _print_rows("Comment styles", rows, output_format)
