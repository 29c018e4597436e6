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

from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console
from rich.markup import escape

from addlicense.core.config import build_config
from addlicense.core.errors import ConfigurationError
from addlicense.core.logger import configure_logging, get_logger
from addlicense.core.pipeline import run_pipeline
from addlicense.core.processor import ProcessingOutcome

console = Console(highlight=False, soft_wrap=True)
err_console = Console(stderr=True, highlight=False, soft_wrap=True)
logger = get_logger("commands.apply")


def report_outcome(outcome: ProcessingOutcome, verbose: bool = False) -> None:
    """Print the per-file line for an outcome, if it warrants one."""
    if outcome.error is not None:
        err_console.print(f"[red]{escape(outcome.path)}: {escape(str(outcome.error))}[/red]")
    elif outcome.missing:
        console.print(escape(outcome.path))
    elif outcome.modified and verbose:
        console.print(f"{escape(outcome.path)} added license")


def apply(
    patterns: List[str] = typer.Argument(..., help="Files or directories to scan recursively."),
    holder: Optional[str] = typer.Option(
        None, "--holder", "-c", envvar="ADDLICENSE_HOLDER", help="Copyright holder [default: Google LLC]"
    ),
    license_name: Optional[str] = typer.Option(
        None, "--license", "-l", envvar="ADDLICENSE_LICENSE", help="License type: apache, bsd, mit, mpl [default: apache]"
    ),
    license_file: Optional[Path] = typer.Option(
        None, "--licensef", "-f", envvar="ADDLICENSE_LICENSEF", help="Custom license template file; overrides --license."
    ),
    year: Optional[str] = typer.Option(
        None, "--year", "-y", envvar="ADDLICENSE_YEAR", help="Copyright year(s) [default: current year]"
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Print the name of every modified file."),
    check: bool = typer.Option(
        False, "--check", help="Only verify that headers are present; exit non-zero if any are missing."
    ),
    skip_dirs: Optional[List[str]] = typer.Option(
        None, "--skip-dirs", help="Regexp of directory names to skip (repeatable, comma-separated)."
    ),
    skip_files: Optional[List[str]] = typer.Option(
        None, "--skip-files", help="Regexp of file names to skip (repeatable, comma-separated)."
    ),
    workers: Optional[int] = typer.Option(
        None, "--workers", "-w", envvar="ADDLICENSE_WORKERS", help="Number of files processed in parallel."
    ),
    config_file: Optional[Path] = typer.Option(
        None, "--config", envvar="ADDLICENSE_CONFIG", help="YAML file providing defaults for these options."
    ),
):
    """
    Ensure source files carry a license header.

    Modifies files in place and never adds a header to a file that already
    has one. With --check, files are only inspected.
    """
    configure_logging(1 if verbose else 0)

    try:
        config = build_config(
            holder=holder,
            license_name=license_name,
            license_file=license_file,
            year=year,
            check=check,
            verbose=verbose,
            skip_dirs=skip_dirs,
            skip_files=skip_files,
            workers=workers,
            config_file=config_file,
        )
    except ConfigurationError as e:
        err_console.print(f"[red]Error: {escape(str(e))}[/red]")
        raise typer.Exit(code=1)

    logger.info(f"Scanning {len(patterns)} pattern(s) (check={check})")
    verdict = run_pipeline(
        patterns,
        config,
        reporter=lambda outcome: report_outcome(outcome, verbose=config.verbose),
    )

    if config.verbose:
        if config.check:
            console.print(
                f"[bold]Checked {verdict.processed} file(s): {verdict.missing} missing a license header.[/bold]"
            )
        else:
            console.print(
                f"[bold green]Added license header to {verdict.modified} of {verdict.processed} file(s).[/bold green]"
            )

    if not verdict.ok:
        if verdict.errors:
            logger.warning(f"{verdict.errors} file(s) failed")
        raise typer.Exit(code=verdict.exit_code)
