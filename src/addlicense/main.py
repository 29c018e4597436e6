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

from importlib.metadata import PackageNotFoundError, version as package_version

import typer

from addlicense.commands import apply
from addlicense.commands import list as list_cmd

app = typer.Typer(
    name="addlicense",
    help="Ensure source files carry copyright license headers.",
    add_completion=False,
    pretty_exceptions_enable=False,  # Disable stack traces for users
)

app.command(name="apply")(apply.apply)
app.command(name="list-licenses")(list_cmd.list_licenses)
app.command(name="list-styles")(list_cmd.list_styles)


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    version: bool = typer.Option(
        None, "--version", help="Show version and exit"
    ),
):
    """
    addlicense - scan directory patterns and add missing license headers.
    """
    if version:
        try:
            ver = package_version("addlicense")
        except PackageNotFoundError:
            ver = "unknown"
        typer.echo(f"addlicense {ver}")
        raise typer.Exit()

    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit(code=1)


if __name__ == "__main__":
    app()
