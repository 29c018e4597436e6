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

import json

from typer.testing import CliRunner

from addlicense.main import app

runner = CliRunner()


def test_list_licenses_json():
    result = runner.invoke(app, ["list-licenses", "--format", "json"])
    assert result.exit_code == 0
    names = [row["Name"] for row in json.loads(result.output)]
    assert names == ["apache", "bsd", "mit", "mpl"]


def test_list_licenses_pretty():
    result = runner.invoke(app, ["list-licenses"])
    assert result.exit_code == 0
    assert "apache" in result.output
    assert "mpl" in result.output


def test_list_styles_csv():
    result = runner.invoke(app, ["list-styles", "-f", "csv"])
    assert result.exit_code == 0
    lines = result.output.splitlines()
    assert lines[0] == "Extension,Top,Prefix,Bottom"
    assert ".go,,// ," in lines


def test_list_styles_unknown_format():
    result = runner.invoke(app, ["list-styles", "-f", "xml"])
    assert result.exit_code == 1
    assert "Unknown format" in result.output


def test_version():
    result = runner.invoke(app, ["--version"])
    assert result.exit_code == 0
    assert result.output.startswith("addlicense ")


def test_no_command_shows_help():
    result = runner.invoke(app, [])
    assert result.exit_code == 1
    assert "apply" in result.output
