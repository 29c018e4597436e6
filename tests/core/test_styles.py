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

import pytest

from addlicense.core.styles import (
    C_BLOCK,
    DOC_BLOCK,
    HASH_LINE,
    MARKUP_BLOCK,
    ML_BLOCK,
    SLASH_LINE,
    file_extension,
    resolve_style,
    supported_extensions,
)


@pytest.mark.parametrize("path,expected", [
    ("main.go", ".go"),
    ("src/App.TSX", ".tsx"),
    ("Dockerfile", "dockerfile"),
    ("dir.d/Gemfile", "gemfile"),
    ("archive.tar.gz", ".gz"),
])
def test_file_extension(path, expected):
    assert file_extension(path) == expected


@pytest.mark.parametrize("path,style", [
    ("lib.c", C_BLOCK),
    ("lib.h", C_BLOCK),
    ("app.js", DOC_BLOCK),
    ("main.tf", DOC_BLOCK),
    ("main.go", SLASH_LINE),
    ("index.php", SLASH_LINE),
    ("setup.py", HASH_LINE),
    ("Dockerfile", HASH_LINE),
    ("build.dockerfile", HASH_LINE),
    ("Gemfile", HASH_LINE),
    ("page.vue", MARKUP_BLOCK),
    ("lexer.mll", ML_BLOCK),
])
def test_resolve_style(path, style):
    assert resolve_style(path) == style


def test_resolve_style_is_case_insensitive():
    assert resolve_style("MAIN.GO") == SLASH_LINE
    assert resolve_style("Query.SQL").prefix == "-- "


@pytest.mark.parametrize("path", ["data.bin", "README", "notes.txt", "image.png"])
def test_unsupported_extensions(path):
    assert resolve_style(path) is None


def test_other_line_styles():
    assert resolve_style("init.el").prefix == ";; "
    assert resolve_style("server.erl").prefix == "% "
    assert resolve_style("Main.hs").prefix == "-- "


def test_supported_extensions_sorted():
    exts = supported_extensions()
    assert exts == sorted(exts)
    assert ".go" in exts
    assert "dockerfile" in exts
