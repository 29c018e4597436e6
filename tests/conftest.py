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

"""
Pytest configuration and fixtures for addlicense tests.
"""
import pytest

from addlicense.core.config import LicenseConfig
from addlicense.core.licenses import CopyrightData, get_license


@pytest.fixture
def copyright_data():
    """Fixture providing the holder/year used across tests."""
    return CopyrightData(year="2024", holder="Acme Inc")


@pytest.fixture
def apache_config(copyright_data):
    """Fixture providing a mutate-mode configuration with the Apache license."""
    return LicenseConfig(template=get_license("apache"), data=copyright_data, workers=4)


@pytest.fixture
def check_config(copyright_data):
    """Fixture providing a check-mode configuration with the Apache license."""
    return LicenseConfig(template=get_license("apache"), data=copyright_data, check=True, workers=4)


@pytest.fixture
def source_tree(tmp_path):
    """Fixture providing a small mixed tree: licensed, unlicensed and unsupported files."""
    (tmp_path / "pkg").mkdir()
    (tmp_path / "pkg" / "main.go").write_text("package main\n")
    (tmp_path / "pkg" / "done.go").write_text("// Copyright 2020 Someone\nfunc main(){}\n")
    (tmp_path / "script.sh").write_text("#!/bin/bash\necho hi\n")
    (tmp_path / "data.bin").write_bytes(b"\x00\x01\x02")
    (tmp_path / "vendor").mkdir()
    (tmp_path / "vendor" / "lib.go").write_text("package lib\n")
    return tmp_path
