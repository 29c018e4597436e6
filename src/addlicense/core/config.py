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

import os
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional

import yaml

from addlicense.core.errors import ConfigurationError
from addlicense.core.licenses import (
    CopyrightData,
    LicenseTemplate,
    get_license,
    load_license_file,
)
from addlicense.core.logger import get_logger
from addlicense.core.walker import SkipPatternSet, compile_patterns

logger = get_logger("config")

DEFAULT_HOLDER = "Google LLC"
DEFAULT_LICENSE = "apache"

CONFIG_KEYS = {"holder", "license", "licensef", "year", "skip_dirs", "skip_files", "workers"}


def default_year() -> str:
    return str(datetime.now().year)


def default_workers() -> int:
    # Same sizing as ThreadPoolExecutor's own default.
    return min(32, (os.cpu_count() or 1) + 4)


@dataclass(frozen=True)
class LicenseConfig:
    """Everything a run needs, built once at program entry and then only read."""
    template: LicenseTemplate
    data: CopyrightData
    patterns: SkipPatternSet = field(default_factory=SkipPatternSet)
    check: bool = False
    verbose: bool = False
    workers: int = field(default_factory=default_workers)


def load_yaml(path: Path) -> Dict[str, Any]:
    """Load a YAML configuration file safely."""
    path = Path(path)
    if not path.exists():
        raise ConfigurationError(f"Config file not found: {path}")
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        logger.error(f"Failed to parse YAML from {path}: {e}")
        raise ConfigurationError(f"Failed to load config {path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigurationError(f"Config file {path} must contain a mapping")
    unknown = set(data) - CONFIG_KEYS
    if unknown:
        raise ConfigurationError(
            f"Unknown keys in config file {path}: {', '.join(sorted(unknown))}"
        )
    return data


def split_patterns(values: Optional[Iterable[str]]) -> List[str]:
    """Flatten repeated and comma-separated pattern options."""
    if not values:
        return []
    if isinstance(values, str):
        values = [values]
    patterns = []
    for value in values:
        patterns.extend(p for p in str(value).split(",") if p)
    return patterns


def build_config(
    holder: Optional[str] = None,
    license_name: Optional[str] = None,
    license_file: Optional[Path] = None,
    year: Optional[str] = None,
    check: bool = False,
    verbose: bool = False,
    skip_dirs: Optional[Iterable[str]] = None,
    skip_files: Optional[Iterable[str]] = None,
    workers: Optional[int] = None,
    config_file: Optional[Path] = None,
) -> LicenseConfig:
    """
    Resolve explicit settings, an optional YAML file and defaults into a
    LicenseConfig. Explicit values win over the file, the file over defaults.

    Raises:
        ConfigurationError: on any invalid setting.
    """
    file_values: Dict[str, Any] = load_yaml(config_file) if config_file else {}

    def pick(value, key, default=None):
        if value is not None:
            return value
        value = file_values.get(key)
        return default if value is None else value

    license_file = pick(license_file, "licensef")
    if license_file:
        template = load_license_file(Path(license_file))
    else:
        template = get_license(str(pick(license_name, "license", DEFAULT_LICENSE)))

    data = CopyrightData(
        year=str(pick(year, "year", default_year())),
        holder=str(pick(holder, "holder", DEFAULT_HOLDER)),
    )

    patterns = SkipPatternSet(
        dirs=compile_patterns(split_patterns(pick(skip_dirs or None, "skip_dirs"))),
        files=compile_patterns(split_patterns(pick(skip_files or None, "skip_files"))),
    )

    worker_count = pick(workers, "workers", default_workers())
    try:
        worker_count = int(worker_count)
    except (TypeError, ValueError) as e:
        raise ConfigurationError(f"invalid worker count: {worker_count!r}") from e
    if worker_count < 1:
        raise ConfigurationError(f"worker count must be at least 1, got {worker_count}")

    logger.debug(
        f"Configured license={template.name} year={data.year} holder={data.holder} "
        f"check={check} workers={worker_count}"
    )
    return LicenseConfig(
        template=template,
        data=data,
        patterns=patterns,
        check=check,
        verbose=verbose,
        workers=worker_count,
    )
