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
import re
import stat
from dataclasses import dataclass
from typing import Iterable, Iterator, List, Pattern, Tuple

from addlicense.core.errors import ConfigurationError
from addlicense.core.logger import get_logger

logger = get_logger("walker")


@dataclass(frozen=True)
class FileDescriptor:
    path: str
    mode: int


@dataclass(frozen=True)
class SkipPatternSet:
    """Compiled skip rules, matched anywhere in a directory or file base name."""
    dirs: Tuple[Pattern, ...] = ()
    files: Tuple[Pattern, ...] = ()

    def skip_dir(self, name: str) -> bool:
        return any(p.search(name) for p in self.dirs)

    def skip_file(self, name: str) -> bool:
        return any(p.search(name) for p in self.files)


def compile_patterns(patterns: Iterable[str]) -> Tuple[Pattern, ...]:
    compiled: List[Pattern] = []
    for p in patterns:
        try:
            compiled.append(re.compile(p))
        except re.error as e:
            raise ConfigurationError(f"can't compile regexp {p!r}: {e}") from e
    return tuple(compiled)


def walk(root: str, patterns: SkipPatternSet) -> Iterator[FileDescriptor]:
    """
    Yield a descriptor for every regular file reachable from ``root``.

    Directories whose name matches a dir pattern are pruned, files whose name
    matches a file pattern are left out. Unreadable entries are logged and
    skipped; the walk always continues.
    """
    try:
        st = os.lstat(root)
    except OSError as e:
        logger.warning(f"{root} error: {e}")
        return

    name = os.path.basename(os.path.normpath(root))
    if stat.S_ISDIR(st.st_mode):
        if patterns.skip_dir(name):
            logger.debug(f"Skipping directory {root}")
            return
        yield from _walk_dir(root, patterns)
        return

    if patterns.skip_file(name):
        return
    descriptor = _describe(root)
    if descriptor is not None:
        yield descriptor


def walk_all(roots: Iterable[str], patterns: SkipPatternSet) -> Iterator[FileDescriptor]:
    """Walk each root in turn."""
    for root in roots:
        yield from walk(root, patterns)


def _walk_dir(path: str, patterns: SkipPatternSet) -> Iterator[FileDescriptor]:
    try:
        with os.scandir(path) as it:
            entries = sorted(it, key=lambda e: e.name)
    except OSError as e:
        logger.warning(f"{path} error: {e}")
        return

    for entry in entries:
        try:
            is_dir = entry.is_dir(follow_symlinks=False)
        except OSError as e:
            logger.warning(f"{entry.path} error: {e}")
            continue

        if is_dir:
            if patterns.skip_dir(entry.name):
                logger.debug(f"Skipping directory {entry.path}")
                continue
            yield from _walk_dir(entry.path, patterns)
            continue

        if patterns.skip_file(entry.name):
            continue
        descriptor = _describe(entry.path)
        if descriptor is not None:
            yield descriptor


def _describe(path: str):
    try:
        st = os.stat(path)
    except OSError as e:
        logger.warning(f"{path} error: {e}")
        return None
    if not stat.S_ISREG(st.st_mode):
        logger.debug(f"Ignoring non-regular file {path}")
        return None
    return FileDescriptor(path, stat.S_IMODE(st.st_mode))
