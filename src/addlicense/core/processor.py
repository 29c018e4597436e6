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
from dataclasses import dataclass
from typing import Optional

from addlicense.core.config import LicenseConfig
from addlicense.core.errors import RenderError
from addlicense.core.header import assemble, has_license
from addlicense.core.licenses import CopyrightData, LicenseTemplate, render_header
from addlicense.core.logger import get_logger
from addlicense.core.styles import resolve_style
from addlicense.core.walker import FileDescriptor

logger = get_logger("processor")


@dataclass
class ProcessingOutcome:
    path: str
    modified: bool = False
    missing: bool = False
    error: Optional[Exception] = None

    @property
    def failed(self) -> bool:
        return self.error is not None or self.missing


def license_header(path: str, template: LicenseTemplate, data: CopyrightData) -> Optional[bytes]:
    """Render the commented header for ``path``, or None if its type is unsupported."""
    style = resolve_style(path)
    if style is None:
        return None
    return render_header(template, data, style)


def add_license(path: str, mode: int, template: LicenseTemplate, data: CopyrightData) -> bool:
    """
    Insert a license header into ``path`` unless it already has one.
    Returns True if the file was rewritten.
    """
    header = license_header(path, template, data)
    if header is None:
        return False

    with open(path, "rb") as f:
        content = f.read()
    if has_license(content):
        return False

    with open(path, "wb") as f:
        f.write(assemble(header, content))
    os.chmod(path, mode)
    return True


def check_license(path: str, template: LicenseTemplate, data: CopyrightData) -> Optional[bool]:
    """
    Report whether ``path`` is missing a license header without touching it.
    Returns None for unsupported file types.
    """
    # Rendering here surfaces template errors the same way mutate mode would.
    if license_header(path, template, data) is None:
        return None

    with open(path, "rb") as f:
        content = f.read()
    return not has_license(content)


def process_file(descriptor: FileDescriptor, config: LicenseConfig) -> ProcessingOutcome:
    """Run one file through check or mutate mode; failures end up in the outcome."""
    outcome = ProcessingOutcome(descriptor.path)
    try:
        if config.check:
            outcome.missing = bool(check_license(descriptor.path, config.template, config.data))
        else:
            outcome.modified = add_license(
                descriptor.path, descriptor.mode, config.template, config.data
            )
    except (OSError, RenderError) as e:
        logger.debug(f"Failed to process {descriptor.path}: {e}")
        outcome.error = e
    return outcome
