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

import string
from dataclasses import dataclass
from pathlib import Path
from typing import Dict

from addlicense.core.errors import ConfigurationError, RenderError
from addlicense.core.logger import get_logger
from addlicense.core.styles import CommentStyle

logger = get_logger("licenses")

APACHE = """Copyright {year} {holder}

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at

     http://www.apache.org/licenses/LICENSE-2.0

Unless required by applicable law or agreed to in writing, software
distributed under the License is distributed on an "AS IS" BASIS,
WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
See the License for the specific language governing permissions and
limitations under the License."""

BSD = """Copyright (c) {year} {holder} All rights reserved.
Use of this source code is governed by a BSD-style
license that can be found in the LICENSE file."""

MIT = """Copyright (c) {year} {holder}

Permission is hereby granted, free of charge, to any person obtaining a copy of
this software and associated documentation files (the "Software"), to deal in
the Software without restriction, including without limitation the rights to
use, copy, modify, merge, publish, distribute, sublicense, and/or sell copies of
the Software, and to permit persons to whom the Software is furnished to do so,
subject to the following conditions:

The above copyright notice and this permission notice shall be included in all
copies or substantial portions of the Software.

THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND, EXPRESS OR
IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF MERCHANTABILITY, FITNESS
FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT. IN NO EVENT SHALL THE AUTHORS OR
COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER LIABILITY, WHETHER
IN AN ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM, OUT OF OR IN
CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE SOFTWARE."""

MPL = """This Source Code Form is subject to the terms of the Mozilla Public
License, v. 2.0. If a copy of the MPL was not distributed with this
file, You can obtain one at https://mozilla.org/MPL/2.0/."""


@dataclass(frozen=True)
class CopyrightData:
    year: str
    holder: str


@dataclass(frozen=True)
class LicenseTemplate:
    """A license body with ``{year}`` and ``{holder}`` placeholders."""
    name: str
    text: str

    def render(self, data: CopyrightData) -> str:
        try:
            return self.text.format(year=data.year, holder=data.holder)
        except (KeyError, IndexError, ValueError, AttributeError, TypeError) as e:
            raise RenderError(f"render template failed: {e!r}", template=self.name) from e


BUILTIN_LICENSES: Dict[str, LicenseTemplate] = {
    "apache": LicenseTemplate("apache", APACHE),
    "bsd": LicenseTemplate("bsd", BSD),
    "mit": LicenseTemplate("mit", MIT),
    "mpl": LicenseTemplate("mpl", MPL),
}


def get_license(name: str) -> LicenseTemplate:
    """Look up a built-in license by name (case-insensitive)."""
    template = BUILTIN_LICENSES.get(name.lower())
    if template is None:
        raise ConfigurationError(
            f"unknown license: {name} (expected one of: {', '.join(BUILTIN_LICENSES)})"
        )
    return template


def load_license_file(path: Path) -> LicenseTemplate:
    """
    Load a custom license template from disk.

    The placeholder syntax is validated up front so that a malformed file
    aborts the run before any source file is touched.
    """
    try:
        text = Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigurationError(f"license file: {e}") from e

    try:
        fields = {name for _, name, _, _ in string.Formatter().parse(text) if name}
    except ValueError as e:
        raise ConfigurationError(f"license file {path}: {e}") from e

    # Templates written as {{.Year}} {{.Holder}} would render literally.
    if not fields & {"year", "holder"} and "{." in text:
        raise ConfigurationError(
            f"license file {path}: use {{year}} and {{holder}} placeholders, not {{{{.Year}}}} {{{{.Holder}}}}"
        )

    logger.debug(f"Loaded custom license template from {path}")
    return LicenseTemplate(str(path), text)


def render_header(template: LicenseTemplate, data: CopyrightData, style: CommentStyle) -> bytes:
    """
    Render ``template`` and wrap it in ``style``.

    Trailing whitespace is trimmed from every line and the block is followed
    by one blank separator line.
    """
    body = template.render(data)
    lines = []
    if style.top:
        lines.append(style.top)
    for line in body.splitlines():
        lines.append((style.prefix + line).rstrip())
    if style.bottom:
        lines.append(style.bottom)
    lines.append("")
    return ("\n".join(lines) + "\n").encode("utf-8")
