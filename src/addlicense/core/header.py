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

# Only this many leading bytes are searched for an existing license.
DETECTION_WINDOW = 1000

LICENSE_MARKERS = (b"copyright", b"mozilla public")

# Lines that must stay first in a file, matched against the lower-cased line.
SPECIAL_FIRST_LINES = (
    b"#!",                        # interpreter directive
    b"<?xml",                     # XML declaration
    b"<!doctype",                 # HTML doctype
    b"# encoding:",               # Ruby encoding
    b"# frozen_string_literal:",  # Ruby interpreter instruction
    b"<?php",                     # PHP opening tag
)


def has_license(content: bytes) -> bool:
    """Report whether the head of ``content`` already mentions a license."""
    head = content[:DETECTION_WINDOW].lower()
    return any(marker in head for marker in LICENSE_MARKERS)


def special_first_line(content: bytes) -> bytes:
    """
    Return the first line of ``content`` (newline included) if it must stay
    first, otherwise an empty bytes object.
    """
    end = content.find(b"\n")
    line = content if end == -1 else content[:end + 1]
    if line.lower().startswith(SPECIAL_FIRST_LINES):
        return line
    return b""


def assemble(header: bytes, content: bytes) -> bytes:
    """Place ``header`` ahead of ``content``, keeping any special first line on top."""
    line = special_first_line(content)
    if line:
        content = content[len(line):]
        if not line.endswith(b"\n"):
            line += b"\n"
        header = line + b"\n" + header
    return header + content
