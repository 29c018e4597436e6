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
Comment syntax per file type.

Each style is a (top, prefix, bottom) triple: ``top`` and ``bottom`` are
standalone lines wrapping the block (empty for line-comment languages) and
``prefix`` starts every body line.
"""

import os
from typing import Dict, List, NamedTuple, Optional


class CommentStyle(NamedTuple):
    top: str
    prefix: str
    bottom: str


C_BLOCK = CommentStyle("/*", " * ", " */")
DOC_BLOCK = CommentStyle("/**", " * ", " */")
SLASH_LINE = CommentStyle("", "// ", "")
HASH_LINE = CommentStyle("", "# ", "")
LISP_LINE = CommentStyle("", ";; ", "")
ERLANG_LINE = CommentStyle("", "% ", "")
DASH_LINE = CommentStyle("", "-- ", "")
MARKUP_BLOCK = CommentStyle("<!--", " ", "-->")
ML_BLOCK = CommentStyle("(**", "   ", "*)")

_STYLE_GROUPS = [
    (C_BLOCK, [".c", ".h"]),
    (DOC_BLOCK, [".js", ".mjs", ".cjs", ".jsx", ".tsx", ".css", ".tf", ".ts"]),
    (SLASH_LINE, [
        ".cc", ".cpp", ".cs", ".go", ".hh", ".hpp", ".java", ".m", ".mm",
        ".proto", ".rs", ".scala", ".swift", ".dart", ".groovy", ".kt", ".kts",
        ".php",
    ]),
    # Extensionless conventions are keyed by their whole base name.
    (HASH_LINE, [".py", ".sh", ".yaml", ".yml", ".dockerfile", "dockerfile", ".rb", "gemfile"]),
    (LISP_LINE, [".el", ".lisp"]),
    (ERLANG_LINE, [".erl"]),
    (DASH_LINE, [".hs", ".sql"]),
    (MARKUP_BLOCK, [".html", ".xml", ".vue"]),
    (ML_BLOCK, [".ml", ".mli", ".mll", ".mly"]),
]

COMMENT_STYLES: Dict[str, CommentStyle] = {
    ext: style for style, extensions in _STYLE_GROUPS for ext in extensions
}


def file_extension(path: str) -> str:
    """Lower-cased extension of ``path``, or its lower-cased base name if it has none."""
    name = os.path.basename(path)
    ext = os.path.splitext(name)[1]
    if ext:
        return ext.lower()
    return name.lower()


def resolve_style(path: str) -> Optional[CommentStyle]:
    """Return the comment style for ``path``, or None if the file type is unsupported."""
    return COMMENT_STYLES.get(file_extension(path))


def supported_extensions() -> List[str]:
    return sorted(COMMENT_STYLES)
