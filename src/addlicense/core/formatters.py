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

import csv
import io
import json
from typing import Any, Dict, List

import yaml

FORMATS = ("pretty", "json", "yaml", "csv", "tsv", "markdown", "plain")


def format_data(format_type: str, data: List[Dict[str, Any]]) -> str:
    """
    Format a list of dictionaries into the specified string format.

    Args:
        format_type: One of 'json', 'csv', 'yaml', 'markdown', 'plain', 'tsv'.
        data: List of dictionaries to format.

    Returns:
        Formatted string.

    Raises:
        ValueError: If format is unknown.
    """
    fmt = format_type.lower()
    if fmt not in FORMATS:
        raise ValueError(f"Unknown format: {format_type}. Supported formats: {', '.join(FORMATS)}")

    if not data:
        return ""

    if fmt in ("json", "pretty"):
        # "pretty" is normally rendered by Rich in the caller
        return json.dumps(data, indent=2, default=str)

    if fmt == "yaml":
        return yaml.dump(data, sort_keys=False, default_flow_style=False)

    if fmt in ("csv", "tsv"):
        output = io.StringIO()
        delimiter = "\t" if fmt == "tsv" else ","
        writer = csv.DictWriter(output, fieldnames=list(data[0].keys()), delimiter=delimiter)
        writer.writeheader()
        writer.writerows(data)
        return output.getvalue()

    if fmt == "markdown":
        keys = list(data[0].keys())
        md = "| " + " | ".join(keys) + " |\n"
        md += "| " + " | ".join(["---"] * len(keys)) + " |\n"
        for row in data:
            values = [str(row.get(k, "")) for k in keys]
            md += "| " + " | ".join(values) + " |\n"
        return md

    # plain: simple key=value format
    return "\n".join(" ".join(f"{k}={v}" for k, v in row.items()) for row in data)
