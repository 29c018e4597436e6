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

from typing import Optional


class AddLicenseError(Exception):
    """Base class for addlicense failures."""


class ConfigurationError(AddLicenseError):
    """Raised when the run cannot be configured; no file has been touched yet."""


class RenderError(AddLicenseError):
    """Raised when a license template cannot be rendered for a file."""

    def __init__(self, message: str, template: Optional[str] = None):
        self.template = template
        super().__init__(message)
