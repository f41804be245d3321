# topmark:header:start
#
#   project      : fileheader
#   file         : spdx.py
#   file_relpath : src/fileheader/license/spdx.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Predefined license headers keyed by SPDX identifier.

Each `SpdxLicense` holds the notice text to put at the top of source files,
with placeholder tokens for the copyright year and owner where the license
uses them. `SpdxLicense.build_header` substitutes the first occurrence of
each token and returns a ready-to-use `Header`.

The table is built once at import time and exposed read-only as `LICENSES`.

Example:
    ```python
    from fileheader.license.spdx import APACHE_2_0

    header = APACHE_2_0.build_header(year=2024, owner="Example Corp")
    ```
"""

from __future__ import annotations

import datetime
from dataclasses import dataclass
from types import MappingProxyType
from typing import TYPE_CHECKING, Final

from fileheader.core.errors import ConfigError
from fileheader.core.header import Header

if TYPE_CHECKING:
    from collections.abc import Mapping


@dataclass(frozen=True)
class LicenseTokens:
    """Placeholders in a license template.

    Attributes:
        year (str): Token replaced with the copyright year.
        owner (str): Token replaced with the copyright owner.
    """

    year: str
    owner: str


@dataclass(frozen=True)
class SpdxLicense:
    """A predefined license header.

    Attributes:
        spdx_id (str): SPDX identifier (e.g. ``"Apache-2.0"``).
        name (str): Human-readable license name.
        template (str): Header text, possibly containing tokens.
        tokens (LicenseTokens | None): Replacement tokens, or None if the
            notice has no placeholders.
    """

    spdx_id: str
    name: str
    template: str
    tokens: LicenseTokens | None = None

    @property
    def needs_owner(self) -> bool:
        """True if the header embeds a copyright owner."""
        return self.tokens is not None

    def build_text(self, year: int | None = None, owner: str | None = None) -> str:
        """Return the header text with tokens substituted.

        Args:
            year (int | None): Copyright year; defaults to the current year.
            owner (str | None): Copyright owner; required when the license has tokens.

        Returns:
            str: The substituted header text.

        Raises:
            ConfigError: If the license needs an owner and none is given.
        """
        if self.tokens is None:
            return self.template
        if not owner:
            raise ConfigError(f"License {self.spdx_id} requires a copyright owner")
        if year is None:
            year = datetime.date.today().year
        # Only the first occurrence is a placeholder; later ones may be license prose.
        text: str = self.template.replace(self.tokens.year, str(year), 1)
        return text.replace(self.tokens.owner, owner, 1)

    def build_header(self, year: int | None = None, owner: str | None = None) -> Header:
        """Return the license notice as a `Header` (see `build_text`)."""
        return Header.from_text(self.build_text(year, owner))


APACHE_2_0: Final[SpdxLicense] = SpdxLicense(
    spdx_id="Apache-2.0",
    name="Apache License 2.0",
    template="""\
Copyright [yyyy] [name of copyright owner]

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at

    http://www.apache.org/licenses/LICENSE-2.0

Unless required by applicable law or agreed to in writing, software
distributed under the License is distributed on an "AS IS" BASIS,
WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
See the License for the specific language governing permissions and
limitations under the License.
""",
    tokens=LicenseTokens(year="[yyyy]", owner="[name of copyright owner]"),
)

MIT: Final[SpdxLicense] = SpdxLicense(
    spdx_id="MIT",
    name="MIT License",
    template="""\
MIT License

Copyright (c) <year> <copyright holders>

Permission is hereby granted, free of charge, to any person obtaining a copy
of this software and associated documentation files (the "Software"), to deal
in the Software without restriction, including without limitation the rights
to use, copy, modify, merge, publish, distribute, sublicense, and/or sell
copies of the Software, and to permit persons to whom the Software is
furnished to do so, subject to the following conditions:

The above copyright notice and this permission notice shall be included in all
copies or substantial portions of the Software.

THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND, EXPRESS OR
IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF MERCHANTABILITY,
FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT. IN NO EVENT SHALL THE
AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER
LIABILITY, WHETHER IN AN ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM,
OUT OF OR IN CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE
SOFTWARE.
""",
    tokens=LicenseTokens(year="<year>", owner="<copyright holders>"),
)

BSD_3_CLAUSE: Final[SpdxLicense] = SpdxLicense(
    spdx_id="BSD-3-Clause",
    name='BSD 3-Clause "New" or "Revised" License',
    template="""\
Copyright (c) <year> <owner>.

Redistribution and use in source and binary forms, with or without
modification, are permitted provided that the following conditions are met:

1. Redistributions of source code must retain the above copyright notice, this
   list of conditions and the following disclaimer.

2. Redistributions in binary form must reproduce the above copyright notice,
   this list of conditions and the following disclaimer in the documentation
   and/or other materials provided with the distribution.

3. Neither the name of the copyright holder nor the names of its contributors
   may be used to endorse or promote products derived from this software
   without specific prior written permission.

THIS SOFTWARE IS PROVIDED BY THE COPYRIGHT HOLDERS AND CONTRIBUTORS "AS IS"
AND ANY EXPRESS OR IMPLIED WARRANTIES, INCLUDING, BUT NOT LIMITED TO, THE
IMPLIED WARRANTIES OF MERCHANTABILITY AND FITNESS FOR A PARTICULAR PURPOSE ARE
DISCLAIMED. IN NO EVENT SHALL THE COPYRIGHT HOLDER OR CONTRIBUTORS BE LIABLE
FOR ANY DIRECT, INDIRECT, INCIDENTAL, SPECIAL, EXEMPLARY, OR CONSEQUENTIAL
DAMAGES (INCLUDING, BUT NOT LIMITED TO, PROCUREMENT OF SUBSTITUTE GOODS OR
SERVICES; LOSS OF USE, DATA, OR PROFITS; OR BUSINESS INTERRUPTION) HOWEVER
CAUSED AND ON ANY THEORY OF LIABILITY, WHETHER IN CONTRACT, STRICT LIABILITY,
OR TORT (INCLUDING NEGLIGENCE OR OTHERWISE) ARISING IN ANY WAY OUT OF THE USE
OF THIS SOFTWARE, EVEN IF ADVISED OF THE POSSIBILITY OF SUCH DAMAGE.
""",
    tokens=LicenseTokens(year="<year>", owner="<owner>"),
)

GPL_3_0_ONLY: Final[SpdxLicense] = SpdxLicense(
    spdx_id="GPL-3.0-only",
    name="GNU General Public License v3.0 only",
    template="""\
Copyright (C) <year> <name of author>

This program is free software: you can redistribute it and/or modify it under
the terms of the GNU General Public License as published by the Free Software
Foundation, version 3.

This program is distributed in the hope that it will be useful, but WITHOUT ANY
WARRANTY; without even the implied warranty of MERCHANTABILITY or FITNESS FOR A
PARTICULAR PURPOSE. See the GNU General Public License for more details.

You should have received a copy of the GNU General Public License along with
this program. If not, see <https://www.gnu.org/licenses/>.
""",
    tokens=LicenseTokens(year="<year>", owner="<name of author>"),
)

EPL_2_0: Final[SpdxLicense] = SpdxLicense(
    spdx_id="EPL-2.0",
    name="Eclipse Public License 2.0",
    template="""\
This program and the accompanying materials are made available under the
terms of the Eclipse Public License 2.0 which is available at
https://www.eclipse.org/legal/epl-2.0/

SPDX-License-Identifier: EPL-2.0
""",
)

MPL_2_0: Final[SpdxLicense] = SpdxLicense(
    spdx_id="MPL-2.0",
    name="Mozilla Public License 2.0",
    template="""\
This Source Code Form is subject to the terms of the Mozilla Public License,
v. 2.0. If a copy of the MPL was not distributed with this file, You can
obtain one at http://mozilla.org/MPL/2.0/.
""",
)

#: Read-only SPDX id → license table.
LICENSES: Final[Mapping[str, SpdxLicense]] = MappingProxyType(
    {
        lic.spdx_id: lic
        for lic in (APACHE_2_0, MIT, BSD_3_CLAUSE, GPL_3_0_ONLY, EPL_2_0, MPL_2_0)
    }
)

_BY_LOWER_ID: Final[Mapping[str, SpdxLicense]] = MappingProxyType(
    {key.lower(): lic for key, lic in LICENSES.items()}
)


def get_license(spdx_id: str) -> SpdxLicense:
    """Look up a predefined license by SPDX identifier (case-insensitive).

    Raises:
        ConfigError: If the identifier is not in `LICENSES`.
    """
    lic: SpdxLicense | None = _BY_LOWER_ID.get(spdx_id.strip().lower())
    if lic is None:
        known: str = ", ".join(sorted(LICENSES))
        raise ConfigError(f"Unknown license {spdx_id!r} (known: {known})")
    return lic
