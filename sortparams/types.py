# Copyright 2019-2025 SURF, GÉANT, ESnet.
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#    http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
from collections.abc import Callable
from enum import Enum
from typing import Protocol

__all__ = [
    "DIRECTION_KEYWORDS",
    "ParameterSource",
    "QueryParamSink",
    "SortDirection",
]


class SortDirection(Enum):
    """Sort direction (ASC or DESC).

    >>> SortDirection.from_string_or_none("DESC") is SortDirection.DESC
    True
    >>> SortDirection.from_string_or_none("ascending") is SortDirection.ASC
    True
    >>> SortDirection.from_string_or_none("lastname") is None
    True
    """

    ASC = "asc"
    DESC = "desc"

    @classmethod
    def from_string_or_none(cls, value: str | None) -> "SortDirection | None":
        if not value:
            return None
        return DIRECTION_KEYWORDS.get(value.strip().lower())

    @classmethod
    def from_string(cls, value: str) -> "SortDirection":
        if (direction := cls.from_string_or_none(value)) is None:
            raise ValueError(f"Invalid value '{value}' for sort direction, use one of: {', '.join(DIRECTION_KEYWORDS)}")
        return direction

    @property
    def keyword(self) -> str:
        return self.value


DIRECTION_KEYWORDS: dict[str, SortDirection] = {
    "asc": SortDirection.ASC,
    "ascending": SortDirection.ASC,
    "desc": SortDirection.DESC,
    "descending": SortDirection.DESC,
}


class ParameterSource(Protocol):
    """Multi-valued request parameters, e.g. starlette's ``QueryParams`` or werkzeug's ``MultiDict``."""

    def getlist(self, key: str) -> list[str]: ...


QueryParamSink = Callable[[str, str], None]
