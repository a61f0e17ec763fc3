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

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from sortparams.sorting.sorting import Sort


class InvalidSortConfigurationError(ValueError):
    """The sort parameter handling is configured in a way that cannot produce a reliable result."""


class AmbiguousSortDefaultsError(InvalidSortConfigurationError):
    plural_source: str
    singular_source: str
    target: str | None

    def __init__(self, plural_source: str, singular_source: str, target: str | None = None) -> None:
        where = f" on {target}" if target else ""
        message = (
            f"Cannot use both {plural_source} and {singular_source}{where}! "
            f"Move {singular_source} into {plural_source} to define sorting order!"
        )
        super().__init__(message)
        self.plural_source = plural_source
        self.singular_source = singular_source
        self.target = target


class LegacySortDirectionError(InvalidSortConfigurationError):
    sort: "Sort"

    def __init__(self, sort: "Sort") -> None:
        super().__init__(f"Legacy sort configuration only supports a single direction to sort by, got: {sort}")
        self.sort = sort
