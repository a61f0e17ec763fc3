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

"""Translate multi-valued sort request parameters into ordered (field, direction) pairs and back."""

__version__ = "1.0.0"


from sortparams.settings import sort_settings
from sortparams.sorting import Order, Sort, SortDefault, SortDirection, SortParameterResolver, build_defaults
from sortparams.utils.errors import (
    AmbiguousSortDefaultsError,
    InvalidSortConfigurationError,
    LegacySortDirectionError,
)

__all__ = [
    "AmbiguousSortDefaultsError",
    "InvalidSortConfigurationError",
    "LegacySortDirectionError",
    "Order",
    "Sort",
    "SortDefault",
    "SortDirection",
    "SortParameterResolver",
    "build_defaults",
    "sort_settings",
]
