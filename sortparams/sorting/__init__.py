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
from sortparams.sorting.defaults import build_defaults
from sortparams.sorting.expressions import (
    fold_into_expressions,
    group_by_direction,
    legacy_direction_parameter_name,
    legacy_fold_expressions,
    parse_legacy_expression,
    parse_sort_expressions,
    resolve_parameter_name,
)
from sortparams.sorting.resolver import SortParameterResolver
from sortparams.sorting.sorting import Order, Sort, SortDefault, SortDirection

__all__ = [
    "Order",
    "Sort",
    "SortDefault",
    "SortDirection",
    "SortParameterResolver",
    "build_defaults",
    "fold_into_expressions",
    "group_by_direction",
    "legacy_direction_parameter_name",
    "legacy_fold_expressions",
    "parse_legacy_expression",
    "parse_sort_expressions",
    "resolve_parameter_name",
]
