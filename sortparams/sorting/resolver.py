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

from collections.abc import Iterable
from typing import Any

import structlog

from sortparams.settings import SortSettings, sort_settings
from sortparams.sorting.defaults import build_defaults
from sortparams.sorting.expressions import (
    fold_into_expressions,
    legacy_direction_parameter_name,
    legacy_fold_expressions,
    parse_legacy_expression,
    parse_sort_expressions,
    resolve_parameter_name,
)
from sortparams.sorting.sorting import Sort, SortDefault
from sortparams.types import ParameterSource, QueryParamSink

logger = structlog.get_logger(__name__)


class SortParameterResolver:
    """Resolve a Sort from request parameters and write a Sort back into query parameters.

    Values look like ``sort=firstname,lastname,asc&sort=age,desc``. In legacy mode the fields and the direction are
    split over two parameters: ``sort=firstname,lastname&sort.dir=asc``.
    """

    def __init__(self, settings: SortSettings | None = None) -> None:
        self.settings = settings or sort_settings

    @property
    def legacy_mode(self) -> bool:
        return self.settings.SORT_LEGACY_MODE

    def sort_parameter(self, qualifier: str | None = None) -> str:
        return resolve_parameter_name(self.settings.SORT_PARAMETER, qualifier, self.settings.SORT_QUALIFIER_DELIMITER)

    def direction_parameter(self, qualifier: str | None = None) -> str:
        return legacy_direction_parameter_name(self.sort_parameter(qualifier))

    def resolve(
        self,
        params: ParameterSource,
        qualifier: str | None = None,
        defaults: Iterable[SortDefault] = (),
        default: SortDefault | None = None,
        target: str | None = None,
    ) -> Sort | None:
        """Resolve the Sort requested through ``params``, falling back to the declared defaults.

        Args:
            params: the request parameters
            qualifier: distinguishes multiple sort parameters in the same request
            defaults: plural sort defaults of the call site
            default: singular sort default of the call site
            target: name of the call site, used in error messages

        Returns:
            The requested Sort, the default Sort or None.

        """
        parameter = self.sort_parameter(qualifier)
        values = params.getlist(parameter)

        if not values:
            return build_defaults(defaults, default, target=target)

        if self.legacy_mode:
            directions = params.getlist(self.direction_parameter(qualifier))
            return parse_legacy_expression(
                values[0], directions[0] if directions else None, self.settings.SORT_PROPERTY_DELIMITER
            )

        return parse_sort_expressions(values, self.settings.SORT_PROPERTY_DELIMITER)

    def encode(self, sort: Sort, qualifier: str | None = None) -> list[tuple[str, str]]:
        """Return the (name, value) query parameters representing the Sort."""
        parameter = self.sort_parameter(qualifier)
        delimiter = self.settings.SORT_PROPERTY_DELIMITER

        if self.legacy_mode:
            fields, direction = legacy_fold_expressions(sort, delimiter)
            return [(parameter, fields), (self.direction_parameter(qualifier), direction)]

        return [(parameter, expression) for expression in fold_into_expressions(sort, delimiter)]

    def enhance(self, sink: QueryParamSink, value: Any, qualifier: str | None = None) -> None:
        """Append the query parameters for ``value`` to an outgoing URL through ``sink``."""
        if not isinstance(value, Sort):
            logger.debug("Not a sort, skipping", type=type(value).__name__)
            return

        for name, param_value in self.encode(value, qualifier):
            sink(name, param_value)
