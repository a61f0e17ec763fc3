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

import structlog

from sortparams.sorting.sorting import Sort, SortDefault
from sortparams.utils.errors import AmbiguousSortDefaultsError

logger = structlog.get_logger(__name__)

SORT_DEFAULTS_NAME = "SortDefaults"
SORT_DEFAULT_NAME = "SortDefault"


def _append_or_create(sort_default: SortDefault, sort: Sort | None) -> Sort | None:
    if (default_sort := sort_default.to_sort()) is None:
        return sort
    return default_sort if sort is None else sort.and_(default_sort)


def build_defaults(
    defaults: Iterable[SortDefault] = (),
    default: SortDefault | None = None,
    *,
    target: str | None = None,
) -> Sort | None:
    """Build the default Sort from the declared sort defaults of a call site.

    The plural ``defaults`` are combined in the given order. A singular ``default`` can only be used when the plural
    defaults contribute nothing, as the order between both would be ambiguous.

    Args:
        defaults: the plural sort defaults
        default: the singular sort default
        target: name of the call site, only used in the error message

    Returns:
        The default Sort, or None when none of the defaults names a field.

    Raises:
        AmbiguousSortDefaultsError: both the plural and the singular defaults contribute fields.

    """
    sort = None
    for sort_default in defaults:
        sort = _append_or_create(sort_default, sort)

    if default is None or not default.fields:
        return sort

    if sort is not None:
        logger.error("Ambiguous sort defaults", target=target, defaults=str(sort), default=str(default.to_sort()))
        raise AmbiguousSortDefaultsError(SORT_DEFAULTS_NAME, SORT_DEFAULT_NAME, target)

    return _append_or_create(default, sort)
