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

from collections.abc import Callable, Iterable
from urllib.parse import urlencode

import structlog
from starlette.datastructures import URL, QueryParams
from starlette.requests import Request

from sortparams.sorting.resolver import SortParameterResolver
from sortparams.sorting.sorting import Sort, SortDefault

logger = structlog.get_logger(__name__)


def sort_dependency(
    qualifier: str | None = None,
    defaults: Iterable[SortDefault] = (),
    default: SortDefault | None = None,
    resolver: SortParameterResolver | None = None,
) -> Callable[[Request], Sort | None]:
    """Create a FastAPI dependency that resolves the Sort of a request.

    Orders without a direction get the configured default direction.

    Example:
        @router.get("/")
        def list_people(sort: Sort | None = Depends(sort_dependency(defaults=[SortDefault(fields=("lastname",))]))):
            ...
    """
    defaults = tuple(defaults)

    def _resolve_sort(request: Request) -> Sort | None:
        _resolver = resolver or SortParameterResolver()
        sort = _resolver.resolve(request.query_params, qualifier, defaults, default, target=request.url.path)
        if sort is None:
            return None

        logger.debug("Resolved sort from request", path=request.url.path, sort=str(sort))
        return sort.with_default_direction(_resolver.settings.SORT_DEFAULT_DIRECTION)

    return _resolve_sort


def add_sort_to_url(
    url: URL | str, sort: Sort, qualifier: str | None = None, resolver: SortParameterResolver | None = None
) -> URL:
    """Return ``url`` with the query parameters for ``sort``.

    Values already present for the sort parameters are replaced, other query parameters are kept.
    """
    url = URL(str(url))
    resolver = resolver or SortParameterResolver()

    sort_params: list[tuple[str, str]] = []
    resolver.enhance(lambda name, value: sort_params.append((name, value)), sort, qualifier)

    replaced = {resolver.sort_parameter(qualifier), *(name for name, _ in sort_params)}
    kept = [(name, value) for name, value in QueryParams(url.query).multi_items() if name not in replaced]
    return url.replace(query=urlencode(kept + sort_params))
