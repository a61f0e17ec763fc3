import pytest
from starlette.datastructures import QueryParams

from sortparams.settings import SortSettings
from sortparams.sorting import SortParameterResolver


@pytest.fixture
def settings():
    return SortSettings()


@pytest.fixture
def legacy_settings(recwarn):
    return SortSettings(SORT_LEGACY_MODE=True)


@pytest.fixture
def resolver(settings):
    return SortParameterResolver(settings)


@pytest.fixture
def legacy_resolver(legacy_settings):
    return SortParameterResolver(legacy_settings)


@pytest.fixture
def query_params():
    def _query_params(query: str) -> QueryParams:
        return QueryParams(query)

    return _query_params
