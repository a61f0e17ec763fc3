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

import warnings

from pydantic import field_validator, model_validator
from pydantic_settings import BaseSettings
from structlog import get_logger

from sortparams.types import SortDirection

logger = get_logger(__name__)

DEFAULT_PARAMETER = "sort"
DEFAULT_PROPERTY_DELIMITER = ","
DEFAULT_QUALIFIER_DELIMITER = "_"


class SortParamsDeprecationWarning(DeprecationWarning):
    pass


class SortSettings(BaseSettings):
    SORT_PARAMETER: str = DEFAULT_PARAMETER
    SORT_PROPERTY_DELIMITER: str = DEFAULT_PROPERTY_DELIMITER
    SORT_QUALIFIER_DELIMITER: str = DEFAULT_QUALIFIER_DELIMITER
    SORT_LEGACY_MODE: bool = False
    SORT_DEFAULT_DIRECTION: SortDirection = SortDirection.ASC
    LOG_LEVEL: str = "INFO"

    @field_validator("SORT_PARAMETER", "SORT_PROPERTY_DELIMITER")
    @classmethod
    def must_have_text(cls, value: str) -> str:
        if not value or not value.strip():
            raise ValueError("must not be empty")
        return value

    @field_validator("SORT_QUALIFIER_DELIMITER", mode="before")
    @classmethod
    def reset_qualifier_delimiter(cls, value: str | None) -> str:
        return value or DEFAULT_QUALIFIER_DELIMITER

    @model_validator(mode="after")
    def warn_legacy_mode(self) -> "SortSettings":
        if self.SORT_LEGACY_MODE:
            warnings.filterwarnings("always", category=SortParamsDeprecationWarning)
            warnings.warn(  # noqa: B028
                "SORT_LEGACY_MODE is deprecated, encode the direction in the sort parameter itself",
                SortParamsDeprecationWarning,
            )
            logger.warning("Legacy sort mode enabled", sort_parameter=self.SORT_PARAMETER)
        return self


sort_settings = SortSettings()
