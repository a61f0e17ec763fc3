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

from more_itertools import unique_everseen
from pydantic import BaseModel, ConfigDict

from sortparams.types import SortDirection

__all__ = ["Order", "Sort", "SortDefault", "SortDirection"]


class Order(BaseModel):
    """A single sort instruction, a field and the direction to sort it by.

    A direction of ``None`` means no direction was requested; callers resolve it with ``with_default``.
    """

    model_config = ConfigDict(frozen=True)

    field: str
    direction: SortDirection | None = None

    def with_default(self, direction: SortDirection) -> "Order":
        if self.direction is not None:
            return self
        return self.model_copy(update={"direction": direction})

    def __str__(self) -> str:
        direction = self.direction.name if self.direction else "UNSPECIFIED"
        return f"{self.field}: {direction}"


class Sort(BaseModel):
    """Ordered sequence of Orders, the position of an Order decides its precedence."""

    model_config = ConfigDict(frozen=True)

    orders: tuple[Order, ...] = ()

    @classmethod
    def by(cls, direction: SortDirection | None, *fields: str) -> "Sort":
        return cls(orders=tuple(Order(field=field, direction=direction) for field in fields))

    @classmethod
    def of(cls, orders: Iterable[Order]) -> "Sort":
        return cls(orders=tuple(orders))

    def and_(self, other: "Sort") -> "Sort":
        return Sort(orders=self.orders + other.orders)

    def __add__(self, other: "Sort") -> "Sort":
        return self.and_(other)

    def __len__(self) -> int:
        return len(self.orders)

    def directions(self) -> list[SortDirection | None]:
        return list(unique_everseen(order.direction for order in self.orders))

    def with_default_direction(self, direction: SortDirection) -> "Sort":
        return Sort(orders=tuple(order.with_default(direction) for order in self.orders))

    def __str__(self) -> str:
        return ", ".join(str(order) for order in self.orders)


class SortDefault(BaseModel):
    """Declarative default sort for a call site, used when the request carries no sort parameter."""

    model_config = ConfigDict(frozen=True)

    direction: SortDirection = SortDirection.ASC
    fields: tuple[str, ...] = ()

    def to_sort(self) -> Sort | None:
        if not self.fields:
            return None
        return Sort.by(self.direction, *self.fields)
