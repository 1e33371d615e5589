"""Per-object option values.

Each parser, serializer, SAX2 reader or writer owns one ``OptionState``,
tagged with that object's area. Slots exist for every option identity so
that copying a whole configuration needs no area filtering; slots whose
option does not apply to the owner's area are simply ignored by the owner.

The container trusts its caller: stored values are not checked against the
option's declared value type. See ``raptor_options.values`` for coercion.
There is no internal locking.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from raptor_options.catalog import InvalidOptionError, OptionCatalog, build_default_catalog
from raptor_options.config import OptionSettings, get_settings
from raptor_options.types import OptionArea, OptionValue, OptionValueType

if TYPE_CHECKING:
    from collections.abc import Iterator

logger = logging.getLogger("raptor_options.state")


class AreaMismatchError(ValueError):
    def __init__(self, to_area: OptionArea, from_area: OptionArea) -> None:
        super().__init__(f"Cannot copy option state from area {from_area!r} to area {to_area!r}")


def _zero_value(value_type: OptionValueType) -> OptionValue:
    if value_type in (OptionValueType.BOOL, OptionValueType.INT):
        return 0
    return None


class OptionState:
    """Option values for one owner. ``area`` may carry several bits but never none."""

    def __init__(self, area: OptionArea, catalog: OptionCatalog | None = None) -> None:
        self._area = OptionArea(area)
        if self._area == OptionArea.NONE:
            raise ValueError("Option state needs a non-empty area")
        self._catalog = catalog if catalog is not None else build_default_catalog()
        self._values: list[OptionValue] = [_zero_value(d.value_type) for d in self._catalog]

    @property
    def area(self) -> OptionArea:
        return self._area

    @property
    def catalog(self) -> OptionCatalog:
        return self._catalog

    def _index(self, identity: int) -> int:
        if self._catalog.get(identity) is None:
            raise InvalidOptionError(identity)
        return int(identity)

    def get(self, identity: int) -> OptionValue:
        return self._values[self._index(identity)]

    def set(self, identity: int, value: OptionValue) -> None:
        self._values[self._index(identity)] = value

    def is_applicable(self, identity: int) -> bool:
        return self._catalog.is_valid_for_area(identity, self._area)

    def applicable_values(self) -> dict[str, OptionValue]:
        """Values of the options meaningful to this state's owner, keyed by name."""
        return {
            d.name: self._values[d.option]
            for d in self._catalog.options_for_area(self._area)
        }

    def copy_from(
        self, other: OptionState, *, settings: OptionSettings | None = None
    ) -> None:
        """Copy every slot from ``other``. This state's area is left unchanged.

        Copies between different areas are allowed unless
        ``strict_state_copy`` is enabled.
        """
        if len(other._values) != len(self._values):
            raise ValueError(
                f"Option state sizes differ: {len(self._values)} != {len(other._values)}"
            )
        if other._area != self._area:
            if (settings or get_settings()).strict_state_copy:
                raise AreaMismatchError(self._area, other._area)
            logger.debug("Copying option state from %r into %r", other._area, self._area)

        self._values[:] = other._values

    def clone(self) -> OptionState:
        copy = OptionState(self._area, self._catalog)
        copy._values[:] = self._values
        return copy

    def __iter__(self) -> Iterator[OptionValue]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)


def copy_state(
    to: OptionState, from_: OptionState, *, settings: OptionSettings | None = None
) -> None:
    to.copy_from(from_, settings=settings)
