"""Typed option values: coerce text to an option's declared type and apply it.

Accepts ``name=value`` assignments as used on the command line; a bare
``name`` switches a boolean option on.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from raptor_options.types import Option, OptionArea, OptionValue, OptionValueType
from raptor_options.uri import OptionURIError

if TYPE_CHECKING:
    from collections.abc import Iterable

    from raptor_options.catalog import OptionCatalog
    from raptor_options.registry import OptionRegistry
    from raptor_options.state import OptionState
    from raptor_options.uri import URIFactory

_TRUE = ("true", "yes", "1")
_FALSE = ("false", "no", "0")


class UnknownOptionError(ValueError):
    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Unknown option '{name}'")


class OptionAreaError(ValueError):
    def __init__(self, name: str, area: OptionArea) -> None:
        super().__init__(f"Option '{name}' is not valid for area {area!r}")


class OptionValueError(ValueError):
    pass


def coerce_option_value(
    identity: int,
    raw: str,
    catalog: OptionCatalog,
    uri_factory: URIFactory,
) -> OptionValue:
    d = catalog.get(identity)
    if d is None:
        raise UnknownOptionError(str(identity))

    match d.value_type:
        case OptionValueType.BOOL:
            lower = raw.strip().lower()
            if lower in _TRUE:
                return 1
            if lower in _FALSE:
                return 0
            raise OptionValueError(f"Option '{d.name}' expects a boolean, got '{raw}'")
        case OptionValueType.INT:
            try:
                return int(raw)
            except ValueError:
                raise OptionValueError(
                    f"Option '{d.name}' expects an integer, got '{raw}'"
                ) from None
        case OptionValueType.STRING:
            return raw
        case OptionValueType.URI:
            try:
                return uri_factory.base(raw.strip())
            except (ValueError, OptionURIError) as e:
                raise OptionValueError(f"Option '{d.name}' expects a URI, got '{raw}'") from e
    raise OptionValueError(f"Option '{d.name}' has no usable value type")


def parse_option_assignment(
    text: str,
    area: OptionArea,
    registry: OptionRegistry,
) -> tuple[Option, OptionValue]:
    """Parse ``name=value`` (or bare ``name``) for an option valid in ``area``.

    The name may also be given as the option's canonical URI.
    """
    if "=" in text:
        key, raw = text.split("=", 1)
    else:
        key, raw = text, None
    key = key.strip()

    option = registry.option_from_uri(key)
    d = registry.catalog.get(option) if option is not None else registry.catalog.get_by_name(key)
    if d is None:
        raise UnknownOptionError(key)
    if not d.area.intersects(area):
        raise OptionAreaError(d.name, area)

    if raw is None:
        if d.value_type != OptionValueType.BOOL:
            raise OptionValueError(f"Option '{d.name}' needs a value (use {d.name}=VALUE)")
        return d.option, 1

    return d.option, coerce_option_value(d.option, raw, registry.catalog, registry.uri_factory)


def apply_assignments(
    state: OptionState,
    assignments: Iterable[str],
    registry: OptionRegistry,
) -> list[Option]:
    """Parse each assignment for ``state.area`` and store it. Returns the options set."""
    parsed = [parse_option_assignment(text, state.area, registry) for text in assignments]
    for option, value in parsed:
        state.set(option, value)
    return [option for option, _ in parsed]

