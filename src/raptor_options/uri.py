"""Canonical option URIs: ``OPTION_URI_PREFIX + name`` in both directions.

URI values are pydantic ``AnyUrl`` instances built through a small factory
seam so that callers (and tests) can substitute their own construction.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Protocol, runtime_checkable

from pydantic import AnyUrl, TypeAdapter

if TYPE_CHECKING:
    from raptor_options.catalog import OptionCatalog
    from raptor_options.types import Option

logger = logging.getLogger("raptor_options.uri")

OPTION_URI_PREFIX = "http://feature.librdf.org/raptor-"


class OptionURIError(Exception):
    """Raised when an option URI cannot be constructed."""


@runtime_checkable
class URIFactory(Protocol):
    def base(self, uri_string: str) -> AnyUrl: ...

    def from_local_name(self, base: AnyUrl, local_name: str) -> AnyUrl: ...


class PydanticURIFactory:
    """Builds URIs by validating strings through pydantic's ``AnyUrl``."""

    def __init__(self) -> None:
        self._adapter = TypeAdapter(AnyUrl)

    def base(self, uri_string: str) -> AnyUrl:
        return self._adapter.validate_python(uri_string)

    def from_local_name(self, base: AnyUrl, local_name: str) -> AnyUrl:
        return self._adapter.validate_python(str(base) + local_name)


def encode_option_uri(name: str, factory: URIFactory) -> AnyUrl:
    """Build the canonical URI for an option name.

    The returned URI belongs to the caller; nothing here keeps a reference.
    """
    # pydantic's ValidationError is a ValueError; MemoryError is allocation failure
    try:
        base = factory.base(OPTION_URI_PREFIX)
        return factory.from_local_name(base, name)
    except (ValueError, MemoryError) as e:
        raise OptionURIError(f"Cannot build URI for option '{name}': {e}") from e


def decode_option_uri(uri: AnyUrl | str | None, catalog: OptionCatalog) -> Option | None:
    """Map a canonical option URI back to its identity, or None on no match."""
    if uri is None:
        return None

    uri_string = str(uri)
    if not uri_string.startswith(OPTION_URI_PREFIX):
        logger.debug("URI %s is outside the option namespace", uri_string)
        return None

    local_name = uri_string[len(OPTION_URI_PREFIX) :]
    for d in catalog:
        if d.name == local_name:
            return d.option

    logger.debug("No option named '%s'", local_name)
    return None
