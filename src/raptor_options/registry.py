"""Option Registry — area-aware option enumeration and URI lookup.

``OptionRegistry`` is the handle components hold: it pairs the immutable
catalog with the URI factory used to render canonical option URIs.

Resolution has three outcomes that callers must keep apart:

- success: a ``ResolvedOption`` is returned
- not applicable: ``None`` is returned (unknown identity, or the option's
  area does not intersect the requested area)
- hard failure: ``OptionURIError`` is raised while building the URI
"""

from __future__ import annotations

import logging
from enum import IntEnum
from typing import TYPE_CHECKING

from raptor_options.catalog import OptionCatalog, build_default_catalog
from raptor_options.types import (
    Option,
    OptionArea,
    OptionValueType,
    ResolvedOption,
    value_type_label,
)
from raptor_options.uri import (
    OptionURIError,
    PydanticURIFactory,
    URIFactory,
    decode_option_uri,
    encode_option_uri,
)

if TYPE_CHECKING:
    from pydantic import AnyUrl

logger = logging.getLogger("raptor_options.registry")


class ResolveStatus(IntEnum):
    FAILURE = -1
    SUCCESS = 0
    NOT_APPLICABLE = 1


class OptionRegistry:
    def __init__(
        self,
        catalog: OptionCatalog | None = None,
        *,
        uri_factory: URIFactory | None = None,
    ) -> None:
        self._catalog = catalog if catalog is not None else build_default_catalog()
        self._uri_factory = uri_factory if uri_factory is not None else PydanticURIFactory()

    @property
    def catalog(self) -> OptionCatalog:
        return self._catalog

    @property
    def uri_factory(self) -> URIFactory:
        return self._uri_factory

    def resolve(
        self,
        identity: int,
        area: OptionArea | int,
        *,
        name: bool = True,
        uri: bool = True,
        label: bool = True,
    ) -> ResolvedOption | None:
        """Resolve an option for an area, filling only the requested fields.

        Returns None when the identity is unknown or not valid for ``area``.
        Raises OptionURIError if the URI was requested and cannot be built.
        """
        d = self._catalog.get(identity)
        if d is None or not d.area.intersects(area):
            logger.debug("Option %r is not applicable to area %r", identity, area)
            return None

        return ResolvedOption(
            option=d.option,
            name=d.name if name else None,
            uri=encode_option_uri(d.name, self._uri_factory) if uri else None,
            label=d.label if label else None,
        )

    def resolve_status(self, identity: int, area: OptionArea | int) -> ResolveStatus:
        """Three-way status code for ``resolve``, without raising."""
        try:
            resolved = self.resolve(identity, area)
        except OptionURIError:
            return ResolveStatus.FAILURE
        return ResolveStatus.SUCCESS if resolved is not None else ResolveStatus.NOT_APPLICABLE

    def enumerate_parser_option(self, identity: int, **fields: bool) -> ResolvedOption | None:
        return self.resolve(identity, OptionArea.PARSER, **fields)

    def enumerate_serializer_option(self, identity: int, **fields: bool) -> ResolvedOption | None:
        return self.resolve(identity, OptionArea.SERIALIZER, **fields)

    def enumerate_sax2_option(self, identity: int, **fields: bool) -> ResolvedOption | None:
        return self.resolve(identity, OptionArea.SAX2, **fields)

    def enumerate_turtle_writer_option(
        self, identity: int, **fields: bool
    ) -> ResolvedOption | None:
        return self.resolve(identity, OptionArea.TURTLE_WRITER, **fields)

    def enumerate_xml_writer_option(self, identity: int, **fields: bool) -> ResolvedOption | None:
        return self.resolve(identity, OptionArea.XML_WRITER, **fields)

    def option_uri(self, identity: int) -> AnyUrl | None:
        d = self._catalog.get(identity)
        if d is None:
            return None
        return encode_option_uri(d.name, self._uri_factory)

    def option_from_uri(self, uri: AnyUrl | str | None) -> Option | None:
        return decode_option_uri(uri, self._catalog)

    def option_count(self) -> int:
        return self._catalog.count()

    def value_type(self, identity: int) -> OptionValueType:
        return self._catalog.value_type(identity)

    def value_type_label(self, value_type: OptionValueType | int) -> str | None:
        return value_type_label(value_type)

    def is_numeric(self, identity: int) -> bool:
        return self._catalog.is_numeric(identity)

    def is_valid_for_area(self, identity: int, area: OptionArea | int) -> bool:
        return self._catalog.is_valid_for_area(identity, area)
