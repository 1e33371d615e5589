"""Option Catalog — single source of truth for every raptor parser/serializer option."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator

from raptor_options.types import (
    Option,
    OptionArea,
    OptionDescriptor,
    OptionValueType,
)

logger = logging.getLogger("raptor_options.catalog")


class InvalidCatalogError(ValueError):
    pass


class InvalidOptionError(LookupError):
    def __init__(self, identity: int) -> None:
        self.identity = identity
        super().__init__(f"Unknown option identity {identity!r}")


class OptionCatalog:
    """Immutable table of option descriptors indexed by dense identity.

    Every accessor bounds-checks the identity it is given; out-of-range
    queries return a sentinel rather than raising.
    """

    def __init__(self, descriptors: Iterable[OptionDescriptor]) -> None:
        self._descriptors: tuple[OptionDescriptor, ...] = tuple(descriptors)
        self._by_name: dict[str, OptionDescriptor] = {}
        self._validate()

    def _validate(self) -> None:
        for index, d in enumerate(self._descriptors):
            if d.option != index:
                raise InvalidCatalogError(
                    f"Option '{d.name}' has identity {int(d.option)} at catalog position {index}"
                )
            if d.area == OptionArea.NONE:
                raise InvalidCatalogError(f"Option '{d.name}' has an empty area mask")
            if not d.name:
                raise InvalidCatalogError(f"Option {int(d.option)} has an empty name")
            if d.value_type == OptionValueType.INVALID:
                raise InvalidCatalogError(f"Option '{d.name}' has an invalid value type")
            if d.name in self._by_name:
                raise InvalidCatalogError(f"Option name '{d.name}' is defined more than once")
            self._by_name[d.name] = d

    def get(self, identity: int) -> OptionDescriptor | None:
        # bool is an int subclass; True must not alias option 1
        if isinstance(identity, bool) or not isinstance(identity, int):
            return None
        if not 0 <= identity < len(self._descriptors):
            return None
        return self._descriptors[identity]

    def get_by_name(self, name: str) -> OptionDescriptor | None:
        return self._by_name.get(name)

    def count(self) -> int:
        return len(self._descriptors)

    def value_type(self, identity: int) -> OptionValueType:
        d = self.get(identity)
        return d.value_type if d is not None else OptionValueType.INVALID

    def is_numeric(self, identity: int) -> bool:
        """True for boolean and integer options, which use the numeric accessors."""
        d = self.get(identity)
        return d is not None and d.is_numeric

    def area_mask(self, identity: int) -> OptionArea:
        d = self.get(identity)
        return d.area if d is not None else OptionArea.NONE

    def is_valid_for_area(self, identity: int, area: OptionArea | int) -> bool:
        return self.area_mask(identity).intersects(area)

    def options_for_area(self, area: OptionArea | int) -> list[OptionDescriptor]:
        return [d for d in self._descriptors if d.area.intersects(area)]

    def __len__(self) -> int:
        return len(self._descriptors)

    def __iter__(self) -> Iterator[OptionDescriptor]:
        return iter(self._descriptors)


def _option(
    option: Option,
    area: OptionArea,
    value_type: OptionValueType,
    name: str,
    label: str,
) -> OptionDescriptor:
    return OptionDescriptor(
        option=option, area=area, value_type=value_type, name=name, label=label
    )


_PARSER = OptionArea.PARSER
_SERIALIZER = OptionArea.SERIALIZER
_WRITERS = OptionArea.XML_WRITER | OptionArea.TURTLE_WRITER
_BOOL = OptionValueType.BOOL
_INT = OptionValueType.INT
_STRING = OptionValueType.STRING

# Ordered by identity. New options are appended; never renumber.
OPTION_DESCRIPTORS: tuple[OptionDescriptor, ...] = (
    # =========================================================================
    # RDF/XML parser
    # =========================================================================
    _option(Option.SCANNING, _PARSER, _BOOL, "scanForRDF",
            "RDF/XML parser scans for rdf:RDF in XML content"),
    _option(Option.ALLOW_NON_NS_ATTRIBUTES, _PARSER, _BOOL, "allowNonNsAttributes",
            "RDF/XML parser allows bare 'name' rather than namespaced 'rdf:name'"),
    _option(Option.ALLOW_OTHER_PARSETYPES, _PARSER, _BOOL, "allowOtherParsetypes",
            "RDF/XML parser allows user-defined rdf:parseType values"),
    _option(Option.ALLOW_BAGID, _PARSER, _BOOL, "allowBagID",
            "RDF/XML parser allows rdf:bagID"),
    _option(Option.ALLOW_RDF_TYPE_RDF_LIST, _PARSER, _BOOL, "allowRDFtypeRDFlist",
            "RDF/XML parser generates the collection rdf:type rdf:List triple"),
    _option(Option.NORMALIZE_LANGUAGE, _PARSER | OptionArea.SAX2, _BOOL, "normalizeLanguage",
            "RDF/XML parser normalizes xml:lang values to lowercase"),
    _option(Option.NON_NFC_FATAL, _PARSER, _BOOL, "nonNFCfatal",
            "RDF/XML parser makes non-NFC literals a fatal error"),
    _option(Option.WARN_OTHER_PARSETYPES, _PARSER, _BOOL, "warnOtherParseTypes",
            "RDF/XML parser warns about unknown rdf:parseType values"),
    _option(Option.CHECK_RDF_ID, _PARSER, _BOOL, "checkRdfID",
            "RDF/XML parser checks rdf:ID values for duplicates"),
    # =========================================================================
    # Serializers and writers
    # =========================================================================
    _option(Option.RELATIVE_URIS, _SERIALIZER, _BOOL, "relativeURIs",
            "Serializers write relative URIs wherever possible."),
    _option(Option.WRITER_AUTO_INDENT, _WRITERS, _BOOL, "autoIndent",
            "Turtle and XML Writer automatically indent elements."),
    _option(Option.WRITER_AUTO_EMPTY, _WRITERS, _BOOL, "autoEmpty",
            "Turtle and XML Writer automatically detect and abbreviate empty elements."),
    # Typed integer; older tables declared it boolean.
    _option(Option.WRITER_INDENT_WIDTH, _WRITERS, _INT, "indentWidth",
            "Turtle and XML Writer use as number of spaces to indent."),
    _option(Option.WRITER_XML_VERSION, _SERIALIZER | OptionArea.XML_WRITER, _INT, "xmlVersion",
            "Serializers and XML Writer use as XML version to write."),
    _option(Option.WRITER_XML_DECLARATION, _SERIALIZER | OptionArea.XML_WRITER, _BOOL,
            "xmlDeclaration", "Serializers and XML Writer write XML declaration."),
    _option(Option.NO_NET, _PARSER | OptionArea.SAX2, _BOOL, "noNet",
            "Parsers and SAX2 XML Parser deny network requests."),
    # =========================================================================
    # DOT serializer colours
    # =========================================================================
    _option(Option.RESOURCE_BORDER, _SERIALIZER, _STRING, "resourceBorder",
            "DOT serializer resource border color"),
    _option(Option.LITERAL_BORDER, _SERIALIZER, _STRING, "literalBorder",
            "DOT serializer literal border color"),
    _option(Option.BNODE_BORDER, _SERIALIZER, _STRING, "bnodeBorder",
            "DOT serializer blank node border color"),
    _option(Option.RESOURCE_FILL, _SERIALIZER, _STRING, "resourceFill",
            "DOT serializer resource fill color"),
    _option(Option.LITERAL_FILL, _SERIALIZER, _STRING, "literalFill",
            "DOT serializer literal fill color"),
    _option(Option.BNODE_FILL, _SERIALIZER, _STRING, "bnodeFill",
            "DOT serializer blank node fill color"),
    # =========================================================================
    # GRDDL parser and WWW retrieval
    # =========================================================================
    _option(Option.HTML_TAG_SOUP, _PARSER, _BOOL, "htmlTagSoup",
            "GRDDL parser uses a lax HTML parser"),
    _option(Option.MICROFORMATS, _PARSER, _BOOL, "microformats",
            "GRDDL parser looks for microformats"),
    _option(Option.HTML_LINK, _PARSER, _BOOL, "htmlLink",
            'GRDDL parser looks for <link type="application/rdf+xml">'),
    _option(Option.WWW_TIMEOUT, _PARSER, _INT, "wwwTimeout",
            "Parser WWW request retrieval timeout"),
    _option(Option.WRITE_BASE_URI, _SERIALIZER, _BOOL, "writeBaseURI",
            "Serializers write a base URI directive @base / xml:base"),
    _option(Option.WWW_HTTP_CACHE_CONTROL, _PARSER, _STRING, "wwwHttpCacheControl",
            "Parser WWW request HTTP Cache-Control: header value"),
    _option(Option.WWW_HTTP_USER_AGENT, _PARSER, _STRING, "wwwHttpUserAgent",
            "Parser WWW request HTTP User-Agent: header value"),
    # =========================================================================
    # JSON, Atom and RSS serializers
    # =========================================================================
    _option(Option.JSON_CALLBACK, _SERIALIZER, _STRING, "jsonCallback",
            "JSON serializer callback function name"),
    _option(Option.JSON_EXTRA_DATA, _SERIALIZER, _STRING, "jsonExtraData",
            "JSON serializer callback data parameter"),
    _option(Option.RSS_TRIPLES, _SERIALIZER, _STRING, "rssTriples",
            "Atom and RSS serializers write extra RDF triples"),
    _option(Option.ATOM_ENTRY_URI, _SERIALIZER, OptionValueType.URI, "atomEntryUri",
            "Atom serializer writes an atom:entry with this URI (otherwise atom:feed)"),
    _option(Option.PREFIX_ELEMENTS, _SERIALIZER, _BOOL, "prefixElements",
            "Atom and RSS serializers write namespace-prefixed elements"),
)


def build_default_catalog() -> OptionCatalog:
    """Build the catalog of every option the library understands."""
    catalog = OptionCatalog(OPTION_DESCRIPTORS)
    logger.debug("Built option catalog with %d options", len(catalog))
    return catalog
