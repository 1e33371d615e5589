"""Option identity, area and value-type enumerations, plus the descriptor model."""

from enum import IntEnum, IntFlag

from pydantic import AnyUrl, BaseModel, ConfigDict


class Option(IntEnum):
    """Dense option identity. Values double as catalog indexes; append only."""

    SCANNING = 0
    ALLOW_NON_NS_ATTRIBUTES = 1
    ALLOW_OTHER_PARSETYPES = 2
    ALLOW_BAGID = 3
    ALLOW_RDF_TYPE_RDF_LIST = 4
    NORMALIZE_LANGUAGE = 5
    NON_NFC_FATAL = 6
    WARN_OTHER_PARSETYPES = 7
    CHECK_RDF_ID = 8
    RELATIVE_URIS = 9
    WRITER_AUTO_INDENT = 10
    WRITER_AUTO_EMPTY = 11
    WRITER_INDENT_WIDTH = 12
    WRITER_XML_VERSION = 13
    WRITER_XML_DECLARATION = 14
    NO_NET = 15
    RESOURCE_BORDER = 16
    LITERAL_BORDER = 17
    BNODE_BORDER = 18
    RESOURCE_FILL = 19
    LITERAL_FILL = 20
    BNODE_FILL = 21
    HTML_TAG_SOUP = 22
    MICROFORMATS = 23
    HTML_LINK = 24
    WWW_TIMEOUT = 25
    WRITE_BASE_URI = 26
    WWW_HTTP_CACHE_CONTROL = 27
    WWW_HTTP_USER_AGENT = 28
    JSON_CALLBACK = 29
    JSON_EXTRA_DATA = 30
    RSS_TRIPLES = 31
    ATOM_ENTRY_URI = 32
    PREFIX_ELEMENTS = 33


class OptionArea(IntFlag):
    NONE = 0
    PARSER = 1
    SERIALIZER = 2
    TURTLE_WRITER = 4
    XML_WRITER = 8
    SAX2 = 16

    def intersects(self, other: "OptionArea | int") -> bool:
        return (self & other) != 0


class OptionValueType(IntEnum):
    INVALID = -1
    BOOL = 0
    INT = 1
    STRING = 2
    URI = 3


# Indexed by OptionValueType value; INVALID has no label.
VALUE_TYPE_LABELS: tuple[str, ...] = ("boolean", "integer", "string", "uri")


def value_type_label(value_type: OptionValueType | int) -> str | None:
    """Human label for a value type, or None for INVALID / unknown values."""
    if not isinstance(value_type, int) or isinstance(value_type, bool):
        return None
    if not 0 <= value_type < len(VALUE_TYPE_LABELS):
        return None
    return VALUE_TYPE_LABELS[value_type]


class OptionDescriptor(BaseModel):
    model_config = ConfigDict(frozen=True)

    option: Option
    area: OptionArea
    value_type: OptionValueType
    name: str
    label: str

    @property
    def is_numeric(self) -> bool:
        return self.value_type in (OptionValueType.BOOL, OptionValueType.INT)


class ResolvedOption(BaseModel):
    """Result of resolving an option for an area. Unrequested fields stay None."""

    model_config = ConfigDict(frozen=True)

    option: Option
    name: str | None = None
    uri: AnyUrl | None = None
    label: str | None = None


OptionValue = int | str | AnyUrl | None
