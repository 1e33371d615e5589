"""raptor-options: typed registry of raptor parser, serializer and writer options.

Quick Start:
    from raptor_options import Option, OptionArea, OptionRegistry, OptionState

    registry = OptionRegistry()
    resolved = registry.enumerate_parser_option(Option.SCANNING)
    # resolved.name == "scanForRDF"

    state = OptionState(OptionArea.PARSER, registry.catalog)
    state.set(Option.NO_NET, 1)
"""

from raptor_options.catalog import (
    InvalidCatalogError,
    InvalidOptionError,
    OptionCatalog,
    build_default_catalog,
)
from raptor_options.registry import OptionRegistry, ResolveStatus
from raptor_options.state import AreaMismatchError, OptionState, copy_state
from raptor_options.types import (
    Option,
    OptionArea,
    OptionDescriptor,
    OptionValueType,
    ResolvedOption,
    value_type_label,
)
from raptor_options.uri import OPTION_URI_PREFIX, OptionURIError

__version__ = "0.1.0"

__all__ = [
    "OPTION_URI_PREFIX",
    "AreaMismatchError",
    "InvalidCatalogError",
    "InvalidOptionError",
    "Option",
    "OptionArea",
    "OptionCatalog",
    "OptionDescriptor",
    "OptionRegistry",
    "OptionState",
    "OptionURIError",
    "OptionValueType",
    "ResolveStatus",
    "ResolvedOption",
    "build_default_catalog",
    "copy_state",
    "value_type_label",
]
