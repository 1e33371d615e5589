"""Unit tests for canonical option URI encoding and decoding."""

import pytest
from pydantic import AnyUrl

from raptor_options.types import Option
from raptor_options.uri import (
    OPTION_URI_PREFIX,
    OptionURIError,
    PydanticURIFactory,
    URIFactory,
    decode_option_uri,
    encode_option_uri,
)


class TestEncode:
    def test_prefix_plus_name(self):
        uri = encode_option_uri("scanForRDF", PydanticURIFactory())
        assert isinstance(uri, AnyUrl)
        assert str(uri) == OPTION_URI_PREFIX + "scanForRDF"

    def test_factory_failure_is_hard_error(self, failing_factory):
        with pytest.raises(OptionURIError, match="scanForRDF"):
            encode_option_uri("scanForRDF", failing_factory)

    def test_factories_satisfy_protocol(self, failing_factory):
        assert isinstance(PydanticURIFactory(), URIFactory)
        assert isinstance(failing_factory, URIFactory)


class TestDecode:
    def test_known_name(self, catalog):
        assert decode_option_uri(OPTION_URI_PREFIX + "noNet", catalog) == Option.NO_NET

    def test_accepts_anyurl(self, catalog):
        uri = encode_option_uri("atomEntryUri", PydanticURIFactory())
        assert decode_option_uri(uri, catalog) == Option.ATOM_ENTRY_URI

    @pytest.mark.parametrize(
        "uri",
        [
            "",
            "http://feature.librdf.org/raptor",
            "http://feature.librdf.org/",
            "https://feature.librdf.org/raptor-noNet",
            "http://feature.librdf.org/rasqal-noNet",
            "noNet",
        ],
    )
    def test_prefix_mismatch_is_no_match(self, catalog, uri):
        assert decode_option_uri(uri, catalog) is None

    def test_prefix_alone_is_no_match(self, catalog):
        assert decode_option_uri(OPTION_URI_PREFIX, catalog) is None

    def test_match_is_exact(self, catalog):
        assert decode_option_uri(OPTION_URI_PREFIX + "noNetX", catalog) is None
        assert decode_option_uri(OPTION_URI_PREFIX + "nonet", catalog) is None

    def test_none_is_no_match(self, catalog):
        assert decode_option_uri(None, catalog) is None

    def test_round_trip_every_option(self, catalog):
        factory = PydanticURIFactory()
        for d in catalog:
            assert decode_option_uri(encode_option_uri(d.name, factory), catalog) == d.option
