"""Pytest configuration and fixtures for the option registry tests."""

import pytest
from pydantic import AnyUrl

from raptor_options.catalog import OptionCatalog, build_default_catalog
from raptor_options.registry import OptionRegistry


class FailingURIFactory:
    """URI factory that can never allocate a URI."""

    def base(self, uri_string: str) -> AnyUrl:
        raise ValueError("out of URIs")

    def from_local_name(self, base: AnyUrl, local_name: str) -> AnyUrl:
        raise ValueError("out of URIs")


class ExhaustedURIFactory:
    """URI factory whose allocations always run out of memory."""

    def base(self, uri_string: str) -> AnyUrl:
        raise MemoryError("alloc")

    def from_local_name(self, base: AnyUrl, local_name: str) -> AnyUrl:
        raise MemoryError("alloc")


@pytest.fixture
def catalog() -> OptionCatalog:
    return build_default_catalog()


@pytest.fixture
def registry(catalog: OptionCatalog) -> OptionRegistry:
    return OptionRegistry(catalog)


@pytest.fixture
def failing_factory() -> FailingURIFactory:
    return FailingURIFactory()


@pytest.fixture
def failing_registry(catalog: OptionCatalog, failing_factory: FailingURIFactory) -> OptionRegistry:
    return OptionRegistry(catalog, uri_factory=failing_factory)


@pytest.fixture
def exhausted_registry(catalog: OptionCatalog) -> OptionRegistry:
    return OptionRegistry(catalog, uri_factory=ExhaustedURIFactory())
