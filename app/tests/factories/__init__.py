"""Test data factories for deterministic test data generation."""

from tests.factories.localization import (
    make_locale_info,
    make_resolver,
    make_translations,
    write_json,
    write_po,
    write_properties,
)

__all__ = [
    "make_locale_info",
    "make_resolver",
    "make_translations",
    "write_json",
    "write_po",
    "write_properties",
]
