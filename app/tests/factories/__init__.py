"""Test data factories for deterministic test data generation."""

from tests.factories.i18n import (
    load_builtin_data,
    make_bundle_data,
    make_bundle_data_without,
    make_spanish_bundle_data,
    make_translation_bundle,
    make_translation_key,
    schema_key_pairs,
)

__all__ = [
    "load_builtin_data",
    "make_bundle_data",
    "make_bundle_data_without",
    "make_spanish_bundle_data",
    "make_translation_bundle",
    "make_translation_key",
    "schema_key_pairs",
]
