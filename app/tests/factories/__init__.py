"""Test data factories for deterministic test data generation."""

from tests.factories.i18n import (
    FRENCH_PLURAL,
    GERMANIC_PLURAL,
    compile_mo,
    context_key,
    make_document,
    make_serde_gettext,
    nest_documents,
    write_mo_file,
)

__all__ = [
    "FRENCH_PLURAL",
    "GERMANIC_PLURAL",
    "compile_mo",
    "context_key",
    "make_document",
    "make_serde_gettext",
    "nest_documents",
    "write_mo_file",
]
