"""Gettext documents - decoding and resolution.

Maps structured documents onto the gettext family of functions and resolves
them into translated, formatted text.

Main components:
- models: value model, request variants, Category, ArgumentTable, SerdeGetText
- decoder: decode() from generic trees into SerdeGetText
- catalog: Catalog interface, NullCatalog and GNUTranslationsCatalog
- clock: Clock interface for date/time arguments
- formatter: printf-style placeholder substitution
- resolver: Resolver orchestrating lookup and formatting
- loader: JSON/YAML document loading
- service: GettextService facade
"""

from serde_gettext.i18n.catalog import Catalog, GNUTranslationsCatalog, NullCatalog
from serde_gettext.i18n.clock import Clock, LocalTimeClock, UTCClock
from serde_gettext.i18n.decoder import decode
from serde_gettext.i18n.errors import (
    AmbiguousOrMissingFunction,
    DecodeError,
    DocumentParseError,
    FormatError,
    GettextError,
    InvalidPlaceholder,
    MalformedArgument,
    MissingArgument,
    MissingField,
    TooDeeplyNested,
    TypeMismatch,
    UnexpectedKey,
    UnrecognizedCategory,
)
from serde_gettext.i18n.factory import create_catalog, create_resolver
from serde_gettext.i18n.formatter import Formatter
from serde_gettext.i18n.loader import load_document, load_document_file
from serde_gettext.i18n.models import (
    ArgumentTable,
    Category,
    CatalogQuery,
    DCNGettext,
    DGettext,
    DNGettext,
    Gettext,
    GettextRequest,
    NGettext,
    NPGettext,
    PGettext,
    SerdeGetText,
    ValueKind,
)
from serde_gettext.i18n.resolver import Resolver
from serde_gettext.i18n.service import GettextService

__all__ = [
    # Models
    "ArgumentTable",
    "Category",
    "CatalogQuery",
    "DCNGettext",
    "DGettext",
    "DNGettext",
    "Gettext",
    "GettextRequest",
    "NGettext",
    "NPGettext",
    "PGettext",
    "SerdeGetText",
    "ValueKind",
    # Decoding and resolution
    "decode",
    "Formatter",
    "Resolver",
    # Collaborators
    "Catalog",
    "NullCatalog",
    "GNUTranslationsCatalog",
    "Clock",
    "LocalTimeClock",
    "UTCClock",
    # Loading and wiring
    "load_document",
    "load_document_file",
    "create_catalog",
    "create_resolver",
    "GettextService",
    # Errors
    "GettextError",
    "DecodeError",
    "AmbiguousOrMissingFunction",
    "TypeMismatch",
    "MissingField",
    "UnexpectedKey",
    "UnrecognizedCategory",
    "FormatError",
    "MissingArgument",
    "InvalidPlaceholder",
    "MalformedArgument",
    "TooDeeplyNested",
    "DocumentParseError",
]
