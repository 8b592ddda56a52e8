"""serde-gettext - structured documents to translated text.

Decodes JSON/YAML-shaped documents naming a gettext function, looks the
message up in a translation catalog and fills the template's printf-style
placeholders, resolving nested documents among the arguments.

Usage:
    from serde_gettext import NullCatalog, Resolver

    resolver = Resolver(NullCatalog())
    resolver.resolve_value({"gettext": "Hello %(name)s!", "args": {"name": "Grace"}})
"""

from serde_gettext.i18n import (
    AmbiguousOrMissingFunction,
    ArgumentTable,
    Catalog,
    Category,
    Clock,
    DCNGettext,
    DecodeError,
    DGettext,
    DNGettext,
    DocumentParseError,
    FormatError,
    Formatter,
    GettextError,
    GettextService,
    Gettext,
    GNUTranslationsCatalog,
    InvalidPlaceholder,
    LocalTimeClock,
    MalformedArgument,
    MissingArgument,
    MissingField,
    NGettext,
    NPGettext,
    NullCatalog,
    PGettext,
    Resolver,
    SerdeGetText,
    TooDeeplyNested,
    TypeMismatch,
    UnexpectedKey,
    UnrecognizedCategory,
    UTCClock,
    create_catalog,
    create_resolver,
    decode,
    load_document,
    load_document_file,
)

__version__ = "0.1.0"

__all__ = [
    "ArgumentTable",
    "Catalog",
    "Category",
    "Clock",
    "DCNGettext",
    "DGettext",
    "DNGettext",
    "Formatter",
    "GettextService",
    "Gettext",
    "GNUTranslationsCatalog",
    "LocalTimeClock",
    "NGettext",
    "NPGettext",
    "NullCatalog",
    "PGettext",
    "Resolver",
    "SerdeGetText",
    "UTCClock",
    "create_catalog",
    "create_resolver",
    "decode",
    "load_document",
    "load_document_file",
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
