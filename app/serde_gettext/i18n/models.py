"""Data model for gettext documents.

Defines the decoded value model, the seven gettext request variants, the
locale category enum, argument tables and the document envelope.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Any, ClassVar, Dict, List, Optional, Sequence, Tuple, Union

from serde_gettext.i18n.errors import MissingArgument, TypeMismatch, UnrecognizedCategory

# Decoded input values are plain Python objects, as produced by json and yaml.
Value = Union[None, bool, int, float, str, List[Any], Dict[str, Any]]


class ValueKind(str, Enum):
    """Tags of the decoded value model."""

    NULL = "null"
    BOOL = "bool"
    INTEGER = "integer"
    FLOAT = "float"
    TEXT = "text"
    SEQUENCE = "sequence"
    MAPPING = "mapping"


def value_kind(value: Any, path: str = "value") -> ValueKind:
    """Classify a decoded value.

    ``bool`` is checked before ``int`` since it is an ``int`` subclass.

    Args:
        value: Decoded value.
        path: Location of the value, used in error messages.

    Returns:
        The ValueKind of ``value``.

    Raises:
        TypeMismatch: If ``value`` is outside the value model.
    """
    if value is None:
        return ValueKind.NULL
    if isinstance(value, bool):
        return ValueKind.BOOL
    if isinstance(value, int):
        return ValueKind.INTEGER
    if isinstance(value, float):
        return ValueKind.FLOAT
    if isinstance(value, str):
        return ValueKind.TEXT
    if isinstance(value, (list, tuple)):
        return ValueKind.SEQUENCE
    if isinstance(value, Mapping):
        return ValueKind.MAPPING
    raise TypeMismatch(
        path,
        "null, boolean, number, string, sequence or mapping",
        type(value).__name__,
    )


# (parent, key) link; the root holds (None, path).
Location = Tuple[Any, Union[str, int]]


def validate_value(value: Any, path: str = "value") -> None:
    """Check that ``value`` and everything below it belongs to the value model.

    Walks the tree with an explicit stack so that deep input cannot exhaust
    the interpreter stack. Locations are kept as (parent, key) links and only
    spelled out when an error is raised.

    Raises:
        TypeMismatch: On the first foreign value or non-text mapping key.
    """
    root: Location = (None, path)
    stack: List[Tuple[Location, Any]] = [(root, value)]
    while stack:
        location, current = stack.pop()
        try:
            kind = value_kind(current)
        except TypeMismatch as e:
            raise TypeMismatch(_spell_path(location), e.expected, e.actual) from e
        if kind is ValueKind.SEQUENCE:
            for index in range(len(current) - 1, -1, -1):
                stack.append(((location, index), current[index]))
        elif kind is ValueKind.MAPPING:
            for key, item in current.items():
                if not isinstance(key, str):
                    raise TypeMismatch(
                        _spell_path(location), "text mapping keys", type(key).__name__
                    )
                stack.append(((location, key), item))


def _spell_path(location: Location) -> str:
    parts: List[str] = []
    parent, key = location
    while parent is not None:
        parts.append(f"[{key}]" if isinstance(key, int) else f".{key}")
        parent, key = parent
    parts.append(key)
    return "".join(reversed(parts))


class Category(str, Enum):
    """Locale categories accepted by ``dcngettext``."""

    CTYPE = "ctype"
    NUMERIC = "numeric"
    TIME = "time"
    COLLATE = "collate"
    MONETARY = "monetary"
    MESSAGES = "messages"
    ALL = "all"
    PAPER = "paper"
    NAME = "name"
    ADDRESS = "address"
    TELEPHONE = "telephone"
    MEASUREMENT = "measurement"
    IDENTIFICATION = "identification"

    @classmethod
    def from_string(cls, token: str) -> "Category":
        """Convert a document token to a Category.

        Args:
            token: Category token (e.g., "messages", "monetary").

        Returns:
            Matching Category enum value.

        Raises:
            UnrecognizedCategory: If the token is not a known category.
        """
        try:
            return cls(token)
        except ValueError as e:
            raise UnrecognizedCategory(token) from e

    @property
    def directory(self) -> str:
        """Catalog directory name (e.g., "LC_MESSAGES")."""
        return f"LC_{self.name}"


@dataclass(frozen=True)
class CatalogQuery:
    """Normalized lookup handed to catalogs.

    Attributes:
        msgid: Source text, or the singular form for plural lookups.
        domain: Text domain, or None for the catalog's default domain.
        context: Message context (``pgettext`` family).
        plural: Plural source text, None for singular lookups.
        n: Count used for plural selection.
        category: Locale category the catalog is read from.
    """

    msgid: str
    domain: Optional[str] = None
    context: Optional[str] = None
    plural: Optional[str] = None
    n: Optional[int] = None
    category: Category = Category.MESSAGES

    @property
    def is_plural(self) -> bool:
        return self.plural is not None


@dataclass(frozen=True)
class GettextRequest:
    """Base of the gettext request variants.

    Subclasses are frozen dataclasses whose field names match the document
    keys of their function body.
    """

    function: ClassVar[str] = ""

    def to_query(self) -> CatalogQuery:
        raise NotImplementedError


@dataclass(frozen=True)
class Gettext(GettextRequest):
    function: ClassVar[str] = "gettext"

    msgid: str

    def to_query(self) -> CatalogQuery:
        return CatalogQuery(msgid=self.msgid)


@dataclass(frozen=True)
class NGettext(GettextRequest):
    function: ClassVar[str] = "ngettext"

    singular: str
    plural: str
    n: int

    def to_query(self) -> CatalogQuery:
        return CatalogQuery(msgid=self.singular, plural=self.plural, n=self.n)


@dataclass(frozen=True)
class PGettext(GettextRequest):
    function: ClassVar[str] = "pgettext"

    ctx: str
    msgid: str

    def to_query(self) -> CatalogQuery:
        return CatalogQuery(msgid=self.msgid, context=self.ctx)


@dataclass(frozen=True)
class DGettext(GettextRequest):
    function: ClassVar[str] = "dgettext"

    domain: str
    msgid: str

    def to_query(self) -> CatalogQuery:
        return CatalogQuery(msgid=self.msgid, domain=self.domain)


@dataclass(frozen=True)
class DNGettext(GettextRequest):
    function: ClassVar[str] = "dngettext"

    domain: str
    singular: str
    plural: str
    n: int

    def to_query(self) -> CatalogQuery:
        return CatalogQuery(
            msgid=self.singular, domain=self.domain, plural=self.plural, n=self.n
        )


@dataclass(frozen=True)
class NPGettext(GettextRequest):
    function: ClassVar[str] = "npgettext"

    ctx: str
    singular: str
    plural: str
    n: int

    def to_query(self) -> CatalogQuery:
        return CatalogQuery(
            msgid=self.singular, context=self.ctx, plural=self.plural, n=self.n
        )


@dataclass(frozen=True)
class DCNGettext(GettextRequest):
    function: ClassVar[str] = "dcngettext"

    domain: str
    singular: str
    plural: str
    n: int
    category: Category

    def to_query(self) -> CatalogQuery:
        return CatalogQuery(
            msgid=self.singular,
            domain=self.domain,
            plural=self.plural,
            n=self.n,
            category=self.category,
        )


# Document key -> request variant, in the order variants are tried.
REQUEST_TYPES: Dict[str, type] = {
    cls.function: cls
    for cls in (Gettext, NGettext, PGettext, DGettext, DNGettext, NPGettext, DCNGettext)
}

FUNCTION_KEYS: Tuple[str, ...] = tuple(REQUEST_TYPES)


class ArgumentTable:
    """Read-only named or positional argument store.

    A table built from a mapping answers only named lookups; a table built
    from a sequence answers only positional lookups.
    """

    __slots__ = ("_named", "_positional")

    def __init__(
        self,
        named: Optional[Mapping] = None,
        positional: Optional[Sequence[Value]] = None,
    ):
        if named is not None and positional is not None:
            raise ValueError("an argument table is either named or positional")
        self._named = MappingProxyType(dict(named)) if named is not None else None
        self._positional = tuple(positional) if positional is not None else None

    @classmethod
    def empty(cls) -> "ArgumentTable":
        return cls(positional=())

    @classmethod
    def from_value(cls, value: Any, path: str = "args") -> "ArgumentTable":
        """Build a table from a document's ``args`` field.

        Args:
            value: Mapping, sequence or None.
            path: Location of the field, used in error messages.

        Raises:
            TypeMismatch: If the field is neither a mapping nor a sequence,
                or holds values outside the value model.
        """
        if value is None:
            return cls.empty()
        kind = value_kind(value, path)
        validate_value(value, path)
        if kind is ValueKind.MAPPING:
            return cls(named=value)
        if kind is ValueKind.SEQUENCE:
            return cls(positional=value)
        raise TypeMismatch(path, "mapping or sequence", kind.value)

    @property
    def is_named(self) -> bool:
        return self._named is not None

    @property
    def names(self) -> Tuple[str, ...]:
        return tuple(self._named) if self._named is not None else ()

    def get(self, name: str) -> Value:
        """Look up a named argument.

        Raises:
            MissingArgument: If the name is absent or the table is positional.
        """
        if self._named is None or name not in self._named:
            raise MissingArgument(name)
        return self._named[name]

    def at(self, index: int) -> Value:
        """Look up a positional argument.

        Raises:
            MissingArgument: If the index is out of range or the table is named.
        """
        if self._positional is None or not 0 <= index < len(self._positional):
            raise MissingArgument(index)
        return self._positional[index]

    def __len__(self) -> int:
        if self._named is not None:
            return len(self._named)
        return len(self._positional)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ArgumentTable):
            return NotImplemented
        return self._named == other._named and self._positional == other._positional

    def __repr__(self) -> str:
        if self._named is not None:
            return f"ArgumentTable(named={dict(self._named)!r})"
        return f"ArgumentTable(positional={list(self._positional)!r})"


@dataclass(frozen=True)
class SerdeGetText:
    """A decoded document: one gettext request plus optional arguments.

    Attributes:
        request: The requested gettext function and its fields.
        args: Arguments for the looked-up template, if the document had any.
    """

    request: GettextRequest
    args: Optional[ArgumentTable] = None

    @property
    def arguments(self) -> ArgumentTable:
        """The argument table, or an empty one when the document had none."""
        return self.args if self.args is not None else ArgumentTable.empty()
