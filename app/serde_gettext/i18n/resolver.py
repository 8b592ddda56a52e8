"""Resolution of gettext documents into final text.

The resolver looks a document's request up in the catalog and formats the
resulting template with the document's arguments. Nested documents among the
arguments re-enter the resolver one level deeper.
"""

from collections.abc import Mapping
from typing import Any, Iterable, List, Optional, Union

from serde_gettext.configuration import max_depth_limit
from serde_gettext.i18n.catalog import Catalog
from serde_gettext.i18n.clock import Clock
from serde_gettext.i18n.decoder import decode
from serde_gettext.i18n.errors import GettextError, TooDeeplyNested
from serde_gettext.i18n.formatter import DEFAULT_MAX_DEPTH, Formatter
from serde_gettext.i18n.models import SerdeGetText, Value
from serde_gettext.operations import OperationResult

Document = Union[SerdeGetText, Value]


class Resolver:
    """Turns documents into translated, formatted text.

    Resolution is a pure tree walk: the catalog is the only collaborator
    called, nothing is cached, and the same document always resolves to the
    same text. Errors are raised as GettextError subclasses and no partial
    text is ever returned.

    Attributes:
        catalog: Catalog answering lookups and literal tokens.
        clock: Optional date/time collaborator.
        max_depth: Maximum nesting depth of argument documents.
        formatter: Formatter used for placeholder substitution.
    """

    def __init__(
        self,
        catalog: Catalog,
        clock: Optional[Clock] = None,
        max_depth: int = DEFAULT_MAX_DEPTH,
    ):
        """Initialize the resolver.

        Raises:
            ValueError: If max_depth is below 1 or above max_depth_limit().
        """
        limit = max_depth_limit()
        if not 1 <= max_depth <= limit:
            raise ValueError(
                f"max_depth must be between 1 and {limit}, got {max_depth}"
            )
        self.catalog = catalog
        self.clock = clock
        self.max_depth = max_depth
        self.formatter = Formatter(
            catalog, self._resolve_at, clock=clock, max_depth=max_depth
        )

    def resolve(self, doc: SerdeGetText) -> str:
        """Resolve a decoded document.

        Args:
            doc: Decoded document.

        Returns:
            The translated and formatted text.

        Raises:
            GettextError: If any lookup or substitution fails.
        """
        return self._resolve_at(doc, 0)

    def resolve_value(self, value: Any) -> str:
        """Decode a raw tree and resolve it.

        Raises:
            DecodeError: If the tree is not a valid document.
            GettextError: If resolution fails.
        """
        return self.resolve(decode(value))

    def render(self, value: Any) -> str:
        """Convert any value to text.

        Documents resolve as with resolve_value(); scalars and join sequences
        are rendered as they would be when used as an argument.
        """
        if isinstance(value, SerdeGetText):
            return self.resolve(value)
        if isinstance(value, Mapping):
            return self.formatter.render_mapping(value, 0)
        return self.formatter.render(value, 0)

    def try_resolve(self, value: Document) -> OperationResult:
        """Resolve a document without raising on resolution errors.

        Returns:
            A success result with the text as ``data``, or a permanent error
            result carrying the error message and code.
        """
        try:
            if isinstance(value, SerdeGetText):
                text = self.resolve(value)
            else:
                text = self.resolve_value(value)
        except GettextError as e:
            return OperationResult.permanent_error(str(e), error_code=e.code)
        return OperationResult.success(data=text)

    def resolve_many(self, values: Iterable[Document]) -> List[OperationResult]:
        """Resolve a batch of documents; a failure never affects its siblings."""
        return [self.try_resolve(value) for value in values]

    def _resolve_at(self, doc: SerdeGetText, depth: int) -> str:
        if depth > self.max_depth:
            raise TooDeeplyNested(self.max_depth)
        template = self.catalog.lookup(doc.request)
        return self.formatter.format(template, doc.arguments, depth)
