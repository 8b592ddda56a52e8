"""Translation service for dependency injection.

Provides a class-based interface to document resolution for easier DI and
testing, and is the layer that reports failures to the logs.
"""

from typing import Any, Iterable, List, Optional

from serde_gettext.i18n.errors import GettextError
from serde_gettext.i18n.factory import create_resolver
from serde_gettext.i18n.loader import load_document
from serde_gettext.i18n.resolver import Document, Resolver
from serde_gettext.logging import get_module_logger
from serde_gettext.operations import OperationResult

logger = get_module_logger()


class GettextService:
    """Class-based document translation service.

    Thin facade over a Resolver created by the factory. Unlike the
    resolver, it logs every failed resolution.

    Usage:
        service = GettextService()
        result = service.translate({"gettext": "Hello!"})
        if result.is_success:
            print(result.data)
    """

    def __init__(self, resolver: Optional[Resolver] = None):
        """Initialize translation service.

        Args:
            resolver: Optional pre-configured Resolver instance.
                If not provided, creates default via factory.
        """
        self._resolver = resolver or create_resolver()

    def translate(self, document: Document) -> OperationResult:
        """Resolve one decoded document into an OperationResult."""
        result = self._resolver.try_resolve(document)
        if not result.is_success:
            logger.warning(
                "resolution_failed",
                error=result.message,
                error_code=result.error_code,
            )
        return result

    def translate_text(self, text: str, fmt: str = "json") -> OperationResult:
        """Parse a serialized document and resolve it."""
        try:
            document = load_document(text, fmt)
        except GettextError as e:
            logger.warning("document_parse_failed", error=str(e), format=fmt)
            return OperationResult.permanent_error(str(e), error_code=e.code)
        return self.translate(document)

    def translate_many(self, documents: Iterable[Document]) -> List[OperationResult]:
        """Resolve a batch of documents independently."""
        results = [self.translate(document) for document in documents]
        failed = sum(1 for result in results if not result.is_success)
        logger.info("resolved_batch", total=len(results), failed=failed)
        return results

    def render(self, value: Any) -> str:
        """Render any value to text, raising GettextError on failure."""
        return self._resolver.render(value)

    @property
    def resolver(self) -> Resolver:
        """Access the underlying Resolver instance."""
        return self._resolver
