"""Catalog interface and implementations.

Defines the contract the resolver uses to turn a gettext request into a
message template, plus an identity catalog and a catalog reading compiled
GNU ``.mo`` files through the standard ``gettext`` module.
"""

import gettext
import os
import struct
import threading
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Dict, List, Optional, Sequence, Tuple

from serde_gettext.i18n.models import CatalogQuery, Category, GettextRequest
from serde_gettext.logging import get_module_logger

logger = get_module_logger()

# Environment variables consulted for the language list, in gettext's order.
LANGUAGE_ENV_VARS = ("LANGUAGE", "LC_ALL", "LC_MESSAGES", "LANG")


class Catalog(ABC):
    """Abstract base for translation catalogs.

    Implementations own plural selection and the fallback policy for
    untranslated messages; the resolver accepts whatever text they return.
    """

    @abstractmethod
    def lookup(self, request: GettextRequest) -> str:
        """Return the message template for a request.

        Args:
            request: One of the gettext request variants.

        Returns:
            Translated template, or the source text when untranslated.
        """

    @abstractmethod
    def lookup_literal(self, token: str) -> str:
        """Return the translation of a plain token such as "yes" or "n/a"."""


class NullCatalog(Catalog):
    """Catalog that returns source strings unchanged.

    Plural selection follows the Germanic rule used by
    ``gettext.NullTranslations``: singular when n == 1, plural otherwise.
    """

    def lookup(self, request: GettextRequest) -> str:
        query = request.to_query()
        if query.is_plural:
            return query.msgid if query.n == 1 else query.plural
        return query.msgid

    def lookup_literal(self, token: str) -> str:
        return token


class GNUTranslationsCatalog(Catalog):
    """Catalog backed by compiled GNU message catalogs.

    Reads ``<localedir>/<language>/LC_<CATEGORY>/<domain>.mo``. Every
    candidate language that has a file is loaded; the first one answers and
    the others are chained as fallbacks. Domains without any file behave
    like the NullCatalog.

    Attributes:
        localedir: Root directory of the compiled catalogs.
        default_domain: Domain used by requests that do not name one.
        languages: Explicit language list, or None to read the environment.
    """

    def __init__(
        self,
        localedir: Path,
        default_domain: str = "messages",
        languages: Optional[Sequence[str]] = None,
    ):
        """Initialize the catalog.

        Args:
            localedir: Root directory of the compiled catalogs.
            default_domain: Domain for gettext, ngettext, pgettext and npgettext.
            languages: Languages in preference order. Defaults to the
                LANGUAGE, LC_ALL, LC_MESSAGES and LANG environment variables.

        Raises:
            ValueError: If localedir does not exist.
        """
        self.localedir = Path(localedir)
        self.default_domain = default_domain
        self.languages = list(languages) if languages else None
        self._cache: Dict[Tuple[str, Category], gettext.NullTranslations] = {}
        self._lock = threading.Lock()

        if not self.localedir.is_dir():
            raise ValueError(f"Locale directory not found: {self.localedir}")

        logger.info(
            "initialized_gnu_catalog",
            localedir=str(self.localedir),
            default_domain=default_domain,
            languages=self.languages,
        )

    def lookup(self, request: GettextRequest) -> str:
        query = request.to_query()
        translations = self.translations(
            query.domain or self.default_domain, query.category
        )
        return _translate(translations, query)

    def lookup_literal(self, token: str) -> str:
        return self.translations(self.default_domain, Category.MESSAGES).gettext(
            token
        )

    def translations(
        self, domain: str, category: Category = Category.MESSAGES
    ) -> gettext.NullTranslations:
        """Get the (cached) translations object for a domain and category."""
        key = (domain, category)
        with self._lock:
            if key not in self._cache:
                self._cache[key] = self._load(domain, category)
            return self._cache[key]

    def candidate_languages(self) -> List[str]:
        """Languages to search, expanded from most to least specific.

        "fr_CA.UTF-8@euro" yields fr_CA.UTF-8@euro, fr_CA.UTF-8, fr_CA@euro,
        fr_CA, fr@euro and fr, like the gettext module does.
        """
        languages = self.languages or _languages_from_environment()
        candidates: List[str] = []
        for language in languages:
            if language in ("C", "POSIX"):
                break
            for expanded in _expand_language(language):
                if expanded not in candidates:
                    candidates.append(expanded)
        return candidates

    def reload(self) -> None:
        """Drop all loaded catalogs so they are read again on next use."""
        with self._lock:
            self._cache.clear()
        logger.info("cleared_catalog_cache")

    def _load(self, domain: str, category: Category) -> gettext.NullTranslations:
        result: Optional[gettext.NullTranslations] = None
        loaded: List[str] = []

        for language in self.candidate_languages():
            mofile = self.localedir / language / category.directory / f"{domain}.mo"
            if not mofile.is_file():
                continue
            try:
                with open(mofile, "rb") as fp:
                    translations = gettext.GNUTranslations(fp)
            except (OSError, ValueError, IndexError, struct.error) as e:
                logger.warning(
                    "could_not_read_catalog", file=str(mofile), error=str(e)
                )
                continue
            if result is None:
                result = translations
            else:
                result.add_fallback(translations)
            loaded.append(language)

        if result is None:
            logger.info(
                "catalog_not_found",
                domain=domain,
                category=category.value,
                localedir=str(self.localedir),
            )
            return gettext.NullTranslations()

        logger.info(
            "loaded_catalog",
            domain=domain,
            category=category.value,
            languages=loaded,
        )
        return result


def _translate(translations: gettext.NullTranslations, query: CatalogQuery) -> str:
    if query.is_plural:
        if query.context is not None:
            return translations.npgettext(
                query.context, query.msgid, query.plural, query.n
            )
        return translations.ngettext(query.msgid, query.plural, query.n)
    if query.context is not None:
        return translations.pgettext(query.context, query.msgid)
    return translations.gettext(query.msgid)


def _languages_from_environment() -> List[str]:
    for var in LANGUAGE_ENV_VARS:
        value = os.environ.get(var)
        if value:
            return [part for part in value.split(":") if part]
    return ["C"]


def _expand_language(language: str) -> List[str]:
    modifier = codeset = territory = ""
    rest = language
    if "@" in rest:
        rest, modifier = rest.split("@", 1)
        modifier = "@" + modifier
    if "." in rest:
        rest, codeset = rest.split(".", 1)
        codeset = "." + codeset
    if "_" in rest:
        rest, territory = rest.split("_", 1)
        territory = "_" + territory

    expanded = []
    for use_territory in (territory, ""):
        for use_codeset in (codeset, "") if use_territory else ("",):
            for use_modifier in (modifier, ""):
                candidate = rest + use_territory + use_codeset + use_modifier
                if candidate not in expanded:
                    expanded.append(candidate)
    return expanded
