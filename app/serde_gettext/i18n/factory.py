"""Factory functions for creating resolvers from settings."""

from typing import Optional

from serde_gettext.configuration import GettextSettings
from serde_gettext.configuration import settings as app_settings
from serde_gettext.i18n.catalog import Catalog, GNUTranslationsCatalog, NullCatalog
from serde_gettext.i18n.clock import LocalTimeClock, UTCClock
from serde_gettext.i18n.resolver import Resolver
from serde_gettext.logging import get_module_logger

logger = get_module_logger()


def create_catalog(settings: Optional[GettextSettings] = None) -> Catalog:
    """Create the catalog described by settings.

    Uses compiled catalogs under GETTEXT_LOCALEDIR when it is set, and the
    identity catalog otherwise.

    Raises:
        ValueError: If GETTEXT_LOCALEDIR does not exist.
    """
    settings = settings or app_settings.gettext
    if settings.localedir is None:
        logger.info("catalog_created_identity")
        return NullCatalog()

    return GNUTranslationsCatalog(
        localedir=settings.localedir,
        default_domain=settings.default_domain,
        languages=settings.language_list,
    )


def create_resolver(
    settings: Optional[GettextSettings] = None,
    catalog: Optional[Catalog] = None,
) -> Resolver:
    """Create and configure a Resolver.

    Args:
        settings: Gettext settings (default: application settings).
        catalog: Catalog to use instead of the one described by settings.

    Returns:
        Resolver: Configured resolver instance

    Usage:
        # Use defaults from the environment
        resolver = create_resolver()

        # Explicit catalog, e.g. in tests
        resolver = create_resolver(catalog=NullCatalog())
    """
    settings = settings or app_settings.gettext
    catalog = catalog or create_catalog(settings)
    clock = LocalTimeClock() if settings.use_local_time else UTCClock()

    resolver = Resolver(catalog, clock=clock, max_depth=settings.max_depth)
    logger.info(
        "resolver_created",
        catalog=type(catalog).__name__,
        max_depth=settings.max_depth,
        clock=type(clock).__name__,
    )
    return resolver
