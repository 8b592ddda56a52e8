"""Feature-level fixtures for gettext document tests.

Provides compiled French catalogs and deterministic collaborators.
"""

import pytest

from serde_gettext.i18n import Clock, GNUTranslationsCatalog, Resolver
from tests.factories.i18n import FRENCH_PLURAL, context_key, write_mo_file


class FixedClock(Clock):
    """Clock that records its calls and returns a fixed rendering."""

    def __init__(self):
        self.calls = []

    def format(self, spec, timestamp):
        self.calls.append((spec, timestamp))
        return f"<{spec}@{timestamp}>"


@pytest.fixture
def fixed_clock():
    return FixedClock()


@pytest.fixture
def localedir(tmp_path):
    """Create a locale directory with French catalogs.

    Returns a directory structure like:
    - fr/LC_MESSAGES/messages.mo
    - fr/LC_MESSAGES/errors.mo
    - fr/LC_MONETARY/money.mo
    """
    root = tmp_path / "locale"
    write_mo_file(
        root,
        "fr",
        "messages",
        messages={
            "Hello!": "Bonjour !",
            "Hello %(name)s!": "Bonjour %(name)s !",
            "The answer is: %(answer)s": "La réponse est : %(answer)s",
            "yes": "oui",
            "no": "non",
            "n/a": "s.o.",
            context_key("menu", "Open"): "Ouvrir",
        },
        plurals={
            ("%s element", "%s elements"): ["%s élément", "%s éléments"],
            (context_key("cart", "%s item"), "%s items"): [
                "%s article",
                "%s articles",
            ],
        },
        plural_forms=FRENCH_PLURAL,
    )
    write_mo_file(
        root,
        "fr",
        "errors",
        messages={"Not found": "Introuvable"},
        plurals={("%s error", "%s errors"): ["%s erreur", "%s erreurs"]},
        plural_forms=FRENCH_PLURAL,
    )
    write_mo_file(
        root,
        "fr",
        "money",
        plurals={("%s coin", "%s coins"): ["%s pièce", "%s pièces"]},
        plural_forms=FRENCH_PLURAL,
        category_dir="LC_MONETARY",
    )
    return root


@pytest.fixture
def french_catalog(localedir):
    """GNU catalog reading the French catalogs."""
    return GNUTranslationsCatalog(localedir, languages=["fr_FR.UTF-8"])


@pytest.fixture
def french_resolver(french_catalog, fixed_clock):
    """Resolver over the French catalogs with a fixed clock."""
    return Resolver(french_catalog, clock=fixed_clock)
