"""Tests for serde_gettext.i18n.catalog module."""

import pytest

from serde_gettext.i18n.catalog import GNUTranslationsCatalog, NullCatalog
from serde_gettext.i18n.decoder import decode
from serde_gettext.i18n.models import Category, Gettext, NGettext, PGettext
from serde_gettext.i18n.resolver import Resolver
from tests.factories.i18n import make_document, write_mo_file


def lookup(catalog, document):
    return catalog.lookup(decode(document).request)


class TestNullCatalog:
    """Tests for NullCatalog."""

    def test_returns_msgid(self):
        """Singular lookups return the msgid."""
        assert NullCatalog().lookup(Gettext(msgid="Hello!")) == "Hello!"

    def test_context_is_ignored(self):
        """Context does not change the identity lookup."""
        assert NullCatalog().lookup(PGettext(ctx="menu", msgid="Open")) == "Open"

    @pytest.mark.parametrize("n,expected", [(0, "as"), (1, "a"), (2, "as")])
    def test_germanic_plural(self, n, expected):
        """The singular is used only for n == 1."""
        request = NGettext(singular="a", plural="as", n=n)
        assert NullCatalog().lookup(request) == expected

    def test_literal_tokens(self):
        """Literal tokens are returned unchanged."""
        assert NullCatalog().lookup_literal("n/a") == "n/a"


class TestGNUTranslationsCatalog:
    """Tests for GNUTranslationsCatalog over compiled French catalogs."""

    def test_gettext(self, french_catalog):
        """gettext reads the default domain."""
        assert lookup(french_catalog, {"gettext": "Hello!"}) == "Bonjour !"

    def test_untranslated_message(self, french_catalog):
        """Untranslated messages fall back to the source text."""
        assert lookup(french_catalog, {"gettext": "Goodbye"}) == "Goodbye"

    @pytest.mark.parametrize(
        "n,expected", [(0, "%s élément"), (1, "%s élément"), (2, "%s éléments")]
    )
    def test_ngettext_uses_catalog_plural_rule(self, french_catalog, n, expected):
        """Plural selection follows the catalog's Plural-Forms header."""
        assert lookup(french_catalog, make_document("ngettext", n=n)) == expected

    def test_pgettext(self, french_catalog):
        """pgettext reads the context-qualified entry."""
        assert lookup(french_catalog, make_document("pgettext")) == "Ouvrir"

    def test_pgettext_other_context(self, french_catalog):
        """Another context does not match."""
        document = make_document("pgettext", ctx="file")
        assert lookup(french_catalog, document) == "Open"

    def test_dgettext(self, french_catalog):
        """dgettext reads the named domain."""
        assert lookup(french_catalog, make_document("dgettext")) == "Introuvable"

    def test_dngettext(self, french_catalog):
        """dngettext reads plurals from the named domain."""
        document = make_document("dngettext", n=1)
        assert lookup(french_catalog, document) == "%s erreur"

    def test_npgettext(self, french_catalog):
        """npgettext reads context-qualified plurals."""
        assert lookup(french_catalog, make_document("npgettext")) == "%s articles"

    def test_dcngettext(self, french_catalog):
        """dcngettext reads the category directory."""
        assert lookup(french_catalog, make_document("dcngettext")) == "%s pièces"

    def test_dcngettext_wrong_category(self, french_catalog):
        """A catalog in another category is not found."""
        document = make_document("dcngettext", category="messages")
        assert lookup(french_catalog, document) == "%s coins"

    def test_unknown_domain(self, french_catalog):
        """Domains without catalogs behave like the identity catalog."""
        document = make_document("dngettext", domain="missing", n=1)
        assert lookup(french_catalog, document) == "%s error"

    def test_lookup_literal(self, french_catalog):
        """Literal tokens come from the default domain."""
        assert french_catalog.lookup_literal("yes") == "oui"
        assert french_catalog.lookup_literal("n/a") == "s.o."

    def test_translations_are_cached(self, french_catalog):
        """Each domain and category is loaded once."""
        first = french_catalog.translations("messages")
        assert french_catalog.translations("messages") is first
        assert french_catalog.translations("messages", Category.MONETARY) is not first

    def test_reload_clears_cache(self, french_catalog):
        """reload() forces catalogs to be read again."""
        first = french_catalog.translations("messages")
        french_catalog.reload()
        assert french_catalog.translations("messages") is not first

    def test_missing_localedir(self, tmp_path):
        """A missing locale directory is rejected."""
        with pytest.raises(ValueError):
            GNUTranslationsCatalog(tmp_path / "missing")

    def test_default_domain(self, localedir):
        """Requests without domain use default_domain."""
        catalog = GNUTranslationsCatalog(
            localedir, default_domain="errors", languages=["fr"]
        )
        assert lookup(catalog, {"gettext": "Not found"}) == "Introuvable"

    def test_fallback_languages(self, localedir):
        """Later languages answer messages the first one lacks."""
        write_mo_file(
            localedir,
            "de",
            "messages",
            messages={"Hello!": "Hallo!", "Goodbye": "Tschüss"},
        )
        catalog = GNUTranslationsCatalog(localedir, languages=["fr", "de"])
        assert lookup(catalog, {"gettext": "Hello!"}) == "Bonjour !"
        assert lookup(catalog, {"gettext": "Goodbye"}) == "Tschüss"


class TestCorruptCatalogs:
    """Tests for unreadable .mo files."""

    @pytest.mark.parametrize(
        "content", [b"\x95\x04", b"\xde\x12\x04\x95" + b"\x00" * 8, b"not a catalog"]
    )
    def test_corrupt_catalog_is_skipped(self, tmp_path, content):
        """Unreadable catalogs behave like missing ones."""
        mofile = tmp_path / "fr" / "LC_MESSAGES" / "messages.mo"
        mofile.parent.mkdir(parents=True)
        mofile.write_bytes(content)
        catalog = GNUTranslationsCatalog(tmp_path, languages=["fr"])

        result = Resolver(catalog).try_resolve({"gettext": "Hi"})

        assert result.is_success
        assert result.data == "Hi"

    def test_corrupt_catalog_falls_back_to_next_language(self, localedir):
        """A later language answers when the first catalog is unreadable."""
        (localedir / "fr" / "LC_MESSAGES" / "messages.mo").write_bytes(b"\x95\x04")
        write_mo_file(localedir, "de", "messages", messages={"Hello!": "Hallo!"})
        catalog = GNUTranslationsCatalog(localedir, languages=["fr", "de"])

        assert lookup(catalog, {"gettext": "Hello!"}) == "Hallo!"


class TestCandidateLanguages:
    """Tests for language list expansion."""

    def test_expansion(self, localedir):
        """Languages expand from most to least specific."""
        catalog = GNUTranslationsCatalog(localedir, languages=["fr_CA.UTF-8@euro"])
        assert catalog.candidate_languages() == [
            "fr_CA.UTF-8@euro",
            "fr_CA.UTF-8",
            "fr_CA@euro",
            "fr_CA",
            "fr@euro",
            "fr",
        ]

    def test_c_locale_stops_search(self, localedir):
        """C and POSIX end the language list."""
        catalog = GNUTranslationsCatalog(localedir, languages=["de", "C", "fr"])
        assert catalog.candidate_languages() == ["de"]

    def test_environment(self, localedir, monkeypatch):
        """Without explicit languages the environment is read."""
        monkeypatch.setenv("LANGUAGE", "fr_BE:de")
        catalog = GNUTranslationsCatalog(localedir)
        assert catalog.candidate_languages() == ["fr_BE", "fr", "de"]
        assert lookup(catalog, {"gettext": "Hello!"}) == "Bonjour !"

    def test_environment_c_locale(self, localedir, monkeypatch):
        """An environment without languages yields no candidates."""
        for var in ("LANGUAGE", "LC_ALL", "LC_MESSAGES", "LANG"):
            monkeypatch.delenv(var, raising=False)
        catalog = GNUTranslationsCatalog(localedir)
        assert catalog.candidate_languages() == []
        assert lookup(catalog, {"gettext": "Hello!"}) == "Hello!"
