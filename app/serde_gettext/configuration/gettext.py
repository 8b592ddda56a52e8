"""Catalog and resolution settings."""

import sys
from pathlib import Path
from typing import List, Optional

from pydantic import Field, field_validator

from serde_gettext.configuration.base import ComponentSettings


def max_depth_limit() -> int:
    """Deepest nesting the interpreter stack can resolve.

    Each nesting level costs about six frames; the rest is headroom for the
    caller's own stack.
    """
    return sys.getrecursionlimit() // 10


class GettextSettings(ComponentSettings):
    """Settings for catalog lookup and document resolution.

    Environment Variables:
        GETTEXT_LOCALEDIR: Directory holding <lang>/LC_<CATEGORY>/<domain>.mo files.
            When unset, resolvers use the identity catalog.
        GETTEXT_DEFAULT_DOMAIN: Domain used by non-domain functions (default: messages)
        GETTEXT_LANGUAGES: Comma separated language list (default: from environment)
        GETTEXT_MAX_DEPTH: Maximum nesting depth of argument documents (default: 32)
            Must lie between 1 and max_depth_limit().
        GETTEXT_USE_LOCAL_TIME: Render date/time arguments with the local clock
            (default: True)

    Example:
        ```python
        from serde_gettext.configuration import settings

        if settings.gettext.localedir:
            languages = settings.gettext.language_list
        ```
    """

    localedir: Optional[Path] = Field(
        default=None,
        alias="GETTEXT_LOCALEDIR",
        description="Root directory of compiled message catalogs",
    )
    default_domain: str = Field(
        default="messages",
        alias="GETTEXT_DEFAULT_DOMAIN",
        description="Text domain for gettext, ngettext, pgettext and npgettext",
    )
    languages: Optional[str] = Field(
        default=None,
        alias="GETTEXT_LANGUAGES",
        description="Comma separated languages in preference order",
    )
    max_depth: int = Field(
        default=32,
        alias="GETTEXT_MAX_DEPTH",
        description="Maximum nesting depth of argument documents",
    )
    use_local_time: bool = Field(
        default=True,
        alias="GETTEXT_USE_LOCAL_TIME",
        description="Render strftime arguments with the local clock",
    )

    @field_validator("max_depth")
    @classmethod
    def _check_max_depth(cls, value: int) -> int:
        if value < 1:
            raise ValueError("GETTEXT_MAX_DEPTH must be at least 1")
        limit = max_depth_limit()
        if value > limit:
            raise ValueError(f"GETTEXT_MAX_DEPTH must be at most {limit}")
        return value

    @property
    def language_list(self) -> Optional[List[str]]:
        """Languages split into a list, or None to read them from the environment."""
        if not self.languages:
            return None
        languages = [part.strip() for part in self.languages.split(",")]
        return [language for language in languages if language] or None
