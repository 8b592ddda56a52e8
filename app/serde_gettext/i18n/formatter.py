"""Placeholder substitution for message templates.

Templates use the printf dialect of Python's ``%`` operator:

- ``%s``, ``%d``, ``%5.2f`` ... consume the next positional argument
- ``%(name)s`` looks an argument up by name
- ``%%`` is a literal percent sign

Arguments are converted to text according to their decoded type. Mapping
arguments are nested documents and are resolved before substitution.
"""

import math
import re
from collections.abc import Mapping
from decimal import Decimal
from typing import Any, Callable, List, Optional

from serde_gettext.i18n.catalog import Catalog
from serde_gettext.i18n.clock import Clock
from serde_gettext.i18n.decoder import ARGS_KEY, decode
from serde_gettext.i18n.errors import (
    GettextError,
    InvalidPlaceholder,
    MalformedArgument,
    TooDeeplyNested,
)
from serde_gettext.i18n.models import (
    FUNCTION_KEYS,
    ArgumentTable,
    SerdeGetText,
    Value,
    ValueKind,
    value_kind,
)

DEFAULT_MAX_DEPTH = 32

# Tokens looked up through Catalog.lookup_literal
NULL_TOKEN = "n/a"
TRUE_TOKEN = "yes"
FALSE_TOKEN = "no"

TEXT_KEY = "text"
STRFTIME_KEY = "strftime"
EPOCH_KEY = "epoch"

PLACEHOLDER_PATTERN = re.compile(
    r"%(?:\((?P<key>[^)]*)\))?"
    r"(?P<flags>[#0\- +]*)"
    r"(?P<width>\d+)?"
    r"(?:\.(?P<precision>\d+))?"
    r"(?P<type>[diouxXeEfFgGcrsa%])"
)

# Conversions applied to numbers as numbers; everything else goes through %s.
NUMERIC_CONVERSIONS = frozenset("diueEfFgG")
INTEGER_CONVERSIONS = frozenset("oxX")

ResolveNested = Callable[[SerdeGetText, int], str]


class Formatter:
    """Substitutes arguments into message templates.

    Attributes:
        catalog: Catalog used for the "yes", "no" and "n/a" tokens.
        clock: Clock for ``{strftime, epoch}`` arguments, or None to reject them.
        max_depth: Deepest nesting level accepted before TooDeeplyNested.
    """

    def __init__(
        self,
        catalog: Catalog,
        resolve_nested: ResolveNested,
        clock: Optional[Clock] = None,
        max_depth: int = DEFAULT_MAX_DEPTH,
    ):
        """Initialize the formatter.

        Args:
            catalog: Catalog for literal tokens.
            resolve_nested: Callback resolving a nested document at a depth.
            clock: Optional date/time collaborator.
            max_depth: Maximum nesting depth.
        """
        self.catalog = catalog
        self.clock = clock
        self.max_depth = max_depth
        self._resolve_nested = resolve_nested

    def format(self, template: str, args: ArgumentTable, depth: int = 0) -> str:
        """Substitute ``args`` into ``template``.

        Positional placeholders consume arguments in document order; unused
        arguments are ignored.

        Args:
            template: Message template from the catalog.
            args: Argument table of the document.
            depth: Nesting depth of the document owning the template.

        Returns:
            The formatted text.

        Raises:
            MissingArgument: If a placeholder names an absent argument.
            InvalidPlaceholder: If the template holds an unsupported ``%`` sequence.
            MalformedArgument: If an argument cannot be rendered.
            TooDeeplyNested: If nested documents exceed max_depth.
        """
        parts: List[str] = []
        next_index = 0
        position = 0

        while True:
            start = template.find("%", position)
            if start < 0:
                parts.append(template[position:])
                break
            parts.append(template[position:start])

            match = PLACEHOLDER_PATTERN.match(template, start)
            if match is None:
                raise InvalidPlaceholder(template, start)
            position = match.end()

            key = match.group("key")
            conversion = match.group("type")
            if conversion == "%":
                if match.group(0) != "%%":
                    raise InvalidPlaceholder(template, start)
                parts.append("%")
                continue

            if key is not None:
                value = args.get(key)
            else:
                value = args.at(next_index)
                next_index += 1

            parts.append(self._convert(value, match, depth))

        return "".join(parts)

    def render(self, value: Value, depth: int = 0) -> str:
        """Convert an argument value to text.

        Args:
            value: Decoded argument value.
            depth: Nesting depth of the document owning the argument.

        Returns:
            Text for substitution.
        """
        kind = value_kind(value)
        if kind is ValueKind.NULL:
            return self.catalog.lookup_literal(NULL_TOKEN)
        if kind is ValueKind.BOOL:
            return self.catalog.lookup_literal(TRUE_TOKEN if value else FALSE_TOKEN)
        if kind is ValueKind.INTEGER:
            return str(value)
        if kind is ValueKind.FLOAT:
            return format_float(value)
        if kind is ValueKind.TEXT:
            return value
        if kind is ValueKind.SEQUENCE:
            return self._join(value, depth)
        return self._render_nested(value, depth + 1)

    def render_mapping(self, value: Mapping, depth: int) -> str:
        """Render a mapping argument without wrapping its errors.

        Mappings holding a function key are nested documents; ``strftime``
        mappings are date/time values and ``text`` mappings are untranslated
        templates with their own ``args``.
        """
        self._check_depth(depth)
        if not any(key in value for key in FUNCTION_KEYS):
            if STRFTIME_KEY in value:
                return self._render_datetime(value)
            if TEXT_KEY in value:
                return self._render_text(value, depth)
        return self._resolve_nested(decode(value), depth)

    def _convert(self, value: Value, match: "re.Match[str]", depth: int) -> str:
        spec = "%" + match.group("flags") + (match.group("width") or "")
        if match.group("precision") is not None:
            spec += "." + match.group("precision")
        conversion = match.group("type")

        kind = value_kind(value)
        if kind is ValueKind.INTEGER or kind is ValueKind.FLOAT:
            if conversion in NUMERIC_CONVERSIONS or (
                conversion in INTEGER_CONVERSIONS and kind is ValueKind.INTEGER
            ):
                try:
                    return (spec + conversion) % value
                except (ValueError, OverflowError):
                    # nan and inf have no integer form
                    pass

        return (spec + "s") % self.render(value, depth)

    def _join(self, items: Any, depth: int) -> str:
        if len(items) < 2:
            raise MalformedArgument(
                "join sequence needs a separator followed by at least one item"
            )
        separator = items[0]
        if not isinstance(separator, str):
            raise MalformedArgument(
                f"join separator must be text, got {value_kind(separator).value}"
            )
        self._check_depth(depth + 1)
        return separator.join(self.render(item, depth + 1) for item in items[1:])

    def _render_nested(self, value: Mapping, depth: int) -> str:
        try:
            return self.render_mapping(value, depth)
        except TooDeeplyNested:
            raise
        except GettextError as e:
            raise MalformedArgument(f"nested argument failed: {e}", inner=e) from e

    def _render_text(self, value: Mapping, depth: int) -> str:
        unknown = [key for key in value if key not in (TEXT_KEY, ARGS_KEY)]
        if unknown:
            raise MalformedArgument(f"unexpected key(s) in text argument: {unknown}")
        template = value[TEXT_KEY]
        if not isinstance(template, str):
            raise MalformedArgument("text argument must be a string")
        args = ArgumentTable.from_value(value.get(ARGS_KEY), f"{TEXT_KEY}.{ARGS_KEY}")
        return self.format(template, args, depth)

    def _render_datetime(self, value: Mapping) -> str:
        if self.clock is None:
            raise MalformedArgument("date/time arguments are not enabled")
        unknown = [key for key in value if key not in (STRFTIME_KEY, EPOCH_KEY)]
        if unknown:
            raise MalformedArgument(
                f"unexpected key(s) in date/time argument: {unknown}"
            )
        spec = value[STRFTIME_KEY]
        epoch = value.get(EPOCH_KEY)
        if not isinstance(spec, str):
            raise MalformedArgument("strftime must be a string")
        if value_kind(epoch) is not ValueKind.INTEGER:
            raise MalformedArgument("epoch must be an integer number of seconds")
        try:
            return self.clock.format(spec, epoch)
        except (ValueError, OverflowError, OSError) as e:
            raise MalformedArgument(f"cannot format epoch {epoch}: {e}") from e

    def _check_depth(self, depth: int) -> None:
        if depth > self.max_depth:
            raise TooDeeplyNested(self.max_depth)


def format_float(value: float) -> str:
    """Shortest round-trip digits of a float in positional notation.

    Exponents are never used ("0.0000001", "100000000000000000000") and
    integral values drop the ".0". ``inf`` and ``nan`` keep their repr.
    """
    if not math.isfinite(value):
        return repr(value)
    text = format(Decimal(repr(value)), "f")
    if text.endswith(".0"):
        text = text[:-2]
    return text
