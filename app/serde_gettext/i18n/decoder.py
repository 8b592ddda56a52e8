"""Decoding of generic value trees into gettext documents.

The document format is closed: exactly one function key, an optional
``args`` key and nothing else.
"""

from dataclasses import fields
from typing import Any, Dict

from serde_gettext.i18n.errors import (
    AmbiguousOrMissingFunction,
    MissingField,
    TypeMismatch,
    UnexpectedKey,
)
from serde_gettext.i18n.models import (
    REQUEST_TYPES,
    ArgumentTable,
    Category,
    Gettext,
    GettextRequest,
    SerdeGetText,
    ValueKind,
    value_kind,
)

ARGS_KEY = "args"


def decode(value: Any) -> SerdeGetText:
    """Interpret a decoded tree as a gettext document.

    Args:
        value: Mapping produced by a JSON/YAML decoder (or built by hand).

    Returns:
        SerdeGetText holding the request and its argument table.

    Raises:
        AmbiguousOrMissingFunction: If zero or several function keys are present.
        UnexpectedKey: If the document or request body has unknown keys.
        TypeMismatch: If a field has the wrong shape.
        UnrecognizedCategory: If ``category`` is not a locale category.

    Examples:
        >>> decode({"gettext": {"msgid": "Hello!"}}).request
        Gettext(msgid='Hello!')
    """
    kind = value_kind(value, "document")
    if kind is not ValueKind.MAPPING:
        raise TypeMismatch("document", "mapping", kind.value)

    found = [key for key in value if key in REQUEST_TYPES]
    if len(found) != 1:
        raise AmbiguousOrMissingFunction(found)
    function = found[0]

    unknown = [key for key in value if key != function and key != ARGS_KEY]
    if unknown:
        raise UnexpectedKey("document", [str(key) for key in unknown])

    request = decode_request(function, value[function])
    args = None
    if value.get(ARGS_KEY) is not None:
        args = ArgumentTable.from_value(value[ARGS_KEY], ARGS_KEY)
    return SerdeGetText(request=request, args=args)


def decode_request(function: str, body: Any) -> GettextRequest:
    """Decode the body of a single function key into its request variant.

    ``gettext`` also accepts a bare string as shorthand for ``{msgid: ...}``.
    """
    request_type = REQUEST_TYPES[function]
    if request_type is Gettext and isinstance(body, str):
        return Gettext(msgid=body)

    kind = value_kind(body, function)
    if kind is not ValueKind.MAPPING:
        raise TypeMismatch(function, "mapping", kind.value)

    expected = [field.name for field in fields(request_type)]
    unknown = [key for key in body if key not in expected]
    if unknown:
        raise UnexpectedKey(function, [str(key) for key in unknown])

    values: Dict[str, Any] = {}
    for name in expected:
        path = f"{function}.{name}"
        if name not in body:
            raise MissingField(path)
        if name == "n":
            values[name] = _decode_count(body[name], path)
        elif name == "category":
            values[name] = _decode_category(body[name], path)
        else:
            values[name] = _decode_text(body[name], path)
    return request_type(**values)


def _decode_text(value: Any, path: str) -> str:
    kind = value_kind(value, path)
    if kind is not ValueKind.TEXT:
        raise TypeMismatch(path, "text", kind.value)
    return value


def _decode_count(value: Any, path: str) -> int:
    # Counts are non-negative integers; integral floats (e.g. 2.0 from YAML) coerce.
    kind = value_kind(value, path)
    if kind is ValueKind.FLOAT and value.is_integer():
        value = int(value)
    elif kind is not ValueKind.INTEGER:
        raise TypeMismatch(path, "non-negative integer", kind.value)
    if value < 0:
        raise TypeMismatch(path, "non-negative integer", str(value))
    return value


def _decode_category(value: Any, path: str) -> Category:
    kind = value_kind(value, path)
    if kind is not ValueKind.TEXT:
        raise TypeMismatch(path, "category name", kind.value)
    return Category.from_string(value)
