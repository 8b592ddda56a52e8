"""Loading of JSON and YAML documents into the value model."""

import json
from pathlib import Path
from typing import Any, Union

import yaml

from serde_gettext.i18n.errors import DocumentParseError
from serde_gettext.logging import get_module_logger

logger = get_module_logger()

JSON = "json"
YAML = "yaml"

SUFFIX_FORMATS = {
    ".json": JSON,
    ".yml": YAML,
    ".yaml": YAML,
}


def load_document(text: str, fmt: str = JSON) -> Any:
    """Parse JSON or YAML text into plain Python values.

    Args:
        text: Serialized document.
        fmt: "json" or "yaml".

    Returns:
        The decoded tree (dict, list or scalar).

    Raises:
        DocumentParseError: If the text cannot be parsed.
        ValueError: If fmt is not a supported format.
    """
    if fmt == JSON:
        try:
            return json.loads(text)
        except json.JSONDecodeError as e:
            raise DocumentParseError(f"invalid JSON document: {e}") from e
        except RecursionError as e:
            raise DocumentParseError("JSON document is nested too deeply") from e
    if fmt == YAML:
        try:
            return yaml.safe_load(text)
        except yaml.YAMLError as e:
            raise DocumentParseError(f"invalid YAML document: {e}") from e
        except RecursionError as e:
            raise DocumentParseError("YAML document is nested too deeply") from e
    raise ValueError(f"Unsupported document format: {fmt}")


def load_document_file(path: Union[str, Path]) -> Any:
    """Read and parse a document file; the format follows the file suffix.

    Raises:
        DocumentParseError: If the file cannot be parsed or is not UTF-8.
        ValueError: If the suffix is not .json, .yml or .yaml.
    """
    path = Path(path)
    fmt = SUFFIX_FORMATS.get(path.suffix.lower())
    if fmt is None:
        raise ValueError(f"Unsupported document file: {path}")

    try:
        with open(path, "r", encoding="utf-8") as f:
            text = f.read()
    except UnicodeDecodeError as e:
        logger.error("document_parse_error", file=str(path), error=str(e))
        raise DocumentParseError(f"document is not valid UTF-8: {e}") from e

    try:
        document = load_document(text, fmt)
    except DocumentParseError as e:
        logger.error("document_parse_error", file=str(path), error=str(e))
        raise

    logger.info("loaded_document", file=str(path), format=fmt)
    return document
