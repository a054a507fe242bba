"""Loading of the keyword table used by the keyword matcher."""

from pathlib import Path
from types import MappingProxyType
from typing import Dict, List, Mapping, Optional, Tuple

import yaml
from pydantic import TypeAdapter, ValidationError

from models.subcategory import CategoryType
from logger import get_logger

logger = get_logger()

# category type -> subcategory id -> keywords
KeywordMap = Mapping[CategoryType, Mapping[str, Tuple[str, ...]]]

_KEYWORD_FILE_ADAPTER = TypeAdapter(Dict[CategoryType, Dict[str, List[str]]])


class KeywordConfigError(Exception):
    """Keyword file is missing or malformed."""


def get_default_keywords_path() -> Path:
    """Get the path to the bundled keyword file."""
    return Path(__file__).parent / "keywords.yaml"


def build_keyword_map(data: Mapping) -> KeywordMap:
    """Validate raw keyword data and freeze it into a read-only KeywordMap.

    Args:
        data: Mapping of category type -> subcategory id -> list of keywords.

    Returns:
        Read-only KeywordMap.

    Raises:
        KeywordConfigError: If the data does not have the expected shape.
    """
    try:
        parsed = _KEYWORD_FILE_ADAPTER.validate_python(data or {})
    except ValidationError as e:
        raise KeywordConfigError(f"Invalid keyword configuration: {e}") from e

    return MappingProxyType(
        {
            category_type: MappingProxyType(
                {
                    subcategory_id: tuple(keywords)
                    for subcategory_id, keywords in subcategories.items()
                }
            )
            for category_type, subcategories in parsed.items()
        }
    )


def load_keyword_map(path: Optional[Path] = None) -> KeywordMap:
    """Load the keyword table from a YAML file.

    Args:
        path: YAML file to load. Defaults to the bundled keywords.yaml.

    Returns:
        Read-only KeywordMap.

    Raises:
        KeywordConfigError: If the file doesn't exist or can't be parsed.
    """
    keywords_file = path or get_default_keywords_path()

    if not keywords_file.exists():
        raise KeywordConfigError(f"Keyword file not found: {keywords_file}")

    logger.info(f"Loading keywords from {keywords_file}")

    try:
        with open(keywords_file, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise KeywordConfigError(f"Error parsing keyword file {keywords_file}: {e}") from e

    return build_keyword_map(data)
