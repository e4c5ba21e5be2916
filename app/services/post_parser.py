import logging
from pathlib import Path
from typing import Optional

import yaml

from app.errors import ParseError
from app.schemas.blog import Post

logger = logging.getLogger(__name__)

# Post file key -> Post field
FIELD_MAP = {
    "title": "title",
    "excerpt": "excerpt",
    "created": "date",
    "content": "content",
}

# Plain scalars of these types stay text exactly as written
TEXT_TAGS = {
    "tag:yaml.org,2002:bool",
    "tag:yaml.org,2002:int",
    "tag:yaml.org,2002:float",
    "tag:yaml.org,2002:timestamp",
}


class PostLoader(yaml.SafeLoader):
    """SafeLoader that only resolves null implicitly."""


PostLoader.yaml_implicit_resolvers = {
    first: [(tag, regexp) for tag, regexp in resolvers if tag not in TEXT_TAGS]
    for first, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
}


def parse_post(data: bytes, path: Optional[Path] = None) -> Post:
    """
    Parse the YAML document of a post file.

    The returned Post has no html and no slug yet; the index builder
    fills both.
    """
    try:
        text = data.decode("utf-8")
    except UnicodeDecodeError as e:
        raise ParseError(f"Error decoding file: {e}", path) from e

    try:
        document = yaml.load(text, Loader=PostLoader)
    except yaml.YAMLError as e:
        raise ParseError(f"Error unmarshalling file: {e}", path) from e

    if document is None:
        logger.warning(f"Empty post file {path or ''}")
        return Post()
    if not isinstance(document, dict):
        raise ParseError(
            f"Expected a mapping at the top level, got {type(document).__name__}",
            path,
        )

    fields = {}
    for key, field in FIELD_MAP.items():
        fields[field] = _text_value(document.get(key), key, path)

    if not fields["title"]:
        logger.warning(f"Post file {path or ''} has no title")

    return Post(**fields)


def _text_value(value, key: str, path: Optional[Path]) -> str:
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    raise ParseError(
        f"Field '{key}' must be text, got {type(value).__name__}", path
    )
