import logging
from typing import Sequence

from markdown_it import MarkdownIt

from app.errors import ConversionError

logger = logging.getLogger(__name__)


def markdown_to_html(text: str, extensions: Sequence[str] = ()) -> str:
    """
    Convert a CommonMark string into HTML.

    Raw HTML in the source is escaped, never passed through. `extensions`
    names extra markdown-it rules to enable, e.g. "table" or "strikethrough".
    """
    try:
        md = MarkdownIt("commonmark", {"html": False})
        if extensions:
            md.enable(list(extensions))
        return md.render(text)
    except Exception as e:
        logger.error(f"Error converting markdown to HTML: {e}")
        raise ConversionError(f"Error converting markdown to HTML: {e}") from e
