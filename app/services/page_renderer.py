import logging
from pathlib import Path

import jinja2
from fastapi import HTTPException, Request
from fastapi.templating import Jinja2Templates

from app.schemas.blog import ListingPage, Page, PostPage

logger = logging.getLogger(__name__)

TEMPLATE_EXT = ".page.html"

# Page kind -> template name (without extension)
PAGE_TEMPLATES = {
    "post": "posts",
    "listing": "blog",
}


class PageRenderer:
    def __init__(self, templates_dir: Path):
        self.templates = Jinja2Templates(directory=str(templates_dir))

    def render(self, request: Request, page: Page):
        template_name = PAGE_TEMPLATES[page.kind] + TEMPLATE_EXT
        try:
            return self.templates.TemplateResponse(
                request, template_name, self._context(page)
            )
        except jinja2.TemplateNotFound as e:
            logger.error(f"Template not found: {e}")
            raise HTTPException(status_code=500, detail="Error loading template")
        except jinja2.TemplateError as e:
            logger.error(f"Error rendering template {template_name}: {e}")
            raise HTTPException(status_code=500, detail="Error rendering template")

    @staticmethod
    def _context(page: Page) -> dict:
        if isinstance(page, PostPage):
            return {"post": page.post}
        if isinstance(page, ListingPage):
            return {"posts": page.posts}
        raise TypeError(f"Unsupported page type: {type(page).__name__}")
