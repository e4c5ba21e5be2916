import logging

from fastapi import APIRouter, Depends, HTTPException, Request
from fastapi.responses import HTMLResponse, RedirectResponse

from app import dependencies as deps
from app.errors import PostsError
from app.schemas.blog import ListingPage, PostPage
from app.services.page_renderer import PageRenderer
from app.services.posts_service import PostsService

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/", response_class=HTMLResponse)
def list_posts(
    request: Request,
    service: PostsService = Depends(deps.get_posts_service),
    renderer: PageRenderer = Depends(deps.get_page_renderer),
):
    """Render the listing of all posts."""
    try:
        posts = service.list_posts()
    except PostsError as e:
        logger.error(f"Error loading posts: {e}")
        raise HTTPException(status_code=500, detail="Failed to load posts")
    return renderer.render(request, ListingPage(posts=posts))


@router.get("/post/")
def post_without_slug():
    return RedirectResponse(url="/", status_code=303)


@router.get("/post/{slug}", response_class=HTMLResponse)
def get_post(
    slug: str,
    request: Request,
    service: PostsService = Depends(deps.get_posts_service),
    renderer: PageRenderer = Depends(deps.get_page_renderer),
):
    """Render a single post by slug."""
    try:
        post = service.get_post(slug)
    except PostsError as e:
        logger.error(f"Error loading posts: {e}")
        raise HTTPException(status_code=500, detail="Failed to load posts")
    if post is None:
        logger.info(f"Post not found: {slug}")
        raise HTTPException(status_code=404, detail="Post not found")
    return renderer.render(request, PostPage(post=post))
