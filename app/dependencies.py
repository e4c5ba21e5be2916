from fastapi import Depends, Request

from app.repos.posts_repo import FilePostsRepo
from app.services.page_renderer import PageRenderer
from app.services.posts_service import PostsService
from app.settings import Settings, settings


def get_settings() -> Settings:
    """Small wrapper to allow dependency overrides in tests."""
    return settings


def get_shared_index(request: Request):
    return getattr(request.app.state, "post_index", None)


def get_posts_repo(current_settings: Settings = Depends(get_settings)):
    return FilePostsRepo(current_settings.POSTS_DIR, current_settings.POSTS_EXTENSIONS)


def get_posts_service(
    repo=Depends(get_posts_repo),
    shared_index=Depends(get_shared_index),
    current_settings: Settings = Depends(get_settings),
):
    return PostsService(
        repo=repo,
        shared_index=shared_index,
        markdown_extensions=current_settings.MARKDOWN_EXTENSIONS,
    )


def get_page_renderer(current_settings: Settings = Depends(get_settings)):
    return PageRenderer(current_settings.TEMPLATES_DIR)
