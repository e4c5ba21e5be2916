import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles

from app.repos.posts_repo import FilePostsRepo
from app.routers import posts
from app.services.index_refresher import start_refresher, stop_refresher
from app.services.post_index import SharedPostIndex
from app.services.posts_service import PostsService
from app.settings import settings

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper()),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(title="Blog", description="Personal blog served from YAML posts")


@asynccontextmanager
async def lifespan(app: FastAPI):
    if not settings.shared_index:
        logger.info("Posts are reloaded from disk on every request")
        yield
        return

    repo = FilePostsRepo(settings.POSTS_DIR, settings.POSTS_EXTENSIONS)
    builder = PostsService(repo, markdown_extensions=settings.MARKDOWN_EXTENSIONS)
    app.state.post_index = SharedPostIndex(builder.load_all)
    refresher_thread = start_refresher(
        app.state.post_index, settings.INDEX_REFRESH_SECONDS
    )
    logger.info("Post index refresher started in background thread")

    try:
        yield
    finally:
        stop_refresher()
        refresher_thread.join(timeout=10)
        app.state.post_index = None
        logger.info("Post index refresher exited gracefully")


app.router.lifespan_context = lifespan

app.mount(
    "/static",
    StaticFiles(directory=str(settings.STATIC_DIR), check_dir=False),
    name="static",
)
app.include_router(posts.router)
