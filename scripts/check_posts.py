import logging
import sys

from app.errors import PostsError
from app.repos.posts_repo import FilePostsRepo
from app.services.posts_service import PostsService
from app.settings import settings

logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper()),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


def main() -> int:
    repo = FilePostsRepo(settings.POSTS_DIR, settings.POSTS_EXTENSIONS)
    try:
        index = PostsService(
            repo, markdown_extensions=settings.MARKDOWN_EXTENSIONS
        ).load_all()
    except PostsError as e:
        logger.error(f"Post check failed: {e}")
        return 1

    for post in index.all():
        logger.info(f"{post.slug}: {post.title or '(untitled)'}")
    logger.info(f"Checked {len(index)} posts in {settings.POSTS_DIR}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
