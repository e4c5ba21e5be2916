import logging
from functools import partial
from typing import Callable, List, Optional, Sequence

from app.errors import ConversionError
from app.schemas.blog import Post
from app.services.markdown_converter import markdown_to_html
from app.services.post_index import PostIndex, SharedPostIndex
from app.services.post_parser import parse_post

logger = logging.getLogger(__name__)


def load_all(
    repo, *, convert: Callable[[str], str] = markdown_to_html
) -> PostIndex:
    """
    Build a new index from every post file in the repo.

    Any discovery, parse or conversion error aborts the whole build and
    propagates; a partial index is never returned.
    """
    index = PostIndex()
    for path in repo.list_post_files():
        parsed = parse_post(repo.read_post(path), path)
        slug = repo.slug_for(path)
        try:
            html = convert(parsed.content)
        except ConversionError as e:
            raise ConversionError(str(e), path) from e
        index.add(parsed.model_copy(update={"slug": slug, "html": html}))

    logger.debug(f"Built post index with {len(index)} posts")
    return index


class PostsService:
    def __init__(
        self,
        repo,
        shared_index: Optional[SharedPostIndex] = None,
        markdown_extensions: Sequence[str] = (),
    ):
        self.repo = repo
        self.shared_index = shared_index
        self.convert = partial(markdown_to_html, extensions=tuple(markdown_extensions))

    def load_all(self) -> PostIndex:
        if self.shared_index is not None:
            return self.shared_index.current()
        return load_all(self.repo, convert=self.convert)

    def list_posts(self) -> List[Post]:
        posts = self.load_all().all()
        # Dated posts first, newest first by text comparison of `date`
        # (chronological for ISO dates), then undated posts
        posts.sort(key=lambda post: (bool(post.date), post.date), reverse=True)
        return posts

    def get_post(self, slug: str) -> Optional[Post]:
        return self.load_all().get(slug)
