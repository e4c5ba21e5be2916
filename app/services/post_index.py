import logging
import threading
from typing import Callable, Dict, Iterator, List, Optional

from app.schemas.blog import Post

logger = logging.getLogger(__name__)


class PostIndex:
    """Posts keyed by slug, as produced by one build pass."""

    def __init__(self, posts: Optional[Dict[str, Post]] = None):
        self._posts: Dict[str, Post] = dict(posts or {})

    def add(self, post: Post) -> None:
        if post.slug in self._posts:
            logger.debug(f"Slug {post.slug} already indexed, replacing")
        self._posts[post.slug] = post

    def get(self, slug: str) -> Optional[Post]:
        return self._posts.get(slug)

    def all(self) -> List[Post]:
        return list(self._posts.values())

    def __contains__(self, slug) -> bool:
        return slug in self._posts

    def __iter__(self) -> Iterator[str]:
        return iter(self._posts)

    def __len__(self) -> int:
        return len(self._posts)


class SharedPostIndex:
    """
    One process-wide index, replaced only after a full rebuild succeeds.
    Readers always see a complete index: the previous one or the new one.
    Rebuilds run one at a time, so a slower build never overwrites a
    newer index.
    """

    def __init__(self, builder: Callable[[], PostIndex]):
        self.builder = builder
        self._lock = threading.Lock()  # guards the index reference
        self._build_lock = threading.Lock()  # serializes rebuilds
        self._index: Optional[PostIndex] = None

    def current(self) -> PostIndex:
        with self._lock:
            index = self._index
        if index is not None:
            return index
        with self._build_lock:
            with self._lock:
                index = self._index
            if index is None:
                index = self._rebuild()
        return index

    def refresh(self) -> PostIndex:
        """Build a new index and swap it in; keeps the old one on failure."""
        with self._build_lock:
            return self._rebuild()

    def _rebuild(self) -> PostIndex:
        try:
            index = self.builder()
        except Exception as e:
            logger.error(f"Index rebuild failed, keeping previous index: {e}")
            raise
        with self._lock:
            self._index = index
        logger.info(f"Post index refreshed with {len(index)} posts")
        return index

    @property
    def loaded(self) -> bool:
        with self._lock:
            return self._index is not None
