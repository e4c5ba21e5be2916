import logging
from pathlib import Path
from typing import Iterable, List

from app.errors import DiscoveryError, ParseError

logger = logging.getLogger(__name__)


class FilePostsRepo:
    def __init__(self, posts_dir: Path, extensions: Iterable[str] = (".yaml",)):
        self.posts_dir = Path(posts_dir)
        self.extensions = tuple(ext.lower() for ext in extensions)

    def list_post_files(self) -> List[Path]:
        """List post files in the posts directory, sorted by filename."""
        try:
            entries = list(self.posts_dir.iterdir())
        except OSError as e:
            raise DiscoveryError(
                f"Error reading posts directory: {e}", self.posts_dir
            ) from e

        files = [
            entry
            for entry in entries
            if entry.suffix.lower() in self.extensions and entry.is_file()
        ]
        files.sort(key=lambda path: path.name)
        logger.debug(f"Found {len(files)} post files in {self.posts_dir}")
        return files

    def read_post(self, path: Path) -> bytes:
        try:
            return path.read_bytes()
        except OSError as e:
            raise ParseError(f"Error reading file: {e}", path) from e

    @staticmethod
    def slug_for(path: Path) -> str:
        return path.stem
