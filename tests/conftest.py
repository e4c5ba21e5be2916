import textwrap
from pathlib import Path

import pytest

from app.errors import ParseError


class FakeRepo:
    """
    Minimal posts repo stand-in. Files are listed in the given order,
    which lets tests pin the enumeration order.
    """

    def __init__(self, files: list[tuple[str, str | bytes]]):
        self.files = files
        self.reads = []

    def list_post_files(self):
        return [Path(name) for name, _ in self.files]

    def read_post(self, path: Path) -> bytes:
        self.reads.append(path.name)
        for name, data in self.files:
            if name == path.name:
                if isinstance(data, str):
                    return textwrap.dedent(data).lstrip().encode("utf-8")
                return data
        raise ParseError("Error reading file", path)

    @staticmethod
    def slug_for(path: Path) -> str:
        return path.stem


class FakePostsService:
    """
    Minimal posts service stand-in for router tests.
    """

    def __init__(self, list_posts_return=None, get_post_return=None):
        self._list_posts_return = list_posts_return or []
        self._get_post_return = get_post_return
        self.requested_slugs = []

    def list_posts(self):
        return self._list_posts_return

    def get_post(self, slug: str):
        self.requested_slugs.append(slug)
        return self._get_post_return


def write_post(directory: Path, name: str, body: str) -> Path:
    path = directory / name
    path.write_text(textwrap.dedent(body).lstrip(), encoding="utf-8")
    return path


@pytest.fixture
def posts_dir(tmp_path):
    directory = tmp_path / "posts"
    directory.mkdir()
    return directory
