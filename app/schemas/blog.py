from typing import Annotated, List, Literal, Union

from pydantic import BaseModel, ConfigDict, Field


class Post(BaseModel):
    model_config = ConfigDict(frozen=True)

    title: str = ""
    excerpt: str = ""
    date: str = ""  # `created` in the post file, kept as written
    content: str = ""  # Markdown body
    html: str = ""  # Rendered from content, filled by the index builder
    slug: str = ""  # Filename without extension, filled by the index builder


class PostPage(BaseModel):
    kind: Literal["post"] = "post"
    post: Post


class ListingPage(BaseModel):
    kind: Literal["listing"] = "listing"
    posts: List[Post] = Field(default_factory=list)


Page = Annotated[Union[PostPage, ListingPage], Field(discriminator="kind")]
