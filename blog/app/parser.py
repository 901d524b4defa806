"""Parsing of a post file's front matter and markdown body."""

import datetime
from typing import Any

import frontmatter  # type: ignore[reportMissingTypeStubs]
import markdown
import pydantic
import yaml

UNTITLED = 'Untitled'
MARKDOWN_EXTENSIONS = ['fenced_code', 'codehilite', 'tables', 'toc']


class PostParseError(ValueError):
    """Raised when a post file's front matter cannot be parsed."""


class FrontMatterLoader(yaml.SafeLoader):
    """SafeLoader that keeps timestamps as their source text.

    Dates are only used for ordering and display, so `2024-02-30` must load
    rather than fail calendar validation.
    """


FrontMatterLoader.add_constructor(
    'tag:yaml.org,2002:timestamp', FrontMatterLoader.construct_yaml_str
)


class Post(pydantic.BaseModel):
    """A single render-ready blog post.

    `content` is HTML produced from the post's own markdown and is injected
    into pages without escaping.
    """

    model_config = pydantic.ConfigDict(frozen=True)

    slug: str
    title: str
    date: str
    excerpt: str | None = None
    tags: list[str] = []
    published: bool = True
    content: str


def render_markdown(text: str) -> str:
    """Render a markdown body to HTML."""
    return markdown.markdown(text, extensions=MARKDOWN_EXTENSIONS)


def split_front_matter(slug: str, text: str) -> tuple[dict[str, Any], str]:
    """Split raw text into its front matter mapping and markdown body.

    Text without a complete `---` block is all body. Raises PostParseError if
    the block is not valid YAML or does not hold a mapping.
    """
    handler = frontmatter.YAMLHandler()
    text = text.strip()
    if not handler.detect(text):
        return {}, text
    try:
        fm, content = handler.split(text)
    except ValueError:
        return {}, text

    try:
        metadata = handler.load(fm, Loader=FrontMatterLoader)
    except (yaml.YAMLError, ValueError) as e:
        raise PostParseError(f'Invalid front matter in {slug!r}: {e}') from e
    if metadata is None:
        return {}, content
    if not isinstance(metadata, dict):
        raise PostParseError(
            f'Front matter in {slug!r} must be a mapping, '
            f'got {type(metadata).__name__}'
        )
    return metadata, content


def _as_date(value: Any) -> str:
    if value is None or value == '':
        return datetime.date.today().isoformat()
    text = str(value).strip()
    try:
        return datetime.datetime.fromisoformat(text).date().isoformat()
    except ValueError:
        return text


def _as_tags(value: Any) -> list[str]:
    if value is None:
        return []
    if isinstance(value, list | tuple):
        return [str(tag) for tag in value if tag is not None]
    return [str(value)]


def parse_post(slug: str, text: str) -> Post:
    """Parse a post file's raw text into a Post.

    Metadata is read from an optional leading YAML front matter block. Missing
    fields fall back to defaults: title 'Untitled', today's date, no tags, and
    published unless `published` is explicitly false. Timestamps become ISO
    calendar dates where they parse as one and are kept verbatim otherwise.

    Raises PostParseError if the front matter is not a valid YAML mapping.
    """
    metadata, body = split_front_matter(slug, text)
    title = metadata.get('title')
    excerpt = metadata.get('excerpt')

    return Post(
        slug=slug,
        title=str(title) if title else UNTITLED,
        date=_as_date(metadata.get('date')),
        excerpt=str(excerpt) if excerpt is not None else None,
        tags=_as_tags(metadata.get('tags')),
        published=metadata.get('published') is not False,
        content=render_markdown(body),
    )
