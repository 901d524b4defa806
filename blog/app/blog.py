"""Blog post loading, filtering and querying."""

import asyncio
import logging
import pathlib

from . import parser, store

logger = logging.getLogger(__name__)


class PostRepository:
    """Read-only queries over the posts in a content store.

    Every call re-reads the store; nothing is cached between calls. Unpublished
    posts are never returned, and lookups that fail for any reason return None.
    """

    store: store.ContentStore

    def __init__(self, content: store.ContentStore | pathlib.Path | str) -> None:
        if isinstance(content, store.ContentStore):
            self.store = content
        else:
            self.store = store.ContentStore(content)

    def _load(self, name: str) -> parser.Post:
        return parser.parse_post(store.slug_from_name(name), self.store.read(name))

    async def _load_or_skip(self, name: str) -> parser.Post | None:
        try:
            return await asyncio.to_thread(self._load, name)
        except (OSError, ValueError) as e:
            logger.warning('Failed to load post %r: %s', name, e)
            return None

    async def get_all_posts(self) -> list[parser.Post]:
        """Return all published posts, newest first.

        Files that cannot be read or parsed are skipped and logged.
        """
        self.store.ensure_exists()
        names = self.store.list_candidate_files()
        if not names:
            return []

        loaded = await asyncio.gather(*(self._load_or_skip(name) for name in names))
        posts = [p for p in loaded if p is not None and p.published]
        return sorted(posts, key=lambda p: p.date, reverse=True)

    async def get_post_by_slug(self, slug: str) -> parser.Post | None:
        """Return the published post with the given slug, or None.

        Missing, unpublished and unreadable posts are all reported as None.
        """
        path = self.store.path_for(slug)
        try:
            self.store.ensure_exists()
            if path is None or not path.is_file():
                return None
        except OSError as e:
            # e.g. ENAMETOOLONG, which pathlib does not treat as "missing"
            logger.warning('Failed to look up post %r: %s', slug[:80], e)
            return None

        post = await self._load_or_skip(path.name)
        if post is None or not post.published:
            return None
        return post

    async def get_all_tags(self) -> list[str]:
        """Return every tag used by a published post, sorted and de-duplicated."""
        posts = await self.get_all_posts()
        return sorted({tag for post in posts for tag in post.tags})

    async def get_posts_by_tag(self, tag: str) -> list[parser.Post]:
        """Return published posts carrying the given tag, newest first."""
        posts = await self.get_all_posts()
        return [post for post in posts if tag in post.tags]
