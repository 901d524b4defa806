"""Filesystem access to the directory of markdown post files."""

import pathlib

POST_SUFFIX = '.md'

# Path segments under /blog that belong to other pages
RESERVED_SLUGS = frozenset({'tags'})


def is_plain_name(name: str) -> bool:
    """Return True if name is usable as a single, non-hidden path segment."""
    if not name or name.startswith('.') or '\\' in name:
        return False
    return pathlib.PurePath(name).name == name


class ContentStore:
    """A directory of `<slug>.md` files, one per post.

    The store is only ever read, apart from creating the directory itself.
    """

    root: pathlib.Path

    def __init__(self, root: pathlib.Path | str) -> None:
        self.root = pathlib.Path(root)

    def ensure_exists(self) -> None:
        """Create the store directory (and parents) if it does not exist yet."""
        self.root.mkdir(parents=True, exist_ok=True)

    def list_candidate_files(self) -> list[str]:
        """Return the sorted names of post files, or an empty list if there are none."""
        if not self.root.is_dir():
            return []
        return sorted(
            path.name
            for path in self.root.iterdir()
            if path.name.endswith(POST_SUFFIX) and path.is_file()
        )

    def path_for(self, slug: str) -> pathlib.Path | None:
        """Return the expected file path for a slug.

        Returns None for slugs that are not a plain file name, so that a lookup
        can never resolve outside the store.
        """
        if not is_plain_name(slug):
            return None
        return self.root / f'{slug}{POST_SUFFIX}'

    def read(self, name: str) -> str:
        """Read a post file's raw text.

        Raises OSError if the file cannot be read, UnicodeDecodeError if not UTF-8.
        """
        return (self.root / name).read_text(encoding='utf-8')


def slug_from_name(name: str) -> str:
    """Derive a post slug from its file name."""
    return name.removesuffix(POST_SUFFIX)
