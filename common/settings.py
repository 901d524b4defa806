"""Shared application settings read from environment variables."""

import os
import pathlib

CONTENT_DIR: pathlib.Path = pathlib.Path(
    os.environ.get('BLOG_CONTENT_DIR', pathlib.Path.cwd() / 'content' / 'blog')
)
SITE_TITLE: str = os.environ.get('SITE_TITLE', 'My Blog')
SITE_DESCRIPTION: str = os.environ.get(
    'SITE_DESCRIPTION',
    'Thoughts, tutorials, and insights from my development journey.',
)
SITE_URL: str = os.environ.get('SITE_URL', 'http://localhost:8000').rstrip('/')
LOG_LEVEL: str = os.environ.get('LOG_LEVEL', 'INFO').upper()
