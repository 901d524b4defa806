"""Test configuration and fixtures for blog tests."""

import pathlib
from collections.abc import Generator

import fastapi.testclient
import pytest

from blog.app import blog, main


def write_post(directory: pathlib.Path, slug: str, text: str) -> pathlib.Path:
    """Write a markdown post into directory and return its path."""
    path = directory / f'{slug}.md'
    path.write_text(text, encoding='utf-8')
    return path


@pytest.fixture(name='content_dir')
def content_dir_fixture(tmp_path: pathlib.Path) -> pathlib.Path:
    """A content directory holding two published posts and one unpublished post."""
    write_post(
        tmp_path,
        'a',
        "---\ntitle: 'Post A'\ndate: '2024-03-01'\npublished: true\n---\n# A\n",
    )
    write_post(
        tmp_path,
        'b',
        "---\ntitle: 'Post B'\ndate: '2024-02-01'\npublished: false\n---\n# B\n",
    )
    write_post(
        tmp_path,
        'c',
        "---\ntitle: 'Post C'\ndate: '2024-01-01'\ntags: ['x']\n---\n# C\n",
    )
    return tmp_path


@pytest.fixture(name='repository')
def repository_fixture(content_dir: pathlib.Path) -> blog.PostRepository:
    """A repository over the sample content directory."""
    return blog.PostRepository(content_dir)


@pytest.fixture(name='client')
def client_fixture(
    repository: blog.PostRepository,
) -> Generator[fastapi.testclient.TestClient, None, None]:
    """A test client for the FastAPI app serving the sample content directory."""
    main.app.dependency_overrides[main.get_repository] = lambda: repository
    yield fastapi.testclient.TestClient(main.app)
    main.app.dependency_overrides.clear()
