"""Render the blog to a directory of static HTML files."""

import argparse
import asyncio
import logging
import pathlib

import jinja2

import common.log
import common.settings
import common.templates
from blog.app import blog, store

logger = logging.getLogger(__name__)

TEMPLATES_DIR = pathlib.Path(__file__).resolve().parent / 'app' / 'templates'
STATIC_DIR = pathlib.Path(__file__).resolve().parent / 'app' / 'static'

# Templates
HOME_TEMPLATE_FILE = 'home.html.jinja2'
INDEX_TEMPLATE_FILE = 'index.html.jinja2'
POST_TEMPLATE_FILE = 'post.html.jinja2'
TAGS_TEMPLATE_FILE = 'tags.html.jinja2'
TAG_TEMPLATE_FILE = 'tag.html.jinja2'
RSS_TEMPLATE_FILE = 'rss.xml.jinja2'

RECENT_POSTS_ON_HOME = 5


def write_page(html: str, path: pathlib.Path) -> None:
    """Write a rendered page, creating parent directories as needed."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(html, encoding='utf-8')


async def generate(
    repository: blog.PostRepository, output_dir: pathlib.Path
) -> list[pathlib.Path]:
    """Render every page of the site into output_dir and return the written paths.

    Pages mirror the web app's routes, e.g. /blog/<slug> is written to
    blog/<slug>/index.html.
    """
    env: jinja2.Environment = common.templates.make_environment(TEMPLATES_DIR)
    posts = await repository.get_all_posts()
    all_tags = await repository.get_all_tags()

    pages: dict[pathlib.Path, str] = {
        output_dir / 'index.html': env.get_template(HOME_TEMPLATE_FILE).render(
            posts=posts[:RECENT_POSTS_ON_HOME]
        ),
        output_dir / 'blog' / 'index.html': env.get_template(
            INDEX_TEMPLATE_FILE
        ).render(posts=posts),
        output_dir / 'blog' / 'tags' / 'index.html': env.get_template(
            TAGS_TEMPLATE_FILE
        ).render(tags=all_tags),
        output_dir / 'rss.xml': env.get_template(RSS_TEMPLATE_FILE).render(
            posts=posts
        ),
    }

    post_template = env.get_template(POST_TEMPLATE_FILE)
    for post in posts:
        if post.slug in store.RESERVED_SLUGS or not store.is_plain_name(post.slug):
            logger.warning('Skipping post %r: slug is not a usable page URL', post.slug)
            continue
        pages[output_dir / 'blog' / post.slug / 'index.html'] = post_template.render(
            post=post
        )

    tag_template = env.get_template(TAG_TEMPLATE_FILE)
    for tag in all_tags:
        if not store.is_plain_name(tag):
            logger.warning('Skipping tag page for %r: not a plain path segment', tag)
            continue
        tagged = [p for p in posts if tag in p.tags]
        pages[output_dir / 'blog' / 'tags' / tag / 'index.html'] = tag_template.render(
            tag=tag, posts=tagged
        )

    for path, html in pages.items():
        write_page(html, path)

    for asset in STATIC_DIR.glob('*'):
        if asset.is_file():
            write_page(
                asset.read_text(encoding='utf-8'), output_dir / 'assets' / asset.name
            )

    logger.info('Wrote %d pages for %d posts to %s', len(pages), len(posts), output_dir)
    return list(pages)


def main() -> None:
    """Generate the static blog from the markdown posts in the content directory."""
    parser = argparse.ArgumentParser(description='Render the blog to static HTML')
    parser.add_argument(
        '--content-dir',
        type=pathlib.Path,
        default=common.settings.CONTENT_DIR,
        help='Directory of markdown posts (default: %(default)s)',
    )
    parser.add_argument(
        '--output-dir',
        type=pathlib.Path,
        default=pathlib.Path('site'),
        help='Directory to write the site to (default: %(default)s)',
    )
    args = parser.parse_args()

    common.log.configure_logging()
    asyncio.run(generate(blog.PostRepository(args.content_dir), args.output_dir))


if __name__ == '__main__':
    main()
