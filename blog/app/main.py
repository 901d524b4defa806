"""FastAPI application for the blog site."""

import pathlib
from typing import Annotated

import fastapi
import fastapi.responses
import fastapi.staticfiles
import uvicorn

import common.log
import common.settings
import common.templates

from . import blog

APP_DIR = pathlib.Path(__file__).resolve().parent

app = fastapi.FastAPI(title=common.settings.SITE_TITLE)

common.log.configure_logging()

app.mount(
    '/assets',
    fastapi.staticfiles.StaticFiles(directory=APP_DIR / 'static'),
    name='assets',
)

templates = common.templates.make_templates(APP_DIR / 'templates')

RECENT_POSTS_ON_HOME = 5


def get_repository() -> blog.PostRepository:
    """Return a repository over the configured content directory."""
    return blog.PostRepository(common.settings.CONTENT_DIR)


Repository = Annotated[blog.PostRepository, fastapi.Depends(get_repository)]


@app.get('/', response_class=fastapi.responses.HTMLResponse)
async def home(
    request: fastapi.Request, repository: Repository
) -> fastapi.responses.HTMLResponse:
    """Render the home page with a link to the blog and the latest posts."""
    posts = await repository.get_all_posts()
    return templates.TemplateResponse(
        request=request,
        name='home.html.jinja2',
        context={'posts': posts[:RECENT_POSTS_ON_HOME]},
    )


@app.get('/blog', response_class=fastapi.responses.HTMLResponse)
async def index(
    request: fastapi.Request, repository: Repository
) -> fastapi.responses.HTMLResponse:
    """Render the blog index page listing all posts."""
    posts = await repository.get_all_posts()
    return templates.TemplateResponse(
        request=request, name='index.html.jinja2', context={'posts': posts}
    )


@app.get('/blog/tags', response_class=fastapi.responses.HTMLResponse)
async def tags(
    request: fastapi.Request, repository: Repository
) -> fastapi.responses.HTMLResponse:
    """Render the list of all tags."""
    all_tags = await repository.get_all_tags()
    return templates.TemplateResponse(
        request=request, name='tags.html.jinja2', context={'tags': all_tags}
    )


@app.get('/blog/tags/{tag}', response_class=fastapi.responses.HTMLResponse)
async def tag(
    request: fastapi.Request, tag: str, repository: Repository
) -> fastapi.responses.HTMLResponse:
    """Render the posts carrying a single tag."""
    posts = await repository.get_posts_by_tag(tag)
    return templates.TemplateResponse(
        request=request, name='tag.html.jinja2', context={'tag': tag, 'posts': posts}
    )


@app.get('/blog/{slug}', response_class=fastapi.responses.HTMLResponse)
async def post(
    request: fastapi.Request, slug: str, repository: Repository
) -> fastapi.responses.HTMLResponse:
    """Render an individual blog post by slug."""
    matched = await repository.get_post_by_slug(slug)
    if matched is None:
        raise fastapi.HTTPException(status_code=404, detail='Post not found')
    return templates.TemplateResponse(
        request=request, name='post.html.jinja2', context={'post': matched}
    )


@app.get('/rss.xml')
async def rss(repository: Repository) -> fastapi.responses.Response:
    """Render and serve the RSS feed."""
    posts = await repository.get_all_posts()
    xml = templates.get_template('rss.xml.jinja2').render(posts=posts)  # type: ignore
    return fastapi.responses.Response(content=xml, media_type='application/rss+xml')


@app.api_route('/health', methods=['GET', 'HEAD'])
async def health() -> dict[str, str]:
    """Health check endpoint."""
    return {'status': 'healthy'}


if __name__ == '__main__':
    uvicorn.run(app, host='0.0.0.0', port=8000)
