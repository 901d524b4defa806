"""Factories for Jinja2 environments with the blog's standard globals."""

import datetime
import pathlib

import fastapi.templating
import jinja2

import common.settings


def datefmt(value: str, fmt: str = '%B %d, %Y') -> str:
    """Format an ISO date string for display, passing unparseable values through."""
    try:
        return datetime.date.fromisoformat(value).strftime(fmt)
    except ValueError:
        return value


def _install(env: jinja2.Environment) -> jinja2.Environment:
    env.filters['datefmt'] = datefmt
    env.globals['site_title'] = common.settings.SITE_TITLE
    env.globals['site_description'] = common.settings.SITE_DESCRIPTION
    env.globals['site_url'] = common.settings.SITE_URL
    return env


def make_templates(
    directory: pathlib.Path | str,
) -> fastapi.templating.Jinja2Templates:
    """Create a Jinja2Templates instance with site globals and filters pre-set."""
    templates = fastapi.templating.Jinja2Templates(directory=str(directory))
    _install(templates.env)
    return templates


def make_environment(directory: pathlib.Path | str) -> jinja2.Environment:
    """Create a plain Jinja2 environment matching make_templates."""
    env = jinja2.Environment(
        loader=jinja2.FileSystemLoader(str(directory)),
        autoescape=True,
    )
    return _install(env)
