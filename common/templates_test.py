"""Unit tests for common/templates.py."""

import pathlib
import tempfile
import unittest

import common.settings
import common.templates


class TestDatefmt(unittest.TestCase):
    """Tests for the datefmt filter."""

    def test_default_format(self) -> None:
        """ISO dates are formatted as long dates."""
        self.assertEqual(common.templates.datefmt('2024-03-01'), 'March 01, 2024')

    def test_custom_format(self) -> None:
        """A custom strftime format can be given."""
        self.assertEqual(
            common.templates.datefmt('2024-03-01', '%Y/%m/%d'), '2024/03/01'
        )

    def test_invalid_date_passes_through(self) -> None:
        """Values that are not ISO dates are returned unchanged."""
        self.assertEqual(common.templates.datefmt('someday'), 'someday')


class TestMakeTemplates(unittest.TestCase):
    """Tests for the make_templates factory."""

    def setUp(self) -> None:
        """Create a temporary directory to use as a templates directory."""
        self.tmpdir = tempfile.mkdtemp()

    def test_site_globals_set(self) -> None:
        """make_templates sets the site globals from common.settings."""
        templates = common.templates.make_templates(self.tmpdir)
        env_globals = templates.env.globals  # type: ignore[reportUnknownMemberType]
        self.assertEqual(env_globals['site_title'], common.settings.SITE_TITLE)
        self.assertEqual(env_globals['site_url'], common.settings.SITE_URL)
        self.assertEqual(
            env_globals['site_description'], common.settings.SITE_DESCRIPTION
        )

    def test_datefmt_filter_registered(self) -> None:
        """make_templates registers the datefmt filter."""
        templates = common.templates.make_templates(pathlib.Path(self.tmpdir))
        self.assertIs(templates.env.filters['datefmt'], common.templates.datefmt)


class TestMakeEnvironment(unittest.TestCase):
    """Tests for the make_environment factory."""

    def test_renders_with_globals_and_autoescape(self) -> None:
        """Templates see the site globals and escape variables."""
        with tempfile.TemporaryDirectory() as tmpdir:
            path = pathlib.Path(tmpdir)
            (path / 'page.html.jinja2').write_text('{{ site_title }}|{{ value }}')
            env = common.templates.make_environment(path)
            html = env.get_template('page.html.jinja2').render(value='<b>')
        self.assertEqual(html, f'{common.settings.SITE_TITLE}|&lt;b&gt;')


if __name__ == '__main__':
    unittest.main()
