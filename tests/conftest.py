"""Shared test fixtures for hlopts tests."""

import textwrap

import pytest


@pytest.fixture
def site(tmp_path):
    """A site source directory with a _config.yml carrying pygments_options."""
    (tmp_path / "_config.yml").write_text(textwrap.dedent("""\
        title: Example site
        pygments_options:
          startinline: true
          linenos: table
    """))
    return tmp_path


@pytest.fixture
def code_file(tmp_path):
    """A small Python source file to highlight."""
    path = tmp_path / "snippet.py"
    path.write_text("def foo():\n    return 42\n")
    return path
