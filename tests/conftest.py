"""
Pytest configuration and shared fixtures for notmuch front end tests.
"""
import sys
from pathlib import Path

import pytest

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from notmuch_cli.commands.registry import build_default_registry
from notmuch_cli.database.base import Database
from notmuch_cli.models.invocation import InvocationContext


CONFIG_TEMPLATE = """\
[database]
path={mail_dir}

[user]
name=Jane Doe
primary_email=jane@example.com
other_email=jane@work.example.com;

[new]
tags=unread;inbox;
ignore=

[search]
exclude_tags=deleted;spam;

[maildir]
synchronize_flags=true
"""


class FakeDatabase(Database):
    """In-memory stand-in for a mail database backend."""

    def __init__(self, path, mode, uuid="XYZ", revision=7, status=0, error=None):
        self.path = path
        self.mode = mode
        self.uuid = uuid
        self.revision = revision
        self.status = status
        self.error = error
        self.revision_calls = 0
        self.close_calls = 0
        self.commands = []

    def get_revision(self):
        self.revision_calls += 1
        return self.revision, self.uuid

    def run_command(self, name, options, config):
        self.commands.append((name, options))
        if self.error:
            raise self.error
        return self.status

    def close(self):
        self.close_calls += 1


class FakeDatabaseFactory:
    """Callable factory recording every database it opens."""

    def __init__(self, **kwargs):
        self.kwargs = kwargs
        self.opened = []

    def __call__(self, path, mode):
        database = FakeDatabase(path, mode, **self.kwargs)
        self.opened.append(database)
        return database

    @property
    def last(self):
        return self.opened[-1]


class ViewerLaunched(SystemExit):
    """Raised by RecordingViewer in place of replacing the process."""


class RecordingViewer:
    """Man page viewer that records the page instead of exec'ing man."""

    def __init__(self):
        self.pages = []

    def show(self, page):
        self.pages.append(page)
        raise ViewerLaunched(0)


@pytest.fixture(autouse=True)
def isolated_environment(tmp_path, monkeypatch):
    """Point HOME at a temporary directory and clear notmuch variables."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    for name in (
        "NOTMUCH_CONFIG",
        "NOTMUCH_MEMORY_REPORT",
        "NOTMUCH_DEBUG",
        "MAILDIR",
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("NAME", "Test User")
    monkeypatch.setenv("EMAIL", "test@example.com")
    return home


@pytest.fixture
def mail_dir(tmp_path):
    """Create an empty mail directory."""
    path = tmp_path / "mail"
    path.mkdir()
    return path


@pytest.fixture
def config_file(tmp_path, mail_dir, monkeypatch):
    """Write a configuration file and point NOTMUCH_CONFIG at it."""
    path = tmp_path / "notmuch-config"
    path.write_text(CONFIG_TEMPLATE.format(mail_dir=mail_dir), encoding="utf-8")
    monkeypatch.setenv("NOTMUCH_CONFIG", str(path))
    return path


@pytest.fixture
def database_factory():
    """Factory for fake databases whose uuid is XYZ."""
    return FakeDatabaseFactory()


@pytest.fixture
def viewer():
    """Man page viewer that records requested pages."""
    return RecordingViewer()


@pytest.fixture
def context(database_factory, viewer):
    """Invocation context wired to the fake collaborators."""
    return InvocationContext(
        registry=build_default_registry(),
        help_viewer=viewer,
        database_factory=database_factory,
    )
