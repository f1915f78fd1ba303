import os

import django
import pytest
from graphql import build_schema

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "tests.settings")
django.setup()

from graphql_html_printer.printer import HtmlVisitor  # noqa: E402
from tests.unit.schemas import LIBRARY_SDL  # noqa: E402


def pytest_configure(config):
    config.addinivalue_line("markers", "unit: fast tests without external services")


@pytest.fixture
def library_schema():
    return build_schema(LIBRARY_SDL)


@pytest.fixture
def visitor(library_schema):
    return HtmlVisitor(library_schema)
