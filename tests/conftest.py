#!/usr/bin/env python3
"""Shared fixtures for the Apple Journal importer tests."""

from pathlib import Path

import pytest
from bs4 import BeautifulSoup

import import_apple_journal
from import_apple_journal import FragmentConversionError


ENTRY_TEMPLATE = """<!DOCTYPE html>
<html>
<head><meta charset="utf-8"><title>Journal Entry</title></head>
<body>
<div class="pageContainer">
{header}
{title}
{body}
</div>
</body>
</html>
"""


def build_entry_html(header="Tuesday, December 12, 2023", title="", body=""):
    """Build an entry document the way the Journal export lays it out."""
    header_html = f'<div class="pageHeader">{header}</div>' if header is not None else ""
    title_html = (
        f'<div class="title"><p class="p1"><span class="s2">{title}</span></p></div>'
        if title
        else ""
    )
    return ENTRY_TEMPLATE.format(header=header_html, title=title_html, body=body)


def paragraph(text):
    return f'<div class="bodyText"><p class="p1"><span class="s1">{text}</span></p></div>'


def asset_grid(*srcs):
    items = "".join(
        '<div class="gridItem assetType_photo">'
        f'<img class="asset_image" src="{src}"></div>'
        for src in srcs
    )
    return f'<div class="assetGrid">{items}</div>'


class TextConverter:
    """Converter stub returning the fragment's plain text."""

    def convert(self, html):
        return BeautifulSoup(html, "html.parser").get_text(" ", strip=True)


class FailingConverter(TextConverter):
    """Fails on any fragment containing 'boom'."""

    def convert(self, html):
        if "boom" in html:
            raise FragmentConversionError("cannot convert")
        return super().convert(html)


@pytest.fixture(autouse=True)
def reset_logging():
    """Keep the module-level log settings from leaking between tests."""
    import_apple_journal.set_log_level("INFO")
    import_apple_journal.set_log_file(None)
    yield
    import_apple_journal.set_log_level("INFO")
    import_apple_journal.set_log_file(None)


@pytest.fixture
def temp_dir(tmp_path):
    """Create a temporary directory for tests."""
    return tmp_path


@pytest.fixture
def export_dir(temp_dir):
    """An extracted export with Entries/ and Resources/ folders."""
    root = temp_dir / "export"
    (root / "Entries").mkdir(parents=True)
    (root / "Resources").mkdir(parents=True)
    return root


@pytest.fixture
def write_entry(export_dir):
    """Write an entry document into Entries/ and return its path."""

    def _write(name="entry.html", **kwargs):
        path = export_dir / "Entries" / name
        path.write_text(build_entry_html(**kwargs), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def write_resource(export_dir):
    """Write a fake image into Resources/ and return its path."""

    def _write(name="photo.jpg", data=b"\xff\xd8fake-jpeg"):
        path = export_dir / "Resources" / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(data)
        return path

    return _write


@pytest.fixture
def text_converter():
    return TextConverter()


@pytest.fixture
def output_dir(temp_dir):
    return temp_dir / "out"


def read_markdown_files(directory: Path):
    return sorted(p.name for p in directory.glob("*.md"))
