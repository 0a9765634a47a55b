#!/usr/bin/env python3
"""
import_apple_journal.py - VERSION v1.2.1

Convert an Apple Journal export (the ZIP archive produced by "Export Journal",
or the already unpacked folder) into standalone Markdown files, one per entry.
Photos embedded in an entry are copied into a shared `media/` folder under
collision-free names and referenced from the Markdown by relative path.

CHANGES IN v1.2.1:
- Header dates are matched against explicit layouts only; free-form
  guessing turned number soup into real dates.
- Loose text in an entry is re-escaped before conversion so literal '<'
  and '>' survive.
- Only the header and title elements actually read are left out of the body.

CHANGES IN v1.2.0:
- Added optional YAML front matter (--front-matter) with title and date.
- Added --converter pandoc as an alternative to markdownify for rich-text
  fragments.
- Duplicate date/title pairs within one run now get a numeric suffix instead
  of overwriting each other.

CHANGES IN v1.1.0:
- Accept an already extracted export directory as --input.
- Skip asset paths that point outside the export (remote, data: or ../..).
- Ignore __MACOSX when locating the Entries folder.

Dependencies: beautifulsoup4, markdownify, pyyaml
(pandoc optional, only for --converter pandoc)
"""

# ------------------------ Imports ------------------------
import argparse
import os
import re
import shutil
import subprocess
import sys
import tempfile
import uuid
import zipfile
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Set
from urllib.parse import unquote, urlparse

import yaml
from bs4 import BeautifulSoup
from bs4.element import (
    CData,
    Comment,
    Declaration,
    Doctype,
    NavigableString,
    ProcessingInstruction,
    Tag,
)
from markdownify import ATX, MarkdownConverter


# ------------------------ Constants ------------------------
class LogLevel(Enum):
    DEBUG = 1
    INFO = 2
    WARNING = 3
    ERROR = 4


class NodeKind(Enum):
    TEXT_FRAGMENT = "text_fragment"
    ASSET_GRID = "asset_grid"
    SKIP = "skip"


HEADER_SELECTOR = "div.pageHeader"
TITLE_SELECTOR = "div.title span.s2"
TITLE_BLOCK_CLASS = "title"
CONTAINER_SELECTOR = "div.pageContainer"
ASSET_GRID_CLASS = "assetGrid"
GRID_IMAGE_SELECTOR = "div.gridItem.assetType_photo img.asset_image"

# Tried in order against the header with the weekday stripped.
DATE_LAYOUTS = ("%B %d, %Y", "%b %d, %Y", "%d %B %Y", "%d %b %Y", "%Y-%m-%d")
NOON_HOUR = 12

ENTRY_EXTENSIONS = {".html", ".htm"}
ENTRIES_DIR_NAME = "Entries"
MEDIA_DIR_NAME = "media"
IGNORED_ARCHIVE_DIRS = {"__MACOSX"}

CONVERTER_NAMES = ("markdownify", "pandoc")


# ------------------------ Global Variables ------------------------
_log_file = None
_log_level = LogLevel.INFO  # Default log level for console


# ------------------------ Logging Functions ------------------------
def set_log_file(log_file: Optional[Path]) -> None:
    """Set the global log file for diagnostics."""
    global _log_file
    _log_file = log_file


def set_log_level(level: str) -> None:
    """Set the global log level for console output."""
    global _log_level
    try:
        _log_level = LogLevel[level.upper()]
    except KeyError:
        raise ValueError(
            f"Invalid log level: {level}. Choose from DEBUG, INFO, WARNING, ERROR."
        )


def log_message(message: str, level: str = "INFO") -> None:
    """Log message to console (if level >= _log_level) and log file (if set)."""
    timestamp = datetime.now(timezone.utc).isoformat()
    formatted_message = f"[{level}] {timestamp} {message}"

    try:
        message_level = LogLevel[level.upper()]
        if message_level.value >= _log_level.value:
            print(formatted_message)
    except KeyError:
        print(formatted_message)

    if _log_file:
        try:
            with Path(_log_file).open("a", encoding="utf-8") as f:
                f.write(f"{formatted_message}\n")
        except (IOError, OSError) as e:
            print(f"Could not write to log file {_log_file}: {e}", file=sys.stderr)


def log_error(message: str) -> None:
    """Log error message."""
    log_message(message, "ERROR")


def log_warning(message: str) -> None:
    """Log warning message."""
    log_message(message, "WARNING")


def log_debug(message: str) -> None:
    """Log debug message."""
    log_message(message, "DEBUG")


# ------------------------ Errors ------------------------
class JournalImportError(Exception):
    """Base class for every error raised while importing a journal."""


class EntryError(JournalImportError):
    """The current entry cannot be converted; the run carries on."""


class DateParseError(EntryError):
    def __init__(self, header: str):
        super().__init__(f"Could not parse date from header '{header}'")
        self.header = header


class MissingDateError(EntryError):
    pass


class EmptyEntryError(EntryError):
    pass


class WriteError(EntryError):
    pass


class AssetNotFoundError(JournalImportError):
    pass


class FragmentConversionError(JournalImportError):
    pass


class MediaCopyError(JournalImportError):
    pass


class ArchiveError(JournalImportError):
    pass


class EntriesRootNotFoundError(JournalImportError):
    pass


# ------------------------ Data Types ------------------------
@dataclass
class JournalEntry:
    creation_date: datetime
    title: str = ""
    markdown_text: str = ""
    # absolute source path -> file name inside the media directory
    media: Dict[Path, str] = field(default_factory=dict)
    source_path: Optional[Path] = None


@dataclass
class ConversionSummary:
    total: int = 0
    success: int = 0
    errors: int = 0
    written: List[Path] = field(default_factory=list)


# ------------------------ Helper Functions ------------------------
def ensure_dir(path: Path) -> None:
    """Create directory if it doesn't exist."""
    path.mkdir(parents=True, exist_ok=True)


def collapse_whitespace(text: str) -> str:
    return re.sub(r"\s+", " ", text).strip()


def is_within(path: Path, root: Path) -> bool:
    """Return True if `path` is `root` or lies below it, after normalisation."""
    path_str = os.path.normpath(os.path.abspath(path))
    root_str = os.path.normpath(os.path.abspath(root))
    try:
        return os.path.commonpath([path_str, root_str]) == root_str
    except ValueError:
        # Different drives on Windows
        return False


# ------------------------ Fragment Converters ------------------------
def check_pandoc() -> bool:
    """Check if pandoc is installed and available."""
    try:
        subprocess.run(
            ["pandoc", "--version"],
            stdout=subprocess.PIPE,
            stderr=subprocess.PIPE,
            check=True,
        )
        return True
    except (subprocess.CalledProcessError, FileNotFoundError):
        return False


@dataclass(frozen=True)
class MarkdownifyConverter:
    """HTML fragment -> Markdown using markdownify."""

    heading_style: str = ATX
    bullets: str = "-"

    def convert(self, html: str) -> str:
        try:
            converter = MarkdownConverter(
                heading_style=self.heading_style, bullets=self.bullets
            )
            return converter.convert(html).strip()
        except Exception as e:
            raise FragmentConversionError(f"markdownify failed: {e}") from e


@dataclass(frozen=True)
class PandocConverter:
    """HTML fragment -> GitHub Flavored Markdown through the pandoc binary."""

    target_format: str = "gfm"

    def convert(self, html: str) -> str:
        try:
            result = subprocess.run(
                ["pandoc", "-f", "html", "-t", self.target_format, "--wrap=none"],
                input=html,
                check=True,
                stdout=subprocess.PIPE,
                stderr=subprocess.PIPE,
                encoding="utf-8",
            )
        except subprocess.CalledProcessError as e:
            raise FragmentConversionError(f"Pandoc conversion failed: {e.stderr}") from e
        except FileNotFoundError as e:
            raise FragmentConversionError("Pandoc not found in system PATH") from e
        return result.stdout.strip()


def make_converter(name: str = "markdownify"):
    """Build a fragment converter by name."""
    if name == "markdownify":
        return MarkdownifyConverter()
    if name == "pandoc":
        return PandocConverter()
    raise ValueError(
        f"Unknown converter: {name}. Choose from {', '.join(CONVERTER_NAMES)}."
    )


# ------------------------ Date Parsing ------------------------
def parse_journal_date(header: str) -> datetime:
    """Parse a header such as 'Tuesday, December 12, 2023' into noon UTC.

    Only the explicit DATE_LAYOUTS are accepted. Exported entries carry no
    time of day, so the result is pinned to 12:00 UTC to keep the calendar
    date stable in every timezone.
    """
    date_str = header
    if "," in date_str:
        date_str = date_str.split(",", 1)[1]
    date_str = date_str.strip()

    for layout in DATE_LAYOUTS:
        try:
            parsed = datetime.strptime(date_str, layout)
        except ValueError:
            continue
        return datetime(
            parsed.year, parsed.month, parsed.day, NOON_HOUR, 0, tzinfo=timezone.utc
        )

    raise DateParseError(header)


# ------------------------ Entry Extraction ------------------------
def title_from_filename(html_path: Path) -> str:
    """Best-effort title from names like '2023-12-12_Morning_Walk.html'."""
    parts = Path(html_path).stem.split("_", 1)
    if len(parts) == 2 and "-" in parts[0]:
        return parts[1].replace("_", " ").strip()
    return ""


def classify_node(node, consumed: Iterable = ()) -> NodeKind:
    """Decide how a direct child of the entry container is rendered.

    `consumed` holds the elements already read as header and title.
    """
    if isinstance(node, Tag):
        # identity, Tag.__eq__ compares markup
        if any(node is element for element in consumed):
            return NodeKind.SKIP
        classes = set(node.get("class") or [])
        if ASSET_GRID_CLASS in classes:
            return NodeKind.ASSET_GRID
        return NodeKind.TEXT_FRAGMENT
    if isinstance(
        node, (Comment, Doctype, CData, ProcessingInstruction, Declaration)
    ):
        return NodeKind.SKIP
    if isinstance(node, NavigableString) and node.strip():
        return NodeKind.TEXT_FRAGMENT
    return NodeKind.SKIP


def resolve_asset(
    src: str, entry_dir: Path, resources_root: Optional[Path] = None
) -> Path:
    """Resolve an image `src` relative to the entry document's directory.

    Raises AssetNotFoundError for remote sources, files that don't exist and
    paths escaping `resources_root`.
    """
    parsed = urlparse(src)
    # one-letter schemes are Windows drive letters
    if parsed.scheme and len(parsed.scheme) > 1:
        if parsed.scheme != "file":
            raise AssetNotFoundError(f"Not a local file: {src}")
        src = parsed.path

    candidates = [src]
    if unquote(src) != src:
        candidates.append(unquote(src))

    for candidate in candidates:
        path = Path(os.path.normpath(os.path.join(str(entry_dir), candidate)))
        if resources_root is not None and not is_within(path, resources_root):
            raise AssetNotFoundError(
                f"Image path escapes the export folder: {src} -> {path}"
            )
        if path.is_file():
            return path

    raise AssetNotFoundError(f"Image file not found: {src}")


def collect_grid_images(
    grid: Tag,
    entry_dir: Path,
    media: Dict[Path, str],
    resources_root: Optional[Path] = None,
) -> List[str]:
    """Register the photos of one asset grid and return their Markdown lines."""
    images = grid.select(GRID_IMAGE_SELECTOR) or grid.find_all("img")
    fragments = []
    for img in images:
        src = img.get("src")
        if not src:
            log_debug(f"Skipping image without src in {entry_dir}")
            continue
        try:
            image_path = resolve_asset(src, entry_dir, resources_root)
        except AssetNotFoundError as e:
            log_warning(f"{e} (referenced from {entry_dir})")
            continue

        new_name = media.get(image_path)
        if new_name is None:
            new_name = f"{uuid.uuid4()}-{image_path.name}"
            media[image_path] = new_name
        fragments.append(f"![]({MEDIA_DIR_NAME}/{new_name})")
    return fragments


def assemble_markdown(
    nodes: Iterable,
    entry_dir: Path,
    converter,
    media: Dict[Path, str],
    resources_root: Optional[Path] = None,
    consumed: Iterable = (),
) -> str:
    """Render content nodes to Markdown, keeping their document order.

    Asset grids become image references (filling `media`), everything else
    goes through `converter`. Nodes listed in `consumed` are left out. Nodes
    that fail to convert are dropped with a warning.
    """
    consumed = [element for element in consumed if element is not None]
    fragments: List[str] = []
    for node in nodes:
        kind = classify_node(node, consumed)
        if kind is NodeKind.SKIP:
            continue
        if kind is NodeKind.ASSET_GRID:
            fragments.extend(
                collect_grid_images(node, entry_dir, media, resources_root)
            )
            continue

        if isinstance(node, Tag):
            fragment_html = str(node)
        else:
            # str() of a text node is unescaped
            fragment_html = node.output_ready(formatter="minimal")
        try:
            markdown = converter.convert(fragment_html)
        except FragmentConversionError as e:
            log_warning(f"Skipping fragment in {entry_dir}: {e}")
            continue
        markdown = markdown.strip()
        if markdown:
            fragments.append(markdown)

    return "\n\n".join(fragments).strip()


def extract_entry(
    html_path: Path, converter, resources_root: Optional[Path] = None
) -> JournalEntry:
    """Parse one entry document into a JournalEntry.

    Raises MissingDateError / DateParseError when the header is unusable and
    EmptyEntryError when neither text nor photos could be extracted.
    """
    html_path = Path(html_path)
    try:
        with html_path.open(encoding="utf-8") as f:
            soup = BeautifulSoup(f.read(), "html.parser")
    except (IOError, OSError, UnicodeDecodeError) as e:
        raise EntryError(f"Could not read {html_path}: {e}") from e

    header = soup.select_one(HEADER_SELECTOR)
    date_str = collapse_whitespace(header.get_text(" ")) if header else ""
    if not date_str:
        raise MissingDateError(f"No date found in pageHeader for {html_path}")
    creation_date = parse_journal_date(date_str)

    title_tag = soup.select_one(TITLE_SELECTOR)
    if title_tag is not None:
        title = collapse_whitespace(title_tag.get_text(" "))
    else:
        title = title_from_filename(html_path)

    container = soup.select_one(CONTAINER_SELECTOR) or soup.body or soup
    media: Dict[Path, str] = {}
    title_block = (
        title_tag.find_parent("div", class_=TITLE_BLOCK_CLASS) or title_tag
        if title_tag is not None
        else None
    )
    consumed = [header, title_block]
    body = assemble_markdown(
        list(container.children),
        html_path.parent,
        converter,
        media,
        resources_root,
        consumed=consumed,
    )

    if title:
        markdown_text = f"# {title}\n\n{body}" if body else f"# {title}"
    else:
        markdown_text = body

    if not markdown_text and not media:
        raise EmptyEntryError(f"Empty entry after processing {html_path}")

    return JournalEntry(
        creation_date=creation_date,
        title=title,
        markdown_text=markdown_text,
        media=media,
        source_path=html_path,
    )


# ------------------------ Entry Writing ------------------------
def sanitize_title(title: str) -> str:
    """Make a title safe to embed in a file name."""
    safe = title.replace("/", "-").replace("\\", "-")
    safe = safe.replace('"', "'")
    return safe.strip()


def markdown_file_name(
    creation_date: datetime, title: str, used_names: Optional[Set[str]] = None
) -> str:
    """Build '<YYYY-MM-DD>-<title>.md', suffixing names already used this run."""
    date_prefix = creation_date.strftime("%Y-%m-%d")
    safe_title = sanitize_title(title)
    # untitled entries are named by date alone, without a trailing hyphen
    base = f"{date_prefix}-{safe_title}" if safe_title else date_prefix

    if used_names is None:
        return f"{base}.md"

    name = base
    counter = 1
    while f"{name}.md" in used_names:
        name = f"{base}_{counter}"
        counter += 1
    used_names.add(f"{name}.md")
    return f"{name}.md"


def render_front_matter(entry: JournalEntry) -> str:
    metadata = {}
    if entry.title:
        metadata["title"] = entry.title
    metadata["date"] = entry.creation_date.date()
    dumped = yaml.safe_dump(metadata, sort_keys=False, allow_unicode=True)
    return f"---\n{dumped}---\n\n"


def copy_media(src: Path, dst: Path) -> None:
    try:
        shutil.copyfile(src, dst)
    except (IOError, OSError) as e:
        raise MediaCopyError(f"Failed to copy media file from {src} to {dst}: {e}") from e


def save_markdown_file(
    output_dir: Path,
    entry: JournalEntry,
    used_names: Optional[Set[str]] = None,
    front_matter: bool = False,
) -> Path:
    """Copy an entry's media and write its Markdown file.

    Media copy failures are logged and skipped. Failing to write the Markdown
    file raises WriteError.

    Returns:
        Path of the written Markdown file
    """
    media_dir = output_dir / MEDIA_DIR_NAME
    try:
        ensure_dir(media_dir)
    except (IOError, OSError) as e:
        raise WriteError(f"Could not create media directory {media_dir}: {e}") from e

    for src, new_name in entry.media.items():
        try:
            copy_media(src, media_dir / new_name)
        except MediaCopyError as e:
            log_warning(str(e))

    file_path = output_dir / markdown_file_name(
        entry.creation_date, entry.title, used_names
    )
    content = entry.markdown_text
    if front_matter:
        content = render_front_matter(entry) + content

    try:
        with file_path.open("w", encoding="utf-8") as f:
            f.write(content)
    except (IOError, OSError) as e:
        raise WriteError(f"Could not write markdown file {file_path}: {e}") from e

    log_debug(f"Saved entry to {file_path}")
    return file_path


# ------------------------ Archive Handling ------------------------
def extract_archive(archive_path: Path, dest_dir: Path) -> None:
    """Extract a ZIP archive, refusing members that would land outside dest_dir."""
    try:
        with zipfile.ZipFile(archive_path) as archive:
            members = archive.infolist()
            for member in members:
                target = dest_dir / member.filename
                if not is_within(target, dest_dir) or os.path.isabs(member.filename):
                    raise ArchiveError(f"{member.filename}: illegal file path")
            ensure_dir(dest_dir)
            archive.extractall(dest_dir)
    except zipfile.BadZipFile as e:
        raise ArchiveError(f"{archive_path} is not a valid ZIP archive: {e}") from e
    except (IOError, OSError) as e:
        raise ArchiveError(f"Could not extract {archive_path}: {e}") from e


def find_entries_root(extract_dir: Path) -> Path:
    """Locate the Entries folder at the top level or inside one wrapper folder."""
    entries_path = extract_dir / ENTRIES_DIR_NAME
    if entries_path.is_dir():
        return entries_path

    top_level = [
        p
        for p in extract_dir.iterdir()
        if p.name not in IGNORED_ARCHIVE_DIRS and not p.name.startswith(".")
    ]
    if len(top_level) == 1 and top_level[0].is_dir():
        potential_root = top_level[0] / ENTRIES_DIR_NAME
        if potential_root.is_dir():
            return potential_root

    raise EntriesRootNotFoundError(
        f"Entries folder not found at {entries_path}. "
        "Please ensure the export structure is correct."
    )


# ------------------------ Conversion Driver ------------------------
def find_entry_files(entries_root: Path) -> List[Path]:
    """Return every entry document below entries_root, sorted."""
    if not entries_root.is_dir():
        raise EntriesRootNotFoundError(f"Entries folder not found: {entries_root}")
    return sorted(
        p
        for p in entries_root.rglob("*")
        if p.is_file() and p.suffix.lower() in ENTRY_EXTENSIONS
    )


def convert_entry(
    html_path: Path,
    output_dir: Path,
    converter,
    used_names: Set[str],
    resources_root: Optional[Path] = None,
    dry_run: bool = False,
    front_matter: bool = False,
) -> Optional[Path]:
    """Extract and write one entry. Returns the output path (None on dry run)."""
    entry = extract_entry(html_path, converter, resources_root)
    if dry_run:
        name = markdown_file_name(entry.creation_date, entry.title, used_names)
        print(f"  Would write: {name} ({len(entry.media)} media files)")
        return None
    return save_markdown_file(output_dir, entry, used_names, front_matter)


def convert_entries(
    entries_root: Path,
    output_dir: Path,
    converter,
    resources_root: Optional[Path] = None,
    dry_run: bool = False,
    front_matter: bool = False,
) -> ConversionSummary:
    """Convert every entry below entries_root; one bad entry never stops the run."""
    html_files = find_entry_files(entries_root)
    summary = ConversionSummary(total=len(html_files))
    if not html_files:
        log_warning(f"No entry files found in {entries_root}")
        return summary

    print(f"\nFound {len(html_files)} entries to process")
    used_names: Set[str] = set()

    for i, html_path in enumerate(html_files, 1):
        print(f"\n[{i}/{len(html_files)}] Processing: {html_path.name}")
        try:
            written = convert_entry(
                html_path,
                output_dir,
                converter,
                used_names,
                resources_root=resources_root,
                dry_run=dry_run,
                front_matter=front_matter,
            )
        except JournalImportError as e:
            log_error(f"Error processing entry {html_path}: {e}. Entry skipped.")
            summary.errors += 1
            continue
        except Exception as e:
            log_error(f"Unexpected error processing entry {html_path}: {e}. Entry skipped.")
            summary.errors += 1
            continue

        summary.success += 1
        if written is not None:
            summary.written.append(written)
            log_message(f"Saved {html_path.name} as {written.name}", "INFO")

    return summary


def import_journal(
    input_path: Path,
    output_dir: Path,
    converter,
    dry_run: bool = False,
    front_matter: bool = False,
) -> ConversionSummary:
    """Stage the export (ZIP or folder) and convert all of its entries.

    A ZIP archive is extracted into a scratch directory that is removed again
    whatever happens.
    """
    if not dry_run:
        ensure_dir(output_dir)

    if input_path.is_dir():
        entries_root = find_entries_root(input_path)
        return convert_entries(
            entries_root,
            output_dir,
            converter,
            resources_root=input_path,
            dry_run=dry_run,
            front_matter=front_matter,
        )

    temp_dir = Path(tempfile.mkdtemp(prefix="apple_journal_"))
    log_debug(f"Using temporary directory: {temp_dir}")
    try:
        extract_archive(input_path, temp_dir)
        entries_root = find_entries_root(temp_dir)
        print(f"Processing HTML entries from: {entries_root}")
        return convert_entries(
            entries_root,
            output_dir,
            converter,
            resources_root=temp_dir,
            dry_run=dry_run,
            front_matter=front_matter,
        )
    finally:
        try:
            shutil.rmtree(temp_dir)
            log_debug(f"Cleaned up temporary directory: {temp_dir}")
        except (IOError, OSError) as e:
            log_warning(f"Could not clean up temporary directory {temp_dir}: {e}")


def print_summary(summary: ConversionSummary, output_dir: Path) -> None:
    print(f"\n{'='*50}")
    print("CONVERSION SUMMARY")
    print(f"{'='*50}")
    print(f"Total entries found: {summary.total}")
    print(f"Successfully converted: {summary.success}")
    print(f"Errors: {summary.errors}")
    print(f"Output written to: {output_dir}")


def main(argv: Optional[List[str]] = None) -> None:
    """Parse command-line arguments and run the conversion."""
    parser = argparse.ArgumentParser(
        description="Convert an Apple Journal export to Markdown files"
    )
    parser.add_argument(
        "-i",
        "--input",
        type=Path,
        required=True,
        help="Apple Journal export ZIP file (or its extracted folder)",
    )
    parser.add_argument(
        "-o",
        "--output",
        type=Path,
        required=True,
        help="Output directory for Markdown files",
    )
    parser.add_argument("--log-file", type=Path, help="Path to log file")
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="INFO",
        help="Logging level",
    )
    parser.add_argument(
        "--converter",
        choices=CONVERTER_NAMES,
        default="markdownify",
        help="HTML to Markdown converter for text blocks",
    )
    parser.add_argument(
        "--front-matter",
        action="store_true",
        help="Prepend YAML front matter with title and date",
    )
    parser.add_argument(
        "--dry-run", action="store_true", help="Perform a dry run without writing files"
    )
    args = parser.parse_args(argv)

    set_log_level(args.log_level)
    set_log_file(args.log_file)

    if not args.input.exists():
        log_error(f"Input does not exist: {args.input}")
        sys.exit(1)

    if args.converter == "pandoc" and not check_pandoc():
        log_error("Pandoc is not installed or not found in PATH")
        sys.exit(1)

    log_message(f"Starting conversion from {args.input} to {args.output}")
    if args.dry_run:
        print("\n[DRY RUN MODE] - No files will be written")

    try:
        summary = import_journal(
            args.input,
            args.output,
            make_converter(args.converter),
            dry_run=args.dry_run,
            front_matter=args.front_matter,
        )
    except JournalImportError as e:
        log_error(str(e))
        sys.exit(1)
    except (IOError, OSError) as e:
        log_error(f"Unexpected error during conversion: {e}")
        sys.exit(1)

    print_summary(summary, args.output)
    if summary.errors and not summary.success:
        sys.exit(1)


if __name__ == "__main__":
    main()
