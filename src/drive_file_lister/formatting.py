"""
src/drive_file_lister/formatting.py

Renders Drive file records as tables.
Includes:
- print_file_list: delimited (CSV-style) rendering with a configurable delimiter
- print_tabbed_file_list: whitespace-aligned rendering
- derived field helpers: filetype, format_size, format_datetime, truncate_string

Both renderers share the same column order and both honour use_extended.
"""
from __future__ import annotations

import csv
import sys
from dataclasses import dataclass, field
from datetime import datetime, tzinfo
from typing import List, Optional, Sequence, TextIO

from .models import FileRecord

BASE_HEADERS = ["Id", "Name", "Type", "Size", "Created"]
EXTENDED_HEADERS = ["Checksum", "HeadRevisionId"]

SIZE_UNITS = ["B", "KB", "MB", "GB", "TB", "PB"]
TRUNCATE_INDICATOR = "..."
TAB_PADDING = 3


@dataclass
class PrintFileListArgs:
    files: Sequence[FileRecord]
    out: TextIO = field(default_factory=lambda: sys.stdout)
    name_width: int = 0
    skip_header: bool = False
    size_in_bytes: bool = False
    delimiter: str = "|"
    use_extended: bool = False
    tz: Optional[tzinfo] = None

    def __post_init__(self) -> None:
        check_delimiter(self.delimiter)


def check_delimiter(delimiter: str) -> str:
    """csv.writer accepts only a single-character delimiter."""
    if not isinstance(delimiter, str) or len(delimiter) != 1:
        raise ValueError(f"delimiter must be a single character, got {delimiter!r}")
    return delimiter


def filetype(record: FileRecord) -> str:
    if record.is_dir:
        return "dir"
    if record.is_binary:
        return "bin"
    return "doc"


def format_size(size: int, force_bytes: bool = False) -> str:
    """Human-scaled size using decimal units; empty when size is unknown."""
    if not size:
        return ""
    if force_bytes:
        return f"{size} B"
    value = float(size)
    i = 0
    while value > 1000 and i < len(SIZE_UNITS) - 1:
        value /= 1000
        i += 1
    return f"{value:.1f} {SIZE_UNITS[i]}"


def format_datetime(value: str, tz: Optional[tzinfo] = None) -> str:
    """Format an RFC 3339 timestamp as 'YYYY-MM-DD HH:MM:SS' in tz (local time when None)."""
    if not value:
        return ""
    try:
        parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError:
        return value
    return parsed.astimezone(tz).strftime("%Y-%m-%d %H:%M:%S")


def truncate_string(value: str, width: int) -> str:
    """Shorten value to exactly width characters; width <= 0 disables truncation."""
    if width <= 0 or len(value) <= width:
        return value
    if width <= len(TRUNCATE_INDICATOR):
        return value[:width]
    return value[: width - len(TRUNCATE_INDICATOR)] + TRUNCATE_INDICATOR


def _headers(use_extended: bool) -> List[str]:
    if use_extended:
        return BASE_HEADERS + EXTENDED_HEADERS
    return list(BASE_HEADERS)


def _row(record: FileRecord, args: PrintFileListArgs) -> List[str]:
    row = [
        record.id,
        truncate_string(record.name, args.name_width),
        filetype(record),
        format_size(record.size, args.size_in_bytes),
        format_datetime(record.created_time, args.tz),
    ]
    if args.use_extended:
        row.extend([record.md5_checksum, record.head_revision_id])
    return row


def _rows(args: PrintFileListArgs) -> List[List[str]]:
    rows = [] if args.skip_header else [_headers(args.use_extended)]
    rows.extend(_row(f, args) for f in args.files)
    return rows


def print_file_list(args: PrintFileListArgs) -> None:
    """Write records as delimited rows to args.out."""
    writer = csv.writer(args.out, delimiter=args.delimiter, lineterminator="\n")
    writer.writerows(_rows(args))
    args.out.flush()


def print_tabbed_file_list(args: PrintFileListArgs) -> None:
    """
    Write records as aligned columns to args.out.
    Every column but the last is padded to its widest cell plus TAB_PADDING spaces.
    """
    rows = _rows(args)
    if not rows:
        args.out.flush()
        return
    widths = [max(len(row[i]) for row in rows) for i in range(len(rows[0]) - 1)]
    for row in rows:
        cells = [cell.ljust(widths[i] + TAB_PADDING) for i, cell in enumerate(row[:-1])]
        cells.append(row[-1])
        args.out.write("".join(cells) + "\n")
    args.out.flush()
