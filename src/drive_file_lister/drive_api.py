"""
src/drive_file_lister/drive_api.py

Paginated listing of Google Drive files plus the list-and-render operation.
Includes:
- list_all_files(): pages through files.list until exhausted or max_files reached
- list_files(): lists, optionally resolves absolute paths, renders a table
- structured logging integration (uses Python logging, JSON optional)
- Exceptions: DriveAPIError for uniform error reporting

Notes:
- `service` is a Drive v3 resource from googleapiclient; tests pass a fake with
  the same files().list(...).execute() shape.
- Path resolution is delegated to a PathResolver supplied by the caller.
"""
from __future__ import annotations

import json
import logging
import os
import sys
from dataclasses import dataclass, field
from typing import Any, List, Optional, Protocol, TextIO

from .formatting import PrintFileListArgs, check_delimiter, print_file_list, print_tabbed_file_list
from .models import FileRecord, ListQuery

# Module logger
logger = logging.getLogger(__name__)

DEFAULT_QUERY = "trashed = false and 'me' in owners"
DEFAULT_MAX_FILES = 30
DEFAULT_NAME_WIDTH = 40


class DriveAPIError(RuntimeError):
    """Raised when listing files from Drive fails."""
    pass


class PathResolver(Protocol):
    """Resolves a record to its fully-qualified Drive path, raising if ancestry is unknown."""

    def abs_path(self, record: FileRecord) -> str:
        ...


def log_event(level: str, message: str, **fields: Any) -> None:
    """
    Helper to log structured events. When DRIVE_LOG_JSON is set this emits a
    single JSON line. Otherwise we fallback to human-readable messages.
    """
    if os.environ.get("DRIVE_LOG_JSON", "").lower() in ("1", "true", "yes"):
        line = json.dumps({"message": message, "module": __name__, **fields}, default=str)
    else:
        line = f"[{level.upper()}] {message}"
        if fields:
            line += " | " + ", ".join(f"{k}={v}" for k, v in fields.items())
    log = {"info": logger.info, "warning": logger.warning, "error": logger.error}.get(level, logger.debug)
    log(line)


def list_all_files(service, list_query: ListQuery) -> List[FileRecord]:
    """
    Fetch pages of file metadata until the source is exhausted or max_files
    records have been collected, then truncate to max_files.
    Errors raised by the underlying request propagate unchanged.
    """
    page_size = list_query.page_size
    log_event(
        "info", "list_all_files:start",
        query=list_query.query, sort_order=list_query.sort_order,
        max_files=list_query.max_files, page_size=page_size,
    )
    files: List[FileRecord] = []
    page_token: Optional[str] = None
    pages = 0
    while True:
        resp = service.files().list(
            q=list_query.query or None,
            fields=list_query.fields,
            orderBy=list_query.sort_order or None,
            pageSize=page_size,
            pageToken=page_token,
        ).execute()
        pages += 1
        batch = resp.get("files", [])
        files.extend(FileRecord.from_api(item) for item in batch)
        log_event("debug", "list_all_files:page", page=pages, count=len(batch), total=len(files))

        # Stop when we have all the files we need
        if list_query.max_files > 0 and len(files) >= list_query.max_files:
            break
        page_token = resp.get("nextPageToken")
        if not page_token:
            break

    if list_query.max_files > 0:
        files = files[: list_query.max_files]
    log_event("info", "list_all_files:done", pages=pages, count=len(files))
    return files


@dataclass
class ListFilesArgs:
    out: TextIO = field(default_factory=lambda: sys.stdout)
    max_files: int = DEFAULT_MAX_FILES
    name_width: int = DEFAULT_NAME_WIDTH
    query: str = DEFAULT_QUERY
    sort_order: str = ""
    skip_header: bool = False
    size_in_bytes: bool = False
    abs_path: bool = False
    use_csv: bool = False
    use_extended: bool = False
    delimiter: str = "|"

    def __post_init__(self) -> None:
        check_delimiter(self.delimiter)


def list_files(
    service,
    args: ListFilesArgs,
    pathfinder: Optional[PathResolver] = None
) -> List[FileRecord]:
    """
    List files matching args.query and render them to args.out.
    - abs_path: names are replaced by pathfinder.abs_path(record) before rendering;
      resolver errors abort the whole operation before any output is written
    - use_csv: delimited output with args.delimiter, otherwise aligned columns
    Returns the records that were rendered.
    """
    list_query = ListQuery(query=args.query, sort_order=args.sort_order, max_files=args.max_files)
    try:
        files = list_all_files(service, list_query)
    except Exception as exc:
        log_event("error", "list_files:error", query=args.query, error=repr(exc))
        raise DriveAPIError(f"Failed to list files: {exc}") from exc

    if args.abs_path:
        if pathfinder is None:
            raise DriveAPIError("Absolute paths requested but no path resolver was given")
        # Replace name with absolute path
        files = [f.with_name(pathfinder.abs_path(f)) for f in files]

    print_args = PrintFileListArgs(
        files=files,
        out=args.out,
        name_width=args.name_width,
        skip_header=args.skip_header,
        size_in_bytes=args.size_in_bytes,
        delimiter=args.delimiter,
        use_extended=args.use_extended,
    )
    if args.use_csv:
        print_file_list(print_args)
    else:
        print_tabbed_file_list(print_args)
    log_event("info", "list_files:done", count=len(files), csv=args.use_csv)
    return files
