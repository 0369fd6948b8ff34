"""Data model for Drive listing: file metadata snapshots and list queries."""
from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any, Dict, Tuple

FOLDER_MIME_TYPE = "application/vnd.google-apps.folder"
MAX_PAGE_SIZE = 1000

LIST_FIELDS = (
    "nextPageToken, "
    "files(id, name, md5Checksum, mimeType, size, createdTime, parents, headRevisionId)"
)


@dataclass(frozen=True)
class FileRecord:
    """
    Snapshot of one Drive file as returned by files.list.

    Notes:
        - size is 0 when the API omits it (folders, native Google docs).
        - created_time is kept as the RFC 3339 string the API returned.
    """

    id: str
    name: str
    md5_checksum: str = ""
    mime_type: str = ""
    size: int = 0
    created_time: str = ""
    parents: Tuple[str, ...] = ()
    head_revision_id: str = ""

    @classmethod
    def from_api(cls, data: Dict[str, Any]) -> "FileRecord":
        """Build a record from a Drive v3 file resource dict."""
        return cls(
            id=data.get("id", ""),
            name=data.get("name", ""),
            md5_checksum=data.get("md5Checksum", ""),
            mime_type=data.get("mimeType", ""),
            size=int(data.get("size") or 0),
            created_time=data.get("createdTime", ""),
            parents=tuple(data.get("parents") or ()),
            head_revision_id=data.get("headRevisionId", ""),
        )

    def with_name(self, name: str) -> "FileRecord":
        return replace(self, name=name)

    @property
    def is_dir(self) -> bool:
        return self.mime_type == FOLDER_MIME_TYPE

    @property
    def is_binary(self) -> bool:
        # Drive only computes checksums for uploaded binary content
        return bool(self.md5_checksum)


@dataclass(frozen=True)
class ListQuery:
    """Parameters for one paginated files.list run. max_files=0 means unbounded."""

    query: str = ""
    sort_order: str = ""
    max_files: int = 0
    fields: str = LIST_FIELDS

    def __post_init__(self) -> None:
        if self.max_files < 0:
            raise ValueError(f"max_files must be >= 0, got {self.max_files}")

    @property
    def page_size(self) -> int:
        if 0 < self.max_files < MAX_PAGE_SIZE:
            return self.max_files
        return MAX_PAGE_SIZE
