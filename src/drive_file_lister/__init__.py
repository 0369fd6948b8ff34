"""List Google Drive files and render them as delimited or tabbed tables."""
from .drive_api import DriveAPIError, ListFilesArgs, PathResolver, list_all_files, list_files
from .formatting import PrintFileListArgs, print_file_list, print_tabbed_file_list
from .models import FileRecord, ListQuery

__all__ = [
    "DriveAPIError",
    "FileRecord",
    "ListFilesArgs",
    "ListQuery",
    "PathResolver",
    "PrintFileListArgs",
    "list_all_files",
    "list_files",
    "print_file_list",
    "print_tabbed_file_list",
]
