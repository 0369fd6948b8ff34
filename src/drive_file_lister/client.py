"""Build an authorized Drive v3 service from a stored token file."""
from __future__ import annotations

from pathlib import Path
from typing import Iterable

from google.oauth2.credentials import Credentials
from googleapiclient.discovery import build

from .drive_api import DriveAPIError, log_event

DEFAULT_SCOPES = ["https://www.googleapis.com/auth/drive.metadata.readonly"]


def build_service(token_file: str, scopes: Iterable[str] = DEFAULT_SCOPES):
    """
    Return a Drive service using credentials previously stored in token_file.
    No OAuth flow is run here; a missing token raises DriveAPIError.
    """
    token_path = Path(token_file)
    if not token_path.exists():
        raise DriveAPIError(f"token_file missing: {token_file}")
    creds = Credentials.from_authorized_user_file(str(token_path), scopes=list(scopes))
    log_event("info", "build_service:loaded_token", token_file=str(token_path))
    return build("drive", "v3", credentials=creds, cache_discovery=False)
