import argparse
import sys
from pathlib import Path

from .client import build_service
from .config_loader import load_config
from .drive_api import DriveAPIError, ListFilesArgs, log_event, list_files
from .logging_setup import setup_logging


def build_parser():
    p = argparse.ArgumentParser(prog="drive-file-lister", description="List files in Google Drive")
    p.add_argument("--config", default="config.yaml", help="YAML config file")
    p.add_argument("--token-file", help="stored authorized-user token (overrides config)")
    p.add_argument("-q", "--query", help="Drive search query")
    p.add_argument("--order", dest="sort_order", help="sort order, e.g. 'folder,name'")
    p.add_argument("-m", "--max", dest="max_files", type=int, help="max files to list, 0 for all")
    p.add_argument("--name-width", type=int, help="truncate names to this width, 0 to disable")
    p.add_argument("--csv", action="store_true", help="delimited output")
    p.add_argument("--delimiter", help="delimiter for --csv output")
    p.add_argument("--extended", action="store_true", help="add checksum and head revision columns")
    p.add_argument("--bytes", dest="size_in_bytes", action="store_true", help="size in bytes")
    p.add_argument("--no-header", dest="skip_header", action="store_true", help="omit the header row")
    return p


def list_args_from(ns, cfg, out=None):
    list_cfg = cfg["list"]

    def pick(value, key):
        return list_cfg[key] if value is None else value

    def pick_int(value, key):
        value = pick(value, key)
        try:
            return int(value)
        except (TypeError, ValueError):
            raise ValueError(f"list.{key} must be an integer, got {value!r}") from None

    return ListFilesArgs(
        out=out or sys.stdout,
        max_files=pick_int(ns.max_files, "max_files"),
        name_width=pick_int(ns.name_width, "name_width"),
        query=pick(ns.query, "query"),
        sort_order=pick(ns.sort_order, "sort_order"),
        skip_header=ns.skip_header,
        size_in_bytes=ns.size_in_bytes,
        use_csv=ns.csv,
        use_extended=ns.extended,
        delimiter=pick(ns.delimiter, "delimiter"),
    )


def main(argv=None):
    ns = build_parser().parse_args(argv)
    cfg = load_config(Path(ns.config))
    setup_logging(cfg)
    try:
        args = list_args_from(ns, cfg)
        service = build_service(ns.token_file or cfg["drive"]["token_file"], cfg["drive"]["scopes"])
        list_files(service, args)
    except (DriveAPIError, ValueError) as exc:
        log_event("error", "main:failed", error=repr(exc))
        print(f"error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == '__main__':
    sys.exit(main())
