import copy
import os
from pathlib import Path

import yaml

DEFAULTS = {
    "logging": {"level": "INFO", "json": False},
    "drive": {
        "token_file": "token.json",
        "scopes": ["https://www.googleapis.com/auth/drive.metadata.readonly"],
    },
    "list": {
        "max_files": 30,
        "name_width": 40,
        "query": "trashed = false and 'me' in owners",
        "sort_order": "",
        "delimiter": "|",
    },
}


def _merge(base, override):
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(base.get(key), dict):
            _merge(base[key], value)
        else:
            base[key] = value
    return base


def load_config(path=Path('config.yaml')):
    cfg = copy.deepcopy(DEFAULTS)
    path = Path(path)
    if path.exists():
        data = yaml.safe_load(path.read_text()) or {}
        if not isinstance(data, dict):
            raise ValueError(f"{path}: expected a mapping at top level")
        _merge(cfg, data)
    # overlay env
    if os.environ.get('DRIVE_TOKEN_FILE'):
        cfg['drive']['token_file'] = os.environ['DRIVE_TOKEN_FILE']
    if os.environ.get('DRIVE_LOG_LEVEL'):
        cfg['logging']['level'] = os.environ['DRIVE_LOG_LEVEL'].upper()
    if os.environ.get('DRIVE_LOG_JSON'):
        cfg['logging']['json'] = os.environ['DRIVE_LOG_JSON'].lower() in ('1', 'true', 'yes')
    return cfg
