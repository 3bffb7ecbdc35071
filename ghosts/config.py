import json
import os
from dataclasses import dataclass, field, fields, replace

from .log import get_logger

log = get_logger(__name__)

WIN_W, WIN_H = 1280, 720
FPS = 60
BG_COLOR = (18, 18, 20)
CAMERA_INDEX = 0
CONFIG_ENV = 'GHOSTS_CONFIG'


@dataclass
class Settings:
    width: int = WIN_W
    height: int = WIN_H
    fps: int = FPS
    fullscreen: bool = False
    resizable: bool = True
    background: tuple = field(default=BG_COLOR)
    hand_tracking: bool = False
    camera_index: int = CAMERA_INDEX
    seed: object = None
    caption: str = 'Ghosts'


def _coerce(name, kind, value):
    # JSON only knows lists, so the colour comes back as one
    if kind is tuple:
        if not isinstance(value, (list, tuple)) or len(value) != 3:
            raise ValueError(f'{name}: expected an RGB triple, got {value!r}')
        return tuple(int(c) for c in value)
    if kind is bool:
        if not isinstance(value, bool):
            raise ValueError(f'{name}: expected true/false, got {value!r}')
        return value
    if kind is int:
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise ValueError(f'{name}: expected a number, got {value!r}')
        return int(value)
    if kind is str:
        return str(value)
    return value


_KINDS = {
    'width': int,
    'height': int,
    'fps': int,
    'fullscreen': bool,
    'resizable': bool,
    'background': tuple,
    'hand_tracking': bool,
    'camera_index': int,
    'seed': object,
    'caption': str,
}


def merge(settings: Settings, overrides: dict) -> Settings:
    """Return a copy of settings with the known keys of overrides applied."""
    known = {f.name for f in fields(Settings)}
    changes = {}
    for key, value in overrides.items():
        if key not in known:
            log.debug('ignoring unknown setting %r', key)
            continue
        if value is None:
            continue
        changes[key] = _coerce(key, _KINDS[key], value)
    return replace(settings, **changes)


def load_settings(path=None, overrides=None) -> Settings:
    """Defaults, then the JSON file (path or $GHOSTS_CONFIG), then overrides."""
    settings = Settings()
    path = path or os.environ.get(CONFIG_ENV)
    if path:
        if os.path.exists(path):
            try:
                with open(path, 'r', encoding='utf-8') as f:
                    data = json.load(f)
            except (OSError, ValueError) as e:
                log.warning('could not read config %s: %s', path, e)
                data = {}
            if isinstance(data, dict):
                # same layout as the anchor files: settings may sit under "__config__"
                settings = merge(settings, data.get('__config__', data))
            else:
                log.warning('config %s is not a JSON object, using defaults', path)
        else:
            log.warning('config file %s not found, using defaults', path)
    if overrides:
        settings = merge(settings, overrides)
    return settings


def save_settings(settings: Settings, path: str):
    data = {'__config__': {f.name: getattr(settings, f.name) for f in fields(Settings)}}
    data['__config__']['background'] = list(settings.background)
    with open(path, 'w', encoding='utf-8') as f:
        json.dump(data, f, ensure_ascii=False, indent=2)
    return path
