from __future__ import annotations

import os
from pathlib import Path


# Highest priority first.
_ENV_FILES = (".env.local", ".env.production", ".env.development", ".env.test")

_ENV_PREFIX = "A11Y_ANALYTICS_"

_DEFAULT_PROVIDER = "auto"
_DEFAULT_GSETTINGS_BIN = "gsettings"
_DEFAULT_GSETTINGS_TIMEOUT_MS = 2_000


def get_prefixed_env(name: str) -> str | None:
    return os.environ.get(_ENV_PREFIX + name)


def _unquote(value: str) -> str:
    if len(value) >= 2 and value[0] == value[-1] and value[0] in "'\"":
        return value[1:-1]
    return value


def _read_env_file(path: Path) -> dict[str, str]:
    """`A11Y_ANALYTICS_*` assignments from one dotenv file; other keys are ignored."""
    found: dict[str, str] = {}
    for raw in path.read_text(encoding="utf-8").splitlines():
        line = raw.strip()
        if line.startswith("export "):
            line = line[len("export ") :].lstrip()
        if not line.startswith(_ENV_PREFIX):
            continue
        key, sep, value = line.partition("=")
        key = key.strip()
        if not sep or not key[len(_ENV_PREFIX) :]:
            continue
        found.setdefault(key, _unquote(value.strip()))
    return found


def load_env_files(root: str | Path | None = None) -> list[Path]:
    """
    Copy `A11Y_ANALYTICS_*` settings from dotenv files in `root` (default: cwd) into
    the process environment. `.env.local` wins over `.env.production`, then
    `.env.development`, then `.env.test`; the real environment wins over all of them.
    """
    base = Path.cwd() if root is None else Path(root)
    paths = [base / name for name in _ENV_FILES if (base / name).is_file()]
    for path in paths:
        for key, value in _read_env_file(path).items():
            if key not in os.environ:
                os.environ[key] = value
    return paths


def get_provider_name() -> str:
    raw = get_prefixed_env("PROVIDER")
    if raw is None or not raw.strip():
        return _DEFAULT_PROVIDER
    return raw.strip().lower()


def get_gsettings_bin() -> str:
    raw = get_prefixed_env("GSETTINGS_BIN")
    if raw is None or not raw.strip():
        return _DEFAULT_GSETTINGS_BIN
    return raw.strip()


def get_gsettings_timeout_ms() -> int:
    raw = get_prefixed_env("GSETTINGS_TIMEOUT_MS")
    if raw is None:
        return _DEFAULT_GSETTINGS_TIMEOUT_MS
    try:
        value = int(raw)
    except ValueError:
        return _DEFAULT_GSETTINGS_TIMEOUT_MS
    return max(1, value)
