"""Reading whole assets from the asset directory."""

from pathlib import Path

DEFAULT_ASSET_ROOT = "assets"


def asset_path(path, root=DEFAULT_ASSET_ROOT):
    """Return the filesystem path of an asset below ``root``."""
    return Path(root) / path


def _read_asset(path, root):
    try:
        return asset_path(path, root).read_bytes()
    except (FileNotFoundError, IsADirectoryError, PermissionError) as exc:
        raise FileNotFoundError(f"File {path} failed to open.") from exc


def read_all_bytes_from_asset(path, root=DEFAULT_ASSET_ROOT):
    """Return the raw bytes of an asset."""
    return _read_asset(path, root)


def read_text_asset(path, root=DEFAULT_ASSET_ROOT):
    """Return an asset as text, dropping one trailing NUL byte if present."""
    data = _read_asset(path, root)
    if data.endswith(b"\0"):
        data = data[:-1]
    return data.decode("utf-8")