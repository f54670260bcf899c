"""Module for output paths used by the data subpackage."""

import os
from pathlib import Path

DEFAULT_BASE_DIR = Path("./results")
BASE_DIR_ENV = "FFTCORE_BASE_DIR"


def _resolve_base_dir(base_path=None) -> Path:
    """Resolve base directory from explicit path or environment."""
    if base_path is not None:
        return Path(base_path)
    return Path(os.environ.get(BASE_DIR_ENV, str(DEFAULT_BASE_DIR)))


def get_base_dir(base_path=None) -> Path:
    """Get user base directory for data and figures."""
    return _resolve_base_dir(base_path)


def get_fig_dir(base_path=None) -> Path:
    """Get figures output directory."""
    return _resolve_base_dir(base_path) / "figures"


def get_user_paths(base_path=None, create=False):
    """Get all user-selected output paths and optionally create them."""
    root = _resolve_base_dir(base_path)
    fig_path = get_fig_dir(root)

    if create:
        root.mkdir(parents=True, exist_ok=True)
        fig_path.mkdir(parents=True, exist_ok=True)

    return {
        "base_dir": root,
        "fig_dir": fig_path,
    }


__all__ = [
    "DEFAULT_BASE_DIR",
    "BASE_DIR_ENV",
    "get_base_dir",
    "get_fig_dir",
    "get_user_paths",
]
