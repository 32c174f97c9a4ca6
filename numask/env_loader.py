"""``.env`` support for the default mask configuration."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from .user_config import get_appdata_dir

ENV_FILENAME = ".env"


def find_env_file() -> Optional[Path]:
    """Return the ``.env`` file holding mask defaults, if there is one.

    ``NUMASK_DOTENV_DIR`` wins over the working directory, which wins over
    the per-user config directory.
    """
    for directory in (os.getenv("NUMASK_DOTENV_DIR"), os.getcwd(), get_appdata_dir()):
        if not directory:
            continue
        path = Path(directory) / ENV_FILENAME
        if path.is_file():
            return path
    return None


def load_mask_env() -> Optional[Path]:
    """Copy the ``.env`` mask defaults into ``os.environ``.

    Variables already present in the environment keep their values.
    """
    path = find_env_file()
    if path is not None:
        load_dotenv(dotenv_path=path, override=False)
    return path


__all__ = ["find_env_file", "load_mask_env"]
