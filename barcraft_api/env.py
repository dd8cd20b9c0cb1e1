"""Loading of ``.env`` files for the server entry point."""
from __future__ import annotations

import os
from pathlib import Path

from dotenv import find_dotenv, load_dotenv

ENV_FILE_VARIABLE = "BARCRAFT_ENV_FILE"


def load_environment(path: str | Path | None = None, *, override: bool = False) -> bool:
    """Populate :data:`os.environ` from a dotenv file.

    The file is taken from *path*, then from ``BARCRAFT_ENV_FILE``, then from
    the nearest ``.env`` above the working directory. Returns ``False`` when no
    file exists.
    """

    dotenv_path = path or os.getenv(ENV_FILE_VARIABLE) or find_dotenv(usecwd=True)
    if not dotenv_path or not Path(dotenv_path).is_file():
        return False
    return load_dotenv(dotenv_path=dotenv_path, override=override)
