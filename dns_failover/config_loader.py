"""Load ``.env`` files into the process environment before settings are read."""

from __future__ import annotations

import os
from pathlib import Path

from dotenv import load_dotenv

DEFAULT_ENV_FILES = (Path("/config/.env"), Path(".env"))


def env_file_candidates(extra_path: str | os.PathLike[str] | None = None) -> list[Path]:
    """Return the ``.env`` locations to try, most specific first, without duplicates.

    Order: ``--env-file``, ``CONFIG_PATH``, ``/config/.env`` (container mount),
    ``./.env``.
    """
    candidates: dict[Path, None] = {}
    for raw in (extra_path, os.getenv("CONFIG_PATH"), *DEFAULT_ENV_FILES):
        if raw:
            candidates.setdefault(Path(raw).expanduser().resolve(), None)
    return list(candidates)


def load_environment(extra_path: str | os.PathLike[str] | None = None) -> list[Path]:
    """Load every existing candidate file and return the ones that were read.

    Values already set in the environment win over file values, so a
    scheduler can override a single setting without editing the file.
    """
    loaded = [path for path in env_file_candidates(extra_path) if path.is_file()]
    for path in loaded:
        load_dotenv(path, override=False)
    return loaded


# Copyright (c) Liam Suorsa
