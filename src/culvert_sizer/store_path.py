"""Where the field card store lives on disk.

Crews usually keep one store per machine. The location can be pinned per
shell with `CULVERT_SIZER_STORE`, per checkout with a one-line
`STORE_PATH.txt` beside `pyproject.toml`, or left at the per-user default.
"""

from __future__ import annotations

import os
from pathlib import Path

from loguru import logger

CONFIG_FILENAME = "STORE_PATH.txt"
ENV_VARIABLE = "CULVERT_SIZER_STORE"
DEFAULT_STORE_PATH = Path("~/.culvert-sizer/field_cards.json")


def store_path_file() -> Path:
    """Location of `STORE_PATH.txt` in the project checkout (src/culvert_sizer/../..)."""
    return Path(__file__).resolve().parents[2] / CONFIG_FILENAME


def read_store_path_file() -> Path | None:
    """
    Return the store location pinned in `STORE_PATH.txt`.

    Only the first non-blank line counts; surrounding quotes and `~` are
    handled so paths copied from a file manager work as-is. None when the
    file is missing or blank.
    """
    pin_file: Path = store_path_file()
    if not pin_file.is_file():
        return None
    lines: list[str] = [line.strip() for line in pin_file.read_text(encoding="utf-8").splitlines()]
    first: str | None = next((line for line in lines if line), None)
    if first is None:
        return None
    return Path(first.strip("\"'")).expanduser()


def save_store_path(path: Path) -> Path:
    """Pin `path` (made absolute) as the store location and return the pin file written."""
    pin_file: Path = store_path_file()
    store: Path = Path(path).expanduser().absolute()
    pin_file.write_text(f"{store}\n", encoding="utf-8")
    logger.info("Pinned field card store to {store} in {pin_file}", store=store, pin_file=pin_file)
    return pin_file


def resolve_store_path() -> Path:
    """Store location: `CULVERT_SIZER_STORE`, else `STORE_PATH.txt`, else the per-user default."""
    from_env: str = os.environ.get(ENV_VARIABLE, "").strip()
    if from_env:
        store: Path = Path(from_env).expanduser()
        source: str = ENV_VARIABLE
    elif (pinned := read_store_path_file()) is not None:
        store = pinned
        source = CONFIG_FILENAME
    else:
        store = DEFAULT_STORE_PATH.expanduser()
        source = "default"
    logger.debug("Field card store {store} (from {source})", store=store, source=source)
    return store


__all__: list[str] = [
    "CONFIG_FILENAME",
    "DEFAULT_STORE_PATH",
    "ENV_VARIABLE",
    "read_store_path_file",
    "resolve_store_path",
    "save_store_path",
    "store_path_file",
]
