"""JSON and text read/write helpers with atomic persistence."""

from __future__ import annotations

import json
import os
import sys
import tempfile
from contextlib import suppress
from pathlib import Path
from typing import TextIO

STDIN_MARKER: str = "-"


def load_json_file(path: Path) -> object:
    """Load and parse JSON from disk."""
    return json.loads(path.read_text(encoding="utf-8"))


def read_text_input(path: Path | None, *, stdin: TextIO | None = None) -> str:
    """Read UTF-8 text from *path*, or from stdin when *path* is ``None`` or ``-``."""
    if path is None or str(path) == STDIN_MARKER:
        stream = stdin if stdin is not None else sys.stdin
        return stream.read()
    return path.read_text(encoding="utf-8", errors="replace")


def write_json_atomic(
    *,
    path: Path,
    payload: object,
    temp_prefix: str,
    temp_suffix: str,
) -> None:
    """Persist JSON atomically by writing to a temp file then renaming."""
    write_text_atomic(
        path=path,
        content=json.dumps(payload, indent=2, sort_keys=True) + "\n",
        temp_prefix=temp_prefix,
        temp_suffix=temp_suffix,
    )


def write_text_atomic(
    *,
    path: Path,
    content: str,
    temp_prefix: str,
    temp_suffix: str,
) -> None:
    """Persist text atomically by writing to a temp file then renaming."""
    path.parent.mkdir(parents=True, exist_ok=True)

    temp_name: str | None = None
    try:
        with tempfile.NamedTemporaryFile(
            mode="w",
            encoding="utf-8",
            dir=path.parent,
            prefix=temp_prefix,
            suffix=temp_suffix,
            delete=False,
        ) as handle:
            temp_name = handle.name
            handle.write(content)
    except Exception:
        if temp_name:
            with suppress(FileNotFoundError):
                Path(temp_name).unlink()
        raise

    assert temp_name is not None
    os.replace(temp_name, path)
