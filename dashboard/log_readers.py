"""
Helpers for reading the recent tail of an NDJSON log.

The read is bounded: the file is scanned backwards in blocks only until the
requested number of lines is buffered.
"""

from __future__ import annotations

import json
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any


BLOCK_SIZE = 8192


@dataclass
class TailParse:
    records: list[Any] = field(default_factory=list)
    skipped_empty: int = 0
    skipped_malformed: int = 0

    @property
    def skipped(self) -> int:
        return self.skipped_empty + self.skipped_malformed


def _reject_constant(name: str) -> float:
    # NaN/Infinity would make the response body invalid JSON.
    raise ValueError(f"non-standard JSON constant {name!r}")


def read_tail(path: Path, window: int, block_size: int = BLOCK_SIZE) -> str:
    """
    Return the trailing text of ``path`` holding at least ``window`` lines.

    Unless the whole file was read, the returned text starts with a partial
    line that ``parse_tail`` slices away. Raises ``OSError`` when the file
    cannot be opened or read.
    """
    with Path(path).open("rb") as f:
        f.seek(0, os.SEEK_END)
        offset = f.tell()
        data = b""
        text = ""
        while offset > 0:
            step = min(block_size, offset)
            offset -= step
            f.seek(offset)
            data = f.read(step) + data
            text = data.decode("utf-8", errors="replace")
            if text.rstrip().count("\n") >= window:
                break
    return text


def parse_tail(text: str, window: int) -> TailParse:
    """
    Decode the last ``window`` lines of ``text`` as independent JSON values.

    - Trailing whitespace is trimmed before lines are counted.
    - Empty lines, undecodable lines and JSON nulls are skipped.
    - File order is preserved (oldest first).
    """
    result = TailParse()
    for line in text.rstrip().split("\n")[-window:]:
        if not line:
            result.skipped_empty += 1
            continue
        try:
            parsed = json.loads(line, parse_constant=_reject_constant)
        except (ValueError, RecursionError):
            result.skipped_malformed += 1
            continue
        if parsed is None:
            result.skipped_malformed += 1
            continue
        result.records.append(parsed)
    return result


__all__ = ["BLOCK_SIZE", "TailParse", "read_tail", "parse_tail"]
