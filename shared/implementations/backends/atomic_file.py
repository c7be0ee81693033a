"""Replace-on-success file writes shared by the backends."""

import os
from pathlib import Path
from typing import Callable, TextIO


def write_atomically(path: str, dump: Callable[[TextIO], None]) -> None:
    """
    Write ``path`` through a sibling temp file that replaces it only once
    ``dump`` has finished, so a failed write leaves the previous file intact.

    Raises:
        Whatever ``dump`` or the file system raise. The temp file is removed.
    """
    Path(path).parent.mkdir(parents=True, exist_ok=True)
    tmp = f"{path}.tmp"
    try:
        with open(tmp, "w", encoding="utf-8") as f:
            dump(f)
        os.replace(tmp, path)
    except BaseException:
        Path(tmp).unlink(missing_ok=True)
        raise
