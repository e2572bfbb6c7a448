"""Document storage - reads slide markdown from disk and writes repaired text back."""

import logging
from pathlib import Path
from typing import Union

logger = logging.getLogger(__name__)


class DocumentStore:
    """UTF-8 file storage for slide documents."""

    def __init__(self, encoding: str = "utf-8"):
        self.encoding = encoding

    # newline="" on both sides keeps the document's own line endings

    def read(self, path: Union[str, Path]) -> str:
        with open(Path(path), "r", encoding=self.encoding, newline="") as f:
            return f.read()

    def write(self, path: Union[str, Path], text: str) -> None:
        target = Path(path)
        with open(target, "w", encoding=self.encoding, newline="") as f:
            f.write(text)
        logger.debug(f"Wrote {len(text)} chars to {target}")
