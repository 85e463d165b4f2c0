"""
Transient files created while producing a delivery.

    with TransientFile(temp_dir / "SA-Output-1a2b3c4d.docx") as docx_path:
        writer.write(print_doc, docx_path)
        ...

Deletion is always attempted on exit, whether or not the body raised.
A failed deletion is logged and never propagates.
"""

import os
from pathlib import Path
from typing import Union

from config.logging_config import get_logger

logger = get_logger(__name__)


class TransientFile:
    """Context manager owning a file path for the duration of one request."""

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)
        self.cleaned_up = False

    def __enter__(self) -> Path:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        return self.path

    def __exit__(self, exc_type, exc, tb) -> bool:
        self.cleanup()
        # Never suppress the body's exception
        return False

    def cleanup(self) -> bool:
        """Delete the file if it exists. Returns True when nothing is left behind."""
        if not self.path.exists():
            self.cleaned_up = True
            return True

        try:
            os.remove(self.path)
        except OSError as e:
            logger.warning(f"Could not delete temporary document {self.path}: {e}")
            return False

        self.cleaned_up = True
        logger.info(f"Cleaned up temporary document: {self.path.name}")
        return True
