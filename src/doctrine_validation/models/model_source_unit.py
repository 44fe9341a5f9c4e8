# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Model for a source file read once for a single scan."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from doctrine_validation.errors import UnreadableSourceError

__all__: list[str] = [
    "ModelSourceUnit",
]


@dataclass(frozen=True)
class ModelSourceUnit:
    """Raw text of one source file.

    Attributes:
        path: Path the text was read from (display form).
        text: Full file contents.
    """

    path: str
    text: str

    @classmethod
    def read(cls, path: str | Path, *, encoding: str = "utf-8") -> ModelSourceUnit:
        """Read a source file.

        Args:
            path: File to read.
            encoding: Text encoding of the file.

        Returns:
            ModelSourceUnit holding the file contents.

        Raises:
            UnreadableSourceError: If the file is missing, unreadable, or not
                valid text in ``encoding``.
        """
        file_path = Path(path)
        try:
            text = file_path.read_text(encoding=encoding)
        except (OSError, UnicodeDecodeError) as e:
            reason = e.strerror if isinstance(e, OSError) and e.strerror else str(e)
            raise UnreadableSourceError(
                f"Cannot read source file {file_path}",
                path=str(file_path),
                reason=reason,
            ) from e
        return cls(path=str(file_path), text=text)
