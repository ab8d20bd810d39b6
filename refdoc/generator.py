"""Base class for output formats."""

from __future__ import annotations

import os
from abc import ABC, abstractmethod
from pathlib import Path
from typing import ClassVar

from refdoc.corpus import Corpus


class Generator(ABC):
    """Turns a corpus into documentation in one format."""

    name: ClassVar[str] = ""
    extension: ClassVar[str] = ""

    def build(self, output_path: str | os.PathLike[str], corpus: Corpus) -> Path:
        """Write the documentation under ``output_path`` and return the file.

        A missing path is created as a directory. Given a directory, the
        documentation goes to a file named ``reference`` with this format's
        extension inside it; given anything else, to that path.
        """
        target = Path(output_path)
        if not target.exists():
            target.mkdir(parents=True)
        if target.is_dir():
            file_name = target / f"reference.{self.extension}"
        else:
            file_name = target
        self.build_one(file_name, corpus)
        return file_name

    def build_one(self, file_name: str | os.PathLike[str], corpus: Corpus) -> None:
        """Write the documentation as one file, replacing any existing one."""
        text = self.build_string(corpus)
        with open(file_name, "w", encoding="utf-8", newline="") as stream:
            stream.write(text)

    @abstractmethod
    def build_string(self, corpus: Corpus) -> str:
        """Return the documentation as a string."""