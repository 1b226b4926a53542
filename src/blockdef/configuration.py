from __future__ import annotations

import os
from dataclasses import dataclass


@dataclass(frozen=True)
class Configuration:
    root_dir: str = "."

    def relative_path(self, file: str) -> str:
        """Return *file* relative to ``root_dir`` when it lives beneath it."""
        root = os.path.abspath(self.root_dir)
        path = os.path.abspath(file)
        try:
            if os.path.commonpath([root, path]) != root:
                return file
        except ValueError:  # different drives on Windows
            return file
        return os.path.relpath(path, root)
