"""Resolution of request paths to files under the static root."""

from __future__ import annotations

import mimetypes
import os
from dataclasses import dataclass
from pathlib import Path

DEFAULT_MEDIA_TYPE = "application/octet-stream"

mimetypes.add_type("text/javascript", ".js")
mimetypes.add_type("text/javascript", ".mjs")
mimetypes.add_type("application/wasm", ".wasm")
mimetypes.add_type("application/manifest+json", ".webmanifest")


def guess_media_type(path: Path) -> str:
    media_type, _ = mimetypes.guess_type(path.name)
    return media_type or DEFAULT_MEDIA_TYPE


@dataclass(slots=True, frozen=True)
class StaticAsset:
    path: Path
    media_type: str


class StaticFileResolver:
    """Maps URL paths onto files inside ``root`` without ever leaving it.

    Empty paths and directories resolve to their index file. Paths with
    ``..`` segments, backslashes or NUL bytes are refused, as are dotfiles
    unless ``serve_dotfiles`` is set. Every candidate is fully resolved
    (symlinks included) and must still live under the resolved root.
    """

    def __init__(self, root: Path, index_file: str = "index.html", serve_dotfiles: bool = False) -> None:
        self.root = root.resolve()
        self.index_file = index_file
        self.serve_dotfiles = serve_dotfiles

    def _candidate(self, requested: str) -> Path | None:
        segments = [segment for segment in requested.split("/") if segment]
        for segment in segments:
            if segment == ".." or "\\" in segment or "\x00" in segment:
                return None
            if segment.startswith(".") and not self.serve_dotfiles:
                return None

        candidate = self.root.joinpath(*segments).resolve()
        if not candidate.is_relative_to(self.root):
            return None
        return candidate

    def is_directory(self, requested: str) -> bool:
        candidate = self._candidate(requested)
        return candidate is not None and candidate.is_dir()

    def locate(self, requested: str) -> StaticAsset | None:
        """Return the asset for ``requested`` or ``None`` when nothing matches."""
        candidate = self._candidate(requested)
        if candidate is None:
            return None
        if candidate.is_dir():
            candidate = candidate / self.index_file
            # An index file may itself be a symlink pointing elsewhere.
            candidate = candidate.resolve()
            if not candidate.is_relative_to(self.root):
                return None
        elif requested.endswith("/"):
            return None
        if not candidate.is_file():
            return None
        return StaticAsset(path=candidate, media_type=guess_media_type(candidate))

    def open_stat(self, asset: StaticAsset) -> os.stat_result:
        """Stat ``asset`` through an open handle so unreadable files fail here, not mid-response."""
        with asset.path.open("rb") as handle:
            return os.fstat(handle.fileno())
