import logging
import os
from pathlib import Path, PurePosixPath
from typing import Iterable, List, Tuple

from app.exceptions import DocumentNotFound
from app.schemas.content import Status
from app.settings import Settings

logger = logging.getLogger(__name__)


class FileContentRepo:
    """
    Content files on disk. The directory a file lives in is the only signal
    of its publication status.

    Ids come from the location a file was found in, not from a symlink target.
    """

    def __init__(
        self,
        root: Path,
        posts_dir: Path,
        drafts_dir: Path,
        extensions: Iterable[str] = (".md", ".markdown"),
    ):
        self.root = _normalize(root)
        self.locations = {
            Status.PUBLISHED: _normalize(posts_dir),
            Status.DRAFT: _normalize(drafts_dir),
        }
        self.prefixes = {
            status: self._id_prefix(base) for status, base in self.locations.items()
        }
        self.extensions = {ext.lower() for ext in extensions}

    @classmethod
    def from_settings(cls, settings: Settings) -> "FileContentRepo":
        return cls(
            root=Path(settings.CONTENT_ROOT),
            posts_dir=settings.posts_path,
            drafts_dir=settings.drafts_path,
            extensions=settings.CONTENT_EXTENSIONS,
        )

    def list_paths(self, status: Status) -> List[Path]:
        base = self.locations[status]
        if not base.is_dir():
            logger.debug(f"No {status.value} directory at {base}")
            return []
        return sorted(
            path for path in base.rglob("*") if self._is_content_file(path, base)
        )

    def doc_id(self, path: Path) -> str:
        path = _normalize(path)
        for status, base in self.locations.items():
            if path.is_relative_to(base):
                relative = PurePosixPath(path.relative_to(base).as_posix())
                return (self.prefixes[status] / relative).as_posix()
        raise ValueError(f"{path} is outside the content locations")

    def read(self, path: Path) -> str:
        return path.read_text(encoding="utf-8")

    def find(self, doc_id: str) -> Tuple[Path, Status]:
        """Resolve a document id to its file and status."""
        requested = PurePosixPath(doc_id)
        for status, prefix in self.prefixes.items():
            if not requested.is_relative_to(prefix):
                continue
            base = self.locations[status]
            path = _normalize(base / requested.relative_to(prefix))
            if path.is_relative_to(base) and self._is_content_file(path, base):
                return path, status
        raise DocumentNotFound(doc_id)

    def _id_prefix(self, base: Path) -> PurePosixPath:
        # Locations outside the content root are addressed by their own name.
        if base.is_relative_to(self.root):
            return PurePosixPath(base.relative_to(self.root).as_posix())
        return PurePosixPath(base.name)

    def _is_content_file(self, path: Path, base: Path) -> bool:
        if not path.is_file():
            return False
        if path.suffix.lower() not in self.extensions:
            return False
        relative = path.relative_to(base)
        return not any(part.startswith(".") for part in relative.parts)


def _normalize(path) -> Path:
    """Absolute path with '..' collapsed, symlinks left in place."""
    return Path(os.path.normpath(Path(path).absolute()))
