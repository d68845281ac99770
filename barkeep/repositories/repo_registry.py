"""Registry of the git repositories available for review."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Optional

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GitRepo:
    name: str
    path: Path


class RepoRegistry:
    """Lists repositories found under ``root``.

    A directory counts as a repository when it holds a ``.git`` folder
    (working copy) or its name ends with ``.git`` (bare clone, listed without
    the suffix).
    """

    def __init__(self, root: str | Path | None = None, repos: Iterable[GitRepo] | None = None) -> None:
        self.root = Path(root) if root else None
        self._repos: Optional[list[GitRepo]] = list(repos) if repos is not None else None

    @classmethod
    def from_names(cls, names: Iterable[str]) -> "RepoRegistry":
        return cls(repos=[GitRepo(name=name, path=Path(name)) for name in names])

    def _scan(self) -> list[GitRepo]:
        if self.root is None or not self.root.is_dir():
            if self.root is not None:
                logger.warning("Repos root %s does not exist; no repositories loaded", self.root)
            return []
        found: list[GitRepo] = []
        for entry in sorted(self.root.iterdir()):
            if not entry.is_dir():
                continue
            if (entry / ".git").exists():
                found.append(GitRepo(name=entry.name, path=entry))
            elif entry.name.endswith(".git"):
                found.append(GitRepo(name=entry.name[: -len(".git")], path=entry))
        logger.debug("Loaded %d repositories from %s", len(found), self.root)
        return found

    @property
    def repos(self) -> list[GitRepo]:
        if self._repos is None:
            self._repos = self._scan()
        return list(self._repos)

    def reload(self) -> None:
        if self.root is not None:
            self._repos = None

    def names(self) -> list[str]:
        return [repo.name for repo in self.repos]

    def find(self, name: str) -> Optional[GitRepo]:
        return next((repo for repo in self.repos if repo.name == name), None)

    def has_repo(self, name: str) -> bool:
        return self.find(name) is not None
