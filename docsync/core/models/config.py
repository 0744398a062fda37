"""
Sync configuration model — loaded from docsync.yml.

Every stage receives the same SyncConfig instance; nothing reads
directory names from module globals.
"""

from __future__ import annotations

from pathlib import Path, PurePosixPath

from pydantic import BaseModel, Field, field_validator


class SyncConfig(BaseModel):
    """Where the scraper writes, where the curated pages live, and what to keep."""

    root: Path = Field(default_factory=Path.cwd)

    scratch_dir: str = "tmp"
    target_dir: str = "reference/api"
    protected_files: list[str] = Field(default_factory=lambda: ["introduction.mdx"])

    extension: str = ".mdx"
    nav_file: str = "mint.json"

    @field_validator("extension")
    @classmethod
    def _extension_has_dot(cls, value: str) -> str:
        if not value.startswith(".") or len(value) < 2:
            raise ValueError(f"extension must look like '.mdx', got {value!r}")
        return value

    @field_validator("protected_files")
    @classmethod
    def _normalize_protected(cls, value: list[str]) -> list[str]:
        return [PurePosixPath(p.replace("\\", "/")).as_posix() for p in value]

    @property
    def scratch_path(self) -> Path:
        """Absolute scratch directory."""
        return self.root / self.scratch_dir

    @property
    def target_path(self) -> Path:
        """Absolute target directory."""
        return self.root / self.target_dir

    def protected_paths(self) -> set[Path]:
        """Protected files resolved against the target directory."""
        return {self.target_path / p for p in self.protected_files}

    def display(self, path: Path) -> str:
        """Root-relative POSIX form of a path, as shown to the operator."""
        try:
            return path.relative_to(self.root).as_posix()
        except ValueError:
            return path.as_posix()
