"""Profile management for recipebook logs and configuration."""

import os
from pathlib import Path
from typing import Optional

import typer
from dotenv import load_dotenv

# Load environment variables at module import
load_dotenv()

DEFAULT_CALORIE_THRESHOLD = 300.0


class Profile:
    """Manages profile-specific paths and settings for recipebook.

    The active profile is determined by the RECIPEBOOK_PROFILE environment
    variable, defaulting to "default" if not set. RECIPEBOOK_HOME overrides
    where the profile keeps its data.
    """

    def __init__(self, name: Optional[str] = None, data_root: Optional[Path] = None):
        """Initialize profile with given name or from environment.

        Args:
            name: Profile name. If None, uses RECIPEBOOK_PROFILE env var or "default".
            data_root: Data directory. If None, uses RECIPEBOOK_HOME, the
                project's data/<name> directory, or the per-user app directory.
        """
        self.name = name or os.getenv("RECIPEBOOK_PROFILE", "default")

        if data_root is None:
            home = os.getenv("RECIPEBOOK_HOME")
            data_root = Path(home) if home else self._default_data_root()
        self._data_root = Path(data_root)

        self.log_level = os.getenv("RECIPEBOOK_LOG_LEVEL", "DEBUG").upper()
        self.calorie_threshold = self._read_threshold()

        self._ensure_directories()

    def _default_data_root(self) -> Path:
        """data/<name> in a source checkout, else the per-user app directory."""
        project_root = self._find_project_root()
        if project_root is None:
            return Path(typer.get_app_dir("recipebook")) / self.name
        return project_root / "data" / self.name

    def _find_project_root(self) -> Optional[Path]:
        """Find project root by looking for pyproject.toml or .git.

        Returns None for an installed copy or when no root is found.
        """
        current = Path(__file__).resolve().parent
        if "site-packages" in current.parts or "dist-packages" in current.parts:
            return None

        while current != current.parent:
            if (current / "pyproject.toml").exists() or (current / ".git").exists():
                return current
            current = current.parent

        return None

    def _read_threshold(self) -> float:
        raw = os.getenv("RECIPEBOOK_CALORIE_THRESHOLD")
        if not raw:
            return DEFAULT_CALORIE_THRESHOLD
        try:
            return float(raw)
        except ValueError:
            return DEFAULT_CALORIE_THRESHOLD

    def _ensure_directories(self) -> None:
        """Create profile directories if they don't exist."""
        self.data_root.mkdir(parents=True, exist_ok=True)
        self.logs_dir.mkdir(parents=True, exist_ok=True)

    @property
    def data_root(self) -> Path:
        """Root directory for profile data."""
        return self._data_root

    @property
    def logs_dir(self) -> Path:
        """Directory for log files."""
        return self._data_root / "logs"

    @property
    def log_file(self) -> Path:
        """Path to the main recipebook log file."""
        return self.logs_dir / "recipebook.log"

    @classmethod
    def current(cls) -> "Profile":
        """Get the current active profile."""
        return cls()

    def __str__(self) -> str:
        return f"Profile({self.name})"

    def __repr__(self) -> str:
        return f"Profile(name={self.name!r}, data_root={self._data_root!s})"
