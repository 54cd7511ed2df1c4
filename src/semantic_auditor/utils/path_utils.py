# src/semantic_auditor/utils/path_utils.py
import logging
from pathlib import Path
from typing import Union

logger = logging.getLogger(__name__)


class PathUtils:
    """
    A central utility for reliably retrieving important project paths.
    """

    @staticmethod
    def get_project_root() -> Path:
        """
        Returns the absolute path of the project root.
        Searches upwards for a directory containing 'src' and 'pyproject.toml'.
        """
        current_path = Path(__file__).resolve().parent
        while current_path != current_path.parent:
            src_dir = current_path / "src"
            pyproject_toml = current_path / "pyproject.toml"
            if src_dir.is_dir() and pyproject_toml.is_file():
                return current_path
            current_path = current_path.parent
        raise FileNotFoundError(
            "Could not find the project root. Search for a directory containing 'src' and 'pyproject.toml'.")

    @staticmethod
    def get_package_root() -> Path:
        """Directory of the semantic_auditor package (holds settings.json)."""
        return Path(__file__).resolve().parent.parent

    @staticmethod
    def resolve_fixture_path(path: Union[str, Path]) -> Path:
        """
        Resolves a fixture path. Absolute paths are returned as-is,
        relative paths are taken from the project root.
        """
        candidate = Path(path)
        if candidate.is_absolute():
            return candidate
        resolved = PathUtils.get_project_root() / candidate
        logger.debug("Resolved fixture path %s -> %s", path, resolved)
        return resolved
