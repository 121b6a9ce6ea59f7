"""Reflect folder tool - walk a local folder and reflect every PHP file."""

import logging
from pathlib import Path
from typing import Optional

import pathspec

from ..errors import ReflectionError
from ..parser import LANGUAGE_EXTENSIONS
from ..reflected_file import ReflectedFile
from ..reflection import get_strategy

logger = logging.getLogger(__name__)


# File patterns to skip
SKIP_PATTERNS = [
    "vendor/", "node_modules/", ".git/", ".svn/", ".idea/",
    "var/cache/", "storage/framework/",
    "dist/", "build/",
    "test_data/", "testdata/", "fixtures/", "snapshots/",
    ".blade.php", ".twig",
    "composer.lock",
]


def should_skip_file(path: str) -> bool:
    """Check if file should be skipped based on path patterns."""
    # Normalize path separators for matching
    normalized = path.replace("\\", "/")
    for pattern in SKIP_PATTERNS:
        if pattern in normalized:
            return True
    return False


def load_gitignore(folder_path: Path) -> Optional[pathspec.PathSpec]:
    """Load the folder's .gitignore, if it has one."""
    gitignore = folder_path / ".gitignore"
    if not gitignore.is_file():
        return None

    try:
        lines = gitignore.read_text(encoding="utf-8", errors="replace").splitlines()
    except OSError as e:
        logger.warning("Could not read %s: %s", gitignore, e)
        return None

    return pathspec.PathSpec.from_lines("gitwildmatch", lines)


def discover_php_files(
    folder_path: Path,
    max_files: int = 500,
    max_size: int = 500 * 1024,  # 500KB
) -> list[Path]:
    """Discover PHP files in a local folder.

    Args:
        folder_path: Root folder to scan
        max_files: Maximum number of files to reflect
        max_size: Maximum file size in bytes

    Returns:
        List of Path objects for PHP files
    """
    gitignore_spec = load_gitignore(folder_path)
    files = []

    for file_path in folder_path.rglob("*"):
        if not file_path.is_file():
            continue

        rel_path = file_path.relative_to(folder_path).as_posix()

        if should_skip_file(rel_path):
            continue

        if gitignore_spec and gitignore_spec.match_file(rel_path):
            continue

        if file_path.suffix not in LANGUAGE_EXTENSIONS:
            continue

        try:
            if file_path.stat().st_size > max_size:
                continue
        except OSError:
            continue

        files.append(file_path)

    # Prioritize: src/, lib/, app/ first, shallow before deep
    priority_dirs = ["src/", "lib/", "app/"]

    def priority_key(file_path: Path) -> tuple:
        rel_path = file_path.relative_to(folder_path).as_posix()
        for i, prefix in enumerate(priority_dirs):
            if rel_path.startswith(prefix):
                return (i, rel_path.count("/"), rel_path)
        return (len(priority_dirs), rel_path.count("/"), rel_path)

    files.sort(key=priority_key)
    return files[:max_files]


def reflect_folder(
    path: str,
    strategy: Optional[str] = None,
    max_files: int = 500,
) -> dict:
    """Reflect every PHP file in a local folder.

    Files that cannot be read or parsed are reported as warnings and do not
    stop the walk.

    Args:
        path: Path to local folder (absolute or relative, supports ~)
        strategy: Name strategy ("lexical" or "resolved")
        max_files: Maximum number of files to reflect

    Returns:
        Dict mapping each relative file path to its declared names
    """
    folder_path = Path(path).expanduser().resolve()

    if not folder_path.exists():
        return {"success": False, "error": f"Folder not found: {path}"}

    if not folder_path.is_dir():
        return {"success": False, "error": f"Path is not a directory: {path}"}

    try:
        name_strategy = get_strategy(strategy)
    except ValueError as e:
        return {"success": False, "error": str(e)}

    php_files = discover_php_files(folder_path, max_files=max_files)
    if not php_files:
        return {"success": False, "error": "No PHP files found"}

    files = {}
    warnings = []

    for file_path in php_files:
        rel_path = file_path.relative_to(folder_path).as_posix()
        try:
            result = ReflectedFile(file_path, name_strategy).result
        except ReflectionError as e:
            logger.warning("Skipping %s: %s", rel_path, e)
            warnings.append(f"{rel_path}: {e}")
            continue

        if not result.is_empty():
            files[rel_path] = result.to_dict()

    output = {
        "success": True,
        "folder_path": str(folder_path),
        "file_count": len(php_files),
        "files": files,
    }

    if warnings:
        output["warnings"] = warnings

    if len(php_files) >= max_files:
        output["note"] = f"Folder has many files; reflected first {max_files}"

    return output
