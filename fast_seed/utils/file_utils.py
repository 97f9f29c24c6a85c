from pathlib import Path
from typing import Optional


def with_trailing_separator(path: str) -> str:
    """Trim any trailing `/` or `\\` and append exactly one `/`."""
    return path.rstrip('\\/') + '/'


def resolve_cli_path(path_override: Optional[str], default: Path | str) -> Path:
    """
    Resolve a directory passed on the command line against the project root.

    Args:
        path_override: Directory given by the user (relative to the project root), or None.
        default: Directory used when no override is given.

    Raises:
        ValueError: If the override points outside of the project root.
    """
    project_root = Path.cwd().resolve()
    if path_override is None:
        return project_root / default

    resolved = (project_root / path_override).resolve()
    if resolved != project_root and project_root not in resolved.parents:
        raise ValueError(f"Path must be inside the project root: {path_override}")
    return resolved
