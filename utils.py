import logging
import json
from pathlib import Path
from typing import Optional


def get_logger(name: str, level: Optional[str] = None) -> logging.Logger:
    """
    Input: name (str) - logger name, usually the component name
           level (str) - optional level name, e.g. "DEBUG"
    Functionality: Return a named logger; handlers are left to the application
    Output: logging.Logger
    """
    logger = logging.getLogger(name)

    if level:
        logger.setLevel(level.upper())
    elif logger.level == logging.NOTSET:
        logger.setLevel(logging.INFO)

    return logger


def load_json_from_project(json_path: str, project_root: str | None = None) -> dict:
    """
    Search for a JSON file inside the project and return it as a dict.

    json_path: filename or relative path (e.g. "config.json" or "config/selectors.json")
    project_root: root directory to search from (defaults to cwd)
    """
    root = Path(project_root) if project_root else Path.cwd()

    target = Path(json_path)

    # Case 1: direct relative/absolute path exists
    if target.is_absolute() or (root / target).exists():
        path = target if target.is_absolute() else root / target
    else:
        # Case 2: search by filename inside project
        matches = list(root.rglob(target.name))
        if not matches:
            raise FileNotFoundError(f"JSON file not found in project: {json_path}")
        if len(matches) > 1:
            raise FileExistsError(
                f"Multiple JSON files named '{target.name}' found: {matches}"
            )
        path = matches[0]

    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)
