import os
from pathlib import Path


def get_root_path():
    project_root = Path(os.environ.get("PROJECT_ROOT", ".")).resolve()
    return project_root


def get_package_path():
    return Path(__file__).resolve().parent.parent


def strip_first(value: str, prefix: str) -> str:
    """Remove the first occurrence of ``prefix`` anywhere in ``value``."""
    return value.replace(prefix, "", 1)
