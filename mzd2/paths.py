"""Resource path layout next to a map file, and JSON serialisation."""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any, Optional, Union
from uuid import UUID

PathLike = Union[str, "os.PathLike[str]"]

_TAB_INDENT = 255


def attached_to_path(path: PathLike, add: PathLike) -> Path:
    """Append ``add`` to the final path component, without a separator."""
    return Path(os.fspath(path) + os.fspath(add))


def tex_resource_dir(map_path: PathLike) -> Path:
    return attached_to_path(map_path, "_data") / "tex"


def tex_resource_path(map_path: PathLike, resource_uuid: UUID) -> Path:
    return tex_resource_dir(map_path) / f"{resource_uuid}.png"


def seltrix_resource_dir(map_path: PathLike) -> Path:
    return attached_to_path(map_path, "_data") / "sel"


def seltrix_resource_path(map_path: PathLike, resource_uuid: UUID) -> Path:
    return seltrix_resource_dir(map_path) / f"{resource_uuid}.sel"


def json_ser_with_indent(value: Any, indent: Optional[int]) -> bytes:
    """Serialise to UTF-8 JSON: compact if ``indent`` is None, tabs if 255, else that many spaces."""
    if indent is None:
        text = json.dumps(value, separators=(",", ":"), ensure_ascii=False, allow_nan=False)
    else:
        if not 0 <= indent <= 255:
            raise ValueError(f"indent must be in 0..=255, got {indent}")
        indent_str = "\t" if indent == _TAB_INDENT else " " * indent
        text = json.dumps(value, indent=indent_str, ensure_ascii=False, allow_nan=False)
    return text.encode("utf-8")