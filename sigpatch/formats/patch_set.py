"""
sigpatch - Patch Set Files

Loads named collections of signature patches from TOML, YAML, or JSON.

Every top-level table other than reserved keys is one patch, keyed by its
name:

    name = "disable checks"

    [skip_check]
    pattern = "74 ? 8B 45"
    patch = "EB ? 8B 45"
    order = 0

A top-level ``patches`` list of entries that each carry ``name`` is also
accepted. Table order in the file is not significant; patches are sorted by
their required ``order`` key.
"""

import json
import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List

import yaml

from ..core.errors import PatchSetError, PatternParseError
from ..core.patches import SignaturePatch

RESERVED_KEYS = {"name", "description", "patches"}


@dataclass
class PatchSet:
    """A named, ordered collection of signature patches."""

    name: str
    patches: List[SignaturePatch] = field(default_factory=list)
    description: str = ""

    def __len__(self) -> int:
        return len(self.patches)


def _read_mapping(path: Path) -> Dict[str, Any]:
    suffix = path.suffix.lower()
    if suffix == ".toml":
        with open(path, "rb") as f:
            return tomllib.load(f)
    if suffix in (".yml", ".yaml"):
        with open(path, "r", encoding="utf-8") as f:
            return yaml.safe_load(f) or {}
    if suffix == ".json":
        with open(path, "r", encoding="utf-8") as f:
            return json.load(f)
    raise PatchSetError(f"Unsupported patch set format: {path.name}")


def _require_str(entry: Dict[str, Any], key: str, patch_name: str) -> str:
    value = entry.get(key)
    if not isinstance(value, str):
        raise PatchSetError(f"Patch '{patch_name}': missing or non-string '{key}'")
    return value


def parse_patch(name: str, entry: Dict[str, Any]) -> SignaturePatch:
    """
    Build a SignaturePatch from one patch-set entry.

    Args:
        name: Patch name
        entry: Mapping with pattern, patch, order, and optional description

    Returns:
        Compiled patch

    Raises:
        PatchSetError: If a required key is missing or has the wrong type
        PatternParseError: If a signature is malformed
        PatchLengthError: If pattern and patch lengths differ
    """
    if not isinstance(entry, dict):
        raise PatchSetError(f"Patch '{name}' must be a table")

    pattern = _require_str(entry, "pattern", name)
    patch = _require_str(entry, "patch", name)

    if "order" not in entry:
        raise PatchSetError(f"Patch '{name}' is missing 'order'")
    order = entry["order"]
    if isinstance(order, bool) or not isinstance(order, int):
        raise PatchSetError(f"Patch '{name}': 'order' must be an integer, got {order!r}")

    description = entry.get("description", "")
    if not isinstance(description, str):
        raise PatchSetError(f"Patch '{name}': 'description' must be a string")

    try:
        return SignaturePatch.from_strings(name, pattern, patch, order, description)
    except PatternParseError as e:
        raise PatternParseError(f"Patch '{name}': {e}") from e


def parse_patch_set(data: Dict[str, Any]) -> PatchSet:
    """
    Build a PatchSet from an already-decoded mapping.

    Raises:
        PatchSetError: If the structure is invalid
    """
    if not isinstance(data, dict):
        raise PatchSetError("Patch set must be a table at the top level")

    name = data.get("name")
    if not isinstance(name, str):
        raise PatchSetError("Patch set is missing 'name'")

    patches = []

    for key, value in data.items():
        if key in RESERVED_KEYS or not isinstance(value, dict):
            continue
        patches.append(parse_patch(key, value))

    entries = data.get("patches", [])
    if not isinstance(entries, list):
        raise PatchSetError("'patches' must be a list of tables")

    for entry in entries:
        if not isinstance(entry, dict) or not isinstance(entry.get("name"), str):
            raise PatchSetError(f"Entry in 'patches' list has no name: {entry!r}")
        patches.append(parse_patch(entry["name"], entry))

    patches.sort(key=lambda p: p.order)

    description = data.get("description", "")
    if not isinstance(description, str):
        raise PatchSetError("Patch set 'description' must be a string")

    return PatchSet(name, patches, description)


def load_patch_set(path: str) -> PatchSet:
    """
    Load a patch set file.

    Args:
        path: .toml, .yml/.yaml, or .json file

    Returns:
        PatchSet with patches sorted by order

    Raises:
        OSError: If the file cannot be read
        PatchSetError: If the file cannot be decoded or is invalid
        PatternParseError: If any signature is malformed
        PatchLengthError: If any pattern/patch pair differs in length
    """
    path = Path(path)
    try:
        data = _read_mapping(path)
    except (
        tomllib.TOMLDecodeError,
        yaml.YAMLError,
        json.JSONDecodeError,
        UnicodeDecodeError,
    ) as e:
        raise PatchSetError(f"Cannot parse {path}: {e}") from e

    return parse_patch_set(data)
