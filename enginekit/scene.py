"""Saving and loading scenes as JSON files."""

from __future__ import annotations

import json
import os
from dataclasses import dataclass, field
from typing import Any

SCENE_EXTENSION = ".scene"

Vector3 = tuple[float, float, float]


class SceneNotFoundError(FileNotFoundError):
    """Raised when a scene file does not exist."""


@dataclass
class ObjectInfo:
    """Placement and type of one actor in a scene."""

    location: Vector3 = (0.0, 0.0, 0.0)
    rotation: Vector3 = (0.0, 0.0, 0.0)
    scale: Vector3 = (0.0, 0.0, 0.0)
    object_type: str = ""
    uuid: int = 0


@dataclass
class WorldInfo:
    """Everything stored in a scene file."""

    scene_name: str = ""
    version: int = 0
    actor_count: int = 0
    next_uuid: int = 0
    object_infos: list[ObjectInfo] = field(default_factory=list)


def _scene_path(scene_name: str | os.PathLike[str]) -> str:
    return os.fspath(scene_name) + SCENE_EXTENSION


def _vector(values: Any) -> Vector3:
    items = list(values)[:3] if isinstance(values, list) else []
    items.extend([0.0] * (3 - len(items)))
    x, y, z = (float(item) for item in items)
    return (x, y, z)


def _uuid_from_key(key: str) -> int:
    return int(key) if key.isdigit() else 0


def load_scene(scene_name: str | os.PathLike[str]) -> WorldInfo:
    """Read ``<scene_name>.scene``; raises SceneNotFoundError if it is missing."""
    path = _scene_path(scene_name)
    try:
        with open(path, encoding="utf-8") as handle:
            document = json.load(handle)
    except FileNotFoundError:
        raise SceneNotFoundError(f"scene file not found: {path}") from None

    world = WorldInfo(
        scene_name=str(document.get("SceneName", "")),
        version=int(document.get("Version", 0)),
        actor_count=int(document.get("ActorCount", 0)),
        next_uuid=int(document.get("NextUUID", 0)),
    )
    actors = document.get("Actors")
    if isinstance(actors, dict):
        for key, actor in sorted(actors.items()):
            world.object_infos.append(
                ObjectInfo(
                    location=_vector(actor.get("Location")),
                    rotation=_vector(actor.get("Rotation")),
                    scale=_vector(actor.get("Scale")),
                    object_type=str(actor.get("Type", "")),
                    uuid=_uuid_from_key(key),
                )
            )
    return world


def save_scene(world_info: WorldInfo) -> str | None:
    """Write ``<scene_name>.scene`` and return its path; nothing for an unnamed scene."""
    if not world_info.scene_name:
        return None

    document: dict[str, Any] = {
        "Version": world_info.version,
        "NextUUID": world_info.next_uuid,
        "ActorCount": world_info.actor_count,
        "SceneName": world_info.scene_name,
    }
    actors = {
        str(info.uuid): {
            "Location": list(info.location),
            "Rotation": list(info.rotation),
            "Scale": list(info.scale),
            "Type": info.object_type,
        }
        for info in world_info.object_infos
    }
    if actors:
        document["Actors"] = actors

    path = _scene_path(world_info.scene_name)
    with open(path, "w", encoding="utf-8") as handle:
        json.dump(document, handle, indent=2, sort_keys=True)
    return path