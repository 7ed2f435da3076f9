"""Loading of simulated world descriptions into visualisation markers."""

from __future__ import annotations

import logging
import os
import time
from dataclasses import dataclass
from enum import IntEnum
from typing import Any, Callable

import yaml

from dronenav.common import Quaternion, Vector3

logger = logging.getLogger(__name__)

MODEL_SCHEME = "model://"
DRONE_MESH = "model://matrice_100/meshes/Matrice_100.dae"
_PRIMITIVE_COLOR = (0.5, 0.5, 0.5, 0.9)


class WorldLoadError(Exception):
    """A world description could not be read or turned into markers."""


class MarkerType(IntEnum):
    """Shape of a visualisation marker."""

    CUBE = 1
    SPHERE = 2
    CYLINDER = 3
    MESH_RESOURCE = 10


_PRIMITIVES = {
    "cube": MarkerType.CUBE,
    "sphere": MarkerType.SPHERE,
    "cylinder": MarkerType.CYLINDER,
}


@dataclass(frozen=True)
class WorldObject:
    """One object of a world description."""

    type: str
    name: str
    frame_id: str
    mesh_resource: str
    position: Vector3
    orientation: Quaternion
    scale: Vector3


@dataclass(frozen=True)
class Marker:
    """A visualisation marker ready to be published."""

    id: int
    type: MarkerType
    frame_id: str
    stamp: float
    position: Vector3
    orientation: Quaternion
    scale: Vector3
    color: tuple[float, float, float, float] = (0.0, 0.0, 0.0, 0.0)
    mesh_resource: str = ""
    mesh_use_embedded_materials: bool = False


def _floats(node: Any, count: int, key: str) -> list[float]:
    try:
        return [float(node[i]) for i in range(count)]
    except (TypeError, ValueError, IndexError, KeyError) as exc:
        raise WorldLoadError(f"'{key}' needs {count} numbers") from exc


def parse_world_object(node: Any) -> WorldObject:
    """Build a :class:`WorldObject` from a mapping read from YAML."""
    try:
        type_, name, frame_id, mesh = (
            str(node[key]) for key in ("type", "name", "frame_id", "mesh_resource")
        )
        position, orientation, scale = (
            node[key] for key in ("position", "orientation", "scale")
        )
    except (KeyError, TypeError) as exc:
        raise WorldLoadError(f"world object is missing field {exc}") from exc
    x, y, z, w = _floats(orientation, 4, "orientation")
    return WorldObject(
        type=type_,
        name=name,
        frame_id=frame_id,
        mesh_resource=mesh,
        position=Vector3(*_floats(position, 3, "position")),
        orientation=Quaternion(w=w, x=x, y=y, z=z),
        scale=Vector3(*_floats(scale, 3, "scale")),
    )


def resolve_uri(
    uri: str, model_path: str | None = None, home: str | None = None
) -> str:
    """Turn a ``model://`` URI into a ``file://`` URI of an existing file.

    The directories of ``model_path`` (colon separated) are searched first,
    then ``<home>/.gazebo/models``. Both default to the environment.
    """
    if model_path is None:
        model_path = os.environ.get("GAZEBO_MODEL_PATH", "")
    if home is None:
        home = os.environ.get("HOME", "")
    relative = uri[len(MODEL_SCHEME) - 1:]
    locations = f"{model_path}:{home}/.gazebo/models".split(":")
    for location in locations:
        if os.path.isfile(location + relative):
            return "file://" + location + relative
    raise WorldLoadError(f"could not find model {uri}")


def _resolved(uri: str, model_path: str | None, home: str | None) -> str:
    return resolve_uri(uri, model_path, home) if MODEL_SCHEME in uri else uri


def world_markers(
    world_path: str, model_path: str | None = None, home: str | None = None
) -> list[Marker]:
    """Read a YAML world description and return one marker per object."""
    try:
        with open(world_path, encoding="utf-8") as stream:
            doc = yaml.safe_load(stream)
    except (OSError, yaml.YAMLError) as exc:
        raise WorldLoadError(f"cannot read world {world_path}: {exc}") from exc
    if doc is None:
        return []
    if not isinstance(doc, list):
        raise WorldLoadError("world description must be a list of objects")

    markers = []
    for object_id, node in enumerate(doc, start=1):
        item = parse_world_object(node)
        color = (0.0, 0.0, 0.0, 0.0)
        mesh = ""
        if item.type == "mesh":
            marker_type = MarkerType.MESH_RESOURCE
            mesh = _resolved(item.mesh_resource, model_path, home)
        elif item.type in _PRIMITIVES:
            marker_type = _PRIMITIVES[item.type]
            color = _PRIMITIVE_COLOR
        else:
            raise WorldLoadError(f"invalid object type {item.type!r} in world")
        markers.append(
            Marker(
                id=object_id,
                type=marker_type,
                frame_id=item.frame_id,
                stamp=time.time(),
                position=item.position,
                orientation=item.orientation,
                scale=item.scale,
                color=color,
                mesh_resource=mesh,
                mesh_use_embedded_materials=marker_type is MarkerType.MESH_RESOURCE,
            )
        )
    return markers


def drone_marker(
    position: Vector3,
    orientation: Quaternion,
    model_path: str | None = None,
    home: str | None = None,
) -> Marker:
    """Mesh marker of the vehicle at the given pose."""
    return Marker(
        id=0,
        type=MarkerType.MESH_RESOURCE,
        frame_id="local_origin",
        stamp=time.time(),
        position=position,
        orientation=orientation,
        scale=Vector3(1.5, 1.5, 1.5),
        mesh_resource=_resolved(DRONE_MESH, model_path, home),
        mesh_use_embedded_materials=True,
    )


class WorldVisualizer:
    """Publishes the world and the vehicle when a world description is set."""

    def __init__(
        self,
        world_path: str,
        publish_world: Callable[[list[Marker]], None],
        publish_drone: Callable[[Marker], None],
    ) -> None:
        self.world_path = world_path
        self._publish_world = publish_world
        self._publish_drone = publish_drone

    def on_timer(self) -> bool:
        """Publish the world markers; returns whether anything was published."""
        if not self.world_path:
            return False
        try:
            markers = world_markers(self.world_path)
        except WorldLoadError as exc:
            logger.warning("Failed to visualize world: %s", exc)
            return False
        self._publish_world(markers)
        return True

    def on_position(self, position: Vector3, orientation: Quaternion) -> bool:
        """Publish the vehicle marker; returns whether it was published."""
        if not self.world_path:
            return False
        try:
            marker = drone_marker(position, orientation)
        except WorldLoadError as exc:
            logger.warning("Failed to visualize drone: %s", exc)
            return False
        self._publish_drone(marker)
        return True