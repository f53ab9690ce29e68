"""Saving and reading scene files in YAML."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any, Optional, Union

import yaml

from slamcore.scene.camera import CameraComponent
from slamcore.scene.components import CornerstoneComponent, RenderingComponent, TagComponent
from slamcore.scene.transform import TransformComponent
from slamcore.scene.world import ECSWorld, Entity
from slamcore.scene.yaml_convert import (
    decode_projection_type,
    decode_vector,
    encode_projection_type,
    encode_vector,
)

logger = logging.getLogger(__name__)

PathLike = Union[str, "os.PathLike[str]"]

_HEADER = "# Slam Engine scene data file.\n"


class _FlowList(list):
    """A list dumped in flow style, e.g. ``[0.0, 1.0, 2.0]``."""


class _SceneDumper(yaml.SafeDumper):
    pass


_SceneDumper.add_representer(
    _FlowList,
    lambda dumper, data: dumper.represent_sequence(
        "tag:yaml.org,2002:seq", data, flow_style=True
    ),
)


def scene_file_path(asset_dir: PathLike, scene_name: str) -> Path:
    """Path of the scene file named ``scene_name`` under an asset directory."""
    return Path(asset_dir) / "Scene" / f"{scene_name}.yaml"


def _name_or_empty(name: Optional[str]) -> str:
    return "" if name is None else name


def _entity_node(entity: Entity) -> dict[str, Any]:
    node: dict[str, Any] = {"Entity ID": int(entity.handle)}

    tag = entity.try_get_components(TagComponent)
    if tag is not None:
        node["Tag Component"] = {"Name": tag.name}

    transform = entity.try_get_components(TransformComponent)
    if transform is not None:
        node["Transform Component"] = {
            "Position": _FlowList(encode_vector(transform.position)),
            "Rotation": _FlowList(encode_vector(transform.rotation)),
            "Scale": _FlowList(encode_vector(transform.scale)),
        }

    camera = entity.try_get_components(CameraComponent)
    if camera is not None:
        node["Camera Component"] = {
            "Main Camera": bool(camera.is_main_camera),
            "Projection Type": encode_projection_type(camera.projection_type),
            "Perspective": {
                "FOV": float(camera.fov),
                "Near Plane": float(camera.near_plane),
                "Far Plane": float(camera.far_plane),
            },
            "Orthographic": {
                "Size": float(camera.ortho_size),
                "Near Clip": float(camera.ortho_near_clip),
                "Far Clip": float(camera.ortho_far_clip),
            },
            "Controller": {
                "Rotate Speed": float(camera.rotate_speed),
                "Move Speed": float(camera.max_move_speed),
                "Acceleration": float(camera.max_speed_to_acceleration),
                "Shift Multiplier": float(camera.move_speed_key_shift_multiplier),
                "Scroll Multiplier": float(camera.move_speed_mouse_scroll_multiplier),
            },
        }

    rendering = entity.try_get_components(RenderingComponent)
    if rendering is not None:
        node["Rendering Component"] = {
            "Mesh": _name_or_empty(rendering.mesh_resource_name),
            "Material": _name_or_empty(rendering.material_resource_name),
            "Base Shader": _name_or_empty(rendering.base_shader_resource_name),
            "ID Shader": _name_or_empty(rendering.id_shader_resource_name),
        }

    cornerstone = entity.try_get_components(CornerstoneComponent)
    if cornerstone is not None:
        node["Cornerstone Component"] = {"Info": cornerstone.info}

    return node


def serialize_yaml(world: ECSWorld, scene_name: str, path: PathLike) -> dict[str, Any]:
    """Write every tagged entity of ``world`` to a YAML scene file at ``path``.

    Returns the document that was written. Failing to open the file raises
    the usual :class:`OSError`.
    """
    logger.info('Serialize scene data file: "%s"', os.fspath(path))
    document = {
        "Scene": scene_name,
        "Entities": [_entity_node(entity) for entity in world.view(TagComponent)],
    }
    text = yaml.dump(
        document, Dumper=_SceneDumper, sort_keys=False, default_flow_style=False
    )
    with open(path, "w", encoding="utf-8") as out:
        out.write(_HEADER)
        out.write(text)
    return document


def _read_fields(node: Any, converters: dict[str, Any]) -> dict[str, Any]:
    if not isinstance(node, dict):
        raise ValueError(f"Expected a mapping, got {node!r}")
    return {key: convert(node[key]) for key, convert in converters.items() if node.get(key) is not None}


def _as_str(value: Any) -> str:
    return "" if value is None else str(value)


def _vec3(value: Any) -> tuple[float, ...]:
    return decode_vector(value, 3)


_SECTIONS: dict[str, dict[str, Any]] = {
    "Tag Component": {"Name": _as_str},
    "Transform Component": {"Position": _vec3, "Rotation": _vec3, "Scale": _vec3},
    "Rendering Component": {
        "Mesh": _as_str,
        "Material": _as_str,
        "Base Shader": _as_str,
        "ID Shader": _as_str,
    },
    "Cornerstone Component": {"Info": _as_str},
}

_CAMERA_GROUPS: dict[str, dict[str, Any]] = {
    "Perspective": {"FOV": float, "Near Plane": float, "Far Plane": float},
    "Orthographic": {"Size": float, "Near Clip": float, "Far Clip": float},
    "Controller": {
        "Rotate Speed": float,
        "Move Speed": float,
        "Acceleration": float,
        "Shift Multiplier": float,
        "Scroll Multiplier": float,
    },
}


def _parse_camera(node: Any) -> dict[str, Any]:
    camera = _read_fields(node, {"Main Camera": bool, "Projection Type": decode_projection_type})
    for group, converters in _CAMERA_GROUPS.items():
        if node.get(group) is not None:
            camera[group] = _read_fields(node[group], converters)
    return camera


def _parse_entity(node: Any) -> dict[str, Any]:
    if not isinstance(node, dict):
        raise ValueError(f"Expected an entity mapping, got {node!r}")
    entity: dict[str, Any] = {}
    if node.get("Entity ID") is not None:
        entity["Entity ID"] = int(node["Entity ID"])
    for section, converters in _SECTIONS.items():
        if node.get(section) is not None:
            entity[section] = _read_fields(node[section], converters)
    if node.get("Camera Component") is not None:
        entity["Camera Component"] = _parse_camera(node["Camera Component"])
    return entity


def deserialize_yaml(path: PathLike) -> dict[str, Any]:
    """Read a YAML scene file into a document with decoded values.

    Vectors become tuples, projection types :class:`ProjectionType` members
    and numbers floats. A file without a ``Scene`` key raises
    :class:`ValueError`.
    """
    logger.info('Deserialize scene data file: "%s"', os.fspath(path))
    data = yaml.safe_load(Path(path).read_text(encoding="utf-8"))
    if not isinstance(data, dict) or data.get("Scene") is None:
        raise ValueError(f'Unknown scene data file: "{os.fspath(path)}"')

    scene = str(data["Scene"])
    logger.debug("Scene: %s", scene)
    entities = [_parse_entity(node) for node in data.get("Entities") or []]
    for entity in entities:
        logger.debug("\tEntity: %s", entity)
    return {"Scene": scene, "Entities": entities}