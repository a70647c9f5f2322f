from __future__ import annotations

import json
from typing import Any, Dict

from ..geometry import DEFAULT_VISIBILITY_THRESHOLD
from ..roller_definition import ROLLER_SCHEMA_VERSION, RollerDefinition


def roller_definition_to_dict(defn: RollerDefinition) -> Dict[str, Any]:
    payload: Dict[str, Any] = {
        "schema_version": defn.schema_version,
        "variant": defn.variant,
        "sides": defn.sides,
        "animation": {
            "duration_ms": defn.duration_ms,
            "rotation_curve": defn.rotation_curve,
            "bounce_curve": defn.bounce_curve,
        },
        "visibility": {
            "threshold": defn.visibility_threshold,
            "strict": bool(defn.strict_visibility),
        },
        "size": defn.size,
        "assets": {
            "play_sound": bool(defn.play_sound),
            "sound_path": defn.sound_path,
            "use_custom_faces": bool(defn.use_custom_faces),
            "face_image_dir": defn.face_image_dir,
        },
    }
    return payload


def roller_definition_from_dict(payload: Dict[str, Any]) -> RollerDefinition:
    if not isinstance(payload, dict):
        raise ValueError("Roller payload must be a JSON object")
    version = payload.get("schema_version", 0)
    if isinstance(version, bool) or version != ROLLER_SCHEMA_VERSION:
        raise ValueError(f"Unsupported roller schema version: {version}")
    animation = _section(payload, "animation")
    visibility = _section(payload, "visibility")
    assets = _section(payload, "assets")
    defn = RollerDefinition(
        variant=payload.get("variant", "cube"),
        sides=payload.get("sides", 6),
        duration_ms=animation.get("duration_ms"),
        rotation_curve=animation.get("rotation_curve", "ease_out_quad"),
        bounce_curve=animation.get("bounce_curve", "ease_in_out"),
        visibility_threshold=visibility.get("threshold", DEFAULT_VISIBILITY_THRESHOLD),
        strict_visibility=visibility.get("strict", False),
        size=payload.get("size", 200.0),
        play_sound=assets.get("play_sound", True),
        sound_path=_optional_str(assets.get("sound_path")),
        use_custom_faces=assets.get("use_custom_faces", False),
        face_image_dir=_optional_str(assets.get("face_image_dir")),
        schema_version=version,
    )
    defn.validate()
    return defn


def _section(payload: Dict[str, Any], key: str) -> Dict[str, Any]:
    section = payload.get(key, {})
    if not isinstance(section, dict):
        raise ValueError(f"Roller section '{key}' must be a JSON object")
    return section


def _optional_str(value: object) -> str | None:
    if value is None:
        return None
    if not isinstance(value, str):
        raise ValueError(f"Expected a path string, got {value!r}")
    text = value.strip()
    return text or None


def serialize_roller_definition(defn: RollerDefinition) -> str:
    return json.dumps(roller_definition_to_dict(defn), indent=2)


def deserialize_roller_definition(payload: str) -> RollerDefinition:
    return roller_definition_from_dict(json.loads(payload))
