import pytest

from dice_roller.core.io import (
    deserialize_roller_definition,
    roller_definition_from_dict,
    roller_definition_to_dict,
    serialize_roller_definition,
)
from dice_roller.core.roller_definition import RollerDefinition


def test_roller_roundtrip() -> None:
    definition = RollerDefinition(
        variant="flat",
        sides=12,
        duration_ms=1500,
        rotation_curve="ease_out_cubic",
        bounce_curve="linear",
        visibility_threshold=0.9,
        strict_visibility=True,
        size=160.0,
        play_sound=False,
        sound_path="sounds/roll.wav",
        use_custom_faces=True,
        face_image_dir="faces",
    )
    loaded = deserialize_roller_definition(serialize_roller_definition(definition))
    assert loaded == definition


def test_missing_sections_use_defaults() -> None:
    loaded = roller_definition_from_dict({"schema_version": 1})
    assert loaded == RollerDefinition()
    payload = roller_definition_to_dict(loaded)
    assert payload["animation"]["duration_ms"] is None
    assert payload["assets"]["sound_path"] is None


def test_unsupported_schema_version() -> None:
    payload = roller_definition_to_dict(RollerDefinition())
    payload["schema_version"] = 2
    with pytest.raises(ValueError, match="Unsupported roller schema version"):
        roller_definition_from_dict(payload)


@pytest.mark.parametrize(
    "changes",
    [
        {"sides": 0},
        {"sides": 2.5},
        {"sides": "6"},
        {"variant": "d20"},
        {"size": -1.0},
        {"visibility": {"strict": "false"}},
        {"visibility": {"threshold": "0.9"}},
        {"animation": {"duration_ms": 1500.5}},
        {"assets": {"play_sound": 1}},
        {"assets": ["play_sound"]},
        {"schema_version": True},
    ],
)
def test_invalid_values_are_rejected(changes) -> None:
    payload = roller_definition_to_dict(RollerDefinition(variant="flat"))
    payload.update(changes)
    with pytest.raises(ValueError):
        roller_definition_from_dict(payload)


def test_unknown_curve_is_rejected() -> None:
    payload = roller_definition_to_dict(RollerDefinition())
    payload["animation"]["rotation_curve"] = "wobble"
    with pytest.raises(ValueError, match="Unknown curve id"):
        roller_definition_from_dict(payload)


def test_non_object_payloads_are_rejected() -> None:
    with pytest.raises(ValueError, match="JSON object"):
        deserialize_roller_definition("[1, 2, 3]")
    with pytest.raises(ValueError):
        deserialize_roller_definition("{not json")


def test_json_booleans_are_kept() -> None:
    payload = roller_definition_to_dict(RollerDefinition())
    payload["visibility"]["strict"] = False
    payload["assets"]["play_sound"] = False
    loaded = roller_definition_from_dict(payload)
    assert loaded.strict_visibility is False
    assert loaded.play_sound is False
