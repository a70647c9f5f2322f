from .roller_io import (
    ROLLER_SCHEMA_VERSION,
    deserialize_roller_definition,
    roller_definition_from_dict,
    roller_definition_to_dict,
    serialize_roller_definition,
)

__all__ = [
    "ROLLER_SCHEMA_VERSION",
    "deserialize_roller_definition",
    "roller_definition_from_dict",
    "roller_definition_to_dict",
    "serialize_roller_definition",
]
