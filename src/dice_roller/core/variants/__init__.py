from .base import DieVariant, VariantUIDefaults
from .registry import VariantRegistry, variant_registry


def load_builtin_variants() -> None:
    # Import side effects to register built-in variants.
    from . import cube_die  # noqa: F401
    from . import flat_die  # noqa: F401


__all__ = [
    "DieVariant",
    "VariantUIDefaults",
    "VariantRegistry",
    "variant_registry",
    "load_builtin_variants",
]
