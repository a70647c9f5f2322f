from __future__ import annotations

from typing import Dict, List

from .base import DieVariant


class VariantRegistry:
    def __init__(self) -> None:
        self._variants: Dict[str, DieVariant] = {}

    def register(self, variant: DieVariant) -> None:
        if variant.variant_id in self._variants:
            raise ValueError(f"Duplicate variant id: {variant.variant_id}")
        self._variants[variant.variant_id] = variant

    def get(self, variant_id: str) -> DieVariant:
        variant = self._variants.get(variant_id)
        if variant is None:
            raise ValueError(f"Unknown die variant: {variant_id}")
        return variant

    def all(self) -> List[DieVariant]:
        return list(self._variants.values())


variant_registry = VariantRegistry()
