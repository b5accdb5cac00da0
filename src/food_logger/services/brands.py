"""Brand attribution from free-text source context."""

import re
from dataclasses import dataclass

from food_logger.domain.brands import BRAND_ALIASES, BRANDS, BrandInfo


@dataclass(frozen=True)
class BrandMatcher:
    """Match a context string such as "from Pret" against known brands."""

    brands: tuple[tuple[str, BrandInfo], ...] = BRANDS
    aliases: tuple[tuple[str, str, bool], ...] = BRAND_ALIASES

    def match(self, context: str | None) -> BrandInfo | None:
        """Return the first brand whose key appears in the context, if any."""
        if not context:
            return None
        lowered = context.lower()
        for key, brand in self.brands:
            if key in lowered:
                return brand
        for alias, key, standalone in self.aliases:
            if _contains(lowered, alias, standalone=standalone):
                return self._lookup(key)
        return None

    def all_brands(self) -> list[BrandInfo]:
        """Return every known brand in lookup order."""
        return [brand for _, brand in self.brands]

    def _lookup(self, key: str) -> BrandInfo | None:
        for brand_key, brand in self.brands:
            if brand_key == key:
                return brand
        return None


def _contains(text: str, needle: str, *, standalone: bool) -> bool:
    if not standalone:
        return needle in text
    return re.search(rf"\b{re.escape(needle)}\b", text) is not None
