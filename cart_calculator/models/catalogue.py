from __future__ import annotations

from types import MappingProxyType
from typing import Dict, Iterable, Iterator, Mapping, Optional

from .product import Product


class Catalogue(Mapping[str, Product]):
    """
    Read-only product lookup, keyed by product code.

    Built once (per configuration) and shared by every cart; there is no
    way to add or remove entries after construction.
    """

    def __init__(self, products: Iterable[Product]):
        entries: Dict[str, Product] = {}
        dups = []
        for p in products:
            if p.code in entries and p.code not in dups:
                dups.append(p.code)
            entries[p.code] = p
        if dups:
            raise ValueError(f"Duplicate product codes in catalogue: {dups}")
        self._entries = MappingProxyType(entries)

    def lookup(self, code: str) -> Optional[Product]:
        # exact, case-sensitive match
        return self._entries.get(code)

    def __getitem__(self, code: str) -> Product:
        return self._entries[code]

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"Catalogue({list(self._entries)})"


DEFAULT_CATALOGUE = Catalogue(
    [
        Product(code="R01", name="Red Widget", price="32.95"),
        Product(code="G01", name="Green Widget", price="24.95"),
        Product(code="B01", name="Blue Widget", price="7.95"),
    ]
)
