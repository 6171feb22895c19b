"""
In‑memory storage for the application.

``ProductStore`` keeps the product catalog: a mapping from integer
id to ``Product`` plus the counter used to assign new ids.
``AppendLog`` is an ordered list of entries used for the visit and
time logs.  Both guard their state with a single ``threading.Lock``;
every public method holds the lock for its whole read‑modify‑write
sequence, so each call is atomic with respect to the others.

Nothing here is persisted.  One instance of each store is created by
``create_app`` and lives as long as the process.
"""

import threading
from dataclasses import dataclass
from typing import Any, Dict, Generic, List, Optional, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class Product:
    """A catalog entry as held by the store."""

    id: int
    name: str
    price: int


class ProductStore:
    """Lock‑guarded mapping from product id to ``Product``.

    Ids start at 1 and are handed out in increasing order, one per
    successful ``create``.  Deleting a product never frees its id.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._records: Dict[int, Product] = {}
        self._next_id = 1

    @property
    def next_id(self) -> int:
        with self._lock:
            return self._next_id

    def create(self, name: str, price: int) -> Product:
        with self._lock:
            product = Product(id=self._next_id, name=name, price=price)
            self._next_id += 1
            self._records[product.id] = product
            return product

    def get(self, product_id: int) -> Optional[Product]:
        with self._lock:
            return self._records.get(product_id)

    def replace(self, product_id: int, name: str, price: int) -> Optional[Product]:
        """Overwrite the product stored under ``product_id``.

        Returns ``None`` without touching the store when the id is
        unknown.
        """
        with self._lock:
            if product_id not in self._records:
                return None
            product = Product(id=product_id, name=name, price=price)
            self._records[product_id] = product
            return product

    def delete(self, product_id: int) -> bool:
        with self._lock:
            return self._records.pop(product_id, None) is not None

    def list(self) -> List[Product]:
        """Return all products ordered by id."""
        with self._lock:
            return [self._records[key] for key in sorted(self._records)]

    def __len__(self) -> int:
        with self._lock:
            return len(self._records)


class AppendLog(Generic[T]):
    """Lock‑guarded, append‑only list of entries."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._entries: List[T] = []

    def append(self, entry: T) -> T:
        with self._lock:
            self._entries.append(entry)
            return entry

    def entries(self) -> List[T]:
        with self._lock:
            return list(self._entries)

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)


# Free‑form JSON documents recorded by the visits endpoint.
VisitDocument = Dict[str, Any]
