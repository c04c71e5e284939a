import logging
import threading
import uuid
from typing import Dict, Any, List, Optional, Iterable

from .models import SEED_PRODUCTS

# This file holds the in-memory product store and its lock.

logger = logging.getLogger("product-api.store")

NOT_FOUND = -1

class ProductStore:
    """
    Ordered, process-lifetime collection of product records.

    Records are plain dicts so that partial updates can merge arbitrary
    fields over them. Insertion order is the only order kept.
    """

    def __init__(self, seed: Optional[Iterable[Dict[str, Any]]] = None):
        self.lock = threading.RLock()
        self._products: List[Dict[str, Any]] = []
        if seed is None:
            seed = (p.model_dump() for p in SEED_PRODUCTS)
        for record in seed:
            self._products.append(dict(record))

    def __len__(self) -> int:
        return len(self._products)

    def list_all(self) -> List[Dict[str, Any]]:
        # shallow snapshot: callers may filter/slice without touching stored order
        with self.lock:
            return list(self._products)

    def find_by_id(self, product_id: str) -> Optional[Dict[str, Any]]:
        with self.lock:
            for p in self._products:
                if p.get("id") == product_id:
                    return p
            return None

    def find_index_by_id(self, product_id: str) -> int:
        with self.lock:
            for i, p in enumerate(self._products):
                if p.get("id") == product_id:
                    return i
            return NOT_FOUND

    def get_at(self, index: int) -> Dict[str, Any]:
        with self.lock:
            return self._products[index]

    def insert(self, record: Dict[str, Any]) -> Dict[str, Any]:
        product = dict(record)
        product["id"] = str(uuid.uuid4())
        with self.lock:
            self._products.append(product)
        logger.debug("inserted product %s", product["id"])
        return product

    def replace_at(self, index: int, record: Dict[str, Any]) -> Dict[str, Any]:
        with self.lock:
            self._products[index] = record
        logger.debug("replaced product at %d (id=%s)", index, record.get("id"))
        return record

    def remove_at(self, index: int) -> Dict[str, Any]:
        with self.lock:
            removed = self._products.pop(index)
        logger.debug("removed product %s", removed.get("id"))
        return removed
