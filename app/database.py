import threading
from contextlib import contextmanager
from typing import Dict, Optional

from .models import Product

# The catalog lives in memory only; everything here is lost on shutdown.


class ReadWriteLock:
    """Shared-read / exclusive-write lock.

    Any number of readers may hold the lock together. A writer holds it
    alone. Waiting writers block new readers so a steady stream of reads
    cannot starve an update.
    """

    def __init__(self):
        self._cond = threading.Condition(threading.Lock())
        self._readers = 0
        self._writer = False
        self._waiting_writers = 0

    def acquire_read(self):
        with self._cond:
            while self._writer or self._waiting_writers:
                self._cond.wait()
            self._readers += 1

    def release_read(self):
        with self._cond:
            self._readers -= 1
            if self._readers == 0:
                self._cond.notify_all()

    def acquire_write(self):
        with self._cond:
            self._waiting_writers += 1
            try:
                while self._writer or self._readers:
                    self._cond.wait()
            finally:
                self._waiting_writers -= 1
            self._writer = True

    def release_write(self):
        with self._cond:
            self._writer = False
            self._cond.notify_all()

    @contextmanager
    def read_locked(self):
        self.acquire_read()
        try:
            yield
        finally:
            self.release_read()

    @contextmanager
    def write_locked(self):
        self.acquire_write()
        try:
            yield
        finally:
            self.release_write()


class ProductStore:
    """In-memory product catalog keyed by integer id.

    Stored records are never mutated in place. ``replace`` and ``create``
    swap in a fresh copy under the write lock, so a reader always sees
    either the old record or the new one.
    """

    def __init__(self):
        self._lock = ReadWriteLock()
        self._products: Dict[int, Product] = {}
        self._next_id = 1

    def get(self, product_id: int) -> Optional[Product]:
        with self._lock.read_locked():
            product = self._products.get(product_id)
        if product is None:
            return None
        return product.model_copy()

    def replace(self, product_id: int, product: Product) -> bool:
        with self._lock.write_locked():
            if product_id not in self._products:
                return False
            # the path id always wins over whatever the body carried
            self._products[product_id] = product.model_copy(update={"id": product_id})
            return True

    def create(self, product: Product) -> Product:
        with self._lock.write_locked():
            product_id = self._next_id
            stored = product.model_copy(update={"id": product_id})
            self._products[product_id] = stored
            self._next_id += 1
        return stored.model_copy()

    def ids(self):
        with self._lock.read_locked():
            return sorted(self._products)

    def __len__(self):
        with self._lock.read_locked():
            return len(self._products)

    def __contains__(self, product_id):
        with self._lock.read_locked():
            return product_id in self._products
