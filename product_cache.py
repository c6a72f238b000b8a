# product_cache.py

import threading
from typing import Callable, Dict, Optional
from utils import log_debug, log_warning


class ProductCache:
    """Last product name that was found on each category page.

    Only saves the title scan during setup. A cached name is validated before
    use and dropped when validation fails, so an empty cache always works.
    """

    def __init__(self):
        self._names: Dict[str, str] = {}
        self._lock = threading.Lock()

    def get(self, category: str) -> Optional[str]:
        with self._lock:
            return self._names.get(category.lower())

    def put(self, category: str, name: str) -> None:
        with self._lock:
            self._names[category.lower()] = name

    def invalidate(self, category: Optional[str] = None) -> None:
        with self._lock:
            if category is None:
                self._names.clear()
            else:
                self._names.pop(category.lower(), None)

    def get_or_compute(
        self,
        category: str,
        compute: Callable[[], Optional[str]],
        validate: Callable[[str], bool],
    ) -> Optional[str]:
        cached = self.get(category)
        if cached is not None:
            if validate(cached):
                log_debug(f"Using cached {category} product: {cached}")
                return cached
            log_warning(f"Cached {category} product '{cached}' is stale, recomputing")
            self.invalidate(category)

        name = compute()
        if name:
            self.put(category, name)
        return name

    def __len__(self) -> int:
        with self._lock:
            return len(self._names)
