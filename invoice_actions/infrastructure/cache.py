"""In-process cache of rendered page payloads keyed by route path"""

import threading
from typing import Any, Callable, Dict, Optional


class PageCache:
    """
    Holds the last rendered payload per path until the path is revalidated.

    Mutation handlers call revalidate_path() after a successful write so the
    next read of that page is rebuilt from the database. Each revalidation
    bumps the path's generation; a render that started before the bump is
    returned to its caller but never stored.
    """

    def __init__(self):
        self._pages: Dict[str, Any] = {}
        self._generations: Dict[str, int] = {}
        self._lock = threading.Lock()

    def get(self, path: str) -> Optional[Any]:
        with self._lock:
            return self._pages.get(path)

    def get_or_render(self, path: str, render: Callable[[], Any]) -> Any:
        """Return the cached payload for path, rendering and storing it on a miss"""
        with self._lock:
            cached = self._pages.get(path)
            generation = self._generations.get(path, 0)
        if cached is not None:
            return cached

        payload = render()
        with self._lock:
            if self._generations.get(path, 0) == generation:
                self._pages[path] = payload
        return payload

    def revalidate_path(self, path: str) -> None:
        """Drop the cached payload for path and discard renders still in flight"""
        with self._lock:
            self._pages.pop(path, None)
            self._generations[path] = self._generations.get(path, 0) + 1
