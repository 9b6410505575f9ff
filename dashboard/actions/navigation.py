# dashboard/actions/navigation.py

import logging
import threading
from typing import Any, Callable, Dict, NoReturn

logger = logging.getLogger(__name__)


class Redirect(Exception):
    """
    Raised to end a form action and send the browser to `location`.

    This is control flow, not a failure: the HTTP layer turns it into a
    303 response.
    """

    def __init__(self, location: str):
        super().__init__(location)
        self.location = location


def redirect(location: str) -> NoReturn:
    raise Redirect(location)


class PageCache:
    """
    Rendered page data keyed by path.

    A path stays cached until revalidate_path() drops it; the next render
    queries the database again. A render that overlaps a revalidation of
    its path is returned but not stored.
    """

    def __init__(self) -> None:
        self._pages: Dict[str, Any] = {}
        self._generations: Dict[str, int] = {}
        self._lock = threading.Lock()

    def get_or_render(self, path: str, render: Callable[[], Any]) -> Any:
        with self._lock:
            if path in self._pages:
                return self._pages[path]
            generation = self._generations.get(path, 0)

        page = render()

        with self._lock:
            if self._generations.get(path, 0) == generation:
                self._pages[path] = page
        return page

    def revalidate_path(self, path: str) -> None:
        logger.debug("Revalidating %s", path)
        with self._lock:
            self._generations[path] = self._generations.get(path, 0) + 1
            self._pages.pop(path, None)

    def is_cached(self, path: str) -> bool:
        with self._lock:
            return path in self._pages
