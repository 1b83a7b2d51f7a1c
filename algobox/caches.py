"""Recently-used caches, browsing history and recent call counting."""

from __future__ import annotations

from collections import OrderedDict, deque


class LRUCache:
    """A fixed-capacity key/value cache that evicts the least recently used key."""

    def __init__(self, capacity: int) -> None:
        self.capacity = capacity
        self._items: OrderedDict[int, int] = OrderedDict()

    def get(self, key: int) -> int:
        """Return the value for key and mark it recently used, or -1 if absent."""
        if key not in self._items:
            return -1
        self._items.move_to_end(key)
        return self._items[key]

    def put(self, key: int, value: int) -> None:
        """Store value under key, evicting the least recently used key if full."""
        if key in self._items:
            self._items[key] = value
            self._items.move_to_end(key)
            return
        self._items[key] = value
        if len(self._items) > self.capacity:
            self._items.popitem(last=False)

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, key: object) -> bool:
        return key in self._items


class BrowserHistory:
    """A single-tab browsing history with back and forward navigation."""

    def __init__(self, homepage: str) -> None:
        self._pages = [homepage]
        self._index = 0

    @property
    def current(self) -> str:
        """The page currently shown."""
        return self._pages[self._index]

    def visit(self, url: str) -> None:
        """Open url, discarding any forward history."""
        del self._pages[self._index + 1 :]
        self._pages.append(url)
        self._index += 1

    def back(self, steps: int) -> str:
        """Go back up to steps pages and return the page reached."""
        if steps < 0:
            raise ValueError("steps must not be negative")
        self._index = max(self._index - steps, 0)
        return self.current

    def forward(self, steps: int) -> str:
        """Go forward up to steps pages and return the page reached."""
        if steps < 0:
            raise ValueError("steps must not be negative")
        self._index = min(self._index + steps, len(self._pages) - 1)
        return self.current


class RecentCounter:
    """Count the requests made within the last 3000 milliseconds."""

    WINDOW = 3000

    def __init__(self) -> None:
        self._times: deque[int] = deque()

    def ping(self, t: int) -> int:
        """Record a request at time t and return how many fall in [t-3000, t]."""
        self._times.append(t)
        while self._times[0] < t - self.WINDOW:
            self._times.popleft()
        return len(self._times)