"""
Proxy Pattern
=============

Core Design: A stand-in object with the same interface as the real subject
controls access to it.

Variants:
1. Virtual Proxy - ProxyImage defers the expensive disk load of RealImage
   until the image is first displayed, then reuses it
2. Caching Proxy - CdnProxy answers repeated requests from an LRU cache and
   only goes to the OriginServer on a miss

Data Structures:
- OrderedDict for the CDN cache, last item is most recently used
"""

from abc import ABC, abstractmethod
from collections import OrderedDict
from typing import Dict, Optional


# ==================== VIRTUAL PROXY ====================

class Image(ABC):

    @abstractmethod
    def display(self) -> str:
        pass


class RealImage(Image):
    load_count = 0

    def __init__(self, filename: str):
        self.filename = filename
        self._load_from_disk()

    def _load_from_disk(self):
        RealImage.load_count += 1
        print(f"Loading image from disk: {self.filename}")

    def display(self) -> str:
        message = f"Displaying image: {self.filename}"
        print(message)
        return message


class ProxyImage(Image):

    def __init__(self, filename: str):
        self.filename = filename
        self._real_image: Optional[RealImage] = None

    @property
    def is_loaded(self) -> bool:
        return self._real_image is not None

    def display(self) -> str:
        if self._real_image is None:
            self._real_image = RealImage(self.filename)
        return self._real_image.display()


# ==================== CACHING PROXY ====================

class ContentServer(ABC):

    @abstractmethod
    def fetch(self, path: str) -> str:
        pass


class OriginServer(ContentServer):
    """Slow origin, every fetch counts as a round trip"""

    def __init__(self, content: Optional[Dict[str, str]] = None):
        self.content = {} if content is None else content
        self.request_count = 0

    def fetch(self, path: str) -> str:
        self.request_count += 1
        print(f"[Origin] Fetching {path}")
        return self.content.get(path, f"<content of {path}>")


class CdnProxy(ContentServer):

    def __init__(self, origin: ContentServer, capacity: int = 100):
        if capacity <= 0:
            raise ValueError("Cache capacity must be positive")
        self.origin = origin
        self.capacity = capacity
        self._cache: OrderedDict = OrderedDict()
        self.stats = {"hits": 0, "misses": 0}

    def fetch(self, path: str) -> str:
        if path in self._cache:
            self.stats["hits"] += 1
            self._cache.move_to_end(path)
            print(f"[CDN] Cache hit: {path}")
            return self._cache[path]

        self.stats["misses"] += 1
        content = self.origin.fetch(path)
        if len(self._cache) >= self.capacity:
            evicted, _ = self._cache.popitem(last=False)
            print(f"[CDN] Evicted: {evicted}")
        self._cache[path] = content
        return content

    def invalidate(self, path: str) -> bool:
        if path in self._cache:
            del self._cache[path]
            return True
        return False

    def is_cached(self, path: str) -> bool:
        return path in self._cache

    def get_stats(self) -> Dict:
        total = self.stats["hits"] + self.stats["misses"]
        hit_rate = self.stats["hits"] / total if total > 0 else 0
        return {
            **self.stats,
            "hit_rate": hit_rate,
            "size": len(self._cache),
            "capacity": self.capacity
        }


# ==================== DEMONSTRATION ====================

def main():
    print("=" * 60)
    print("PROXY PATTERN DEMONSTRATION")
    print("=" * 60)
    print()

    print("1. Virtual proxy:")
    image = ProxyImage("sample_photo.jpg")
    print(f"Loaded before display: {image.is_loaded}")
    print("Calling display() for the first time:")
    image.display()
    print("Calling display() a second time:")
    image.display()
    print()

    print("2. Caching proxy (CDN):")
    origin = OriginServer({"/index.html": "<h1>Home</h1>"})
    cdn = CdnProxy(origin, capacity=2)
    for path in ["/index.html", "/index.html", "/about.html", "/logo.png", "/index.html"]:
        cdn.fetch(path)
    print(f"Origin requests: {origin.request_count}")
    print(f"CDN stats: {cdn.get_stats()}")
    print()

    print("=" * 60)


if __name__ == "__main__":
    main()
