"""
Singleton Pattern
=================

Core Design: Ensure a class has exactly one instance and provide a global
access point to it.

Thread Safety:
- Double-checked locking around instance creation
- Arguments of the first instance() call win, later ones are ignored

Common uses: configuration managers, loggers, connection pools.
"""

import threading


class Singleton:
    _instance = None
    _lock = threading.Lock()

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        # each subclass gets its own slot and lock
        cls._instance = None
        cls._lock = threading.Lock()

    @classmethod
    def instance(cls, *args, **kwargs):
        if cls._instance is None:
            with cls._lock:
                if cls._instance is None:
                    cls._instance = cls(*args, **kwargs)
        return cls._instance

    @classmethod
    def reset(cls):
        """Drop the shared instance so the next instance() call builds a new one"""
        with cls._lock:
            cls._instance = None


class ConnectionManager(Singleton):
    """Tracks how many connections have been established, shared by all callers"""

    def __init__(self, name: str = "default"):
        self.name = name
        self._connection_count = 0
        self._count_lock = threading.Lock()

    def establish_connection(self) -> int:
        with self._count_lock:
            self._connection_count += 1
            return self._connection_count

    @property
    def connection_count(self) -> int:
        return self._connection_count


# ==================== DEMONSTRATION ====================

def main():
    print("=" * 60)
    print("SINGLETON DEMONSTRATION")
    print("=" * 60)
    print()

    manager_1 = ConnectionManager.instance("primary")
    manager_2 = ConnectionManager.instance("secondary")

    print(f"Same instance: {manager_1 is manager_2}")
    print(f"Name (first init persists): {manager_2.name}")
    print()

    print("1. Connecting through the first reference:")
    print(f"  count = {manager_1.connection_count}")
    manager_1.establish_connection()
    manager_1.establish_connection()
    print(f"  count = {manager_1.connection_count}")
    print()

    print("2. Connecting through the second reference:")
    print(f"  count = {manager_2.connection_count}")
    manager_2.establish_connection()
    print(f"  count = {manager_2.connection_count}")
    print()

    ConnectionManager.reset()
    print("=" * 60)


if __name__ == "__main__":
    main()
