import threading

import pytest

from design_patterns.creational.singleton import ConnectionManager


@pytest.fixture(autouse=True)
def fresh_manager():
    ConnectionManager.reset()
    yield
    ConnectionManager.reset()


def test_instance_is_shared():
    first = ConnectionManager.instance("primary")
    second = ConnectionManager.instance("secondary")

    assert first is second
    assert second.name == "primary"


def test_connection_count_is_shared_across_references():
    first = ConnectionManager.instance()
    second = ConnectionManager.instance()

    assert first.connection_count == 0
    first.establish_connection()
    first.establish_connection()
    assert second.connection_count == 2
    assert second.establish_connection() == 3


def test_reset_builds_new_instance():
    first = ConnectionManager.instance()
    first.establish_connection()
    ConnectionManager.reset()

    assert ConnectionManager.instance() is not first
    assert ConnectionManager.instance().connection_count == 0


def test_concurrent_access_creates_single_instance():
    seen = []

    def grab():
        seen.append(ConnectionManager.instance())

    threads = [threading.Thread(target=grab) for _ in range(16)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert len({id(manager) for manager in seen}) == 1
