import pytest

from design_patterns.structural.proxy import CdnProxy, OriginServer, ProxyImage, RealImage


def test_proxy_image_loads_lazily_once(capsys):
    before = RealImage.load_count
    image = ProxyImage("sample_photo.jpg")
    assert image.is_loaded is False
    assert RealImage.load_count == before

    assert image.display() == "Displaying image: sample_photo.jpg"
    assert image.display() == "Displaying image: sample_photo.jpg"

    assert image.is_loaded is True
    assert RealImage.load_count == before + 1
    out = capsys.readouterr().out
    assert out.count("Loading image from disk: sample_photo.jpg") == 1


def test_cdn_serves_repeat_requests_from_cache():
    origin = OriginServer({"/index.html": "<h1>Home</h1>"})
    cdn = CdnProxy(origin)

    assert cdn.fetch("/index.html") == "<h1>Home</h1>"
    assert cdn.fetch("/index.html") == "<h1>Home</h1>"
    assert origin.request_count == 1
    stats = cdn.get_stats()
    assert stats["hits"] == 1
    assert stats["misses"] == 1
    assert stats["hit_rate"] == 0.5


def test_cdn_evicts_least_recently_used():
    origin = OriginServer()
    cdn = CdnProxy(origin, capacity=2)

    cdn.fetch("/a")
    cdn.fetch("/b")
    cdn.fetch("/a")
    cdn.fetch("/c")

    assert cdn.is_cached("/a")
    assert cdn.is_cached("/c")
    assert not cdn.is_cached("/b")
    assert origin.request_count == 3


def test_cdn_invalidate_forces_origin_fetch():
    origin = OriginServer()
    cdn = CdnProxy(origin)
    cdn.fetch("/a")

    assert cdn.invalidate("/a") is True
    assert cdn.invalidate("/a") is False
    cdn.fetch("/a")
    assert origin.request_count == 2


@pytest.mark.parametrize("capacity", [0, -1, -10])
def test_cdn_rejects_non_positive_capacity(capacity):
    with pytest.raises(ValueError):
        CdnProxy(OriginServer(), capacity=capacity)


def test_origin_keeps_callers_empty_content_mapping():
    content = {}
    origin = OriginServer(content)
    content["/late.html"] = "<p>late</p>"

    assert origin.fetch("/late.html") == "<p>late</p>"
