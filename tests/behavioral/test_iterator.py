from design_patterns.behavioral.iterator import FunkyNameRepository, NameIterator


def test_explicit_iteration_visits_every_name():
    repository = FunkyNameRepository()
    iterator = repository.create_iterator()

    names = []
    while iterator.has_next():
        names.append(iterator.next())

    assert len(names) == 10
    assert names[0] == "DJ Jazzy Jeff"
    assert names[-1] == "FunkMaster Flex"


def test_next_past_end_returns_none():
    iterator = NameIterator(["only"])
    assert iterator.next() == "only"
    assert iterator.has_next() is False
    assert iterator.next() is None


def test_python_iteration_protocol():
    assert list(NameIterator([1, 2, 3])) == [1, 2, 3]
    repository = FunkyNameRepository()
    assert list(repository) == list(repository)
    assert len(repository) == 10


def test_empty_collection():
    iterator = NameIterator([])
    assert iterator.has_next() is False
    assert list(iterator) == []
