from promptdeck.services.storage.memory_storage import MemoryStorage


def test_memory_storage_round_trip():
    storage = MemoryStorage()
    assert storage.load("projects", default=[]) == []
    value = [{"id": "a"}]
    assert storage.save("projects", value)
    value[0]["id"] = "mutated"
    assert storage.load("projects") == [{"id": "a"}]


def test_memory_storage_returns_copies():
    storage = MemoryStorage()
    storage.save("projects", [{"id": "a"}])
    loaded = storage.load("projects")
    loaded.append({"id": "b"})
    assert storage.load("projects") == [{"id": "a"}]


def test_memory_storage_delete():
    storage = MemoryStorage()
    storage.save("projects", [])
    storage.delete("projects")
    storage.delete("missing")
    assert storage.load("projects") is None
