import tempfile

import pytest

from promptdeck_commons.config_schema import (
    PROJECTS_STORAGE_KEY,
    Config,
    StorageConfigLocal,
    StorageConfigMemory,
)
from promptdeck.services.configurator.configurator import SimpleConfigurator
from promptdeck.services.storage.local_json_storage import LocalJsonStorage
from promptdeck.services.storage.memory_storage import MemoryStorage


def test_default_config():
    configurator = SimpleConfigurator()
    assert configurator.get_config().storage_config is None
    assert configurator.get_storage_key() == PROJECTS_STORAGE_KEY


def test_memory_storage_config():
    configurator = SimpleConfigurator(
        config=Config(storage_config=StorageConfigMemory(), storage_key="decks")
    )
    assert isinstance(configurator.create_storage(), MemoryStorage)
    assert configurator.get_storage_key() == "decks"


def test_local_storage_config():
    with tempfile.TemporaryDirectory() as temp_dir:
        configurator = SimpleConfigurator(
            config=Config(storage_config=StorageConfigLocal(dir_path=temp_dir))
        )
        storage = configurator.create_storage()
        assert isinstance(storage, LocalJsonStorage)
        assert storage.base_dir == temp_dir


def test_no_storage_config_uses_base_dir():
    with tempfile.TemporaryDirectory() as temp_dir:
        storage = SimpleConfigurator(base_dir=temp_dir).create_storage()
        assert isinstance(storage, LocalJsonStorage)
        assert storage.base_dir == temp_dir


def test_config_round_trips_through_json():
    config = Config(storage_config=StorageConfigLocal(dir_path="/tmp/decks"))
    assert Config.model_validate_json(config.model_dump_json()) == config


def test_invalid_storage_config_type():
    with pytest.raises(ValueError):
        SimpleConfigurator().create_storage(storage_config="nonsense")
