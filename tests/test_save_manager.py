"""Tests for save persistence."""

import orjson
import pytest

from morphcore.errors import SaveError
from morphcore.persistence.save_manager import SAVE_VERSION, SaveManager

STATE = {"money": 750, "collection": [], "discoveredMorphs": ["Albino"], "collectedSpots": []}


@pytest.fixture
def manager(tmp_path):
    return SaveManager(tmp_path / "saves" / "save.json")


def test_save_and_load(manager):
    assert manager.save(STATE)
    assert manager.has_save()
    assert manager.load() == STATE


def test_envelope_shape(manager):
    manager.save(STATE)
    envelope = orjson.loads(manager.path.read_bytes())
    assert envelope["version"] == SAVE_VERSION == "1.0.0"
    assert isinstance(envelope["timestamp"], int)
    assert envelope["state"] == STATE


def test_load_without_save(manager):
    assert not manager.has_save()
    assert manager.load() is None


def test_corrupt_save_loads_as_none(manager):
    manager.path.parent.mkdir(parents=True)
    manager.path.write_text("{corrupt", encoding="utf-8")
    assert manager.load() is None


def test_save_without_state_block_loads_as_none(manager):
    manager.path.parent.mkdir(parents=True)
    manager.path.write_bytes(orjson.dumps({"version": SAVE_VERSION}))
    assert manager.load() is None


def test_old_version_is_migrated_and_resaved(manager):
    manager.path.parent.mkdir(parents=True)
    manager.path.write_bytes(orjson.dumps({"version": "0.9.0", "timestamp": 1, "state": STATE}))

    assert manager.load() == STATE
    envelope = orjson.loads(manager.path.read_bytes())
    assert envelope["version"] == SAVE_VERSION


def test_delete_save(manager):
    manager.save(STATE)
    assert manager.delete_save()
    assert not manager.has_save()
    assert not manager.delete_save()


def test_export_and_import(manager, tmp_path):
    manager.save(STATE)
    exported = manager.export_save(tmp_path / "backup" / "export.json")
    assert exported is not None and exported.exists()

    manager.delete_save()
    assert manager.import_save(exported) == STATE
    assert manager.load() == STATE


def test_export_without_save(manager, tmp_path):
    assert manager.export_save(tmp_path / "export.json") is None


def test_import_invalid_file_raises(manager, tmp_path):
    bad = tmp_path / "bad.json"
    bad.write_text("not json", encoding="utf-8")
    with pytest.raises(SaveError):
        manager.import_save(bad)

    with pytest.raises(SaveError):
        manager.import_save(tmp_path / "missing.json")


def test_player_state_persists(manager, catalog, make_creature):
    from morphcore.collection import PlayerState

    player = PlayerState(catalog=catalog)
    player.add(make_creature({"albino": ["albino", "+"]}, creature_id="het"))
    manager.save(player.to_dict())

    restored = PlayerState.from_dict(manager.load(), catalog)
    assert restored.get("het").het_gene_names == ["Albino"]
