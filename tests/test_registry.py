from __future__ import annotations

import json
from importlib import resources

from modlist.core.model import MOD_STATUS_VALUES, ModInfo, ModStatus
from modlist.io.modinfo import load_bundled_modinfo, modinfo_list_to_json, parse_modinfo


def test_registry_is_a_tuple_of_modinfo():
    from modlist.registry import mods

    assert isinstance(mods, tuple)
    assert all(isinstance(m, ModInfo) for m in mods)


def test_every_bundled_record_has_name_and_known_status():
    from modlist.registry import get_mods

    for mod in get_mods():
        assert isinstance(mod.name, str)
        assert mod.name.strip()
        assert isinstance(mod.status, ModStatus)
        assert mod.status in MOD_STATUS_VALUES


def test_get_mods_is_idempotent():
    from modlist.registry import get_mods, mods

    first = get_mods()
    second = get_mods()

    assert first is second
    assert first is mods


def test_bundled_data_passes_strict_check():
    strict = load_bundled_modinfo(validate=True)

    from modlist.registry import mods

    assert strict == mods


def test_registry_keeps_bundled_file_order():
    text = (resources.files("modlist") / "data" / "modinfo.json").read_text(encoding="utf-8")
    raw = json.loads(text)

    from modlist.registry import mods

    assert [m.name for m in mods] == [obj["name"] for obj in raw]


def test_registry_reserializes_to_equal_sequence():
    from modlist.registry import mods

    reloaded = parse_modinfo(json.loads(json.dumps(modinfo_list_to_json(mods))))

    assert reloaded == mods
