import pytest

from enginekit.show_flags import EngineShowFlag, EngineShowFlags


@pytest.fixture(autouse=True)
def fresh_instance():
    EngineShowFlags.destroy()
    yield
    EngineShowFlags.destroy()


def test_all_flags_enabled_by_default():
    flags = EngineShowFlags.get()
    assert flags.bits == (1 << 64) - 1
    for flag in EngineShowFlag:
        assert flags.get_single_flag(flag)


def test_get_returns_same_instance():
    first = EngineShowFlags.get()
    first.set_single_flag(EngineShowFlag.PRIMITIVES, False)
    second = EngineShowFlags.get()
    assert second.get_single_flag(EngineShowFlag.PRIMITIVES) is False
    assert second.bits == first.bits


def test_set_single_flag_off_and_on():
    flags = EngineShowFlags.get()
    flags.set_single_flag(EngineShowFlag.PRIMITIVES, False)
    assert not flags.get_single_flag(EngineShowFlag.PRIMITIVES)
    assert flags.get_single_flag(EngineShowFlag.BILLBOARD_TEXT)
    flags.set_single_flag(EngineShowFlag.PRIMITIVES, True)
    assert flags.get_single_flag(EngineShowFlag.PRIMITIVES)
    assert flags.bits == (1 << 64) - 1


def test_toggle_twice_restores():
    flags = EngineShowFlags.get()
    before = flags.bits
    flags.toggle_single_flag(EngineShowFlag.BILLBOARD_TEXT)
    assert not flags.get_single_flag(EngineShowFlag.BILLBOARD_TEXT)
    flags.toggle_single_flag(EngineShowFlag.BILLBOARD_TEXT)
    assert flags.bits == before


def test_set_flag_by_name():
    flags = EngineShowFlags.get()
    assert flags.set_flag_by_name("BillboardText", False) is True
    assert not flags.get_single_flag(EngineShowFlag.BILLBOARD_TEXT)


def test_set_unknown_flag_by_name():
    flags = EngineShowFlags.get()
    before = flags.bits
    assert flags.set_flag_by_name("Nothing", False) is False
    assert flags.bits == before


def test_find_index_by_name():
    assert EngineShowFlags.find_index_by_name("Primitives") == int(EngineShowFlag.PRIMITIVES)
    assert EngineShowFlags.find_index_by_name("BillboardText") == int(EngineShowFlag.BILLBOARD_TEXT)
    assert EngineShowFlags.find_index_by_name("Missing") == -1


def test_initialize_reenables_flags():
    flags = EngineShowFlags.get()
    flags.set_single_flag(EngineShowFlag.PRIMITIVES, False)
    flags.initialize()
    assert flags.get_single_flag(EngineShowFlag.PRIMITIVES)