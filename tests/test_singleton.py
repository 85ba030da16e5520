import copy

import pytest

from enginekit.singleton import Singleton


class _Counter(Singleton):
    created = 0

    def __init__(self):
        type(self).created += 1
        self.value = 0


class _Other(Singleton):
    pass


class _Derived(_Counter):
    pass


def _get(cls):
    return Singleton.get.__func__(cls)


def _destroy(cls):
    Singleton.destroy.__func__(cls)


def setup_function():
    _destroy(_Counter)
    _destroy(_Other)
    _destroy(_Derived)


def test_get_returns_same_instance():
    first = Singleton.get.__func__(_Counter)
    first.value = 42
    assert Singleton.get.__func__(_Counter) is first
    assert _Counter.get().value == 42


def test_each_class_has_its_own_instance():
    counter = Singleton.get.__func__(_Counter)
    other = Singleton.get.__func__(_Other)
    assert counter is not other
    assert isinstance(other, _Other)
    assert not isinstance(other, _Counter)


def test_subclass_does_not_share_base_instance():
    base = Singleton.get.__func__(_Counter)
    derived = Singleton.get.__func__(_Derived)
    assert derived is not base
    assert type(derived) is _Derived
    assert Singleton.get.__func__(_Counter) is base


def test_destroy_creates_fresh_instance():
    first = Singleton.get.__func__(_Counter)
    first.value = 7
    Singleton.destroy.__func__(_Counter)
    second = Singleton.get.__func__(_Counter)
    assert second is not first
    assert second.value == 0


def test_destroy_without_instance_is_harmless_and_get_still_works():
    first = _get(_Other)
    _destroy(_Other)
    _destroy(_Other)
    second = _get(_Other)
    assert type(second) is _Other
    assert second is not first
    assert _get(_Other) is second


def test_instance_created_once():
    before = _Counter.created
    Singleton.get.__func__(_Counter)
    Singleton.get.__func__(_Counter)
    Singleton.get.__func__(_Counter)
    assert _Counter.created == before + 1


def test_copy_is_refused():
    instance = Singleton.get.__func__(_Counter)
    with pytest.raises(TypeError):
        copy.copy(instance)
    with pytest.raises(TypeError):
        copy.deepcopy(instance)