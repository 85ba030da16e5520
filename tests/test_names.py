import pytest

from enginekit.names import (
    NAME_SIZE,
    Name,
    NameEntry,
    NamePool,
    get_pool,
    hash_string,
    hash_string_lower,
)


def test_hash_of_empty_string_is_djb2_seed():
    assert hash_string("") == 5381


def test_hash_of_single_char():
    assert hash_string("a") == 177670


def test_hash_stops_at_nul():
    assert hash_string("abc\0def") == hash_string("abc")


def test_hash_fits_in_32_bits():
    value = hash_string("x" * 1000)
    assert 0 <= value < 2**32


def test_hash_lower_ignores_case():
    assert hash_string_lower("HeLLo") == hash_string_lower("hello")
    assert hash_string_lower("hello") == hash_string("hello")
    assert hash_string("HeLLo") != hash_string("hello")


def test_get_pool_is_singleton():
    assert get_pool() is NamePool.get()
    assert get_pool() is get_pool()


def test_pool_find_or_store_and_resolve():
    pool = get_pool()
    display = pool.find_or_store("PoolEntryName")
    assert display == hash_string("PoolEntryName")
    entry = pool.resolve(display)
    assert isinstance(entry, NameEntry)
    assert entry.name == "PoolEntryName"
    assert entry.comparison_id == hash_string_lower("PoolEntryName")
    assert entry.length == len("PoolEntryName")


def test_pool_store_is_idempotent():
    pool = get_pool()
    first = pool.find_or_store("RepeatedName")
    size = len(pool)
    second = pool.find_or_store("RepeatedName")
    assert first == second
    assert len(pool) == size


def test_pool_resolve_unknown_raises():
    pool = NamePool()
    with pytest.raises(KeyError):
        pool.resolve(12345)


def test_wide_flag_for_non_ascii():
    pool = get_pool()
    entry = pool.resolve(pool.find_or_store("액터"))
    assert entry.is_wide is True
    ascii_entry = pool.resolve(pool.find_or_store("Actor"))
    assert ascii_entry.is_wide is False


def test_default_name_is_none():
    name = Name()
    assert name.to_string() == "None"
    assert name.display_index == 0
    assert name.comparison_index == 0
    assert name.is_none


def test_name_round_trip_keeps_case():
    assert Name("MyActor").to_string() == "MyActor"
    assert str(Name("myactor")) == "myactor"


def test_names_compare_ignoring_case():
    assert Name("Cube") == Name("CUBE")
    assert hash(Name("Cube")) == hash(Name("cube"))
    assert Name("Cube") != Name("Sphere")


def test_name_indexes_match_hashes():
    name = Name("Sphere")
    assert name.display_index == hash_string("Sphere")
    assert name.comparison_index == hash_string_lower("Sphere")


def test_too_long_name_becomes_none():
    name = Name("x" * NAME_SIZE)
    assert name.to_string() == "None"
    assert name == Name()


def test_longest_allowed_name_is_stored():
    text = "y" * (NAME_SIZE - 1)
    assert Name(text).to_string() == text


def test_empty_name_differs_from_none():
    empty = Name("")
    assert empty.display_index == hash_string("")
    assert empty.to_string() == ""
    assert empty != Name()


def test_names_usable_as_dict_keys():
    table = {Name("Actor"): 1}
    assert table[Name("ACTOR")] == 1


def test_name_not_equal_to_plain_string():
    assert (Name("Actor") == "Actor") is False