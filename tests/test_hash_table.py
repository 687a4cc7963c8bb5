import pytest

from smartcity.hash_table import HashTable, is_prime, next_prime, polynomial_hash


@pytest.mark.parametrize("num", [2, 3, 5, 101, 211])
def test_is_prime_true(num):
    assert is_prime(num) is True


@pytest.mark.parametrize("num", [-7, 0, 1, 4, 9, 100, 202])
def test_is_prime_false(num):
    assert is_prime(num) is False


def test_next_prime_small_values():
    assert next_prime(0) == 2
    assert next_prime(2) == 2


def test_next_prime_is_prime_and_not_smaller():
    for num in range(3, 300):
        result = next_prime(num)
        assert result >= num
        assert is_prime(result)
        assert all(not is_prime(k) for k in range(num, result))


def test_polynomial_hash_in_range_and_deterministic():
    for key in ["Stop1", "BUS-42", "Panadol", "ü", "x" * 50]:
        value = polynomial_hash(key, 101)
        assert 0 <= value < 101
        assert value == polynomial_hash(key, 101)


def test_polynomial_hash_empty_key_is_zero():
    assert polynomial_hash("", 101) == 0


def test_polynomial_hash_rejects_bad_size():
    with pytest.raises(ValueError):
        polynomial_hash("a", 0)


def test_insert_and_search():
    table = HashTable()
    table.insert("B1", {"company": "Metro"})
    table.insert("B2", 7)
    assert table.search("B1") == {"company": "Metro"}
    assert table.search("B2") == 7
    assert table.search("B3") is None
    assert len(table) == 2


def test_insert_replaces_existing_value():
    table = HashTable()
    table.insert("key", 1)
    table.insert("key", 2)
    assert table.search("key") == 2
    assert len(table) == 1


def test_insert_empty_key_rejected():
    table = HashTable()
    with pytest.raises(ValueError):
        table.insert("", 1)
    assert table.is_empty()


def test_search_empty_key_returns_none():
    assert HashTable().search("") is None


def test_remove():
    table = HashTable()
    table.insert("a", 1)
    table.insert("b", 2)
    table.remove("a")
    assert "a" not in table
    assert "b" in table
    assert len(table) == 1


def test_remove_missing_raises():
    table = HashTable()
    with pytest.raises(KeyError):
        table.remove("missing")
    with pytest.raises(KeyError):
        table.remove("")


def test_collisions_in_small_table():
    table = HashTable(size=1)
    table.resize(1)
    table.insert("x", 1)
    assert table.table_size == 2
    for key in ["y", "z"]:
        table.insert(key, key.upper())
    assert table.search("x") == 1
    assert table.search("z") == "Z"


def test_automatic_resize_after_load_factor():
    table = HashTable()
    for number in range(75):
        table.insert(f"k{number}", number)
    assert table.table_size == 101
    table.insert("k75", 75)
    assert table.table_size == 211
    assert table.load_factor <= 0.75
    assert all(table.search(f"k{n}") == n for n in range(76))


def test_resize_ignores_smaller_size():
    table = HashTable(size=11)
    table.insert("a", 1)
    table.resize(5)
    assert table.table_size == 11
    table.resize(23)
    assert table.table_size == 23
    assert table.search("a") == 1


def test_load_factor():
    table = HashTable(size=10)
    assert table.load_factor == 0.0
    table.insert("a", 1)
    table.insert("b", 2)
    assert table.load_factor == pytest.approx(0.2)


def test_clear():
    table = HashTable()
    table.insert("a", 1)
    table.clear()
    assert table.is_empty()
    assert table.search("a") is None
    assert list(table) == []


def test_iteration_covers_all_keys():
    table = HashTable(size=7)
    keys = {"alpha", "beta", "gamma", "delta"}
    for key in keys:
        table.insert(key, None)
    assert set(table) == keys
    assert len(list(table)) == len(keys)


def test_invalid_size():
    with pytest.raises(ValueError):
        HashTable(size=0)


def test_str_format():
    table = HashTable(size=1)
    table.insert("only", 1)
    text = str(table)
    assert text.startswith("HashTable Contents (Size: 1):")
    assert "only -> null" in text


def test_str_empty():
    assert str(HashTable()) == "HashTable Contents (Size: 0):"