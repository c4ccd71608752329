import pytest

from symscan.hashtable import ChainedHashTable, insert_values, main


def test_new_entries_go_to_front_of_chain():
    table = ChainedHashTable(5)
    table.add(1, 3)
    table.add(2, 3)
    table.add(7, 3)
    assert table.chain(3) == [7, 2, 1]


def test_empty_chain():
    table = ChainedHashTable(5)
    assert table.chain(0) == []


def test_find_returns_matching_entry():
    table = ChainedHashTable(4)
    table.add(10, 2)
    table.add(14, 2)
    assert table.find(2, lambda e: e == 10) == 10
    assert table.find(2, lambda e: e > 11) == 14


def test_find_missing_returns_none():
    table = ChainedHashTable(4)
    table.add(10, 2)
    assert table.find(2, lambda e: e == 99) is None
    assert table.find(1, lambda e: True) is None


def test_chain_returns_copy():
    table = ChainedHashTable(3)
    table.add(4, 1)
    table.chain(1).append(99)
    assert table.chain(1) == [4]


@pytest.mark.parametrize("code", [-1, 5, 100])
def test_out_of_range_hash_code(code):
    table = ChainedHashTable(5)
    with pytest.raises(IndexError):
        table.add(1, code)
    with pytest.raises(IndexError):
        table.chain(code)


@pytest.mark.parametrize("size", [0, -3])
def test_invalid_size(size):
    with pytest.raises(ValueError):
        ChainedHashTable(size)


def test_format_lists_only_non_empty_buckets():
    table = ChainedHashTable(5)
    table.add(1, 3)
    table.add(2, 3)
    table.add(4, 0)
    text = table.format()
    assert text.startswith("\nHash Table:\n")
    assert "[3]: 2 -> 1 -> NULL" in text
    assert "[0]: 4 -> NULL" in text
    assert "[1]" not in text


def test_format_of_empty_table_is_header_only():
    assert ChainedHashTable(3).format() == "\nHash Table:\n"


def test_insert_values_reports_duplicates():
    inputs = [17, 18, 23, 25, 18, 38, 39, 22]
    table, messages = insert_values(inputs, 20)
    assert len(messages) == len(inputs)
    duplicates = [m for m in messages if m.endswith("(already exists)")]
    assert duplicates == [messages[4]]
    assert messages[4].split("\t")[1] == "18 (already exists)"


def test_insert_values_collisions_share_a_chain():
    table, _ = insert_values([18, 38], 20)
    assert table.chain(18) == [38, 18]


def test_insert_values_each_value_stored_once():
    values = [3, 3, 3, 8]
    table, _ = insert_values(values, 5)
    stored = [e for code in range(5) for e in table.chain(code)]
    assert sorted(stored) == [3, 8]


def test_main_default_run(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    assert out.count("(already exists)") == 1
    assert "Hash Table:" in out
    assert out.rstrip().endswith("NULL")


def test_main_with_arguments(capsys):
    assert main(["5", "25"]) == 0
    out = capsys.readouterr().out
    assert "[5]: 25 -> 5 -> NULL" in out


def test_main_rejects_non_integer(capsys):
    assert main(["abc"]) == 1
    assert "invalid integer" in capsys.readouterr().err