import pytest

from bejdecode.dictionary import Dictionary, read_binary


def dict_bytes(entries):
    return b"".join(bytes([tag, len(key)]) + key.encode() for tag, key in entries)


def test_from_bytes_parses_entries_in_order():
    entries = [(1, "Name"), (2, "Id"), (7, "Status")]
    dictionary = Dictionary.from_bytes(dict_bytes(entries))
    assert dictionary.entries == tuple(entries)
    assert len(dictionary) == 3


def test_key_lookup_returns_name():
    dictionary = Dictionary.from_bytes(dict_bytes([(1, "Name"), (2, "Id")]))
    assert dictionary.key(2) == "Id"
    assert dictionary.key(1) == "Name"


def test_key_missing_returns_none():
    dictionary = Dictionary.from_bytes(dict_bytes([(1, "Name")]))
    assert dictionary.key(9) is None


def test_duplicate_tag_first_entry_wins():
    dictionary = Dictionary.from_bytes(dict_bytes([(3, "First"), (3, "Second")]))
    assert dictionary.key(3) == "First"


def test_truncated_trailing_entry_is_ignored():
    data = dict_bytes([(1, "Name")]) + bytes([2, 10]) + b"abc"
    dictionary = Dictionary.from_bytes(data)
    assert dictionary.entries == ((1, "Name"),)


def test_single_trailing_byte_is_ignored():
    data = dict_bytes([(4, "Key")]) + b"\x05"
    assert Dictionary.from_bytes(data).entries == ((4, "Key"),)


def test_empty_key_is_kept():
    dictionary = Dictionary.from_bytes(dict_bytes([(5, "")]))
    assert dictionary.key(5) == ""


def test_empty_data_gives_empty_dictionary():
    dictionary = Dictionary.from_bytes(b"")
    assert len(dictionary) == 0
    assert dictionary.key(0) is None


def test_load_from_file(tmp_path):
    entries = [(1, "Name"), (2, "Id")]
    path = tmp_path / "dict.bin"
    path.write_bytes(dict_bytes(entries))
    assert Dictionary.load(path).entries == tuple(entries)


def test_read_binary_returns_contents(tmp_path):
    payload = bytes(range(256))
    path = tmp_path / "blob.bin"
    path.write_bytes(payload)
    assert read_binary(path) == payload


def test_read_binary_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_binary(tmp_path / "missing.bin")


def test_load_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        Dictionary.load(tmp_path / "missing.bin")