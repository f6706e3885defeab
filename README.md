# bejdecode

`bejdecode` turns a BEJ (Binary Encoded JSON) file into JSON text. It reads
element tags from the BEJ data and looks up their names in a binary
dictionary file.

## Installation

```
pip install .
```

For the tests:

```
pip install .[test]
pytest
```

## Command line

```
bejdecode <bej_filepath> <dictionary_filepath> <json_filepath>
```

The same command can be run as `python -m bejdecode.cli`. It prints the paths
it was given, reads the BEJ file and the dictionary, and writes the decoded
object to the JSON path. It exits with status 0 on success. It exits with
status 1 when it is not given exactly three arguments, or when a file cannot
be read or written.

## Input formats

**Dictionary file**: a sequence of entries. Each entry is one tag byte, one
length byte, and then that many bytes of key name. An entry that is cut short
at the end of the file is ignored. When a tag appears more than once, the
first entry wins.

**BEJ file**: a sequence of elements. Each element has:

- a tag: one byte, or two bytes when the high bit of the first is set (the
  low seven bits of the first byte, then the second byte shifted left by
  seven). The low four bits give the data type and the remaining bits give
  the dictionary tag;
- a length: one byte, or, when its high bit is set, the low seven bits say how
  many big-endian bytes hold the length;
- the value bytes.

Decoding stops at the end of the data, at a raw tag of `0`, or when a tag is
the last thing in the data.

## Output

- type `0`, integer: values of 1, 2, 4 or 8 bytes are read little-endian;
  any other width is written as `0`;
- type `1`, set: a nested object, decoded from the value bytes;
- type `2`, string: the value bytes up to the first NUL, in double quotes;
- any other type: `"<unknown>"`.

Tags missing from the dictionary get the key `unknown_tag`. An element whose
length runs past the end of its buffer is written as `"<unknown>"`, and its
value bytes are not skipped, so decoding carries on from just after its
length.

## Library use

```python
from bejdecode.dictionary import Dictionary
from bejdecode.parser import decode, bej_parse

dictionary = Dictionary.from_bytes(bytes([1, 4]) + b"name")
text = decode(bytes([0x12, 3]) + b"abc", dictionary)
# text == '{"name":"abc"}'

json_text = bej_parse("input.bej", "dict.bin", "output.json")
```

- `bejdecode.dictionary.read_binary(path)` returns a file's bytes.
- `Dictionary.from_bytes(data)` and `Dictionary.load(path)` build a
  dictionary; `Dictionary.key(tag)` gives the name for a tag, or `None`.
- `bejdecode.parser.BejReader` walks a buffer: `read_tag()`, `read_length()`,
  `read_element()` and the generator `elements()`, which yields `Element`
  values (`tag`, `type` as a `DataType`, `length`, `value`).
- `JsonWriter(stream)` writes elements to a text stream with
  `begin_object()`, `write_element(key_name, element, dictionary)`,
  `write_elements(data, dictionary)` and `end_object()`.
- `decode(data, dictionary)` returns the JSON text for a buffer.
- `bej_parse(bej_path, dictionary_path, json_path)` writes the JSON file and
  returns the text it wrote; it raises `OSError` when a file cannot be read or
  written.

Diagnostics (unknown tags, unknown types, lengths past the end of the data)
go to the standard `logging` module, under the `bejdecode` loggers.

## What it does not do

- It only decodes; there is no way to encode JSON into BEJ.
- Only the integer, set and string types are understood.
- Key names and string values are written as they are, without JSON escaping,
  so a quote or backslash in them gives output that is not valid JSON.