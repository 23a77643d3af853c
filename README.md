# jsonmap

`jsonmap` reads a JSON document and flattens it into a simple key/value map
that can be queried by type. It also carries a small levelled logger and a
singly linked list with digit-wise addition.

## How values are stored

The top level of the document must be an object. Each member is stored under
its key:

- strings are stored as strings;
- numbers are stored as integers: the leading integer part of the number,
  wrapped to 32 bits (`2.7` becomes `2`);
- `true` and `false` are stored as the integers `1` and `0`;
- `null` is stored as the string `"null"`;
- nested objects are walked recursively; their members are stored under their
  own keys in the same flat map, and the object's own key is not stored;
- arrays become vectors. If the first element is a string, the vector is a
  list of strings; otherwise it is a list of integers (numbers and booleans).
  Elements of the other kind are left out. An array holding `null`, an object
  or another array is an error. Empty arrays are not stored. One map holds at
  most 255 arrays of each kind.

## Reading a document

`jsonmap.json_to_map.JsonToMap` is the entry point. It takes a source and a
`CreateMode`:

- `CreateMode.FILE_PATH` (the default): the source is a path to a file, which
  must have the `.json` extension and is read as UTF-8;
- `CreateMode.STRING_BUFF`: the source is the JSON text itself.

```python
from jsonmap.json_to_map import CreateMode, JsonToMap

text = '''{
    "problem_id": 3,
    "config": {"name": "demo"},
    "numbers": [1, 2.7, true],
    "words": ["a", "b"],
    "missing": null
}'''

with JsonToMap(text, CreateMode.STRING_BUFF) as jmap:
    print(jmap.keys())                   # ['problem_id', 'name', 'numbers', 'words', 'missing']
    print(jmap.get_int("problem_id"))    # 3
    print(jmap.get_string("name"))       # 'demo'
    print(jmap.get_char("name"))         # 'd'
    print(jmap.get_vector_int("numbers"))  # [1, 2, 1]
    print(jmap.get_vector_str("words"))  # ['a', 'b']
    print(jmap.get_string("missing"))    # 'null'
```

Accessors:

- `keys()` returns the stored keys in insertion order;
- `get_int`, `get_string` and `get_char` (first character of a non-empty
  string) return the stored value of that type;
- `get_float` and `get_double` return the stored integer as a `float`;
- `get_vector_int` and `get_vector_str` return the stored list, or `None`
  when the key is absent or does not hold a list.

A missing key raises `KeyError`. A value of the wrong type, a file that cannot
be read or is not a `.json` file, invalid JSON, a root that is not an object,
an unsupported array element, or a read after `close()` raise `Json2MapError`.
`JsonToMap` is a context manager; leaving the block calls `close()`.

## Lower-level pieces

- `jsonmap.json_parsing`: `parse_json(text)` parses JSON text (non-integer
  numbers become `Decimal`; `NaN` and `Infinity` are rejected) and
  `save_map(context, root, vectors)` stores the members of a root object into
  a mapping. Both raise `JsonParsingError`.
- `jsonmap.map_setting`: `set_json_value(context, key, value, callback, vectors)`
  stores one decoded JSON value; nested objects are handed to `callback`.
  Raises `MapSettingError`.
- `jsonmap.vector_storage`: `VectorStore`, a bounded pool of string and integer
  vectors (`VectorType.STR`, `VectorType.INT`) with `allocate`, `push`,
  `clear`, `free` and `reset`. Raises `VectorStorageError`.
- `jsonmap.logger`: `Logger`, a levelled logger (`Level.TRACE` to
  `Level.FATAL`). It writes `HH:MM:SS LEVEL file:line: message` to its stream
  (standard error by default) at or above `set_level`, unless `set_quiet(True)`.
  `add_callback(fn, level)` passes each `LogEvent` to `fn`; `add_fp(fp, level)`
  writes dated records to a text stream; at most 32 of these may be added.
  `set_lock(fn)` installs a function called with `True` before and `False`
  after each record. `level_string(level)` gives a level's name.
- `jsonmap.linked_list`: `SinglyList` (`push`, `delete` removing every node
  with the value, iteration, `len`, `print_nodes(logger)`) and
  `add_two_numbers(l1, l2)`, which adds two numbers stored as chains of
  `ListNode` digits, least significant digit first.

```python
from jsonmap.linked_list import SinglyList, add_two_numbers

a, b = SinglyList(), SinglyList()
for d in (2, 4, 3):
    a.push(d)
for d in (5, 6, 4):
    b.push(d)

result = SinglyList()
result.head = add_two_numbers(a.head, b.head)
print(list(result))  # [7, 0, 8]
```

## What it does not do

`jsonmap` is a library only: it has no command-line program. Values are read
only through the typed accessors above; nested arrays and real-valued numbers
are not kept as such.

## Running the tests

Install the `test` extra and run `pytest` from the project directory.