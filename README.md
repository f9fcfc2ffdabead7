# probehash

probehash provides two hash tables that map string keys to integer values.
Both tables use open addressing with linear probing. They differ only in how a
key is turned into its home slot:

- `TraditionalHash` adds up the byte values of the key, read as signed 8-bit
  numbers. It reduces the sum to a slot with a bit mask when the table size is
  a power of two. Otherwise it uses the remainder.
- `FibonacciHash` builds a 64-bit polynomial hash with multiplier 31. It then
  multiplies that hash by 2^64/φ and takes the top bits of the product as the
  slot. This hash assumes the table size is a power of two.

Both classes derive from `LinearProbingTable` in `probehash.tables`.

## Installation

```
pip install .
```

## Library use

```python
from probehash.tables import FibonacciHash, TraditionalHash

table = FibonacciHash(8)
table.insert("apple", 3)
table.insert("pear", 5)

table.search("apple")      # 3
table.search("plum")       # None
table.remove("pear")       # True
table.remove("pear")       # False
table.load_factor()        # share of occupied slots, e.g. 0.125
print(table.render())      # one line per slot: "0: Empty", "5: apple -> 3", ...
```

### Table methods

- `insert(key, value)` adds a key or updates the value of a key that is
  already present. If the load factor has reached 0.7, the table doubles
  before the insert. If the probe sequence has no free slot, the method raises
  `probehash.tables.TableFullError`. This happens, for example, when you
  insert into a table of size 0.
- `search(key)` returns the stored value, or `None` if the key is absent.
- `remove(key)` marks the entry as deleted and returns `True`, or returns
  `False` if the key is absent. The deleted slot is kept as a tombstone, so
  later probe chains through it stay intact. The table can shrink only in one
  case: a failed search for the key has visited every slot, the load factor is
  at most 0.3, and the table is larger than its initial size.
- `load_factor()` returns the share of occupied slots as a single-precision
  value. A table with no slots returns 0.0.
- `grow()` doubles the table and `shrink()` halves it. Both re-insert every
  live entry.
- `render()` returns one line per slot. A table with no slots gives
  `Hash table is empty.`
- `hash_index(key)` returns the home slot of a key.

Creating a table with a negative size raises `ValueError`.

## Interactive program

```
probehash [--data PATH]
```

The command redraws both tables and then shows a menu. Every action applies to
both tables, so you can compare how the two hash functions spread the same
keys. The menu options are:

1. Set the table size. This recreates both tables, empty.
2. Insert pairs, either typed in or read from the data file. The default data
   file is `Data.txt` in the current directory. Use `--data` to choose another
   file.
3. Search for a key.
4. Remove a key.
5. Exit.

Options 2–4 ask you to create the tables first. Input is read as
whitespace-separated words. If a number cannot be parsed, the program reports
the bad input and shows the menu again. The program also exits when input
ends.

### Data file format

The file starts with the number of pairs. After it, each non-empty line gives
one pair: the last word is the integer value and the word before it is the
key. Blank lines are skipped. If the file is missing, the program prints
`Error!`. If the file is malformed, for example because it has fewer pairs
than announced, the program prints `Error!` followed by the reason.

```
3
apple 3
pear 5
plum 7
```

`probehash.cli.read_data_file(path)` parses such a file into a list of
`(key, value)` tuples.

## Running the tests

```
pip install .[test]
pytest
```