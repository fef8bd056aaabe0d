# algolab

A collection of small, classic algorithms and data structures:

- `algolab.bst`: an unbalanced binary search tree (`Tree`) with insertion,
  removal, popping the maximum, in-order traversal and an indented text drawing.
- `algolab.linked_list`: a singly linked list of integers (`LinkedList`) with
  tail insertion, tail removal and sorted insertion.
- `algolab.basics`: temperature conversion, Fibonacci numbers, the largest
  value of a sequence, brute-force and Fermat primality tests, palindromes and
  filtering a sequence down to its primes.
- `algolab.primes`: trial-division primality and prime listing over a range
  split across worker threads.
- `algolab.huffman`: Huffman coding of text, with a compact binary file format.

No third-party dependencies are needed.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Library use

### Binary search tree

```python
from algolab.bst import Tree

tree = Tree()
for value in (8, 3, 10, 1, 6, 14):
    tree.insert(value)

tree.remove(10)     # True
list(tree)          # [1, 3, 6, 8, 14]
tree.inorder()      # the same list
tree.pop_max()      # 14
print(tree)         # sideways drawing, right subtree on top
```

Equal elements go to the left subtree. `remove` removes one occurrence and
reports whether the key was found; `pop_max` returns `None` on an empty tree.
`str(tree)` puts each element on its own line, indented four spaces per level
of depth, with the right subtree above the node and the left subtree below.

### Linked list

```python
from algolab.linked_list import LinkedList

items = LinkedList()
items.append(1)
items.append(2)
items.pop_tail()        # 2
items.insert_sorted(0)
list(items)             # [0, 1]
len(items)              # 2
items                   # LinkedList([0, 1])
```

`pop_tail` returns `None` on an empty list. `insert_sorted` places the value
before the first element that is not smaller than it.

### Basics

```python
from algolab.basics import (
    celsius_to_fahrenheit, fibonacci, highest,
    is_prime_bruteforce, is_palindrome, primefy,
)

celsius_to_fahrenheit(100.0)    # 212.0
fibonacci(6)                    # [0, 1, 1, 2, 3, 5]
highest([3, 9, 2])              # 9
highest([])                     # None
is_prime_bruteforce(13)         # True
is_palindrome("arara")          # True
primefy([4, 5, 6, 7])           # [5, 7]
```

`print_fibonacci(n)` prints the same numbers as `fibonacci(n)`, one per line.

`is_prime_fermat(n, iterations, rng=None)` runs the probabilistic Fermat test,
drawing witnesses from the given `random.Random` (a fresh one when omitted).
For `n == 3` with at least one iteration it raises `ValueError`, since there is
no base in the range `[2, n - 2]`.

### Primes in parallel

```python
from algolab.primes import is_prime, list_primes, split_ranges, parallel_primes

list_primes(1, 20)          # [2, 3, 5, 7, 11, 13, 17, 19]
split_ranges(10, 2)         # [(0, 5), (6, 10)]
parallel_primes(100, 4)     # all primes up to 100, in ascending order
```

### Huffman compression

```python
from algolab.huffman import compress_text, decompress_data

data = compress_text("abracadabra")
decompress_data(data)       # "abracadabra"
```

The building blocks are available too: `build_frequency_table`,
`build_huffman_tree` (returning `Leaf` and `Node` objects), `build_codes`,
`encode`, `decode`, `bits_to_bytes` and `bytes_to_bits`. Building a tree from
an empty table raises `ValueError`, so empty text cannot be compressed, and
`decompress_data` raises `ValueError` for truncated or malformed data.

`compress(input_path, output_path)` and `decompress(input_path, output_path)`
do the same on files, reading and writing text as UTF-8. The compressed layout
is: a big-endian 16-bit count of distinct characters, a big-endian 32-bit count
of encoded bits, then one (32-bit code point, 32-bit frequency) pair per
character, then the encoded bits packed most significant bit first and padded
with zeros to a whole byte.

## Commands

```
algolab-basics [WORD]
algolab-list
algolab-primes N THREADS
algolab-huffman [INPUT] [COMPRESSED] [OUTPUT]
```

- `algolab-basics` prints `true` or `false` depending on whether `WORD`
  (default `nataq`) is a palindrome.
- `algolab-list` shows a linked list after tail insertions, a tail removal and
  sorted insertions.
- `algolab-primes N THREADS` computes the primes up to `N` using `THREADS`
  worker threads.
- `algolab-huffman` compresses `INPUT` (default `input.txt`) into `COMPRESSED`
  (default `file.bin`) and then decompresses that into `OUTPUT` (default
  `out.txt`).

## Limitations

- `algolab-primes` prints nothing: it only does the computation. Use
  `parallel_primes` from Python to get the list of primes.
- `algolab-huffman` always runs a compression followed by a decompression;
  there is no command that only compresses or only decompresses a file.