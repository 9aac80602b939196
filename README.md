# algokit

A small collection of classic ciphers and data structures, written in plain
Python with no third-party dependencies.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Ciphers

The cipher functions live in the modules of the `algokit.ciphers` sub-package.

```python
from algokit.ciphers.substitution import caesar, rot13, vigenere
from algokit.ciphers.morse_code import encode, decode
from algokit.ciphers.polybius import encode_ascii, decode_ascii
from algokit.ciphers.sha256 import sha256
from algokit.ciphers.transposition import transposition

caesar("rust", 13)                    # 'ehfg'
rot13("ABC")                          # 'NOP'
vigenere("LoremIpsumDolorSitAmet", "base")
encode("Hello Morse")                 # '.... . .-.. .-.. --- / -- --- .-. ... .'
decode(".... .. / - .... . .-. .")    # 'HI THERE'
encode_ascii("This is a test")        # '4423244324431144154344'
decode_ascii("44 23 24 43")           # 'THIS'
sha256(b"").hex()
transposition(False, "WE ARE DISCOVERED. FLEE AT ONCE.", "ZEBRAS")
# 'EVLNA CDTES EAROF ODEEC WIREE'
```

What each module offers:

- `algokit.ciphers.substitution`
  - `another_rot13(text)`: ROT13 that keeps case.
  - `rot13(text)`: upper-cases the text, then rotates A–Z by 13.
  - `caesar(cipher, shift)`: rotates ASCII letters by `shift`, which must be
    in 0..255 (`ValueError` otherwise).
  - `vigenere(plain_text, key)`: only the ASCII letters of the key count; a key
    without any leaves the text unchanged.
  - `xor(text, key)`: XORs the low byte of each character with `key` (0..255).
- `algokit.ciphers.morse_code`
  - `encode(message)`: characters with no Morse equivalent become `........`.
  - `decode(string)`: words are separated by `/`, unknown symbol groups
    become `_`, and input that holds anything other than `.`, `-`, space and
    `/` raises `InvalidMorseCodeError` (a `ValueError`).
- `algokit.ciphers.polybius`
  - `encode_ascii(string)`: ASCII letters to coordinate pairs (I and J share a
    cell); everything else is dropped.
  - `decode_ascii(string)`: whitespace is ignored, pairs that name no cell are
    dropped.
- `algokit.ciphers.tea`: the Tiny Encryption Algorithm.
  - `tea_encrypt(plain, key)` / `tea_decrypt(cipher, key)`: the data must be a
    multiple of 8 bytes and the key at least 16 bytes, else `ValueError`.
  - `TeaCipher(key0, key1)` with `encrypt_block` and `decrypt_block` on
    64-bit integers.
  - `to_block(data)` / `from_block(block)`: little-endian conversion between
    8 bytes and a 64-bit integer.
- `algokit.ciphers.sha256`: `sha256(data)` returns the 32-byte digest.
- `algokit.ciphers.transposition`: `transposition(decrypt_mode, msg, key)` is a
  columnar transposition with one or more whitespace-separated keywords. Only
  the ASCII letters of the message are kept, upper-cased; encryption groups
  the output into space-separated blocks, and a message with fewer letters
  than a keyword raises `ValueError`.

## Data structures

```python
from algokit.data_structures.avl_tree import AVLTree
from algokit.data_structures.rb_tree import RBTree
from algokit.data_structures.heap import MinHeap
from algokit.data_structures.trie import Trie

tree = AVLTree(range(1, 8))
3 in tree                # True
list(tree)               # [1, 2, 3, 4, 5, 6, 7]

heap = MinHeap()
for n in (4, 2, 9):
    heap.add(n)
list(heap)               # [2, 4, 9] (and the heap is now empty)

trie = Trie()
trie.insert("foo", 1)
trie.get("foo")          # 1

rb = RBTree()
rb.insert(1, "a")
rb.find(1)               # 'a'
```

Each class lives in its own module of `algokit.data_structures`:

- `avl_tree.AVLTree`: a self-balancing ordered set with `insert`, `remove`
  (both return whether anything changed), `contains`/`in`, `len`, in-order
  iteration and `is_balanced`.
- `b_tree.BTree(branch_factor)`: `insert` (duplicates are kept), `search`/`in`,
  and `traverse`, which returns a string rendering of the tree.
- `binary_search_tree.BinarySearchTree`: an unbalanced search tree with
  `insert`, `search`/`in`, `minimum`, `maximum`, `floor`, `ceil` and in-order
  iteration; the lookups return `None` when there is no answer.
- `graph.DirectedGraph` and `graph.UndirectedGraph`: weighted adjacency-list
  graphs with `add_node`, `add_edge((from, to, weight))`, `neighbours`,
  `contains`/`in`, `nodes` and `edges`. `neighbours` of an unknown node raises
  `NodeNotInGraph` (a `LookupError`).
- `heap.Heap(comparator)`, `heap.MinHeap`, `heap.MaxHeap`: binary heaps; the
  heap is its own iterator and iterating removes items in order.
- `linked_list.LinkedList`: a doubly linked list with `insert_at_head`,
  `insert_at_tail`, `insert_at_ith`, `delete_head`, `delete_tail`,
  `delete_ith` and `get`. An index below 0 or above the length raises
  `IndexError`; `str()` joins the values with `", "`.
- `simple_queue.Queue`: FIFO with `enqueue`, `dequeue` and `peek_front`
  (`None` when empty), `len` and `is_empty`.
- `rb_tree.RBTree`: a red-black tree map with `insert`, `find` (`None` if
  absent), `delete` (returns whether the key was present), `items` and key
  iteration in ascending order.
- `stack.Stack`: LIFO with `push`, `pop`, `peek`, `replace_top`, `drain`
  (pops while yielding) and top-down iteration. `pop` and `replace_top` on an
  empty stack raise `StackEmptyError` (an `IndexError`).
- `trie.Trie`: a prefix tree over any iterable of hashable parts, with
  `insert` and `get` (`None` if absent).

## What it does not include

This is a library only: there is no command-line program, and none of the
structures are persisted to disk.