# cfoundry

A small library of data structures and POSIX system helpers, written in
plain Python with no third-party dependencies.

Several modules use `termios`, `fcntl`, `mmap` and descriptor passing over
Unix-domain sockets, so the package is meant for POSIX systems.

## Installation

```
pip install cfoundry
```

## Data structures

- `cfoundry.bitstring.BitString(nbits)`: a fixed number of bits, all clear
  at first. `set`, `clear`, `isset`, and inclusive `set_range` /
  `clear_range`. `intersects(other)` is true when both have the same length
  and share at least one set bit. Bits out of range raise `IndexError`.
- `cfoundry.linklist.LinkedList`: a doubly linked list of non-`None` items
  with a cursor. `store` inserts before the cursor and moves onto the new
  item; `prepend` and `append` leave the cursor alone; `move(Position.HEAD |
  TAIL | NEXT | PREV | END)` moves it; `restore` returns the item under it;
  `delete` removes it (calling the optional `destructor`); `search` finds an
  item by identity; `pop` and `peek` work on the head.
- `cfoundry.hashtab.HashTable(buckets, hashfunc=None, destructor=None)`:
  chained buckets of linked lists mapping non-empty string keys to non-`None`
  values. Storing an existing key does not replace it: the newer entry
  shadows the older until deleted. `restore` returns `None` for a missing
  key, `delete` raises `KeyError`. `default_hash(key, modulo)` is the hash
  used when none is given.
- `cfoundry.btree.BTree(order, destructor=None)`: a B-tree (order at least 2)
  keyed by unique non-zero integers. `store` raises `KeyError` on a duplicate,
  `delete` on a missing key; `restore` returns `None` when absent. Iteration
  yields values node by node (a node's values, then its subtrees), not in key
  order; `iterate(consumer)` stops when the consumer returns a false value.
- `cfoundry.darray.DynamicArray(resize)`: slots addressed by index. After a
  deletion, the next store fills the lowest free slot. `defragment` closes
  the gaps, keeping order. `save` / `load` use `pickle`, so only load files
  you wrote yourself.
- `cfoundry.dstring.DynamicString(blocksz=16)`: a growable string with a
  read/write position: `putc`, `puts`, `getc`, `gets(size, terminator)`,
  `seek(offset, Whence.RELATIVE | ABSOLUTE | END)`, `truncate`, `value`,
  `save` and `load`.

## Encoding and memory

- `cfoundry.hexcodec`: `encode(bytes)` to upper-case hex, `decode(text)`
  back, plus `to_nibble`, `from_nibble`, `to_byte`, `from_byte`, `is_digit`.
- `cfoundry.byteord`: `htons`, `ntohs`, `htonl`, `ntohl`, `htonll`,
  `ntohll` for unsigned integers, and `htonf`, `ntohf`, `htond`, `ntohd`,
  which reorder the bytes of floats.
- `cfoundry.memory`: `Buffer(size)`, a `bytearray` with a `datalen` record,
  `resize` and `clear`. `defrag(items, isempty)` moves non-empty items to the
  front in place and returns how many there are.
- `cfoundry.mempool.MemoryPool(size)`: a bump allocator. `alloc(n)` returns a
  writable `memoryview`, rounding the space used up to the machine word;
  `MemoryError` when exhausted.
- `cfoundry.memfile.MemoryFile(path, readonly=False)`: an existing non-empty
  file mapped into memory (`data`), with `resize` (to the next page
  boundary), `sync` and `close`; usable as a context manager.

## Input and diagnostics

- `cfoundry.textio`: `getchar(delay)` reads one keystroke from the terminal,
  `getpasswd(prompt, size)` reads without echo, `gets` and `getline` read up
  to a terminator from a text stream, `fprintf` writes printf-style text
  under a lock.
- `cfoundry.debug`: `message(file, line, severity, format, *args)` with
  optional `file(line): ` prefix and red text for severities above
  `Severity.INFO` on a terminal; `doassert` reports and raises
  `AssertionError`.
- `cfoundry.log`: `info`, `warning`, `error` and `message` write
  timestamped lines to standard error and, after `set_stream`, to another
  stream as well.
- `cfoundry.error`: `init(progname)`, `printf`, `usage`, `syserr`, and a
  per-thread error number (`get_errno`, `set_errno`, `error_string`,
  `ErrorCode`).
- `cfoundry.trycontext`: `ContextStack` of `Context` records (exception
  number, file, line), with module-level `push`, `top` and `pop` on a
  shared stack.

## Processes and files

- `cfoundry.process`: `run(argv, fdin, fdout, wait, cwd)` starts a program
  with stdin from `fdin` and stdout/stderr to `fdout` (missing descriptors
  mean the null device) and returns the exit status, or the pid when not
  waiting. `pipe_from` and `pipe_to` return `(pid, stream)`; `wait(pid)`
  collects a child; `call(*args)` runs on this process's stdin and stdout.
- `cfoundry.files`: `readdir(path, ReadFlags...)` returns a `DirList` of
  files and (optionally separate) directories; `traverse(path, examine)`
  walks a tree calling `examine(path, stat, depth)`; `isdir`, `isfile`,
  `issymlink`, `ispipe`; `mkdirs` creates each directory before a `/`;
  `lock`, `trylock`, `unlock` take whole-file advisory locks; `load` and
  `getcwd`.
- `cfoundry.filedesc`: `send_fd(sock, fd)` and `recv_fd(sock)` pass an open
  descriptor over a Unix-domain socket.

## HTTP

`cfoundry.httpsrv.HttpServer(port, max_workers=10, timeout=None)` listens
on a TCP port. Each `accept()` takes one connection and serves it on a new
thread, which it returns. Only `GET` is handled (others get 501); URIs are
URL-decoded and dispatched to handlers registered with `add_handler`, or to
the default handler, else 404. A handler is called as
`handler(stream, uri, params)`, where `params` maps names to `HttpParam`
(or is `None` when there was no query string).

```python
from cfoundry.httpsrv import HttpServer, param_get, send_headers, send_status


def hello(stream, uri, params):
    send_status(stream, 200)
    send_headers(stream, "text/plain")
    name = param_get(params, "name")
    who = name.value if name and name.value else "world"
    stream.write(f"hello {who}\n".encode())


with HttpServer(8080) as server:
    server.add_handler("/hello", hello)
    while True:
        server.accept()
```

`urldecode`, `parse_query`, `send_status` and `send_headers` can be used on
their own.

## Example

```python
from cfoundry.btree import BTree
from cfoundry.hashtab import HashTable

tree = BTree(2)
tree.store(42, "answer")
assert tree.restore(42) == "answer"

table = HashTable(16)
table.store("colour", "blue")
assert "colour" in table
```

## What it does not do

- There is no command-line program; everything is a library call.
- There is no general socket or networking layer beyond `filedesc` and the
  HTTP server.
- The HTTP server reads no request bodies, handles only `GET`, and has no
  serving loop of its own: call `accept()` once per connection.

## Running the tests

```
pip install cfoundry[test]
pytest
```