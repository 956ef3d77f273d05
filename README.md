# drills

A collection of small, self-contained programming exercises, each solved as a
Python module. They cover ordering and generic helpers, rotating iterators,
builders, layered loggers, text-mode widgets, expression trees, vector maths,
a minimal protobuf wire decoder, a binary search tree, a ROT-N stream decoder,
counting, matrix transposition, Fibonacci numbers, directory listing, an
elevator event model, the dining philosophers (threaded and asyncio), a
concurrent link checker, a WebSocket chat server and client, and the display
logic of a compass.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Using the modules

```python
from drills.citations import Citation, minimum
from drills.offsets import offset_differences
from drills.expressions import Op, Operation, Value, evaluate, EvaluationError
from drills.bintree import BinaryTree
from drills.counter import Counter
from drills.matrix import transpose
from drills.fibonacci import fib

minimum(Citation("Shapiro", 2011), Citation("Baumann", 2010))
# Citation(author='Baumann', year=2010)

offset_differences(1, [1, 3, 5, 7])
# [2, 2, 2, -6]

evaluate(Op(Operation.ADD, Value(10), Value(20)))
# 30
# evaluate(Op(Operation.DIV, Value(99), Value(0))) raises EvaluationError

tree = BinaryTree()
tree.insert(2)
tree.insert(1)
tree.insert(2)
len(tree), 1 in tree
# (2, True)

counter = Counter()
counter.count("apple")
counter.count("apple")
counter.times_seen("apple")
# 2

transpose([[1, 2, 3], [4, 5, 6]])
# [[1, 4], [2, 5], [3, 6]]

fib(20)
# 6765
```

A few more modules in brief:

- `drills.packages`: `PackageBuilder("name").version(...).authors([...])
  .dependency(...).language(Language.RUST).build()` returns a `Package`;
  `Package.as_dependency()` gives a `Dependency`.
- `drills.loggers`: `StderrLogger` writes `verbosity=N: message` lines;
  `VerbosityFilter(max_verbosity, inner)` passes on only messages up to that
  level.
- `drills.widgets`: `Label`, `Button` and `Window` draw themselves as boxed
  text through `draw_into(buffer)` or print with `draw()`.
- `drills.vectors`: `magnitude(vector)` and `normalize(vector)`, which returns
  a new list; a zero vector comes back as NaN components.
- `drills.protobuf`: `parse_message(data, Person)` decodes the protobuf wire
  format (varint, length-delimited and 32-bit fields) into a `Person` with its
  `PhoneNumber` entries; malformed input raises `ProtoError`.
- `drills.rot`: `RotDecoder(stream, rot)` wraps any binary stream and rotates
  ASCII letters as they are read, so it can be handed to `io.TextIOWrapper` or
  read from directly.
- `drills.dirlist`: `DirectoryIterator(path)` yields every entry name,
  `"."` and `".."` included, and can be used in a `with` block; a directory
  that cannot be opened raises `DirectoryError`.
- `drills.elevator`: event classes (`ButtonPressed`, `CarArrived`,
  `CarDoorOpened`, `CarDoorClosed`) and helper functions that build them.
- `drills.philosophers` and `drills.philosophers_async`: `dine(names, rounds)`
  seats the philosophers at a round table and yields their thoughts (an
  async generator in the asyncio version).
- `drills.linkcheck`: `check_links(start_url, thread_count=16)` crawls a site
  with worker threads and returns the URLs that failed. Links are followed only
  within the start URL's domain; other pages are fetched once but not searched.
- `drills.chat_server` and `drills.chat_client`: `serve(host, port)` relays
  every client's text messages to every connected client through a
  `Broadcaster`; `run_client(uri)` sends lines from standard input and prints
  what arrives.
- `drills.compass`: `scale`, `cap`, `Mode` and `render_image`, which turns a
  magnetometer or accelerometer reading into a 5×5 image with one lit pixel.

## Commands

| Command | What it does |
| --- | --- |
| `drills-packages` | Builds a few packages with `PackageBuilder` and prints them |
| `drills-loggers` | Logs through a `VerbosityFilter` to standard error |
| `drills-widgets` | Draws a text window with a label and a button |
| `drills-expressions` | Evaluates a small expression tree |
| `drills-protobuf [HEX]` | Decodes a `Person` message given in hex, or a built-in example |
| `drills-rot` | Decodes a ROT13 joke |
| `drills-counter` | Counts numbers and fruit |
| `drills-fibonacci [N]` | Prints the N-th Fibonacci number (20 by default) |
| `drills-dirlist [PATH]` | Lists the entries of a directory (the current one by default) |
| `drills-elevator` | Prints a sequence of elevator events |
| `drills-philosophers` | Dining philosophers with threads |
| `drills-philosophers-async` | Dining philosophers with asyncio |
| `drills-linkcheck [URL] [--threads N]` | Crawls a site and reports broken links |
| `drills-chat-server [--host H] [--port P]` | Starts a WebSocket chat server, 127.0.0.1:2000 by default |
| `drills-chat-client [URI]` | Connects to a chat server (ws://127.0.0.1:2000 by default) and relays standard input |

For example:

```
drills-linkcheck https://www.example.com/
```

Start `drills-chat-server` in one terminal and `drills-chat-client` in two
others; every line typed into a client is broadcast to all connected clients.

## What it does not do

`drills.compass` holds only the arithmetic of the compass display. It does not
read a magnetometer or accelerometer, watch a button, or drive an LED matrix;
it has no command, and its readings must be passed in by the caller.