# enginekit

Small building blocks for game tooling:

- `enginekit.binary` reads and writes data in a compact little-endian binary
  layout. It covers scalars, enums, strings, wide strings, lists, maps and
  fixed-size arrays. It also handles the value types `Vector2`, `Vector3`,
  `Transform` and `Color`.
- `enginekit.threadpool` provides `ThreadPool`, which hands queued callables
  to a set of worker threads.

The package has no third-party dependencies.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Binary serialization

Each writer takes a binary stream open for writing. Each reader takes a
binary stream open for reading and returns the value it read.

```python
import io
from enginekit.binary import (
    Vector3, Transform, Color,
    write_string, read_string,
    write_list, read_list,
    write_transform, read_transform,
    write_color, read_color,
    write_map, read_map,
    write_scalar, read_scalar,
)

buffer = io.BytesIO()
write_string(buffer, "level_01")
write_list(buffer, [1.0, 2.5], lambda s, v: write_scalar(s, "f", v))
write_transform(buffer, Transform(Vector3(1, 2, 3), Vector3(0, 90, 0), Vector3(1, 1, 1)))
write_color(buffer, Color(1.0, 0.5, 0.25, 1.0))
write_map(
    buffer,
    {1: "door", 2: "chest"},
    lambda s, k: write_scalar(s, "i", k),
    write_string,
)

buffer.seek(0)
name = read_string(buffer)
weights = read_list(buffer, lambda s: read_scalar(s, "f"))
transform = read_transform(buffer)
color = read_color(buffer)
objects = read_map(buffer, lambda s: read_scalar(s, "i"), read_string)
```

### Layout

- **Scalars.** `write_scalar` and `read_scalar` take a `struct` format such as
  `"i"`, `"f"` or `"Q"`. A format without a byte-order character is read as
  little-endian.
- **Sizes.** `write_size` and `read_size` write lengths and counts as
  unsigned 64-bit integers. All the length prefixes below use them.
- **Enums.** `write_enum(stream, fmt, member)` writes `member.value` with the
  given format. `read_enum(stream, fmt, enum_type)` converts the value back
  into a member of `enum_type`. A value that is not a member raises
  `ValueError`.
- **Strings.** `write_string` writes a length prefix, then the bytes. It takes
  `str`, which it encodes as UTF-8, or `bytes`. `read_string` decodes UTF-8.
- **Wide strings.** `write_wstring` and `read_wstring` use UTF-16LE. Their
  length prefix counts 16-bit code units.
- **Lists.** `write_list(stream, items, write_item)` writes a count followed by
  each item. `read_list(stream, read_item)` reads them back into a `list`.
- **Maps.** `write_map(stream, mapping, write_key, write_value)` writes an entry
  count followed by key/value pairs. `read_map` returns a `dict`. If a key
  repeats, the later value wins.
- **Fixed-size arrays.** `write_array(stream, fmt, values)` and
  `read_array(stream, fmt, count)` carry no length prefix.
- **Value types.** Each value type is written as 32-bit floats:
  - `Vector2`: x, y.
  - `Vector3`: x, y, z.
  - `Color`: r, g, b, a.
  - `Transform`: three `Vector3` values, in the order position, rotation,
    scale.

  A default `Transform` has zero position and rotation, and a scale of
  `(1, 1, 1)`.

A reader that reaches the end of the stream before it has the bytes it needs
raises `EOFError`.

### Scope

The module gives you the building blocks, not finished record types. There
are no ready-made readers or writers for records such as lights, cameras or
triggers. To store one, combine the functions above in a fixed field order.

## Thread pool

```python
import time
from enginekit.threadpool import ThreadPool

results = []

with ThreadPool() as pool:
    pool.run(4)
    for n in range(10):
        pool.push_job(lambda n=n: results.append(n * n))
    while pool.unfinished_jobs():
        time.sleep(0.01)
```

### Methods

- `push_job(job)` queues a callable that takes no arguments and wakes one
  worker.
- `run(thread_count)` starts the workers. Calling it while workers are
  running raises `RuntimeError`. After `join` it may be called again.
- `join()` stops the workers and waits for them to exit. Leaving the `with`
  block calls `join()`.
- `queue_size()` is the number of jobs waiting to be picked up.
- `unfinished_jobs()` is the number of jobs that were pushed but have not
  completed.

### Behaviour

- The most recently pushed job is taken first.
- If a job raises an exception, the exception is logged through the
  `enginekit.threadpool` logger and the worker carries on.
- When the pool is joined, each worker stops as soon as it finishes its
  current job. Jobs still in the queue at that point are not run. To make
  sure all jobs are done, wait until `unfinished_jobs()` reaches zero before
  joining, as the example does.