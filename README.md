# lumen

Core building blocks of a small game engine, in plain Python with no
third-party dependencies.

## Modules

- `lumen.base_object`: `BaseObject`, the common base of reflected objects, and a
  registry of types by class name: `register_type` (usable as a class
  decorator), `get_type` and `create_instance`.
- `lumen.vector`: `Vec2`, `Vec3` and `Vec4` dataclasses with arithmetic
  operators, `dot`, `length` and `normalize`; `Vec3` adds `cross`,
  `element_product`, `sqr_length` and `Vec3.splat`; `Vec4` adds
  `Vec4.from_vec3` and `xyz`.
- `lumen.matrix`: row-major `Mat3` and `Mat4`, built from 9 or 16 values (all
  zeros by default), with `identity`, `transpose`, `at`, `set_element`,
  `clear` and multiplication by matrices and vectors. `Mat3.from_columns`
  builds a matrix from three column vectors; `Mat4` adds `translate`, `scale`
  (both in place) and `homogeneous_inverse` for rigid transforms.
- `lumen.guid`: `Guid`, a 16-byte identifier that parses from hex text (dashes
  ignored; anything malformed gives the all-zero, invalid GUID) and prints as
  `xxxxxxxx-xxxx-xxxx-xxxx-xxxxxxxxxxxx`. `new_guid()` makes a random one;
  `hash_combine` is the 64-bit seed mixer its hash uses.
- `lumen.ring_queue`: `RingQueue`, a FIFO queue over a ring buffer that grows
  when full (to 1 slot, then doubling up to 128, then by half).
- `lumen.tbuffer`: `TBuffer`, a growable byte buffer that packs values with
  `struct` formats at C-aligned offsets and reads them back.
- `lumen.memory_pool`: `MemoryPool`, a thread-safe pool of reusable objects
  allocated a chunk at a time.
- `lumen.logger`: `get_logger` sets up a shared logger writing to stdout and to
  a timestamped file (`log_file_name`) in `Logs/` or a directory you choose;
  `scope_info` logs "<info> begin" and "<info> done" around a block. A `TRACE`
  level below `DEBUG` is registered.
- `lumen.thread_pool`: `ThreadPool`, worker threads that run submitted
  callables and return `concurrent.futures.Future` objects.
- `lumen.task_thread_pool`: `TaskThreadPool`, worker threads that run `Task`
  objects, taking `TaskPriority.HIGH` tasks before `TaskPriority.LOW` ones.

## Install

```
pip install .
```

## Examples

```python
from lumen.vector import Vec3, Vec4
from lumen.matrix import Mat4

m = Mat4.identity().translate(Vec3(1, 2, 3))
print(m * Vec4(0, 0, 0, 1))        # Vec4(x=1.0, y=2.0, z=3.0, w=1.0)
print(Vec3(1, 0, 0).cross(Vec3(0, 1, 0)))
```

```python
from lumen.guid import Guid, new_guid

g = Guid("c4b5a3f2-1d2e-4f60-8a7b-9c0d1e2f3a4b")
print(str(g), g.is_valid())
print(Guid("not a guid").is_valid())   # False
print(new_guid())
```

```python
from lumen.tbuffer import TBuffer

buf = TBuffer()
buf.push("i", 7)          # written at offset 0
buf.push("d", 1.5)        # aligned to offset 8
(value,), pos = buf.read("i", 0)
(number,), pos = buf.read("d", pos)
print(value, number, buf.size)   # 7 1.5 16
```

```python
from lumen.ring_queue import RingQueue
from lumen.memory_pool import MemoryPool

q = RingQueue()
for n in range(3):
    q.push(n)
print(q.pop(), list(q), q.capacity)   # 0 [1, 2] 4

pool = MemoryPool(dict, chunk_size=16)
item = pool.request()
pool.release(item)
```

```python
from lumen.thread_pool import ThreadPool
from lumen.task_thread_pool import Task, TaskPriority, TaskThreadPool

with ThreadPool(4) as pool:
    print(pool.submit(sum, [1, 2, 3]).result())

class Hello(Task):
    def do_task(self):
        print("hello")

with TaskThreadPool(2) as tasks:
    tasks.enqueue(Hello(), TaskPriority.HIGH)
```

Leaving a pool's `with` block shuts it down: running work finishes, work still
queued is dropped (a `ThreadPool` cancels its futures).

```python
from lumen.logger import get_logger, scope_info

log = get_logger("Logs")
with scope_info("loading", log):
    log.info("working")
```

## What it does not do

This package holds only the engine's core utilities. It has no quaternions or
camera helpers such as look-at and orthographic projection, no mesh
generation or model loading, no shader or material handling, no JSON
serialization of objects or asset metadata, and no long-running named threads.
There is no renderer, window or command-line program.

## Tests

```
pip install .[test]
pytest
```