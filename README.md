# ogl3d

Building blocks for small OpenGL 3D games: vector, rectangle and matrix
types, an entity system that updates game objects every frame, wrappers
for vertex arrays, uniform buffers and shader programs, and a fixed-size
window with an OpenGL 4.6 core context. OpenGL access goes through
pyglet.

## Installing

```
pip install .
```

For running the tests:

```
pip install .[test]
pytest
```

## Modules

### `ogl3d.prerequisites`

- `OGL3DError` – a `RuntimeError` whose text starts with `OGL3D Error: `;
  the bare text is kept in `.message`.
- Frozen dataclasses describing resources: `VertexAttribute`,
  `VertexBufferDesc`, `IndexBufferDesc` (its `list_size` is in bytes),
  `ShaderProgramDesc` and `UniformBufferDesc`.
- Enumerations `TriangleType`, `CullType`, `WindingOrder`, `ShaderType`.
- `warning(message)` and `info(message)` write `OGL3D Warning: ...` and
  `OGL3D Info: ...` lines to standard error.

### `ogl3d.linalg`

`Vec2`, `Vec3`, `Vec4`, `Rect(width, height, left, top)` and a row-major
`Mat4` that starts as the identity. `Mat4` offers `set_identity`,
`set_scale`, `set_translation`, `set_rotation_x/y/z`, `set_ortho_lh`,
multiplication with `*` and `*=`, and `to_bytes()`, which packs the 16
values as native 32-bit floats for a uniform buffer.

```python
import math
from ogl3d.linalg import Mat4, Vec3

world = Mat4()
rotation = Mat4()
rotation.set_rotation_z(math.pi / 4)
world *= rotation
move = Mat4()
move.set_translation(Vec3(1, 2, 3))
world *= move
payload = world.to_bytes()  # 64 bytes
```

### `ogl3d.entity`

```python
from ogl3d.entity import Entity, EntitySystem


class Spark(Entity):
    def on_update(self, delta_time):
        super().on_update(delta_time)   # advances self.age
        if self.age >= 3.0:
            self.release()


system = EntitySystem()
spark = system.create_entity(Spark)
system.update(1 / 60)
```

- `EntitySystem.create_entity(entity_type)` builds an instance of the
  given `Entity` subclass, registers it and calls its `on_create()`;
  anything else raises `TypeError`.
- `Entity.release()` marks the entity for removal; it is dropped at the
  start of the next `EntitySystem.update(delta_time)`, which then calls
  `on_update(delta_time)` on every remaining entity. Releasing an entity
  no system owns raises `RuntimeError`.
- `EntitySystem.entities()` lists live entities grouped by type, in
  creation order. `Entity.entity_system` is the owning system.
- The default `on_create()` resets `age` to 0 and the default
  `on_update()` adds the elapsed seconds to it.

### GPU resources

These need a current OpenGL context, such as the one a `Window` makes.
Each takes an optional keyword `gl` to supply another backend, has
`release()` (safe to call twice) and works as a context manager.

- `ogl3d.vertex_array.VertexArrayObject(vb_desc, ib_desc=None)` – uploads
  the vertex bytes and lays out the attributes as floats, plus an index
  buffer when `ib_desc` is given. An empty `list_size` or `vertex_size`, a
  missing vertex or index list, or too few bytes raises `OGL3DError`.
  Properties: `id`, `vertex_buffer_size` (vertex count), `vertex_size`.
- `ogl3d.uniform_buffer.UniformBuffer(desc)` – a buffer of `desc.size`
  bytes. `set_data(data)` uploads the first `size` bytes; fewer bytes
  raise `ValueError`, and a released buffer raises `OGL3DError`.
  Properties: `id`, `size`.
- `ogl3d.shader_program.ShaderProgram(desc)` – reads, compiles and links
  the vertex and fragment shader files. A missing file or a compile or
  link failure is reported with `warning()` rather than raised.
  `set_uniform_buffer_slot(name, slot)` binds a uniform block to a
  binding point, warning if the block is not found. Property: `id`.

### `ogl3d.window`

`Window()` opens a non-resizable 1024x768 window titled
`OpenGL 3D Game` with an OpenGL 4.6 core context; if that fails it raises
`OGL3DError`.

- `inner_size()` returns the drawable area as a `Rect`.
- `make_current_context()` makes its context current.
- `present(vsync)` sets vertical sync and swaps buffers.
- `dispatch_events()` processes pending events and returns `True` once the
  user has asked to close; the close button does not close the window by
  itself. See also `close_requested`.
- `close()` destroys the window (safe to call twice); `closed` tells
  whether it has been. Using a closed window raises `OGL3DError`.

```python
from ogl3d.window import Window

with Window() as window:
    window.make_current_context()
    while not window.dispatch_events():
        # draw here
        window.present(vsync=True)
```

## What it does not do

The package has no game class or main loop that ties these pieces
together, no draw-call layer (clearing, face culling, viewport or
triangle drawing), no ready-made scene or demo, and no command to run.
A game built on it drives the window, the entity system and the OpenGL
draw calls itself.