# cubesim

A small component-based scene system for an interactive cube puzzle.
Game objects hold components, and components talk to one another through
typed connectors: properties, messages and triggers. The package also
provides a transform with quaternion helpers, a camera with projection
helpers, an orbiting camera controller, and per-frame input, timing and
window state.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Objects and components

An `ObjectManager` owns the objects of a scene. Objects created during a
frame start running in the next one. Each `GameObject` has a root
`Transform` (id 1). It adopts further components, which get ids from 2 up.
Components are initialized at the start of the frame after they were
created. They are updated each frame while registered for updates, most
recently registered first. Components that were removed are destroyed at
the end of the frame.

```python
from cubesim.component import Component
from cubesim.object_manager import ObjectManager


class Ticker(Component):
    def __init__(self):
        super().__init__()
        self.ticks = 0

    def initialize(self):
        self.register_update_call()

    def update(self):
        self.ticks += 1


manager = ObjectManager(scene=None)
obj = manager.create_object("ticker")
ticker = obj.create_component(Ticker())

manager.initialize_objects()   # Ticker.initialize runs
manager.process_frame()        # Ticker.update runs
assert ticker.ticks == 1

obj.remove_component(ticker.id)
manager.process_frame()        # destroyed at the end of this frame
assert obj.components == ()
```

`ObjectManager.destroy_object(id)` marks an object for removal. It is torn
down, with all its components, at the end of the frame. `GameObject.scene`
returns whatever was passed to the manager as `scene`.

## Connectors

Components create their pipes in `make_connectors`, using the object's
`MessageManager`. They are wired with `GameObject.connect` and
`GameObject.disconnect`. Both pipes must belong to components of that
object.

```python
class Sender(Component):
    def make_connectors(self, message_manager):
        self.text_out = message_manager.make_message_out(self)


class Label(Component):
    def __init__(self):
        super().__init__()
        self.text = ""

    def make_connectors(self, message_manager):
        self.text_in = message_manager.make_message_in(self, self.set_text)

    def set_text(self, text):
        self.text = text


sender = obj.create_component(Sender())
label = obj.create_component(Label())
obj.connect(sender.text_out, label.text_in)
sender.text_out.send("F R'")
assert label.text == "F R'"
```

There are three kinds of pipe:

- `PropertyOut`/`PropertyIn`: a property input reads `value` from its
  source. It raises `NotConnectedError` when it has no source.
- `MessageOut`/`MessageIn`: a payload is delivered to each connected
  handler.
- `TriggerOut`/`TriggerIn`: a call is made to each connected handler,
  with no arguments.

When a component is destroyed, every connection it took part in is
dropped.

## Transform

`cubesim.transform.Transform` publishes `position`, `rotation`
(a `(w, x, y, z)` quaternion), `scale` and the resulting 4x4 `model`
matrix. It has `move`, `move_relative`, `rotate`, `rotate_relative`,
`front`, `up` and `right`. Rotations may be given as quaternions or as
Euler angles. If the `parent` property input is connected, the model
matrix is built on top of the parent's model. The module also exports
`quat_from_euler`, `quat_multiply`, `quat_rotate`, `quat_to_mat4`,
`angle_axis` and `rotate_vector`.

```python
import math
from cubesim.transform import angle_axis

obj.root.position = (1.0, 2.0, 3.0)
obj.root.rotate(angle_axis(math.pi / 2, (0.0, 1.0, 0.0)))
print(obj.root.front())
```

## Camera and controller

`cubesim.camera` provides `perspective`, `orthographic` and `look_at`,
and a `Camera` component with the constructors `Camera.with_perspective`
and `Camera.with_orthographic`. On initialization the camera calls
`register_camera(camera)` on its object's scene. `view_matrix()` then
looks along the root transform's front.

`cubesim.third_person_controller.ThirdPersonController` keeps its object
orbiting a target object at a given `radius`, facing the target. It reads
the scene's `input` attribute. You can drag with the right mouse button,
or use the numeric keypad:

- 1: front view
- 3: right view
- 7: top view
- 2, 8, 4, 6: step the view around the target

The vertical angle is kept within `ROTATION_LIMIT`. The module's
`rotation_between(start, dest)` returns the shortest rotation between two
directions.

## Input, clock, window, shaders

- `cubesim.input_state.Input` tracks `KeyState`
  (`FREE`/`PRESSED`/`HOLD`/`RELEASED`) for GLFW-numbered keys and mouse
  buttons. Call `update(is_pressed)` once a frame with a callable that
  reports whether a key code is down. Feed cursor and scroll events through
  `on_mouse_move` and `on_scroll`. Read `mouse_offset` and `scroll_offset`.
- `cubesim.clock.Clock` measures `delta_time` and the scaled
  `fixed_delta_time` from a time source you supply, or from
  `time.perf_counter` by default.
- `cubesim.window.Window` holds the width, height and title. It calls
  `on_resize` when resized.
- `cubesim.shader_program.ShaderProgram` reads stage sources from files
  and raises `ShaderError` when a file cannot be read. It stores uniform
  values set with `uniform(name, ...)`, which you read back with
  `uniform_value(name)`. `ShaderType` and `ShaderTrait` name the program
  kinds and traits.

## What the package does not do

The package does not include:

- the cube model itself: its cubies, face turns and move queue;
- a ready-made scene with a frame loop;
- lights, drawables, text widgets or a draw manager;
- any rendering or window system: nothing is drawn on screen;
- a command to run.

It provides the object, component, connector, transform, camera, input and
timing building blocks on which such a scene would be built.