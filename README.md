# slamcore

Building blocks for a small real-time engine, in plain Python:

- **Events** (`slamcore.events`): window, input and scene-viewport event
  classes with category flags (`EventCategory`), and an `EventDispatcher`
  that calls a handler when the event is of a given class.
- **Resources** (`slamcore.resources`): the `Resource` state machine
  (`ResourceState`: importing, building, loading, uploading, ready,
  destroying, destroyed), the PBR `MaterialResource` with its property
  groups, a `ResourceManager` that holds resources by kind and name, and
  whole-file helpers (`read_binary`, `read_string`, `write_binary`).
- **Scene** (`slamcore.scene`): an `ECSWorld` of `Entity` handles carrying
  components such as `TagComponent`, `TransformComponent`,
  `CameraComponent`, `RenderingComponent`, `LightComponent` and
  `CornerstoneComponent`, with YAML scene files written by `serialize_yaml`
  and read back by `deserialize_yaml`.

Keyboard scancodes and mouse button codes live in `slamcore.keycodes`
(`Key`, `MouseButton`); the slot, location and binding numbers shared with
shader programs live in `slamcore.shared`.

## Installing

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Events

```python
from slamcore.events.event import EventCategory, EventDispatcher
from slamcore.events.input_events import KeyPressEvent
from slamcore.keycodes import Key

event = KeyPressEvent(Key.A, is_repeat=True)
print(event)                                         # KeyPress: 4, repeat
print(event.is_in_category(EventCategory.KEYBOARD))  # True

dispatcher = EventDispatcher(event)
dispatcher.dispatch(KeyPressEvent, lambda e: e.key == Key.A)  # returns True
print(event.handled)                                 # True
```

`dispatch` returns whether the handler was called; the handler's result is
or-ed into `event.handled`.

## Scenes

```python
from pathlib import Path

from slamcore.scene.camera import CameraComponent
from slamcore.scene.serializer import deserialize_yaml, scene_file_path, serialize_yaml
from slamcore.scene.world import ECSWorld

world = ECSWorld()
camera = world.create_entity("Camera")
camera.add_component(CameraComponent(is_main_camera=True))
world.create_entity("Cube")
world.create_entity("Cube")                    # named "Cube (1)"

path = scene_file_path("assets", "Demo")       # assets/Scene/Demo.yaml
Path(path).parent.mkdir(parents=True, exist_ok=True)
serialize_yaml(world, "Demo", path)
scene = deserialize_yaml(path)                 # {"Scene": "Demo", "Entities": [...]}
```

Every entity made by `create_entity` carries a `TagComponent` with a unique
name and a default `TransformComponent`. `serialize_yaml` does not create
missing directories, and `deserialize_yaml` raises `ValueError` for a file
without a `Scene` key. `deserialize_yaml` returns the decoded document; it
does not rebuild a world from it.

Each camera keeps cached directions and view/projection matrices (numpy
arrays), recomputed from the transform you pass in whenever `is_dirty` is set:

```python
transform = world.main_camera_transform()
view_projection = world.main_camera_component().view_projection(transform)
```

`main_camera_component` and `main_camera_transform` raise `LookupError` when
no camera has `is_main_camera` set.

## Resources

```python
from slamcore.resources.manager import ResourceManager
from slamcore.resources.material import MaterialResource

manager = ResourceManager()
manager.add_material_resource("Model/Wood", MaterialResource())
manager.update()                               # steps every resource once
material = manager.get_material_resource("Model/Wood")
```

Adding a name that is already taken keeps the existing resource, logs a
warning and returns `False`. Other kinds (`ResourcesType.MESH`, `SHADER`,
`TEXTURE`) are held through `add_resource` / `get_resource` with any
`Resource` subclass you write.

## What it does not do

There is no window, input polling, renderer or GPU upload here: events are
plain objects to be created and dispatched by your own loop, and
`MaterialResource` only walks its states. The package has no mesh, texture
or shader resource classes, no model importer and no shader compiler, and no
command-line program.