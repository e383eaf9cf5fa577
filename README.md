# piggyplat

The gameplay core of a small 3D platformer, kept free of any rendering,
physics or windowing engine. It provides:

- **Messages** (`piggyplat.messages`): `Message` is a frozen dataclass with a
  `type` (`MessageType`) and two numbers, `value_a` and `value_b`.
  `Message.from_vector(type, (x, y))` builds one from a pair, and the
  `vector` property gives the pair back.
- **Entities and components** (`piggyplat.entity`): an `Entity` owns one
  `PhysicsComponent`, one `RenderComponent` and any number of extra
  `Component`s. `Entity.update(delta_t)` updates physics, then rendering, then
  the other components in the order they were attached.
  `Entity.handle_message(message, stop_when_received)` offers a message to the
  same components in the same order; with `stop_when_received` the first one
  that handles it ends the delivery. A component handles the message types
  listed in its `handled_types` class attribute, or whatever its own
  `handle_message` override says. `Component.send_message` passes a message
  to the owning entity and raises `RuntimeError` if the component is not
  attached. The vital components keep an `age` that `update` advances and
  `on_attach` resets.
- **An entity manager** (`piggyplat.entity_manager`): `EntityManager` keeps
  entities in the order they were added, updates them all with
  `update(delta_t)`, and supports `len()` and iteration.
- **Player input** (`piggyplat.player_input`): `PlayerInputComponent` takes
  key event names through `set_key` (`"w"`, `"a"`, `"s"`, `"d"`, `"space"`
  and their `-up` releases, all listed in `KEY_EVENTS`). `"space"` and
  `"space-up"` send a `JUMP_INPUT` message at once with value 1.0 or 0.0; the
  direction keys are remembered, and each `update` sends a `MOVE_INPUT`
  message carrying `move_vector()`, the held direction as a unit vector
  (or `(0.0, 0.0)` when nothing, or only opposing keys, is held).
- **An animation graph** (`piggyplat.anim_graph`, `piggyplat.anim_nodes`,
  `piggyplat.state_machine`): `AnimGraph` sums weighted layers of animation
  nodes to say how strongly each clip shows in the final pose, driven by named
  weights (`AnimWeightName`; an unset weight reads as 0.0). The nodes are
  `SingleAnimNode` (plays one clip, stops the others), `DrivenPoseAnimNode`
  (holds a clip at a position given by a weight), `BlendAnimNode` (blends two
  child nodes by a weight) and `StateMachineAnimNode` (crossfades between
  states when a weight trigger fires; triggers are built with `Comparator`
  and `make_transition`).
- **Clip control** (`piggyplat.current_anim`): `CurrentAnim` wraps a clip's
  playback controller, which must offer `is_playing()`, `loop(restart)`,
  `play()`, `stop()`, `pose(frame)` and the attributes `num_frames` and
  `play_rate`.
- **Interpolation** (`piggyplat.interpolation`): `interpolate(kind, minimum,
  maximum, value)` clamps a value and maps it through a linear, quadratic or
  cubic curve (`InterpolationType`).

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Example: an animation state machine

```python
from piggyplat.anim_graph import AnimGraph, AnimWeightName
from piggyplat.anim_nodes import BlendAnimNode, SingleAnimNode
from piggyplat.state_machine import Comparator, StateMachineAnimNode

graph = AnimGraph()
idle = SingleAnimNode(0, True, graph)
run = SingleAnimNode(1, True, graph)
ground = BlendAnimNode(idle, run, AnimWeightName.MOVE_SPEED, graph)
air = SingleAnimNode(2, True, graph)

machine = StateMachineAnimNode(ground, graph)   # registers itself with the graph
machine.add_state(air)
machine.add_transition(0, 1, AnimWeightName.GROUND_DIST, Comparator.GREATER_THAN, 0.05, 0.1)
machine.add_transition(1, 0, AnimWeightName.GROUND_DIST, Comparator.LESS_THAN, 0.03, 0.1)
graph.add_layer(machine, 1.0)

graph.set_weight(AnimWeightName.MOVE_SPEED, 0.5)
graph.update(1 / 60)
```

Each frame, call `graph.update(delta_t)` and then
`graph.get_influence(anim_index, current_anim)` for every clip, where
`current_anim` is a `CurrentAnim` wrapping that clip's playback controller.

## Example: entities and input

```python
from piggyplat.entity import Entity, PhysicsComponent, RenderComponent
from piggyplat.entity_manager import EntityManager
from piggyplat.messages import MessageType
from piggyplat.player_input import PlayerInputComponent


class Body(PhysicsComponent):
    def __init__(self):
        super().__init__()
        self.move = (0.0, 0.0)

    def handle_message(self, message):
        if message.type is MessageType.MOVE_INPUT:
            self.move = message.vector
            return True
        return False


body = Body()
player = Entity(body, RenderComponent())
controls = PlayerInputComponent()
controls.attach(player)

manager = EntityManager()
manager.add_entity(player)

controls.set_key("w")
controls.set_key("d")
manager.update(1 / 60)
print(body.move)   # (0.7071..., 0.7071...)
```

## What this package does not do

It draws nothing, simulates no physics and opens no window. There are no
concrete physics or render components (no rigid bodies, character
controller, model loading or skeletal animation), no keyboard binding (key
names have to be fed to `PlayerInputComponent.set_key` by the caller), no
frame clock or task loop (the caller passes `delta_t` to `update`), and no
command to start a game.