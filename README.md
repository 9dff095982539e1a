# patternkit

A collection of small, self-contained demonstrations of classic design
patterns. Each module models one pattern around a tiny domain. Its classes
can be used directly, and each module has a `main` function that runs a
short scenario and prints the results.

Operations return their messages as strings rather than printing them;
only the `main` functions write to standard output.

## Patterns

Behavioural:

| Module | Pattern | Domain |
| --- | --- | --- |
| `patternkit.chain` | Chain of responsibility | `RobotBodyHandler`, `RobotLimbHandler` and `RobotCraniumHandler` assemble a robot's parts |
| `patternkit.command` | Command | A `TVRemote` runs `PowerOn`, `PowerOff`, `VolumeUp`, `VolumeDown`, `ChannelUp` and `ChannelDown` against a `TV` |
| `patternkit.state` | State | A `Boss` whose replies depend on a `BadMood`, `OkMood` or `GoodMood` |
| `patternkit.strategy` | Strategy | `Data` sorted in place with an `IncreasingSort` or `DecreasingSort` strategy |
| `patternkit.template_method` | Template method | `TeaMaker` and `CoffeeMaker` sharing one `make_beverage` procedure |
| `patternkit.visitor` | Visitor | `AreaVisitor` and `PerimeterVisitor` over `Circle`, `Square` and `Rectangle` |

Creational:

| Module | Pattern | Domain |
| --- | --- | --- |
| `patternkit.abstract_factory` | Abstract factory | `HumanFactory` and `OrcFactory` making `Soldier`, `Archer` and `Cavalry` units |
| `patternkit.builder` | Builder | A `CarDirector` driving a `ConcreteCarBuilder` that builds a `Car` |
| `patternkit.factory_method` | Factory method | `CowCreator`, `SheepCreator` and `PigCreator` making a `Cow`, `Sheep` or `Pig` |
| `patternkit.prototype` | Prototype | `CivilianRobot` and `MilitaryRobot` cloned directly or through a `PrototypeFactory` |
| `patternkit.singleton` | Singleton | One shared `Globals` object holding a `SystemState` and a file count |

## Installation

```
pip install .
```

No third-party libraries are needed.

## Running the demonstrations

Each module's `main` is installed as a command. The commands take no
options and ignore any arguments.

| Command | What it prints |
| --- | --- |
| `patternkit-chain` | The result of requesting each of a robot's seven parts through a body, limb and cranium chain |
| `patternkit-command` | The TV's response to power on, volume up, volume down, channel up, channel down and power off |
| `patternkit-state` | The boss's help and direction replies in an ok, a bad and a good mood |
| `patternkit-strategy` | One list sorted by `IncreasingSort` (largest first), then by `DecreasingSort` (smallest first) |
| `patternkit-template-method` | The brewing steps for three teas and three coffees, then a line for each refilled machine |
| `patternkit-visitor` | The area and perimeter of a circle of radius 4, a square of side 20 and a 5 by 3 rectangle |
| `patternkit-abstract-factory` | The units created by a human factory and by an orc factory |
| `patternkit-builder` | The build steps, make and model of four cars |
| `patternkit-factory-method` | A cow, a sheep and a pig introducing themselves and their sounds, first unnamed, then named |
| `patternkit-prototype` | Robot type checks, robots and their clones, and clones made by the prototype factory |
| `patternkit-singleton` | The shared settings before and after a change, and as seen through a second lookup |

## Using the modules

A chain of handlers; a request no handler takes yields an empty string:

```python
from patternkit.chain import RobotBodyHandler, RobotCraniumHandler, handle_the_chain

body = RobotBodyHandler(has_chest=True, has_pelvis=True)
body.set_next(RobotCraniumHandler(has_cranium=True))
results = handle_the_chain(body)
# ["Robot's chest assembled!", "Robot's pelvis assembled!", "", "", "", "",
#  "Robot's cranium assembled!"]
```

A command through the remote:

```python
from patternkit.command import TV, PowerOn, TVRemote

tv = TV()
remote = TVRemote(PowerOn(tv))
remote.press()   # "TV is powered on!"
tv.is_powered    # True
```

The singleton:

```python
from patternkit.singleton import Globals

first = Globals.get_instance()
second = Globals.get_instance()
assert first is second
```

`Globals()` called directly raises `TypeError`; `Globals.reset()` drops the
shared instance so the next `get_instance()` creates a fresh one.

## Errors

Missing collaborators are reported by raising rather than failing silently:

- `TVRemote.press()` with no command, `Boss.help_me()` / `Boss.direct_me()`
  with no mood, `Data.sort()` / `Data.do_algorithm()` with no strategy or
  data, and the `CarDirector` build methods with no builder raise
  `RuntimeError`.
- `BeverageMaker.restock_teas()` on a machine without teas, and
  `restock_coffees()` on one without coffees, raise `RuntimeError`.
- `PrototypeFactory.create_prototype()` with an unknown type raises
  `ValueError`.
- `create_one_of_each()` given a number of names other than three raises
  `ValueError`.

## Running the tests

```
pip install ".[test]"
pytest
```