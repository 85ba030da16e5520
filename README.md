# enginekit

Core building blocks for a small game engine, in plain Python with no
third-party dependencies.

## Modules

- `enginekit.singleton` – `Singleton` base class. `get()` creates the one
  instance of a subclass on first use; `destroy()` drops it so the next `get()`
  builds a fresh one. Each subclass has its own instance, and instances refuse
  to be copied.
- `enginekit.names` – `Name`, an interned name whose equality ignores letter
  case while `to_string()` returns the spelling first stored (or `"None"` for an
  empty name or one of 256 characters or more). Names live in a shared
  `NamePool` (`get_pool()`), keyed by 32-bit djb2 hashes from `hash_string` and
  `hash_string_lower`. `NamePool.resolve` raises `KeyError` for an unknown hash.
- `enginekit.objects` – `UObject` and `UClass`. Every `UObject` subclass gets a
  `UClass` from `static_class()` that links to its base class;
  `UClass.is_child_of`, `UObject.is_a`, and `UClass.get_default_object()` (which
  creates one instance of the class on first use). `cast(obj, target)` returns
  the object or `None`; `cast_checked` raises `TypeError` instead.
- `enginekit.delegates` – `Delegate` (one bound callable, `execute` raises
  `RuntimeError` when unbound, `execute_if_bound` returns whether it ran),
  `MulticastDelegate` (`add_lambda` returns a `DelegateHandle`, `remove`,
  `broadcast`) and `DelegateHandle` (never-zero ids from `create()`).
- `enginekit.engine_types` – the `EndPlayReason` enumeration and the abstract
  `GizmoInterface` with `is_gizmo()`.
- `enginekit.show_flags` – `EngineShowFlag` bits (`PRIMITIVES`,
  `BILLBOARD_TEXT`) and the shared `EngineShowFlags` set, all flags on after
  `initialize()`. Flags can be read, set, toggled and set by name
  (`"Primitives"`, `"BillboardText"`); `find_index_by_name` returns the bit value
  or -1.
- `enginekit.view_mode` – `ViewModeIndex`, `FillMode`, `CullMode`,
  `RasterizerDesc` and the shared `ViewMode`. `initialize()` builds solid and
  wireframe descriptions and selects `DEFAULT`; `apply_view_mode()` returns the
  description for the current mode, or `None` for `DEFAULT`.
- `enginekit.console` – `Console` with a log (`log` takes a printf-style
  format, lines cut to 1023 characters), `submit` for entered lines and
  `history_step` for walking the history. `process_command` understands
  `clear` and `help`; `resize_to_screen` rescales a window position or size
  after the screen ratio changes.
- `enginekit.font_atlas` – `FontAtlas` and `GlyphInfo`. `FontAtlas.from_text`
  parses a glyph description (`TEXTURE_WIDTH`, `TEXTURE_HEIGHT`, `CELL_WIDTH`,
  `CELL_HEIGHT`, `CELLS_PER_ROW`, `CELLS_PER_COLUMN` settings, then
  `index unicode` lines; `#` starts a comment line). `FontAtlas.load` reads such a
  file (default `Pretendard_Kor.txt`). `get_glyph` returns an all-zero glyph for
  unknown characters.
- `enginekit.scene` – `save_scene(WorldInfo)` writes `<scene_name>.scene` as
  JSON and returns the path (nothing is written for an empty name);
  `load_scene(name)` reads it back into `WorldInfo` / `ObjectInfo` and raises
  `SceneNotFoundError` when the file is missing.
- `enginekit.debug_draw` – `DebugDrawManager` collects `LineVertex` entries and
  index pairs through `draw_line` and `draw_aabb_box` (twelve edges) until
  `clear_debug()`.

## What it does not do

Nothing here draws to a screen. `ViewMode` only hands back rasterizer
descriptions, `DebugDrawManager` only gathers vertices and indices (the
`life_time` argument does not expire lines; they stay until `clear_debug()`),
and `Console` keeps its log and history with no window of its own. There is no
world, actor spawning or editor user interface.

## Install

```
pip install .
```

## Examples

```python
from enginekit.names import Name

assert Name("Actor") == Name("actor")
print(Name("Actor").to_string())      # "Actor"
```

```python
from enginekit.delegates import MulticastDelegate

on_tick = MulticastDelegate()
handle = on_tick.add_lambda(lambda: print("tick"))
on_tick.broadcast()
on_tick.remove(handle)
```

```python
from enginekit.show_flags import EngineShowFlag, EngineShowFlags

flags = EngineShowFlags.get()
flags.set_flag_by_name("Primitives", False)
print(flags.get_single_flag(EngineShowFlag.PRIMITIVES))   # False
```

```python
from enginekit.console import Console

console = Console()
console.submit("help")
console.log("spawned %d actors", 3)
print(console.items)
```

```python
from enginekit.scene import ObjectInfo, WorldInfo, load_scene, save_scene

world = WorldInfo(scene_name="demo", version=1, actor_count=1,
                  object_infos=[ObjectInfo(location=(1.0, 2.0, 3.0),
                                           scale=(1.0, 1.0, 1.0),
                                           object_type="ACube", uuid=7)])
save_scene(world)                     # writes demo.scene
print(load_scene("demo").object_infos[0].object_type)   # "ACube"
```

## Running the tests

```
pip install .[test]
pytest
```