# meshstage

meshstage opens an OpenGL 3.3 window, draws triangulated meshes loaded from
Wavefront `.obj` files with one directional light and an ambient light, and
lets you edit the scene by answering short prompts in the terminal.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Running

```
meshstage
```

The window opens at 800x600. Its resolution and the keys of the current
mode are printed to the terminal. If the viewer cannot start, the reason is
printed to standard error as `Error: ...` and the command exits with status 1.

### Rendering mode

| Key           | Action                        |
|---------------|-------------------------------|
| W / S         | Move the camera forward/back  |
| A / D         | Move the camera right/left    |
| Left / Right  | Turn the camera (yaw)         |
| Up / Down     | Tilt the camera (pitch, ±89°) |
| E             | Enter edit mode               |

The camera moves 3 units and turns 90° per second while a key is held. The
frame time is printed about once a second.

### Edit mode

The selected object is drawn in white; the camera does not move.

| Key               | Action                                      |
|-------------------|---------------------------------------------|
| Left / Right      | Select the previous / next object           |
| + (or keypad +)   | Import an `.obj` file                       |
| C                 | Change colour (three values from 0 to 255)  |
| P                 | Change position (three values, −1000–1000)  |
| S                 | Change scale (three values, 0.1–10)         |
| R                 | Change rotation (three degrees, 0–360)      |
| Delete            | Delete the selected object (answer `y`)     |
| B                 | Return to rendering mode                    |

Each edit key starts a prompt in the terminal, and the window waits until it
is answered. Type the values separated by spaces, or `exit` to cancel.
Invalid input is explained and the prompt is shown again. Edits other than
import report `No selected object.` when the scene is empty. The first
object imported becomes selected; deleting an object selects the one after
it. A command that fails ends the program with status 1.

## Using the pieces as a library

The scene model works without a window:

```python
from meshstage.camera import Camera
from meshstage.commands import ModelContext, MoveObjectCommand
from meshstage.importer import Importer
from meshstage.parser import Parser
from meshstage.validators import validate_move
from meshstage.world import SceneObject, World

world = World()
importer = Importer()
world.add_object(SceneObject(importer.load_mesh_from_file("cube.obj")))

context = ModelContext(world, Camera(), None, importer)
request = validate_move(Parser().tokenize("1 2 3"))
if request is not None:
    MoveObjectCommand().execute(context, request)

print(world.selected_object().transform.matrix())
```

- `meshstage.parser` splits input on whitespace into `Token`s typed as
  `TokenType.NUMBER`, `PATH` or `WORD`.
- `meshstage.validators` has `validate_import`, `validate_color`,
  `validate_move`, `validate_rotate`, `validate_scale` and
  `validate_delete`; each returns a request from `meshstage.requests`, or
  `None` when the tokens are not acceptable. `validator_for`,
  `messages_for` and `command_for` look these up by `ConsoleAction`.
- Commands in `meshstage.commands` raise `CommandError` when nothing is
  selected or an import fails.
- `meshstage.importer.parse_obj` turns OBJ text into `MeshData`: one mesh
  per `o`, `g` or `usemtl` section, polygons fan-triangulated, identical
  vertices joined, and smooth normals computed for meshes that have none.
  `Importer.load_mesh_from_file` reads a file and raises `MeshImportError`
  when it cannot be opened or holds no triangles.
- `meshstage.camera.Camera` and `meshstage.transform.Transform` produce
  view, projection and model matrices as NumPy arrays.

## What it does not do

- Only `.obj` files are read; texture coordinates, materials and textures
  are ignored, and other model formats are not supported.
- The scene cannot be saved; it exists only while the program runs.
- There are no command-line options.