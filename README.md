# minirt

Reads `.rt` scene descriptions for a small ray tracer. It also provides the
3D vector arithmetic that rendering code builds on.

## Installing

```
pip install .
```

## Command line

```
minirt scene.rt
```

The command reads the scene file and parses every element.

- On success it prints `Finish` and exits with status 0.
- If no file is given, or more than one, it prints `Invalid number of arguments!` and exits with status 0.
- If the file cannot be opened, it prints `Error opening scene!` and exits with status 0.
- If an element line lacks fields, or a point or color has fewer than three components, it prints `Error: ...` to standard error and exits with status 1.

## Scene format

Each line describes one element. The first character of the line selects the
element type. Fields are separated by spaces. Points and colors are written
as comma-separated triples.

```
A 0.2 255,255,255
C -50,0,20 0,0,1 70
L -40,0,30 0.7 255,255,255
sp 0,0,20 20 255,0,0
pl 0,0,0 0,1,0 0,0,255
cy 50,0,20.6 0,0,1 14.2 21.42 10,0,255
```

| First character | Element | Fields |
|-----------------|---------|--------|
| `A` | ambient light | ratio, color |
| `C` | camera | position, orientation, field of view |
| `L` | light | position, brightness, color |
| `s` | sphere | centre, diameter, color |
| `p` | plane | point, normal, color |
| `c` | cylinder | centre, axis, diameter, height, color |

Empty lines are skipped. Lines that start with any other character are
ignored. If an `A`, `C` or `L` line appears more than once, the later line
replaces the earlier one. Spheres, planes and cylinders are kept in file
order.

Numbers are parsed leniently. Leading whitespace and one sign are accepted,
and parsing stops at the first character that does not belong to the number.
Text that contains no digits reads as zero. Extra fields on a line and extra
components in a triple are ignored.

## Library use

```python
from minirt.scene import load_scene
from minirt.vector import Vec3

scene = load_scene("scene.rt")
print(scene.camera.fov, len(scene.spheres))

axis = Vec3(0.0, 0.0, 2.0).normalized()
assert axis.is_normalized()
print(axis.cross(Vec3(1.0, 0.0, 0.0)))
```

The scene module, `minirt.scene`, provides the following:

- `load_scene(path)` reads and parses a file and returns a `Scene`.
- `read_scene(path)` returns the non-empty lines of a file.
- `parse_scene(lines)` builds a `Scene` from lines that are already in memory.
- `parse_color` and `parse_point` each parse one comma-separated field. They return a `Color` or a `Vec3`.
- `SceneError` is raised for a file that cannot be opened or for a malformed line.
- A `Scene` has the attributes `ambient`, `camera` and `light`. Each is `None` until a line declares it. It also has the lists `spheres`, `planes` and `cylinders`.

`Vec3` is an immutable vector with the following operations:

- `+` and `-`
- `dot`
- `cross`
- `scale`
- `length`
- `normalized`, which raises `ZeroDivisionError` for the zero vector
- `is_normalized`

The package also contains these helper modules:

- `minirt.numbers` parses numbers leniently with `parse_double`, `parse_int`, `parse_long` and `parse_int_base`. It also has `int_to_str`.
- `minirt.chars` classifies ASCII characters and converts their case: `is_alpha`, `is_digit`, `to_upper` and the like.
- `minirt.strings` holds string helpers such as `split`, `trim`, `substring`, `compare` and `bounded_copy`.
- `minirt.memory` holds byte-buffer helpers: `find_byte`, `compare_bytes`, `fill`, `zero`, `copy_into`, `move_within` and `allocate`.
- `minirt.linked` provides `LinkedList`, a singly linked list, along with its `Node` and `DoublyNode` node types.
- `minirt.lines` provides `LineReader`, `read_lines` and `count_lines` for line-oriented input.
- `minirt.output` provides `format_string` and `print_formatted` for printf-style output. It also has the stream writers `put_char`, `put_str`, `put_endl` and `put_number`.

## What it does not do

The package reads and parses scenes, and that is all it does:

- It does not render images.
- It does not open a window.
- It does not write any output file.
- It does not check values against their expected ranges. For example, it accepts light ratios outside 0–1, orientation vectors that are not normalized, and color channels outside 0–255.
- It does not require any particular element to be present.

## Running the tests

```
pip install .[test]
pytest
```