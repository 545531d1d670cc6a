# gfxlab

Pure-Python building blocks for small 3D rendering scenes. Each module
computes data that a renderer needs: vertices, normals, texture coordinates,
matrices and pixels. You pass that data to whatever graphics API you use.
The package has no dependencies outside the standard library.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Modules

### `gfxlab.bmp`: uncompressed BMP images

- `read_indexed_bmp(data)` and `load_indexed_bmp(path)` decode 8-bit palettised bitmaps to RGB.
- `read_truecolor_bmp(data)` and `load_truecolor_bmp(path)` decode 24-bit bitmaps to RGB.

Both functions return an `Image` with `width`, `height`, `channels` and `data` fields.
The pixel bytes are stored row after row in file order, and row padding is skipped.
`BmpError` is a subclass of `ValueError`. It is raised in these cases:

- the data is not a BMP;
- the bit depth is not the one requested;
- the image is compressed;
- the data is truncated.

`combine_alpha(color, alpha)` merges a colour image with a mask image into
RGBA. The alpha of each pixel is the integer mean of the mask's three channels.
The call raises `BmpError` if the two images differ in size.
`construct_texture(color_path, alpha_path)` does the same thing from two 24-bit files.

```python
from gfxlab.bmp import load_truecolor_bmp, construct_texture

floor = load_truecolor_bmp("pics/floor.bmp")
tree = construct_texture("img/tree_color.bmp", "img/tree_alpha.bmp")
print(tree.width, tree.height, tree.channels)  # channels == 4
```

### `gfxlab.shadows`: planar projected shadows

`shadow_matrix(plane, light_position)` returns the 4×4 matrix that flattens
geometry onto the plane `a*x + b*y + c*z + d = 0`, as seen from a light at the
homogeneous point `light_position`. The result is a tuple of tuples indexed
`[column][row]`, which is the column-major layout. Inputs that do not have
four components each raise `ValueError`.

### `gfxlab.geometry`: tori and a cube-map box

- `torus_quads(r1, r2, n1, n2)`: the quads of a closed torus around the y axis. Each vertex is a `(normal, position)` pair.
- `torus_strips(r0, n, u_repeat, start, end, r1, m, v_repeat, ccw)`: textured triangle strips for a section of a torus around the z axis, running from `start` to `end`. Equal angles give the whole torus. Each vertex is a `(texcoord, position)` pair, and `ccw` picks the winding.
- `cube_map_quads()`: the six faces of a unit cube centred on the origin. Each vertex also serves as its own cube-map texture coordinate.
- `TextureScroller(du=0.0, dv=0.0, step=0.009)`: `advance()` returns the current offset, then moves it diagonally by one step. Each coordinate wraps when it goes above 1.

The torus helpers use the value 3.1415 for pi, exposed as `PI`.

### `gfxlab.camera`: a walk-around camera in a 20×20 room

`Camera` holds these fields:

- `position`, default `[10, 2, 10]`;
- the heading `phi`, in radians;
- the pitch `psy`, in degrees;
- `speed`;
- the `light_on` and `fog` switches.

`Camera.handle_key(key)` applies one key press:

| Key | Action |
| --- | --- |
| `w` / `s` | walk forward or back, staying between 0.5 and 19.5 on x and z |
| `a` / `d` | turn by pi/24; the heading resets to 0 past a full turn |
| `z` / `x` | look up or down by 15°, within ±90° |
| space / `c` | rise or sink by 0.25, within 0.5 and 8.5 |
| `f` | toggle `light_on` |
| `t` | toggle `fog` |

Any other key is ignored.

`Animation.tick(elapsed_ms)` advances the scene by one frame when more than
10 ms have passed. The elapsed time is taken modulo 65536. A frame adds 0.5°
to `surface_angle`, which wraps from above 180 to −180. It also adds 1° to
`spiral_angle`, which wraps at 360 to 0. The call returns whether a frame was
advanced.

### `gfxlab.surfaces`: a Klein bottle and room shadows

- `klein_bottle(a_steps=50, b_steps=50, radius=2)` returns a grid of `(position, normal)` pairs: `a_steps + 1` rows of `b_steps + 1` points each. Consecutive rows form quad strips. The normals are unit length.
- `room_shadow_matrices(light_position)` returns a dict of shadow matrices keyed `"floor"`, `"left"`, `"right"`, `"back"` and `"forward"`, one for each plane in `ROOM_PLANES`.

### `gfxlab.water`: a rippling water surface

`WaterSurface(seed=None)` runs a damped wave equation on a 128×128 height
field. It keeps `positions` and `normals` up to date for rendering; the
normals are not normalised.

- `disturb(x, y)` presses a round dent near grid point `(x, y)` and releases a `Particle` bubble there.
- `step(viscosity=0.004)` advances the waves by one step. With zero viscosity the waves never fade. On average, a random point is disturbed once in every 25 steps.
- `advance_particles()` ages every live bubble by one tick. A bubble rises for the first four fifths of its 300-tick life, then swells, then bursts.

Both `step` and `advance_particles` return the bubble spheres to draw, as
`(center, radius)` pairs.

```python
from gfxlab.water import WaterSurface

water = WaterSurface(seed=1)
water.disturb(60, 60)
spheres = water.step()
```

## What this package does not do

- It opens no window and issues no drawing calls. Displaying the data is left to your renderer.
- It does not extract isosurfaces from scalar fields, such as metaball surfaces.
- It reads BMP files but does not write them. It reads no other image format.