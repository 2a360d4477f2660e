# cpblobs

Metaballs that drift around inside a unit cube, turned into a triangle mesh
with the marching-cubes algorithm. The package holds the scene logic of a
blob screensaver: the field sampler, the mesher, the animation, the settings
file reader and the per-frame camera and world transforms. It has no
dependencies beyond the standard library.

## Building blocks

- `cpblobs.tables` – the marching-cubes lookup tables.
  `corner_flag_index(values, target)` turns eight corner values into a
  corner state (bit n set when corner n is at or below the target), and
  `edge_triangles(flag_index)` gives that state's triangles as triples of
  edge indices.
- `cpblobs.isosurface.IsoSurface` – the mesher. `set_density(n)` sets the
  number of cells along each side of the unit cube (it must be positive),
  `sample(x, y, z)` is the field (zero in the base class; subclasses
  override it), `normal_at(x, y, z)` gives a unit normal from the field's
  gradient, and `march()` rebuilds `vertices`, `normals` and `face_count`
  at `target_value`. At most 32000 vertices are kept from one march.
  `render_vertices()` returns `Vertex` records centred on the origin, with
  the normal, a white colour and texture coordinates taken from the
  uncentred x and y. `interpolation_offset(val1, val2, wanted)` is the edge
  interpolation it uses.
- `cpblobs.blobby.Blobby` – an `IsoSurface` whose field is the sum of each
  `BlobPoint`'s influence divided by its squared distance. It takes up to
  five points; more raise `ValueError`. `animate_points(ticks)` moves each
  point along sine paths, `sin(ticks * speed) * move_scale + 0.5` per axis;
  an axis with speed 0 keeps its position.
- `cpblobs.xmldocument.XmlDocument` – a small, forgiving reader for the
  settings format. Nodes are positions in the text; tag names are compared
  without regard to case. It offers `load(path)`, `next_node`, `node_tag`,
  `child_node`, `node_text`, `iter_nodes(tag)` and `node_count(tag)`.
- `cpblobs.settings` – `default_settings()`, `parse_settings(text)` and
  `load_settings(path)` return a `Settings` object; `Settings.make_blobby()`
  builds a `Blobby` from copies of the first `num_points` blobs.
  `parse_vector`, `parse_color` and `parse_blob` read single values.
- `cpblobs.scene` – `Screensaver(settings, width, height)` ties it together.
  Each call to `frame()` animates the blobs, marches the surface and returns
  a `Frame` with the mesh, the face count, the world, view and projection
  matrices, and either the environment cube or the gradient background
  (`gradient_background`), then advances time by the tick speed. The matrix
  helpers `yaw_pitch_roll_matrix`, `look_at_lh` and `perspective_fov_lh`
  build left-handed, row-vector matrices.

## Example

```python
from cpblobs.settings import load_settings
from cpblobs.scene import Screensaver

settings = load_settings("config.xml")
saver = Screensaver(settings, 640, 480)

for _ in range(3):
    frame = saver.frame()
    print(frame.ticks, frame.face_count, len(frame.vertices))
```

`load_settings` returns the defaults when the file is missing or empty.
Without a settings file, start from `default_settings()` instead.

## Settings file

Settings live in a `<screensaver>` element. Every child is optional; any
that is missing keeps its default. If there are several `<screensaver>`
elements, each one is applied in turn.

```xml
<screensaver>
  <fov>45</fov>
  <aspectratio>1.33</aspectratio>
  <showcube>true</showcube>
  <bgtopcolor>0 0 64</bgtopcolor>
  <bgbottomcolor>0 0 0</bgbottomcolor>
  <globalspeed>0.01</globalspeed>
  <worldrot>1.0 0.5 0.25</worldrot>
  <numblobs>5</numblobs>
  <cubemap>data\nvlobby_cube_mipmap.dds</cubemap>
  <diffusecubemap>data\nvlobby_cube_mipmap_diffuse.dds</diffusecubemap>
  <specularcubemap>data\nvlobby_cube_mipmap_specular.dds</specularcubemap>
  <blendstyle>0</blendstyle>
  <movescale>0.3</movescale>
  <smoothness>32</smoothness>
  <blobbiness>24</blobbiness>
  <blob1>0.5 0.5 0.5 0.25 2.0 4.0 0.0</blob1>
</screensaver>
```

`fov` is in degrees. `showcube` is true only for the word `true` (any
case). Colours are three integers, red, green and blue, stored as an opaque
ARGB value. `blob1` to `blob5` each give a blob's position (x y z), its
influence, and its speed along each axis. `numblobs` must be between 0 and
5, or `make_blobby()` raises `ValueError`. `smoothness` is the number of
cells along each side of the marching grid, and `blobbiness` is the field
value at which the surface is drawn.

## What it does not do

The package draws nothing and opens no window. It does not load the cube
map textures named in the settings; their paths and `blend_style` are only
carried through to `Settings` and `Frame` for a renderer to use. There is
no command-line program.