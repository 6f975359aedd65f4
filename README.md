# mzd2

Building blocks for a tile-based raster map editor. The package has a sparse
3-D store, id counters, resource path helpers, view geometry and direction-pad
hit testing. It also loads images through Pillow and has a QOI codec for
cache images.

## Installation

```
pip install .
```

To install the test tools as well:

```
pip install ".[test]"
```

## Modules

- `mzd2.coord_store`
  - `CoordStore` holds values at `(x, y, z)` coordinates, each from 0 to 255. Cells are kept in 16×16×16 chunks.
  - Its methods are `get`, `insert`, `remove`, `replace` and `get_or_insert_with`.
  - `walk()` yields `(pos, value)` pairs chunk by chunk.
  - `len()` and `in` work on a store.
  - When `remove(..., autofree=True)` empties a chunk, the chunk is dropped.
  - `CoordStore.laser` is a `Laser`. It counts the occupied cells in each plane along X, Y and Z. `vacant_axis` and `vacant_axis2` read those counts, with the axis given as an `Axis`.
  - `zuckerbounds()` returns a cached `(min, max)` box, or `None` for an empty store. All three axis extents of this box come from the X-plane counts.
  - A coordinate outside 0..=255 raises `ValueError`.
- `mzd2.ids`
  - `IdGenerator` is a thread-safe counter with signed 64-bit wrap-around. `next()` hands out one id and `next_n(n)` hands out `n` consecutive ids, for `n` from 1 to 255.
  - When a counter runs out of positive values it raises `IdOverflowError`.
  - `TilesetId` and `MapId` are frozen dataclasses that draw fresh ids when they are created.
  - `next_op_gen_evo`, `next_op_gen_evo_n`, `next_ur_op_id`, `next_tex_id` and `next_palette_id` use separate process-wide counters. Each starts at 64.
- `mzd2.paths`
  - `attached_to_path` appends text to the last path component.
  - `tex_resource_dir` gives `<map>_data/tex` and `tex_resource_path` gives `<map>_data/tex/<uuid>.png`.
  - `seltrix_resource_dir` and `seltrix_resource_path` do the same with `sel` and `.sel`.
  - `json_ser_with_indent(value, indent)` returns UTF-8 JSON bytes: compact for `None`, tab-indented for `255`, otherwise indented by that many spaces.
- `mzd2.uuids`
  - `uuid7()` makes a time-ordered version 7 UUID.
  - `generate_uuid(check)` avoids every UUID in `check`.
  - `generate_res_uuid(check, map_path)` also avoids UUIDs that already have a texture or selection file next to the map.
- `mzd2.geometry`
  - `trans_pos`, `mul_pos`, `trans_rect` and `mul_rect` scale points and rectangles, and the `trans_` versions also shift them.
  - `quant` truncates each component toward zero to a multiple of the step.
  - `clamp_pair`, `sat_add` and `sat_sub` clamp values into a range.
  - `grid_lines` yields the grid segments inside a clip box: vertical lines first, then horizontal ones.
- `mzd2.dpad`
  - `dpad_region(x, y, text_size, base_size)` returns the `DpadRegion` under a point, or `None`.
  - Each region has an `axis`, a `positive` flag and a highlight `polygon`.
  - `dpad_icons` builds the six labels from a callback. `default_dpad_icons(inverted)` gives the arrow set.
  - `split_doc` splits help text into a status line and a tooltip, returned as a `DocText`.
- `mzd2.qoi`
  - `qoi_encode(width, height, rgba)` writes a 4-channel QOI image.
  - `qoi_decode(data)` returns a `QoiImage` with the channel count from the header.
  - Malformed data raises `QoiError`.
- `mzd2.img`
  - `load_image` detects the format from the file contents.
  - `read_file_and_load_image` reads the whole file first.
  - `load_image_from_memory` falls back to the file extension when the contents do not identify the format.
  - `load_image_adaptive` streams files over 32 MiB.
  - `load_image_off_thread` decodes on a worker thread.
  - `write_png` writes an RGBA image as maximally compressed PNG.
  - `encode_cache_qoi` and `decode_cache_qoi` store RGBA images as QOI.
  - Decoding failures raise `ImageLoadError`.

## Example

```python
from mzd2.coord_store import CoordStore, Axis

store = CoordStore()
store.insert((3, 4, 0), "room")
assert (3, 4, 0) in store
assert store.vacant_axis(3, Axis.X) == 1
for pos, room in store.walk():
    print(pos, room)
```

## What this package does not do

The package is a library only. It has:

- no editor window or drawing surface;
- no command-line program;
- no reading or writing of map or tileset files.

The geometry and direction-pad helpers compute shapes and hit regions. Drawing them is left to the caller.

## Tests

```
pytest
```