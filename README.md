# tilewalk

A small top-down scene drawn from image tiles. A soldier stands on a field of
grass and walks around when you use the keyboard. A pool of water tiles in the
upper-left corner and a rock are solid. The soldier stops in front of them and
does not walk through. He also stops at the edges of the window.

## Installing

```
pip install .
```

This installs `pygame`, which opens the window and loads the images.

## Running

The scene reads its images from an asset directory:

- `grass2.png`: one grass tile (64 x 64)
- `water7.png`: one water tile (64 x 64)
- `rock2.png`: the rock
- `avtandila.png`: the soldier, drawn at twice its size

By default the directory is `assets` under the current directory. To run the
scene:

```
tilewalk
```

To read the images from another directory, use `--assets`:

```
tilewalk --assets path/to/images
```

A window of 992 x 800 pixels opens. Move the soldier with these keys:

| Key | Direction |
|-----|-----------|
| W   | up        |
| A   | left      |
| S   | down      |
| D   | right     |

Each step is 10 pixels. The soldier takes at most one step every 0.03 seconds
in each direction whose key is held down. Close the window to quit.

If an image cannot be loaded, the program stops with a
`tilewalk.sprites.TextureLoadError`.

## Using it as a library

You can build and test the parts of the scene without opening a window.

- `tilewalk.geometry` holds the shapes used for collision:
  - `FloatRect`, with `intersects` and `moved`.
  - `CircleHitbox`.
  - `circle_intersects_rect`.
- `tilewalk.sprites` has:
  - `load_texture`.
  - `Sprite`, a texture with a position and a scale, with `global_bounds` and
    `draw`.
  - `TextureLoadError`.
- `tilewalk.nature` holds the scenery:
  - `NatureObject`, `Grass`, `Water` and `Rock`. These provide
    `collision_box` and `collision_circle`.
  - The tile groups `GrassGroup` and `WaterGroup`, which lay out tiles in rows
    of `TILE_SIZE` (64) pixels.
- `tilewalk.characters` has `Entity`, `Human` and `NPC`.
  - A `Human` has a `collision_box` and a `leg_hitbox`.
  - It checks `is_colliding` before each `move_left`, `move_right`, `move_up`
    or `move_down`.
  - `set_scale` resizes it.
- `tilewalk.game` has:
  - `build_scene`, which lays out the whole scene from an asset directory.
  - `Scene`, which moves the soldier with `handle_keys` and draws everything
    with `draw`.
  - `main`, which runs the window loop.

## What it does not do

`NPC` is a plain character with a texture and a position. It has no behaviour
of its own, and the scene does not place one. The scene has only the one
soldier and no other characters, goals, sound or saved state.

## Tests

```
pip install .[test]
pytest
```