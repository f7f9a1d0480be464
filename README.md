# voxelgame

A small multiplayer voxel game. The package contains:

- a block world made of 32 × 32 × 32 chunks that are generated on demand
  (`voxelgame.block`, `voxelgame.chunk`, `voxelgame.chunk_manager`,
  `voxelgame.world`);
- a server that keeps track of connected players and tells every client when
  a player joins or leaves (`voxelgame.server`);
- the events exchanged between server and clients, with `encode_event` and
  `decode_event` (`voxelgame.events`);
- a TCP transport that keeps packet boundaries (`voxelgame.network`) and the
  dispatch of network activity into game events (`voxelgame.event_handler`);
- an OpenGL client window, built on pyglet, that draws a single orange
  triangle and closes on Escape (`voxelgame.graphics`, `voxelgame.rendering`,
  `voxelgame.client`).

## Installing

```
pip install .
```

The client window needs a desktop with OpenGL 3.3 or later; the server and
the world code run anywhere.

## Running

```
voxelgame 1
```

The mode number is taken from the first command-line argument; without one,
the command reads it from the first line of standard input.

| mode | what starts                                        |
|------|----------------------------------------------------|
| 0    | a server in a background thread and a client window |
| 1    | a server only                                      |
| 2    | a client window only, connecting to localhost      |

Any other number starts nothing. Input that is not a number is reported on
standard error and the command exits with status 1, as it does when the
window cannot be created.

The server listens on port 7776 on all interfaces, accepts up to 32
connections and prints `server initialised` once it is ready. A client waits
up to five seconds for the connection and prints `connection succeeded` or
`connection failed`. Each client prints its own player ID when it joins, and
a line whenever another player joins or leaves the game.

## Using the world code

```python
from voxelgame.block import Block
from voxelgame.chunk_manager import ChunkManager

print(Block(1).name)            # "dirt"

manager = ChunkManager()        # generates chunk (0, 0, 0) and prints "dirt"
chunk = manager.get_chunk((0, 0, 0))
print(chunk.get_block((1, 2, 3)).name)
```

`Block` takes an id from 0 to 255; ids 0 (`air`) and 1 (`dirt`) have names,
and asking for the name of any other id raises `LookupError`.

A new `Chunk` is filled with alternating air and dirt blocks along its flat
index. `block_index` and `block_position` in `voxelgame.chunk` convert
between local coordinates and that index, raising `IndexError` outside the
chunk.

`ChunkManager.get_chunk` generates a chunk the first time its position is
asked for and returns the same chunk afterwards; `is_chunk_generated` tells
whether a position has been generated yet.

## Events on the wire

```python
from voxelgame.events import PlayerAdded, decode_event, encode_event

packet = encode_event(PlayerAdded(3, True))
event = decode_event(packet)
print(event.message())          # "player ID: 3"
```

A packet is one type byte followed by the event's fixed-size payload.
`decode_event` raises `EventDecodeError` for an empty, unknown or short
packet, and returns `None` for a connection request.

## What it does not do

The client only draws one triangle: the block world is not rendered, and it
is not sent between server and clients. Players have an ID and nothing else;
there is no movement, no chat and no saving of the world.

## Tests

```
pip install .[test]
pytest
```