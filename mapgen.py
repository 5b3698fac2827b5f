#std/external libs
import time
import numpy

#local libs
from config import CHUNK_SIZE
from chunks import Chunk
from tiles import AIR, STONE, GRASS
import noise
import config
import logutil
import util

# Horizontal offsets of every cell in a column, indexed [x, z].
COLUMN_X, COLUMN_Z = numpy.mgrid[0:CHUNK_SIZE, 0:CHUNK_SIZE]
# Vertical offsets of every layer in a chunk, broadcast against an (x, z) height map.
CHUNK_Y = numpy.arange(CHUNK_SIZE).reshape((CHUNK_SIZE, 1, 1))


def default_noise():
    return noise.ScaledNoise(getattr(config, 'NOISE_SCALING_FACTOR', 64.0))


def generate_height_map(seed, column_origin, noise_fn=None, height_scale=None, height_offset=None):
    """ Terrain heights for the column whose (0, 0) tile is at the absolute
    coordinate `column_origin` (its y component is ignored).

    The noise is sampled once per horizontal cell, so the result is shared by
    every chunk stacked in the column.

    Parameters
    ----------
    seed : noise.Seed
    column_origin : tuple of 3 ints
    noise_fn : callable (seed, x, y) -> array, defaults to ScaledNoise

    Returns
    -------
    height_map : float64 array of shape (CHUNK_SIZE, CHUNK_SIZE), indexed [x, z]

    """
    if noise_fn is None:
        noise_fn = default_noise()
    if height_scale is None:
        height_scale = getattr(config, 'HEIGHT_SCALE', 16.0)
    if height_offset is None:
        height_offset = getattr(config, 'HEIGHT_OFFSET', 0.0)
    x, _, z = column_origin
    N = noise_fn(seed, COLUMN_X + x, COLUMN_Z + z)
    return numpy.asarray(N, dtype=numpy.float64) * height_scale + height_offset


def generate_chunk(chunk_pos, height_map, topsoil_depth=None):
    """ Build the chunk at chunk coordinate `chunk_pos` from its column's
    height map. Tiles below the surface are stone capped with `topsoil_depth`
    layers of grass; tiles at or above the surface are air.

    """
    height_map = numpy.asarray(height_map, dtype=numpy.float64)
    if height_map.shape != (CHUNK_SIZE, CHUNK_SIZE):
        raise ValueError(f'height map must have shape {(CHUNK_SIZE, CHUNK_SIZE)}, got {height_map.shape}')
    if topsoil_depth is None:
        topsoil_depth = getattr(config, 'TOPSOIL_DEPTH', 3)
    y = CHUNK_Y + chunk_pos[1] * CHUNK_SIZE
    h = height_map[numpy.newaxis, :, :]
    b = numpy.full((CHUNK_SIZE, CHUNK_SIZE, CHUNK_SIZE), AIR, dtype='u2')
    b[y < h] = GRASS
    b[y < h - topsoil_depth] = STONE
    return Chunk(b)


def generate_column(seed, column, y_range, noise_fn=None):
    """ Generate every chunk in `y_range` for the column at chunk coordinates
    `column` = (x, z), computing its height map only once.

    Returns a list of (chunk_pos, chunk) pairs in ascending y order.
    """
    t = time.perf_counter()
    cx, cz = column
    height_map = generate_height_map(seed, util.chunk_origin((cx, 0, cz)), noise_fn)
    chunks = []
    for cy in y_range:
        pos = (cx, cy, cz)
        chunks.append((pos, generate_chunk(pos, height_map)))
    logutil.log("MAPGEN", f"column {column} chunks={len(chunks)} ms={logutil.elapsed_ms(t):.2f}")
    return chunks
