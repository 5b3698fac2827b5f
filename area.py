'''
area.py -- owns the generated chunks of a world and answers tile queries
'''

# standard library imports
import time
import concurrent.futures

import numpy

# local imports
import config
import logutil
import mapgen
import noise
from config import CHUNK_SIZE
from tiles import Tile, OUT_OF_BOUNDS, TILE_SOLID
from util import to_chunk_coord, to_relative_coord


def check_seed(rng_seed):
    """
    Returns `rng_seed` as an int. Any integer is a valid seed; other types
    raise ValueError rather than being coerced.
    """
    if isinstance(rng_seed, bool) or not isinstance(rng_seed, (int, numpy.integer)):
        raise ValueError(f'seed must be an integer, got {rng_seed!r}')
    return int(rng_seed)


def check_radius(initial_radius):
    """
    Returns `initial_radius` as an int, or raises ValueError when it cannot be
    used as a symmetric signed range around the origin.
    """
    if isinstance(initial_radius, bool) or not isinstance(initial_radius, (int, numpy.integer)):
        raise ValueError(f'initial radius must be an integer, got {initial_radius!r}')
    initial_radius = int(initial_radius)
    max_radius = getattr(config, 'MAX_RADIUS', 2**31 - 1)
    if not 0 <= initial_radius <= max_radius:
        raise ValueError(f'initial radius must be in [0, {max_radius}], got {initial_radius}')
    return initial_radius


class Area(object):
    def __init__(self, rng_seed, initial_radius, noise_fn=None, workers=None):
        initial_radius = check_radius(initial_radius)
        self.rng_seed = check_seed(rng_seed)
        self.chunks = {}
        # chunk y values stored for each (x, z) column
        self.columns = {}
        self.seed = noise.Seed(self.rng_seed)
        self.noise_fn = noise_fn if noise_fn is not None else mapgen.default_noise()
        if workers is None:
            workers = getattr(config, 'GEN_WORKERS', 1)
        self.generate(initial_radius, workers)

    def generate(self, radius, workers=1):
        """
        Generate every chunk with x, y and z in [-radius, radius). Height maps
        are built once per (x, z) column and shared by all chunks stacked in it.
        """
        t = time.perf_counter()
        r = range(-radius, radius)
        columns = [(x, z) for z in r for x in r]
        logutil.log("AREA", f"generating seed={self.rng_seed} radius={radius} columns={len(columns)} workers={workers}")
        if workers > 1 and len(columns) > 1:
            with concurrent.futures.ThreadPoolExecutor(max_workers=workers) as executor:
                futures = [executor.submit(mapgen.generate_column, self.seed, column, r, self.noise_fn)
                           for column in columns]
                # insert in submission order so the store matches a serial run
                for future in futures:
                    for pos, chunk in future.result():
                        self.add_chunk(pos, chunk)
        else:
            for column in columns:
                for pos, chunk in mapgen.generate_column(self.seed, column, r, self.noise_fn):
                    self.add_chunk(pos, chunk)
        logutil.log("AREA", f"generated chunks={len(self.chunks)} ms={logutil.elapsed_ms(t):.2f}")

    def add_chunk(self, position, chunk):
        position = tuple(position)
        self.chunks[position] = chunk
        x, y, z = position
        self.columns.setdefault((x, z), set()).add(y)

    def get_chunk(self, position):
        return self.chunks.get(tuple(position))

    def get_tile(self, position):
        """
        retrieves the tile at the absolute (x,y,z) coordinate tuple `position`.
        Positions in chunks that were never generated are out of bounds.
        """
        chunk = self.get_chunk(to_chunk_coord(position))
        if chunk is None:
            return Tile(OUT_OF_BOUNDS)
        rx, ry, rz = to_relative_coord(position)
        return chunk[ry, rx, rz]

    def surface_height(self, x, z):
        """
        Return the absolute y of the highest solid tile at column (x, z), or
        None if no generated chunk in that column holds a solid tile.
        """
        cx, _, cz = to_chunk_coord((x, 0, z))
        rx, _, rz = to_relative_coord((x, 0, z))
        ys = sorted(self.columns.get((cx, cz), ()), reverse=True)
        for cy in ys:
            solid = TILE_SOLID[self.chunks[(cx, cy, cz)].tiles[:, rx, rz]]
            if solid.any():
                top = CHUNK_SIZE - 1 - int(numpy.argmax(solid[::-1]))
                return cy * CHUNK_SIZE + top
        return None

    def positions(self):
        return sorted(self.chunks)

    def __contains__(self, position):
        return tuple(position) in self.chunks

    def __len__(self):
        return len(self.chunks)
