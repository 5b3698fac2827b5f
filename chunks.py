import numpy

from config import CHUNK_SIZE
from tiles import Tile, AIR, TILE_TYPES, TILE_VIRTUAL

CHUNK_SHAPE = (CHUNK_SIZE, CHUNK_SIZE, CHUNK_SIZE)


def _check_storable(tile_id):
    if TILE_VIRTUAL[tile_id]:
        raise ValueError(f'tile {TILE_TYPES[tile_id].name!r} cannot be stored in a chunk')


class Chunk(object):
    '''
    Fixed size cube of tile ids, stored in (y, x, z) order.
    '''
    def __init__(self, tiles=None):
        if tiles is None:
            tiles = numpy.full(CHUNK_SHAPE, AIR, dtype='u2')
        tiles = numpy.asarray(tiles)
        if tiles.shape != CHUNK_SHAPE:
            raise ValueError(f'chunk tiles must have shape {CHUNK_SHAPE}, got {tiles.shape}')
        if not numpy.issubdtype(tiles.dtype, numpy.integer):
            raise ValueError(f'chunk tiles must be integer tile ids, got dtype {tiles.dtype}')
        lo = int(tiles.min())
        hi = int(tiles.max())
        if lo < 0 or hi >= len(TILE_TYPES):
            raise ValueError(f'chunk contains unknown tile ids in [{lo}, {hi}]')
        if TILE_VIRTUAL[tiles].any():
            raise ValueError('chunk contains tiles that cannot be stored')
        self.tiles = tiles.astype('u2', copy=False)

    def __getitem__(self, position):
        """
        returns the Tile at the relative (y, x, z) coordinate `position`
        """
        y, x, z = position
        return Tile(self.tiles[y, x, z])

    def __setitem__(self, position, tile):
        y, x, z = position
        if not isinstance(tile, Tile):
            tile = Tile(tile)
        _check_storable(tile.id)
        self.tiles[y, x, z] = tile.id

    def __eq__(self, other):
        return isinstance(other, Chunk) and numpy.array_equal(self.tiles, other.tiles)

    def copy(self):
        return Chunk(self.tiles.copy())

    def count(self, tile_id):
        return int(numpy.count_nonzero(self.tiles == tile_id))
