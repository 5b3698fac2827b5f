import numpy


class TileType(object):
    name = None
    # Solid tiles are terrain; everything else can be walked or seen through.
    solid = False
    # True for tiles that only exist as query results and are never stored in a chunk.
    virtual = False


class Air(TileType):
    name = 'Air'


class Stone(TileType):
    name = 'Stone'
    solid = True


class Grass(TileType):
    name = 'Grass'
    solid = True


class OutOfBounds(TileType):
    name = 'Out Of Bounds'
    virtual = True


# Tile ids index into this list; Air must stay at 0 so zeroed volumes are empty.
TILE_TYPES = [Air(), Stone(), Grass(), OutOfBounds()]

TILE_ID = {}
for i, t in enumerate(TILE_TYPES):
    TILE_ID[t.name] = i

TILE_NAMES = [t.name for t in TILE_TYPES]
TILE_SOLID = numpy.array([t.solid for t in TILE_TYPES], dtype=bool)
TILE_VIRTUAL = numpy.array([t.virtual for t in TILE_TYPES], dtype=bool)

AIR = TILE_ID['Air']
STONE = TILE_ID['Stone']
GRASS = TILE_ID['Grass']
OUT_OF_BOUNDS = TILE_ID['Out Of Bounds']


class Tile(object):
    '''
    A single classified cell. Tiles are small values: equal ids compare equal
    and a Tile never refers back to the chunk it was read from.
    '''
    __slots__ = ('id',)

    def __init__(self, tile_id):
        if isinstance(tile_id, bool) or not isinstance(tile_id, (int, numpy.integer)):
            raise ValueError(f'tile id must be an integer, got {tile_id!r}')
        tile_id = int(tile_id)
        if not 0 <= tile_id < len(TILE_TYPES):
            raise ValueError(f'unknown tile id {tile_id}')
        self.id = tile_id

    @property
    def type(self):
        return TILE_TYPES[self.id]

    @property
    def name(self):
        return TILE_NAMES[self.id]

    @property
    def solid(self):
        return bool(TILE_SOLID[self.id])

    @property
    def out_of_bounds(self):
        return self.id == OUT_OF_BOUNDS

    def __eq__(self, other):
        return isinstance(other, Tile) and other.id == self.id

    def __hash__(self):
        return hash(('Tile', self.id))

    def __repr__(self):
        return f'Tile({self.name})'
