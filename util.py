from config import CHUNK_SIZE, LOG2_OF_CHUNK_SIZE


def _check_coord(position):
    if len(position) != 3:
        raise ValueError(f"expected an (x, y, z) coordinate, got {position!r}")


def to_chunk_coord(position):
    """ Returns the coordinate of the chunk containing the absolute tile
    coordinate `position`.

    Uses an arithmetic right shift, which floors toward negative infinity, so
    tile -1 belongs to chunk -1 and not chunk 0.

    Parameters
    ----------
    position : tuple of 3 ints

    Returns
    -------
    chunk_position : tuple of 3 ints

    """
    _check_coord(position)
    x, y, z = position
    return (x >> LOG2_OF_CHUNK_SIZE, y >> LOG2_OF_CHUNK_SIZE, z >> LOG2_OF_CHUNK_SIZE)


def to_relative_coord(position):
    """ Returns the offset of the absolute tile coordinate `position` inside
    its chunk. Each component is in [0, CHUNK_SIZE).

    Parameters
    ----------
    position : tuple of 3 ints

    Returns
    -------
    relative_position : tuple of 3 ints

    """
    _check_coord(position)
    x, y, z = position
    return (
        ((x % CHUNK_SIZE) + CHUNK_SIZE) % CHUNK_SIZE,
        ((y % CHUNK_SIZE) + CHUNK_SIZE) % CHUNK_SIZE,
        ((z % CHUNK_SIZE) + CHUNK_SIZE) % CHUNK_SIZE,
    )


def to_absolute_coord(chunk_position, relative_position):
    """ Inverse of `to_chunk_coord` and `to_relative_coord`. """
    _check_coord(chunk_position)
    _check_coord(relative_position)
    return tuple(c * CHUNK_SIZE + r for c, r in zip(chunk_position, relative_position))


def chunk_origin(chunk_position):
    """ Absolute coordinate of the (0, 0, 0) tile of the chunk. """
    return to_absolute_coord(chunk_position, (0, 0, 0))
