'''
main.py -- generate an area around the origin and print a top-down surface map

usage: python main.py [seed] [radius] [workers]
'''
import sys

import config
import logutil
from area import Area
from config import CHUNK_SIZE
from tiles import TILE_ID


def format_surface_map(area, radius):
    """
    One hex cell per tile column across the generated area, rows along z.
    Cells with no solid tile are shown as '--'.
    """
    lines = []
    span = range(-radius * CHUNK_SIZE, radius * CHUNK_SIZE)
    for z in span:
        row = []
        for x in span:
            h = area.surface_height(x, z)
            if h is None:
                row.append("--")
            else:
                row.append(f"{h & 0xFF:02X}")
        lines.append(" ".join(row))
    return "\n".join(lines)


def summarize(area):
    counts = dict.fromkeys(TILE_ID, 0)
    for pos in area.positions():
        chunk = area.get_chunk(pos)
        for name, tile_id in TILE_ID.items():
            counts[name] += chunk.count(tile_id)
    return counts


def parse_args(argv):
    seed = config.DEFAULT_SEED
    radius = config.INITIAL_RADIUS
    workers = config.GEN_WORKERS
    try:
        if len(argv) > 1:
            seed = int(argv[1])
        if len(argv) > 2:
            radius = int(argv[2])
        if len(argv) > 3:
            workers = int(argv[3])
    except ValueError:
        raise SystemExit(__doc__.strip().splitlines()[-1])
    return seed, radius, workers


def main(argv=None):
    if argv is None:
        argv = sys.argv
    seed, radius, workers = parse_args(argv)
    try:
        area = Area(seed, radius, workers=workers)
    except ValueError as e:
        logutil.log("MAIN", str(e), level="ERROR")
        return 2
    for name, n in summarize(area).items():
        logutil.log("MAIN", f"{name}: {n}")
    print(format_surface_map(area, radius))
    return 0


if __name__ == '__main__':
    sys.exit(main())
