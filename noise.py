#
# 2D simplex noise, vectorised with numpy.
#
# Based on example code by Stefan Gustavson (stegu@itn.liu.se).
# Optimisations by Peter Eastman (peastman@drizzle.stanford.edu).
# Better rank ordering method by Stefan Gustavson in 2012.
#
# The original code was placed in the public domain by its author,
# Stefan Gustavson. You may use it as you see fit, but
# attribution is appreciated.
#
#
import numpy

import config


grad3 = numpy.array([(1,1,0),(-1,1,0),(1,-1,0),(-1,-1,0),
                     (1,0,1),(-1,0,1),(1,0,-1),(-1,0,-1),
                     (0,1,1),(0,-1,1),(0,1,-1),(0,-1,-1)], dtype=numpy.float64)

#Skewing and unskewing factors for 2 dimensions
F2 = 0.5*(3.0**0.5-1.0)
G2 = (3.0-3.0**0.5)/6.0


class Seed(object):
    '''
    Permutation table derived from an integer world seed. Any int is accepted;
    the same int always yields the same table.
    '''
    def __init__(self, value):
        self.value = int(value)
        # fold negatives onto odd numbers so every int maps to a distinct entropy value
        entropy = self.value * 2 if self.value >= 0 else -self.value * 2 - 1
        rng = numpy.random.default_rng(numpy.random.SeedSequence(entropy))
        p = rng.permutation(256)
        # To remove the need for index wrapping, double the permutation table length
        self.perm = p[numpy.arange(512) & 255]
        self.perm_mod12 = self.perm % 12

    def __eq__(self, other):
        return isinstance(other, Seed) and other.value == self.value

    def __hash__(self):
        return hash(('Seed', self.value))

    def __repr__(self):
        return f'Seed({self.value})'


# returns floor of floating point array by coercing to integer
def fastfloor(x):
    return numpy.floor(x).astype(numpy.int64)


def _corner(t, g, x, y):
    t = numpy.maximum(t, 0.0)
    return t * t * t * t * (g[..., 0]*x + g[..., 1]*y)


def simplex2(seed, xin, yin):
    """
    2D simplex noise in [-1, 1] at (xin, yin). `xin` and `yin` may be scalars
    or numpy arrays of the same shape; the result has that shape.
    """
    xin = numpy.asarray(xin, dtype=numpy.float64)
    yin = numpy.asarray(yin, dtype=numpy.float64)
    perm = seed.perm
    perm_mod12 = seed.perm_mod12
    # Skew the input space to determine which simplex cell we're in
    s = (xin+yin)*F2
    i = fastfloor(xin+s)
    j = fastfloor(yin+s)
    t = (i+j)*G2
    x0 = xin-(i-t) # The x,y distances from the unskewed cell origin
    y0 = yin-(j-t)
    # Lower triangle, XY order: (0,0)->(1,0)->(1,1)
    # upper triangle, YX order: (0,0)->(0,1)->(1,1)
    i1 = (x0 > y0).astype(numpy.int64)
    j1 = 1 - i1
    x1 = x0 - i1 + G2 # Offsets for middle corner
    y1 = y0 - j1 + G2
    x2 = x0 - 1.0 + 2.0*G2 # Offsets for last corner
    y2 = y0 - 1.0 + 2.0*G2

    # Hashed gradient indices of the three simplex corners
    ii = i & 255
    jj = j & 255
    gi0 = perm_mod12[ii+perm[jj]]
    gi1 = perm_mod12[ii+i1+perm[jj+j1]]
    gi2 = perm_mod12[ii+1+perm[jj+1]]

    n0 = _corner(0.5 - x0*x0 - y0*y0, grad3[gi0], x0, y0)
    n1 = _corner(0.5 - x1*x1 - y1*y1, grad3[gi1], x1, y1)
    n2 = _corner(0.5 - x2*x2 - y2*y2, grad3[gi2], x2, y2)

    # The result is scaled to return values in the interval [-1,1].
    return 70.0 * (n0 + n1 + n2)


def sample(seed, point):
    '''Scalar noise value at the 2D `point`.'''
    x, y = point
    return float(simplex2(seed, x, y))


class ScaledNoise(object):
    '''
    Wraps `simplex2` so that both input coordinates are divided by `scale`
    before sampling. Larger scales give broader terrain features.
    '''
    def __init__(self, scale=None, noise_fn=simplex2):
        if scale is None:
            scale = getattr(config, 'NOISE_SCALING_FACTOR', 64.0)
        if scale <= 0:
            raise ValueError(f'noise scale must be positive, got {scale}')
        self.scale = float(scale)
        self.noise_fn = noise_fn

    def __call__(self, seed, x, y):
        x = numpy.asarray(x, dtype=numpy.float64)
        y = numpy.asarray(y, dtype=numpy.float64)
        return self.noise_fn(seed, x / self.scale, y / self.scale)

    def __repr__(self):
        return f'ScaledNoise(scale={self.scale})'
