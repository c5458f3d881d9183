from .errors import EcError, NotOnCurveError, DegenerateModulusError, NoQuadraticNonResidueError, \
    UnmappableByteError, CodeTableError, OrderNotFoundError
from .modular import mod_inv, sqrt_mod_p, find_non_residue, is_quadratic_residue
from .sampler import random_scalar
from .point import Point, PointAtInfinity, INFINITY
from .order import NaiveOrder, KnownOrder, prime_factors
from .curve import Curve
from .curves import CURVES, get_curve, curve_from_param
