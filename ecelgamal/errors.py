"""
exceptions raised by the curve engine
"""


class EcError(Exception):
    pass


class NotOnCurveError(EcError, ValueError):
    """x has no y on the curve, or a point does not satisfy the equation"""


class DegenerateModulusError(EcError, ValueError):
    """even modulus passed to the square root routine"""


class NoQuadraticNonResidueError(EcError, ArithmeticError):
    """no quadratic non-residue found, the modulus is not a usable prime"""


class UnmappableByteError(EcError, LookupError):

    def __init__(self, point):
        self.point = point
        super().__init__("the point " + str(point) + " does not have an associated byte")


class CodeTableError(EcError, ValueError):
    pass


class OrderNotFoundError(EcError, ArithmeticError):
    pass
