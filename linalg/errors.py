class MatrixError(ArithmeticError):
    """Base class for recoverable matrix failures."""


class DimensionMismatchError(MatrixError):
    pass


class SubmatrixError(MatrixError):
    pass


class NotInvertibleError(MatrixError):
    pass


class NonSquareMatrixError(NotInvertibleError):
    pass
