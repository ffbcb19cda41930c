"""
Exceptions raised by the coordinate transforms.

Invalid parameters raise the built-in `ValueError`; this module only
holds the failure modes that have no built-in counterpart.
"""


class ConvergenceError(ArithmeticError):
    """An iterative conversion did not settle within its iteration cap.

    Attributes
    ----------
    iterations : int
        Number of iterations performed before giving up.
    residual : float
        Size of the last update, in radians.
    """

    def __init__(self, message: str, iterations: int, residual: float):
        # All constructor arguments go into args so the error survives pickling
        super().__init__(message, iterations, residual)
        self.message = message
        self.iterations = iterations
        self.residual = residual

    def __str__(self) -> str:
        return self.message
