class HullError(Exception):
    pass


class PreconditionError(HullError, ValueError):
    """The caller handed in points the algorithm is not defined for."""


class EmptyInputError(PreconditionError):
    def __init__(self):
        super().__init__("a hull needs at least one point")


class DuplicateXCoordinateError(PreconditionError):
    def __init__(self, first, second):
        self.first = first
        self.second = second
        super().__init__(f"points {first} and {second} share x={first.x}")


class HullComputationError(HullError):
    pass
