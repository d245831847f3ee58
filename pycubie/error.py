class ImpossibleScrambleException(Exception):
    """ Exception raised when the cube cannot be reached from the solved state """
    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

class InvalidTurnException(Exception):
    """ Exception raised when a move token cannot be parsed """
    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

class InvalidFaceletException(Exception):
    """ Exception raised when a facelet string does not describe a cube """
    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

class InvalidCubeException(Exception):
    """ Exception raised when a cubie-level description is malformed """
    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message
