import logging
from typing import Never


class FatalVectorException(Exception):
    """A broken precondition or an unrepresentable size request.

    Never caught inside the package: the vector may be half-updated once one
    of these is raised.
    """

    message: str

    def __init__(self, message: str):
        self.message = message
        super().__init__(f"bytevector internal error: {message}")


class IntegerOverflowException(FatalVectorException):
    pass


class IntegerUnderflowException(FatalVectorException):
    pass


class OutOfMemoryException(FatalVectorException):
    pass


def fail(exception: FatalVectorException) -> Never:
    logging.critical(str(exception))
    raise exception
