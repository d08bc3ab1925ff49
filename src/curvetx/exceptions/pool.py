from typing import Any

from curvetx.exceptions.base import CurveTxError

"""
Exceptions defined here are raised by classes and functions in the `curve` module.
"""


class PoolError(CurveTxError):
    """
    Exception raised inside pool metadata helpers.
    """


class CoinIndexOutOfRange(PoolError):
    """
    A call refers to a coin index that the pool metadata does not hold.
    """

    def __init__(self, pool: str, index: int) -> None:
        self.pool = pool
        self.index = index
        super().__init__(message=f"Pool {pool} has no coin at index {index}.")

    def __reduce__(self) -> tuple[Any, ...]:
        # Pickling will raise an exception if a reduction method is not defined
        return self.__class__, (self.pool, self.index)


class InvalidPoolCatalog(PoolError):
    """
    Raised when a pool catalog file cannot be read or fails validation.
    """
