from curvetx.exceptions.base import CurveTxError, CurveTxTypeError, CurveTxValueError

from . import (
    pool,
    transaction,
)

__all__ = (
    "CurveTxError",
    "CurveTxTypeError",
    "CurveTxValueError",
    "pool",
    "transaction",
)
