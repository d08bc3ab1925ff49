from typing import Any

from curvetx.exceptions.base import CurveTxError

"""
Exceptions defined here are raised by classes and functions in the `transaction` module.
"""


class TransactionError(CurveTxError):
    """
    Exception raised inside transaction decoding helpers.
    """


class UnknownFunctionSignature(TransactionError):
    """
    The calldata selector does not match any function of the known pool interfaces.
    """

    def __init__(self, selector: str) -> None:
        self.selector = selector
        super().__init__(message=f"No function matches selector {selector}.")

    def __reduce__(self) -> tuple[Any, ...]:
        # Pickling will raise an exception if a reduction method is not defined
        return self.__class__, (self.selector,)


class CalldataDecodingError(TransactionError):
    """
    The calldata matched a known function, but its arguments could not be decoded.
    """

    def __init__(self, fn_name: str) -> None:
        self.fn_name = fn_name
        super().__init__(message=f"Could not decode the arguments for {fn_name}.")

    def __reduce__(self) -> tuple[Any, ...]:
        # Pickling will raise an exception if a reduction method is not defined
        return self.__class__, (self.fn_name,)


class MissingCallArgument(TransactionError):
    """
    None of the known aliases for an argument are present in the decoded call.
    """

    def __init__(self, fn_name: str, argument: str) -> None:
        self.fn_name = fn_name
        self.argument = argument
        super().__init__(message=f"Call to {fn_name} has no value for argument '{argument}'.")

    def __reduce__(self) -> tuple[Any, ...]:
        # Pickling will raise an exception if a reduction method is not defined
        return self.__class__, (self.fn_name, self.argument)
