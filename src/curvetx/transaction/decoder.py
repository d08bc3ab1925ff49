from collections.abc import Iterable
from typing import Any, Protocol

from eth_abi.exceptions import DecodingError
from eth_utils import function_abi_to_4byte_selector
from hexbytes import HexBytes
from web3 import Web3
from web3.exceptions import Web3Exception

from curvetx.curve.abi import DEFAULT_POOL_ABIS
from curvetx.exceptions import CurveTxValueError
from curvetx.exceptions.transaction import CalldataDecodingError, UnknownFunctionSignature
from curvetx.transaction.types import DecodedCall

SELECTOR_LENGTH = 4


class CallDecoder(Protocol):
    """
    Decodes transaction calldata into a function name and named arguments.

    Implementations raise `UnknownFunctionSignature` if the calldata does not match a function of
    the interface. Any other exception is treated as a decoding failure.
    """

    def decode_call(self, calldata: bytes | str, value: int = 0) -> DecodedCall: ...


class Web3CallDecoder:
    """
    Decode pool calldata using one or more contract ABIs. The ABIs are checked in order and the
    first one defining a function with the calldata selector is used.
    """

    def __init__(self, abis: Iterable[list[Any]] = DEFAULT_POOL_ABIS) -> None:
        self._interfaces = []
        for abi in abis:
            function_names = {
                bytes(function_abi_to_4byte_selector(entry)): entry["name"]
                for entry in abi
                if entry.get("type") == "function"
            }
            self._interfaces.append((function_names, Web3().eth.contract(abi=abi)))

        if not self._interfaces:
            raise CurveTxValueError(message="At least one ABI must be provided.")

    def decode_call(self, calldata: bytes | str, value: int = 0) -> DecodedCall:  # noqa: ARG002
        calldata = HexBytes(calldata)
        selector = bytes(calldata[:SELECTOR_LENGTH])

        for function_names, contract in self._interfaces:
            if (fn_name := function_names.get(selector)) is None:
                continue

            try:
                func, func_args = contract.decode_function_input(calldata)
            except (DecodingError, Web3Exception, ValueError) as exc:
                raise CalldataDecodingError(fn_name=fn_name) from exc

            return DecodedCall(
                fn_name=func.fn_name,
                args=dict(func_args),
            )

        raise UnknownFunctionSignature(selector=HexBytes(selector).to_0x_hex())
