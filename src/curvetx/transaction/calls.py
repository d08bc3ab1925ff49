import enum
from typing import Any

from curvetx.exceptions.transaction import MissingCallArgument
from curvetx.transaction.types import DecodedCall


class CallKind(enum.Enum):
    """
    The pool functions with a known argument layout.
    """

    ADD_LIQUIDITY = "add_liquidity"
    REMOVE_LIQUIDITY = "remove_liquidity"
    REMOVE_LIQUIDITY_IMBALANCE = "remove_liquidity_imbalance"
    REMOVE_LIQUIDITY_ONE_COIN = "remove_liquidity_one_coin"
    EXCHANGE = "exchange"
    EXCHANGE_UNDERLYING = "exchange_underlying"
    UNRECOGNIZED = ""

    @classmethod
    def from_function_name(cls, fn_name: str) -> "CallKind":
        try:
            return cls(fn_name)
        except ValueError:
            return cls.UNRECOGNIZED


# Argument names vary between pool templates and versions. Each logical argument maps to the names
# used by the known templates, listed in lookup priority.
ARGUMENT_ALIASES: dict[CallKind, dict[str, tuple[str, ...]]] = {
    CallKind.ADD_LIQUIDITY: {
        "amounts": ("_amounts", "amounts", "uamounts"),
    },
    CallKind.REMOVE_LIQUIDITY: {
        "burn_amount": ("_amount", "_burn_amount"),
    },
    CallKind.REMOVE_LIQUIDITY_IMBALANCE: {
        "amounts": ("_amounts", "amounts"),
    },
    CallKind.REMOVE_LIQUIDITY_ONE_COIN: {
        "burn_amount": ("_token_amount", "token_amount", "_burn_amount"),
        "coin_index": ("i",),
    },
    CallKind.EXCHANGE: {
        "coin_index_in": ("i",),
        "coin_index_out": ("j",),
        "amount_in": ("dx", "_dx"),
    },
}


def get_call_argument(call: DecodedCall, kind: CallKind, argument: str) -> Any:
    """
    Look up a logical argument of a decoded call, returning the value of the first alias found.
    """

    for alias in ARGUMENT_ALIASES[kind][argument]:
        if (value := call.args.get(alias)) is not None:
            return value

    raise MissingCallArgument(fn_name=call.fn_name, argument=argument)
