from .calls import ARGUMENT_ALIASES, CallKind, get_call_argument
from .curve_transaction import parse_transaction, parse_transactions
from .decoder import CallDecoder, Web3CallDecoder
from .types import (
    CurveTransaction,
    CurveTransactionType,
    DecodedCall,
    ExplorerTransaction,
    ParsedTransaction,
    TokenDirection,
    TokenLeg,
)

__all__ = (
    "ARGUMENT_ALIASES",
    "CallDecoder",
    "CallKind",
    "CurveTransaction",
    "CurveTransactionType",
    "DecodedCall",
    "ExplorerTransaction",
    "ParsedTransaction",
    "TokenDirection",
    "TokenLeg",
    "Web3CallDecoder",
    "get_call_argument",
    "parse_transaction",
    "parse_transactions",
)
