from .config import settings
from .functions import get_checksum_address
from .logging import logger
from .version import __version__

# isort: split

from .curve import Coin, CurveAssetType, CurvePool, CurvePoolRegistry, load_pool_catalog
from .transaction import (
    CurveTransaction,
    CurveTransactionType,
    DecodedCall,
    ExplorerTransaction,
    ParsedTransaction,
    TokenDirection,
    TokenLeg,
    Web3CallDecoder,
    parse_transaction,
    parse_transactions,
)

__all__ = (
    "Coin",
    "CurveAssetType",
    "CurvePool",
    "CurvePoolRegistry",
    "CurveTransaction",
    "CurveTransactionType",
    "DecodedCall",
    "ExplorerTransaction",
    "ParsedTransaction",
    "TokenDirection",
    "TokenLeg",
    "Web3CallDecoder",
    "__version__",
    "cli",
    "constants",
    "curve",
    "exceptions",
    "functions",
    "get_checksum_address",
    "load_pool_catalog",
    "logger",
    "parse_transaction",
    "parse_transactions",
    "settings",
    "transaction",
)
