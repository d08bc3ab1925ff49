import decimal
import functools
from collections.abc import Iterable
from decimal import Decimal

from cchecksum import to_checksum_address
from eth_typing import ChecksumAddress, HexAddress

from curvetx.constants import DECIMAL_CONTEXT
from curvetx.exceptions import CurveTxValueError


@functools.lru_cache(maxsize=512)
def get_checksum_address(address: HexAddress | bytes | str) -> ChecksumAddress:
    return to_checksum_address(address)


def to_decimal_units(raw_amount: int, decimals: int) -> Decimal:
    """
    Convert an integer token quantity to a decimal quantity using the token's precision, e.g.
    1_500_000 with 6 decimals becomes Decimal("1.5").

    The conversion is exact for any 256-bit amount.
    """

    if decimals < 0:
        raise CurveTxValueError(message=f"Invalid decimal precision {decimals}.")

    return Decimal(int(raw_amount)).scaleb(-decimals, context=DECIMAL_CONTEXT)


def sum_decimal_amounts(amounts: Iterable[Decimal]) -> Decimal:
    with decimal.localcontext(DECIMAL_CONTEXT):
        return sum(amounts, start=Decimal(0))


def format_decimal_amount(amount: Decimal) -> str:
    """
    Format a decimal quantity in fixed-point notation without trailing zeros, e.g.
    Decimal("2.500000") becomes "2.5" and Decimal("1E-18") becomes "0.000000000000000001".
    """

    if amount.is_zero():
        return "0"
    return format(amount.normalize(context=DECIMAL_CONTEXT), "f")
