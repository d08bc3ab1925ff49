# ruff: noqa: A005

import dataclasses
import enum
from collections.abc import Mapping
from decimal import Decimal
from typing import Any, Self

from eth_typing import ChecksumAddress
from hexbytes import HexBytes

from curvetx.exceptions import CurveTxTypeError, CurveTxValueError
from curvetx.functions import format_decimal_amount, get_checksum_address


@dataclasses.dataclass(slots=True, frozen=True, kw_only=True)
class ExplorerTransaction:
    """
    A transaction as reported by a block explorer. Only the fields needed to decode the call are
    kept.
    """

    hash: HexBytes
    timestamp: int
    receipt_status: int | None
    is_error: bool
    to: ChecksumAddress | None
    input: HexBytes
    value: int = 0

    @classmethod
    def from_explorer_record(cls, record: Mapping[str, Any]) -> Self:
        """
        Build from an Etherscan-style `txlist` record. All values in these records are strings,
        with an empty `to` for contract deployments and an empty `txreceipt_status` for
        transactions mined before receipts carried a status.
        """

        if not isinstance(record, Mapping):
            raise CurveTxTypeError(
                message=f"Explorer record must be a mapping, not {type(record).__name__}."
            )
        if missing_fields := [field for field in ("hash", "timeStamp") if not record.get(field)]:
            raise CurveTxValueError(
                message=f"Explorer record is missing {', '.join(missing_fields)}."
            )

        recipient = record.get("to")
        receipt_status = record.get("txreceipt_status")
        return cls(
            hash=HexBytes(record["hash"]),
            timestamp=int(record["timeStamp"]),
            receipt_status=int(receipt_status) if receipt_status not in (None, "") else None,
            is_error=str(record.get("isError", "0")) == "1",
            to=get_checksum_address(recipient) if recipient else None,
            input=HexBytes(record.get("input") or b""),
            value=int(record.get("value") or 0),
        )

    @property
    def succeeded(self) -> bool:
        return self.receipt_status == 1 and not self.is_error


@dataclasses.dataclass(slots=True, frozen=True)
class DecodedCall:
    fn_name: str
    args: Mapping[str, Any]


class TokenDirection(enum.Enum):
    ADD = "add"  # deposited into the pool by the caller
    REMOVE = "remove"  # withdrawn from the pool to the caller


class CurveTransactionType(enum.Enum):
    # Function names are matched by prefix, e.g. `remove_liquidity_one_coin` is REMOVE_LIQUIDITY
    REMOVE_LIQUIDITY = "remove_liquidity"
    ADD_LIQUIDITY = "add_liquidity"
    EXCHANGE = "exchange"

    @classmethod
    def from_function_name(cls, fn_name: str) -> "CurveTransactionType | None":
        for transaction_type in cls:
            if fn_name.startswith(transaction_type.value):
                return transaction_type
        return None


@dataclasses.dataclass(slots=True, frozen=True, kw_only=True)
class TokenLeg:
    symbol: str
    address: ChecksumAddress
    direction: TokenDirection
    # None if the quantity cannot be determined from the call arguments
    amount: Decimal | None = None

    def as_dict(self) -> dict[str, Any]:
        return {
            "symbol": self.symbol,
            "address": self.address,
            "amount": format_decimal_amount(self.amount) if self.amount is not None else None,
            "type": self.direction.value,
        }


@dataclasses.dataclass(slots=True, frozen=True, kw_only=True)
class CurveTransaction:
    hash: HexBytes
    pool: ChecksumAddress
    timestamp: int
    type: CurveTransactionType
    # None for pools holding coins without a common unit
    total_amount: Decimal | None
    tokens: tuple[TokenLeg, ...]

    def as_dict(self) -> dict[str, Any]:
        return {
            "hash": self.hash.to_0x_hex(),
            "pool": self.pool,
            "timestamp": self.timestamp,
            "type": self.type.value,
            "totalAmount": (
                format_decimal_amount(self.total_amount) if self.total_amount is not None else None
            ),
            "tokens": [token.as_dict() for token in self.tokens],
        }


@dataclasses.dataclass(slots=True, frozen=True)
class ParsedTransaction:
    decoded_call: DecodedCall | None = None
    transaction: CurveTransaction | None = None
