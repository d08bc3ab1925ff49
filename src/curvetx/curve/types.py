# ruff: noqa: A005

import dataclasses
import enum

from eth_typing import ChecksumAddress

from curvetx.exceptions.pool import CoinIndexOutOfRange


class CurveAssetType(enum.Enum):
    """
    The asset class shared by the coins of a pool. Coins in an `UNKNOWN` pool do not share a common
    unit, so quantities of different coins cannot be added together.
    """

    USD = "usd"
    ETH = "eth"
    BTC = "btc"
    EUR = "eur"
    LINK = "link"
    CRYPTO = "crypto"
    OTHER = "other"
    UNKNOWN = "unknown"


@dataclasses.dataclass(slots=True, frozen=True)
class Coin:
    symbol: str
    address: ChecksumAddress
    decimals: int


@dataclasses.dataclass(slots=True, frozen=True, kw_only=True)
class CurvePool:
    address: ChecksumAddress
    coins: tuple[Coin, ...]
    asset_type: CurveAssetType = CurveAssetType.UNKNOWN
    name: str | None = None

    def __str__(self) -> str:
        return self.name if self.name is not None else self.address

    def get_coin(self, index: int) -> Coin:
        """
        Get the coin at the given position in the pool. Negative indices are rejected instead of
        counting from the end, since a pool contract never accepts them.
        """

        if not 0 <= index < len(self.coins):
            raise CoinIndexOutOfRange(pool=self.address, index=index)
        return self.coins[index]

    @property
    def has_comparable_coins(self) -> bool:
        return self.asset_type is not CurveAssetType.UNKNOWN
