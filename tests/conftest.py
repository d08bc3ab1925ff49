import logging
from collections.abc import Callable
from typing import Any

import pytest
from hexbytes import HexBytes

from curvetx.curve.types import Coin, CurveAssetType, CurvePool
from curvetx.logging import logger
from curvetx.transaction.types import DecodedCall, ExplorerTransaction

THREEPOOL_ADDRESS = "0xbEbc44782C7dB0a1A60Cb6fe97d0b483032FF1C7"
TRICRYPTO_ADDRESS = "0xD51a44d3FaE010294C616388b506AcdA1bfAAE46"

DAI = Coin(symbol="DAI", address="0x6B175474E89094C44Da98b954EedeAC495271d0F", decimals=18)
USDC = Coin(symbol="USDC", address="0xA0b86991c6218b36c1d19D4a2e9Eb0cE3606eB48", decimals=6)
USDT = Coin(symbol="USDT", address="0xdAC17F958D2ee523a2206206994597C13D831ec7", decimals=6)
WBTC = Coin(symbol="WBTC", address="0x2260FAC5E5542a773Aa44fBCfeDf7C193bc2C599", decimals=8)
WETH = Coin(symbol="WETH", address="0xC02aaA39b223FE8D0A0e5C4F27eAD9083C756Cc2", decimals=18)


class StaticCallDecoder:
    """
    A decoder returning a fixed call, or raising a fixed exception, that counts how often it was
    used.
    """

    def __init__(
        self,
        call: DecodedCall | None = None,
        exception: Exception | None = None,
    ) -> None:
        self.call = call
        self.exception = exception
        self.decode_count = 0

    def decode_call(self, calldata: bytes | str, value: int = 0) -> DecodedCall:  # noqa: ARG002
        self.decode_count += 1
        if self.exception is not None:
            raise self.exception
        assert self.call is not None
        return self.call


@pytest.fixture(scope="session", autouse=True)
def _set_curvetx_logging():
    """
    Set the logging level to DEBUG for the test run
    """
    logger.setLevel(logging.DEBUG)


@pytest.fixture
def threepool() -> CurvePool:
    return CurvePool(
        address=THREEPOOL_ADDRESS,
        name="3pool",
        coins=(DAI, USDC, USDT),
        asset_type=CurveAssetType.USD,
    )


@pytest.fixture
def tricrypto() -> CurvePool:
    return CurvePool(
        address=TRICRYPTO_ADDRESS,
        name="tricrypto2",
        coins=(USDT, WBTC, WETH),
        asset_type=CurveAssetType.UNKNOWN,
    )


@pytest.fixture
def make_tx() -> Callable[..., ExplorerTransaction]:
    def _make_tx(**overrides: Any) -> ExplorerTransaction:
        tx_params: dict[str, Any] = dict(
            hash=HexBytes("0x49924bef8541e1d68a015db989083b27b0f879d73854b0ed5531270ad534750d"),
            timestamp=1688175547,
            receipt_status=1,
            is_error=False,
            to=THREEPOOL_ADDRESS,
            input=HexBytes("0x4515cef3"),
            value=0,
        )
        tx_params.update(overrides)
        return ExplorerTransaction(**tx_params)

    return _make_tx


@pytest.fixture
def make_decoder() -> Callable[..., StaticCallDecoder]:
    def _make_decoder(
        fn_name: str | None = None,
        exception: Exception | None = None,
        **args: Any,
    ) -> StaticCallDecoder:
        call = DecodedCall(fn_name=fn_name, args=args) if fn_name is not None else None
        return StaticCallDecoder(call=call, exception=exception)

    return _make_decoder
