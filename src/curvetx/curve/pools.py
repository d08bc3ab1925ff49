import tomllib
from collections.abc import Iterator
from pathlib import Path
from typing import Annotated, Any

import pydantic
import pydantic_core
from eth_typing import ChecksumAddress
from pydantic import AfterValidator, BaseModel

from curvetx.curve.types import Coin, CurveAssetType, CurvePool
from curvetx.exceptions import CurveTxValueError
from curvetx.exceptions.pool import InvalidPoolCatalog
from curvetx.functions import get_checksum_address
from curvetx.logging import logger
from curvetx.transaction.decoder import CallDecoder, Web3CallDecoder

Address = Annotated[str, AfterValidator(lambda address: get_checksum_address(address))]


class CoinRecord(BaseModel):
    symbol: str
    address: Address
    decimals: pydantic.NonNegativeInt


class PoolRecord(BaseModel):
    address: Address
    name: str | None = None
    asset_type: CurveAssetType = CurveAssetType.UNKNOWN
    abi: Path | None = None
    coins: list[CoinRecord]

    def to_pool(self) -> CurvePool:
        return CurvePool(
            address=self.address,
            name=self.name,
            asset_type=self.asset_type,
            coins=tuple(
                Coin(
                    symbol=coin.symbol,
                    address=coin.address,
                    decimals=coin.decimals,
                )
                for coin in self.coins
            ),
        )


class PoolCatalog(BaseModel):
    pools: list[PoolRecord] = pydantic.Field(default_factory=list)


class CurvePoolRegistry:
    """
    A collection of Curve pools and the decoders used for transactions sent to them, keyed by pool
    address.
    """

    def __init__(self, default_decoder: CallDecoder | None = None) -> None:
        self._pools: dict[ChecksumAddress, CurvePool] = {}
        self._decoders: dict[ChecksumAddress, CallDecoder] = {}
        self._default_decoder = default_decoder

    def __len__(self) -> int:
        return len(self._pools)

    def __iter__(self) -> Iterator[CurvePool]:
        return iter(self._pools.values())

    def __contains__(self, address: str) -> bool:
        return get_checksum_address(address) in self._pools

    @property
    def default_decoder(self) -> CallDecoder:
        # Building contracts for the bundled ABIs is deferred until a decoder is needed
        if self._default_decoder is None:
            self._default_decoder = Web3CallDecoder()
        return self._default_decoder

    def add(self, pool: CurvePool, decoder: CallDecoder | None = None) -> None:
        pool_address = get_checksum_address(pool.address)
        if pool_address in self._pools:
            raise CurveTxValueError(message=f"Pool {pool_address} is already registered.")

        self._pools[pool_address] = pool
        if decoder is not None:
            self._decoders[pool_address] = decoder

    def get(self, address: str) -> CurvePool | None:
        return self._pools.get(get_checksum_address(address))

    def get_decoder(self, address: str) -> CallDecoder:
        return self._decoders.get(get_checksum_address(address), self.default_decoder)


def _load_abi(path: Path) -> list[Any]:
    abi = pydantic_core.from_json(path.read_bytes())
    # Build artifacts wrap the ABI with the bytecode and other metadata
    if isinstance(abi, dict):
        abi = abi["abi"]
    return abi


def load_pool_catalog(path: Path) -> CurvePoolRegistry:
    """
    Load a TOML pool catalog. Each `[[pools]]` table describes one pool and its coins, in the
    order used by the pool contract:

    ```
    [[pools]]
    address = "0xbEbc44782C7dB0a1A60Cb6fe97d0b483032FF1C7"
    name = "3pool"
    asset_type = "usd"

    [[pools.coins]]
    symbol = "DAI"
    address = "0x6B175474E89094C44Da98b954EedeAC495271d0F"
    decimals = 18
    ...
    ```

    A pool may set `abi` to the path of a JSON ABI file, resolved relative to the catalog. Pools
    without one are decoded with the bundled Curve pool ABIs.
    """

    try:
        catalog = PoolCatalog.model_validate(tomllib.loads(path.read_text()))
    except (OSError, tomllib.TOMLDecodeError, pydantic.ValidationError) as exc:
        raise InvalidPoolCatalog(message=f"Could not load pool catalog {path}: {exc}") from exc

    registry = CurvePoolRegistry()
    for record in catalog.pools:
        decoder = None
        if record.abi is not None:
            abi_path = record.abi if record.abi.is_absolute() else path.parent / record.abi
            try:
                decoder = Web3CallDecoder(abis=[_load_abi(abi_path)])
            except (OSError, ValueError, KeyError) as exc:
                raise InvalidPoolCatalog(
                    message=f"Could not load ABI {abi_path} for pool {record.address}: {exc}"
                ) from exc
        registry.add(record.to_pool(), decoder=decoder)

    logger.debug(f"Loaded {len(registry)} pools from {path}")
    return registry
