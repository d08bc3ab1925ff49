from . import (
    abi as abi,
)  # excluded from __all__ so it doesn't bubble back up to the top level package namespace
from .pools import CurvePoolRegistry, load_pool_catalog
from .types import Coin, CurveAssetType, CurvePool

__all__ = (
    "Coin",
    "CurveAssetType",
    "CurvePool",
    "CurvePoolRegistry",
    "load_pool_catalog",
)
