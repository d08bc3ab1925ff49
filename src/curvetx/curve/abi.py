# ruff: noqa: E501

from typing import Any

import pydantic_core

# Liquidity and exchange functions of a 2-coin stableswap pool
# ref: https://raw.githubusercontent.com/curvefi/metaregistry/main/contracts/interfaces/CurvePool.json
CURVE_V1_POOL_ABI: list[Any] = pydantic_core.from_json(
    """
    [{"name":"add_liquidity","outputs":[{"type":"uint256","name":""}],"inputs":[{"type":"uint256[2]","name":"amounts"},{"type":"uint256","name":"min_mint_amount"}],"stateMutability":"nonpayable","type":"function"},{"name":"exchange","outputs":[{"type":"uint256","name":""}],"inputs":[{"type":"int128","name":"i"},{"type":"int128","name":"j"},{"type":"uint256","name":"dx"},{"type":"uint256","name":"min_dy"}],"stateMutability":"nonpayable","type":"function"},{"name":"exchange_underlying","outputs":[{"type":"uint256","name":""}],"inputs":[{"type":"int128","name":"i"},{"type":"int128","name":"j"},{"type":"uint256","name":"dx"},{"type":"uint256","name":"min_dy"}],"stateMutability":"nonpayable","type":"function"},{"name":"remove_liquidity","outputs":[{"type":"uint256[2]","name":""}],"inputs":[{"type":"uint256","name":"_amount"},{"type":"uint256[2]","name":"min_amounts"}],"stateMutability":"nonpayable","type":"function"},{"name":"remove_liquidity_imbalance","outputs":[{"type":"uint256","name":""}],"inputs":[{"type":"uint256[2]","name":"amounts"},{"type":"uint256","name":"max_burn_amount"}],"stateMutability":"nonpayable","type":"function"},{"name":"remove_liquidity_one_coin","outputs":[{"type":"uint256","name":""}],"inputs":[{"type":"uint256","name":"_token_amount"},{"type":"int128","name":"i"},{"type":"uint256","name":"_min_amount"}],"stateMutability":"nonpayable","type":"function"},{"name":"withdraw_admin_fees","outputs":[],"inputs":[],"stateMutability":"nonpayable","type":"function"}]
    """
)

# Liquidity and exchange functions of a 3-coin stableswap pool, e.g. DAI/USDC/USDT
# ref: https://github.com/curvefi/curve-contract/blob/master/contracts/pools/3pool/StableSwap3Pool.vy
CURVE_V1_3COIN_POOL_ABI: list[Any] = pydantic_core.from_json(
    """
    [{"name":"add_liquidity","outputs":[],"inputs":[{"type":"uint256[3]","name":"amounts"},{"type":"uint256","name":"min_mint_amount"}],"stateMutability":"nonpayable","type":"function"},{"name":"exchange","outputs":[],"inputs":[{"type":"int128","name":"i"},{"type":"int128","name":"j"},{"type":"uint256","name":"dx"},{"type":"uint256","name":"min_dy"}],"stateMutability":"nonpayable","type":"function"},{"name":"remove_liquidity","outputs":[],"inputs":[{"type":"uint256","name":"_amount"},{"type":"uint256[3]","name":"min_amounts"}],"stateMutability":"nonpayable","type":"function"},{"name":"remove_liquidity_imbalance","outputs":[],"inputs":[{"type":"uint256[3]","name":"amounts"},{"type":"uint256","name":"max_burn_amount"}],"stateMutability":"nonpayable","type":"function"},{"name":"remove_liquidity_one_coin","outputs":[],"inputs":[{"type":"uint256","name":"_token_amount"},{"type":"int128","name":"i"},{"type":"uint256","name":"min_amount"}],"stateMutability":"nonpayable","type":"function"}]
    """
)

# Liquidity and exchange functions of a 2-coin cryptoswap pool
# ref: https://raw.githubusercontent.com/curvefi/metaregistry/main/contracts/interfaces/CurvePoolV2.json
CURVE_V2_POOL_ABI: list[Any] = pydantic_core.from_json(
    """
    [
  {
    "stateMutability": "payable",
    "type": "function",
    "name": "exchange",
    "inputs": [
      { "name": "i", "type": "uint256" },
      { "name": "j", "type": "uint256" },
      { "name": "dx", "type": "uint256" },
      { "name": "min_dy", "type": "uint256" }
    ],
    "outputs": [{ "name": "", "type": "uint256" }]
  },
  {
    "stateMutability": "payable",
    "type": "function",
    "name": "exchange",
    "inputs": [
      { "name": "i", "type": "uint256" },
      { "name": "j", "type": "uint256" },
      { "name": "dx", "type": "uint256" },
      { "name": "min_dy", "type": "uint256" },
      { "name": "use_eth", "type": "bool" }
    ],
    "outputs": [{ "name": "", "type": "uint256" }]
  },
  {
    "stateMutability": "payable",
    "type": "function",
    "name": "exchange_underlying",
    "inputs": [
      { "name": "i", "type": "uint256" },
      { "name": "j", "type": "uint256" },
      { "name": "dx", "type": "uint256" },
      { "name": "min_dy", "type": "uint256" }
    ],
    "outputs": [{ "name": "", "type": "uint256" }]
  },
  {
    "stateMutability": "payable",
    "type": "function",
    "name": "add_liquidity",
    "inputs": [
      { "name": "amounts", "type": "uint256[2]" },
      { "name": "min_mint_amount", "type": "uint256" },
      { "name": "use_eth", "type": "bool" }
    ],
    "outputs": [{ "name": "", "type": "uint256" }]
  },
  {
    "stateMutability": "nonpayable",
    "type": "function",
    "name": "remove_liquidity",
    "inputs": [
      { "name": "_amount", "type": "uint256" },
      { "name": "min_amounts", "type": "uint256[2]" },
      { "name": "use_eth", "type": "bool" }
    ],
    "outputs": []
  },
  {
    "stateMutability": "nonpayable",
    "type": "function",
    "name": "remove_liquidity_one_coin",
    "inputs": [
      { "name": "token_amount", "type": "uint256" },
      { "name": "i", "type": "uint256" },
      { "name": "min_amount", "type": "uint256" }
    ],
    "outputs": [{ "name": "", "type": "uint256" }]
  },
  {
    "stateMutability": "nonpayable",
    "type": "function",
    "name": "remove_liquidity_one_coin",
    "inputs": [
      { "name": "token_amount", "type": "uint256" },
      { "name": "i", "type": "uint256" },
      { "name": "min_amount", "type": "uint256" },
      { "name": "use_eth", "type": "bool" }
    ],
    "outputs": [{ "name": "", "type": "uint256" }]
  }
    ]
    """
)

DEFAULT_POOL_ABIS: tuple[list[Any], ...] = (
    CURVE_V1_POOL_ABI,
    CURVE_V1_3COIN_POOL_ABI,
    CURVE_V2_POOL_ABI,
)
