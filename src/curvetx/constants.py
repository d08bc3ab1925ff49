__all__ = (
    "CURVE_POOL_TOKEN_DECIMALS",
    "DECIMAL_CONTEXT",
)

import decimal

# Curve LP tokens are minted with a fixed 18 decimal precision, regardless of the pool coins
# ref: https://github.com/curvefi/curve-contract/blob/master/contracts/tokens/CurveTokenV3.vy
CURVE_POOL_TOKEN_DECIMALS = 18

# A uint256 holds at most 78 decimal digits, plus room for the fractional part after scaling
DECIMAL_CONTEXT = decimal.Context(prec=100)
