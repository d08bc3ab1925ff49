from collections.abc import Iterable, Iterator, Sequence
from decimal import Decimal

from curvetx.constants import CURVE_POOL_TOKEN_DECIMALS
from curvetx.curve.types import CurvePool
from curvetx.exceptions.transaction import UnknownFunctionSignature
from curvetx.functions import sum_decimal_amounts, to_decimal_units
from curvetx.logging import logger
from curvetx.transaction.calls import CallKind, get_call_argument
from curvetx.transaction.decoder import CallDecoder
from curvetx.transaction.types import (
    CurveTransaction,
    CurveTransactionType,
    DecodedCall,
    ExplorerTransaction,
    ParsedTransaction,
    TokenDirection,
    TokenLeg,
)


def parse_transaction(
    pool: CurvePool,
    tx: ExplorerTransaction,
    decoder: CallDecoder,
) -> ParsedTransaction:
    """
    Decode a transaction sent to a Curve pool and describe the liquidity or exchange action it
    performed.

    The decoded call is returned alongside the transaction record. Either may be `None`: the
    decoded call if the transaction could not be decoded, and the record if the decoded call is not
    a liquidity or exchange action that can be described from its arguments.
    """

    # Failed and reverted transactions may not decode against the current pool interface
    if not tx.succeeded:
        return ParsedTransaction()

    # Contract deployments have no recipient and nothing to decode
    if tx.to is None:
        return ParsedTransaction()

    try:
        decoded_call = decoder.decode_call(tx.input, tx.value)
    except UnknownFunctionSignature:
        return ParsedTransaction()

    match CurveTransactionType.from_function_name(decoded_call.fn_name):
        case CurveTransactionType.REMOVE_LIQUIDITY:
            transaction = _parse_remove_liquidity(pool=pool, tx=tx, call=decoded_call)
        case CurveTransactionType.ADD_LIQUIDITY:
            transaction = _parse_add_liquidity(pool=pool, tx=tx, call=decoded_call)
        case CurveTransactionType.EXCHANGE:
            transaction = _parse_exchange(pool=pool, tx=tx, call=decoded_call)
        case None:
            logger.warning(f"Unrecognized function {decoded_call.fn_name} called on pool {pool}")
            transaction = None

    return ParsedTransaction(decoded_call=decoded_call, transaction=transaction)


def parse_transactions(
    pool: CurvePool,
    txs: Iterable[ExplorerTransaction],
    decoder: CallDecoder,
) -> Iterator[CurveTransaction]:
    """
    Yield a record for each transaction in `txs` describing a liquidity or exchange action.
    """

    for tx in txs:
        if (transaction := parse_transaction(pool, tx, decoder).transaction) is not None:
            yield transaction


def _build_transaction(
    *,
    pool: CurvePool,
    tx: ExplorerTransaction,
    transaction_type: CurveTransactionType,
    total_amount: Decimal,
    tokens: Iterable[TokenLeg],
) -> CurveTransaction:
    return CurveTransaction(
        hash=tx.hash,
        pool=pool.address,
        timestamp=tx.timestamp,
        type=transaction_type,
        total_amount=total_amount if pool.has_comparable_coins else None,
        tokens=tuple(tokens),
    )


def _coin_amount_legs(
    pool: CurvePool,
    raw_amounts: Sequence[int],
    direction: TokenDirection,
) -> list[TokenLeg]:
    """
    Build a leg for each coin with a non-zero amount. Amounts are ordered by coin index.
    """

    tokens = []
    for coin_index, raw_amount in enumerate(raw_amounts):
        if raw_amount == 0:
            continue
        coin = pool.get_coin(coin_index)
        tokens.append(
            TokenLeg(
                symbol=coin.symbol,
                address=coin.address,
                direction=direction,
                amount=to_decimal_units(raw_amount, coin.decimals),
            )
        )
    return tokens


def _parse_remove_liquidity(
    pool: CurvePool,
    tx: ExplorerTransaction,
    call: DecodedCall,
) -> CurveTransaction | None:
    match (kind := CallKind.from_function_name(call.fn_name)):
        case CallKind.REMOVE_LIQUIDITY_IMBALANCE:
            tokens = _coin_amount_legs(
                pool,
                get_call_argument(call, kind, "amounts"),
                TokenDirection.REMOVE,
            )
            total_amount = sum_decimal_amounts(
                token.amount for token in tokens if token.amount is not None
            )
        case CallKind.REMOVE_LIQUIDITY_ONE_COIN:
            # The withdrawn coin amount depends on the pool balances at execution, only the LP
            # tokens burned are known
            coin = pool.get_coin(int(get_call_argument(call, kind, "coin_index")))
            total_amount = to_decimal_units(
                get_call_argument(call, kind, "burn_amount"),
                CURVE_POOL_TOKEN_DECIMALS,
            )
            tokens = [
                TokenLeg(
                    symbol=coin.symbol,
                    address=coin.address,
                    direction=TokenDirection.REMOVE,
                )
            ]
        case CallKind.REMOVE_LIQUIDITY:
            # All coins are withdrawn in proportion to the pool balances at execution
            total_amount = to_decimal_units(
                get_call_argument(call, kind, "burn_amount"),
                CURVE_POOL_TOKEN_DECIMALS,
            )
            tokens = [
                TokenLeg(
                    symbol=coin.symbol,
                    address=coin.address,
                    direction=TokenDirection.REMOVE,
                )
                for coin in pool.coins
            ]
        case _:
            logger.warning(f"Unknown remove liquidity function {call.fn_name} on pool {pool}")
            return None

    return _build_transaction(
        pool=pool,
        tx=tx,
        transaction_type=CurveTransactionType.REMOVE_LIQUIDITY,
        total_amount=total_amount,
        tokens=tokens,
    )


def _parse_add_liquidity(
    pool: CurvePool,
    tx: ExplorerTransaction,
    call: DecodedCall,
) -> CurveTransaction | None:
    match (kind := CallKind.from_function_name(call.fn_name)):
        case CallKind.ADD_LIQUIDITY:
            tokens = _coin_amount_legs(
                pool,
                get_call_argument(call, kind, "amounts"),
                TokenDirection.ADD,
            )
            total_amount = sum_decimal_amounts(
                token.amount for token in tokens if token.amount is not None
            )
        case _:
            logger.warning(f"Unknown add liquidity function {call.fn_name} on pool {pool}")
            return None

    return _build_transaction(
        pool=pool,
        tx=tx,
        transaction_type=CurveTransactionType.ADD_LIQUIDITY,
        total_amount=total_amount,
        tokens=tokens,
    )


def _parse_exchange(
    pool: CurvePool,
    tx: ExplorerTransaction,
    call: DecodedCall,
) -> CurveTransaction | None:
    match (kind := CallKind.from_function_name(call.fn_name)):
        case CallKind.EXCHANGE:
            coin_in = pool.get_coin(int(get_call_argument(call, kind, "coin_index_in")))
            coin_out = pool.get_coin(int(get_call_argument(call, kind, "coin_index_out")))
            total_amount = to_decimal_units(
                get_call_argument(call, kind, "amount_in"),
                coin_in.decimals,
            )
            tokens = [
                TokenLeg(
                    symbol=coin_in.symbol,
                    address=coin_in.address,
                    direction=TokenDirection.ADD,
                    amount=total_amount,
                ),
                # The output amount is only known after execution
                TokenLeg(
                    symbol=coin_out.symbol,
                    address=coin_out.address,
                    direction=TokenDirection.REMOVE,
                ),
            ]
        case CallKind.EXCHANGE_UNDERLYING:
            # Indices refer to the underlying coins (e.g. USDC instead of aUSDC), which are not
            # part of the pool metadata
            return None
        case _:
            logger.warning(f"Unknown exchange function {call.fn_name} on pool {pool}")
            return None

    return _build_transaction(
        pool=pool,
        tx=tx,
        transaction_type=CurveTransactionType.EXCHANGE,
        total_amount=total_amount,
        tokens=tokens,
    )
