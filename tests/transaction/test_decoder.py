from decimal import Decimal

import eth_abi
import pytest
from eth_utils import function_signature_to_4byte_selector
from hexbytes import HexBytes

from curvetx.curve.abi import (
    CURVE_V1_3COIN_POOL_ABI,
    CURVE_V1_POOL_ABI,
    CURVE_V2_POOL_ABI,
    DEFAULT_POOL_ABIS,
)
from curvetx.curve.types import CurvePool
from curvetx.exceptions import CurveTxValueError
from curvetx.exceptions.transaction import CalldataDecodingError, UnknownFunctionSignature
from curvetx.transaction.curve_transaction import parse_transaction
from curvetx.transaction.decoder import Web3CallDecoder
from curvetx.transaction.types import CurveTransactionType, TokenDirection


def encode_call(signature: str, types: list[str], values: list[object]) -> HexBytes:
    return HexBytes(
        function_signature_to_4byte_selector(signature) + eth_abi.encode(types, values)
    )


@pytest.fixture(scope="module")
def decoder() -> Web3CallDecoder:
    return Web3CallDecoder()


def test_decode_3pool_add_liquidity(decoder: Web3CallDecoder):
    calldata = encode_call(
        "add_liquidity(uint256[3],uint256)",
        ["uint256[3]", "uint256"],
        [[10**18, 2 * 10**6, 0], 2 * 10**18],
    )

    call = decoder.decode_call(calldata)

    assert call.fn_name == "add_liquidity"
    assert list(call.args["amounts"]) == [10**18, 2 * 10**6, 0]
    assert call.args["min_mint_amount"] == 2 * 10**18


def test_decode_2coin_add_liquidity(decoder: Web3CallDecoder):
    calldata = encode_call(
        "add_liquidity(uint256[2],uint256)",
        ["uint256[2]", "uint256"],
        [[5, 6], 0],
    )

    call = decoder.decode_call(calldata)

    assert call.fn_name == "add_liquidity"
    assert list(call.args["amounts"]) == [5, 6]


def test_decode_calldata_given_as_hex_string(decoder: Web3CallDecoder):
    calldata = encode_call(
        "exchange(int128,int128,uint256,uint256)",
        ["int128", "int128", "uint256", "uint256"],
        [0, 2, 10**18, 99 * 10**4],
    )

    call = decoder.decode_call(calldata.to_0x_hex())

    assert call.fn_name == "exchange"
    assert call.args == {"i": 0, "j": 2, "dx": 10**18, "min_dy": 99 * 10**4}


@pytest.mark.parametrize(
    ("signature", "types", "values", "expected_args"),
    [
        (
            "exchange(uint256,uint256,uint256,uint256)",
            ["uint256", "uint256", "uint256", "uint256"],
            [1, 2, 10**8, 0],
            {"i": 1, "j": 2, "dx": 10**8, "min_dy": 0},
        ),
        (
            "exchange(uint256,uint256,uint256,uint256,bool)",
            ["uint256", "uint256", "uint256", "uint256", "bool"],
            [2, 0, 10**18, 0, True],
            {"i": 2, "j": 0, "dx": 10**18, "min_dy": 0, "use_eth": True},
        ),
        (
            "remove_liquidity_one_coin(uint256,uint256,uint256)",
            ["uint256", "uint256", "uint256"],
            [10**18, 1, 0],
            {"token_amount": 10**18, "i": 1, "min_amount": 0},
        ),
    ],
)
def test_decode_crypto_pool_functions(
    decoder: Web3CallDecoder,
    signature: str,
    types: list[str],
    values: list[object],
    expected_args: dict[str, object],
):
    call = decoder.decode_call(encode_call(signature, types, values))

    assert call.fn_name == signature.split("(")[0]
    assert call.args == expected_args


@pytest.mark.parametrize(
    "calldata",
    [
        HexBytes("0xdeadbeef"),
        HexBytes("0xa9059cbb" + "00" * 64),  # ERC20 transfer
        HexBytes(""),
    ],
)
def test_unknown_selector(decoder: Web3CallDecoder, calldata: HexBytes):
    with pytest.raises(UnknownFunctionSignature):
        decoder.decode_call(calldata)


def test_truncated_arguments(decoder: Web3CallDecoder):
    calldata = encode_call(
        "add_liquidity(uint256[3],uint256)",
        ["uint256[3]", "uint256"],
        [[1, 2, 3], 4],
    )

    with pytest.raises(CalldataDecodingError, match="add_liquidity"):
        decoder.decode_call(calldata[:40])


def test_decoder_with_custom_abi():
    decoder = Web3CallDecoder(abis=[CURVE_V1_3COIN_POOL_ABI])

    # 2-coin layout is not part of the given ABI
    with pytest.raises(UnknownFunctionSignature):
        decoder.decode_call(
            encode_call(
                "add_liquidity(uint256[2],uint256)",
                ["uint256[2]", "uint256"],
                [[5, 6], 0],
            )
        )


def test_decoder_requires_an_abi():
    with pytest.raises(CurveTxValueError):
        Web3CallDecoder(abis=[])


def test_parse_3pool_transactions(threepool: CurvePool, make_tx, decoder: Web3CallDecoder):
    add_liquidity = parse_transaction(
        threepool,
        make_tx(
            input=encode_call(
                "add_liquidity(uint256[3],uint256)",
                ["uint256[3]", "uint256"],
                [[0, 250 * 10**6, 750 * 10**6], 0],
            )
        ),
        decoder,
    ).transaction
    assert add_liquidity is not None
    assert add_liquidity.type is CurveTransactionType.ADD_LIQUIDITY
    assert add_liquidity.total_amount == Decimal(1000)
    assert [token.symbol for token in add_liquidity.tokens] == ["USDC", "USDT"]

    remove_one = parse_transaction(
        threepool,
        make_tx(
            input=encode_call(
                "remove_liquidity_one_coin(uint256,int128,uint256)",
                ["uint256", "int128", "uint256"],
                [3 * 10**17, 0, 0],
            )
        ),
        decoder,
    ).transaction
    assert remove_one is not None
    assert remove_one.type is CurveTransactionType.REMOVE_LIQUIDITY
    assert remove_one.total_amount == Decimal("0.3")
    assert [(token.symbol, token.direction) for token in remove_one.tokens] == [
        ("DAI", TokenDirection.REMOVE)
    ]

    exchange = parse_transaction(
        threepool,
        make_tx(
            input=encode_call(
                "exchange(int128,int128,uint256,uint256)",
                ["int128", "int128", "uint256", "uint256"],
                [2, 1, 12_345_678, 0],
            )
        ),
        decoder,
    ).transaction
    assert exchange is not None
    assert exchange.type is CurveTransactionType.EXCHANGE
    assert exchange.total_amount == Decimal("12.345678")
    assert [token.symbol for token in exchange.tokens] == ["USDT", "USDC"]


def test_parse_transfer_sent_to_pool(threepool: CurvePool, make_tx, decoder: Web3CallDecoder):
    parsed = parse_transaction(
        threepool,
        make_tx(input=HexBytes("0xa9059cbb" + "00" * 64)),
        decoder,
    )

    assert parsed.decoded_call is None
    assert parsed.transaction is None


def test_default_abis():
    assert DEFAULT_POOL_ABIS == (CURVE_V1_POOL_ABI, CURVE_V1_3COIN_POOL_ABI, CURVE_V2_POOL_ABI)
