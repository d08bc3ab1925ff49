class CurveTxError(Exception):
    """
    Base exception for everything raised by this package.

    Classifying a transaction has two kinds of unsuccessful outcome. A transaction that is simply
    not a liquidity or exchange action (a failed transaction, an unknown selector, an unrecognized
    function) is reported through an empty `ParsedTransaction` and never raises. A transaction that
    looks like a Curve action but contradicts the pool metadata or its own calldata raises a
    subclass of `CurveTxError`, leaving the skip policy to the caller:

    ```
    for tx in txs:
        try:
            parsed = curvetx.parse_transaction(pool, tx, decoder)
        except CoinIndexOutOfRange:
            ... # the pool metadata is incomplete
        except CurveTxError:
            ... # log and skip the transaction
    ```

    An optional string-formatted message may be attached to the exception and retrieved from the
    `.message` attribute.
    """

    message: str | None = None

    def __init__(self, message: str | None = None) -> None:
        if message:
            self.message = message
            super().__init__(message)


class CurveTxValueError(CurveTxError): ...


class CurveTxTypeError(CurveTxError): ...
