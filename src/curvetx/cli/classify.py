from pathlib import Path

import click
import pydantic_core

from curvetx.cli import cli
from curvetx.config import CONFIG_FILE, settings
from curvetx.curve.pools import load_pool_catalog
from curvetx.exceptions import CurveTxError
from curvetx.exceptions.pool import InvalidPoolCatalog
from curvetx.logging import logger
from curvetx.transaction.curve_transaction import parse_transaction
from curvetx.transaction.types import ExplorerTransaction


@cli.command()
@click.argument(
    "transactions",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
)
@click.option(
    "--pools",
    "pools_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Pool catalog (TOML). Defaults to the `pools` setting.",
)
def classify(transactions: Path, pools_path: Path | None) -> None:
    """
    Classify block explorer transaction records sent to Curve pools.

    TRANSACTIONS is a JSON file holding a block explorer `txlist` response, or a list of its
    records. One JSON object is printed for each liquidity or exchange transaction. Records that
    cannot be classified are logged with a warning and skipped.
    """

    if pools_path is None:
        pools_path = settings.pools
    if pools_path is None:
        raise click.UsageError(
            f"No pool catalog given. Pass --pools or set `pools` in {CONFIG_FILE}."
        )

    try:
        registry = load_pool_catalog(pools_path)
    except InvalidPoolCatalog as exc:
        raise click.ClickException(str(exc)) from exc

    records = pydantic_core.from_json(transactions.read_bytes())
    if isinstance(records, dict):
        records = records.get("result")
    if not isinstance(records, list):
        raise click.ClickException(f"{transactions} does not hold a list of transaction records.")

    for position, record in enumerate(records):
        try:
            tx = ExplorerTransaction.from_explorer_record(record)
        except (CurveTxError, ValueError) as exc:
            logger.warning(f"Skipping record {position}, it is not a valid transaction: {exc}")
            continue

        if tx.to is None or (pool := registry.get(tx.to)) is None:
            logger.debug(f"Skipping {tx.hash.to_0x_hex()}, recipient is not a known pool")
            continue

        try:
            parsed = parse_transaction(pool, tx, registry.get_decoder(pool.address))
        except CurveTxError as exc:
            logger.warning(f"Could not classify {tx.hash.to_0x_hex()} on pool {pool}: {exc}")
            continue

        if parsed.transaction is not None:
            click.echo(pydantic_core.to_json(parsed.transaction.as_dict()).decode())
