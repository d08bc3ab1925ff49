import click

from curvetx.version import __version__


@click.group()
@click.version_option(version=__version__)
def cli() -> None: ...


from . import classify, config  # noqa: F401, E402
