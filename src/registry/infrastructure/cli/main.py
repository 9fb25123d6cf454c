import logging

import click

from registry.infrastructure.cli.gender_commands import (
    gender_add,
    gender_list,
    gender_show,
)


@click.group()
@click.option("-v", "--verbose", is_flag=True, default=False, help="Enable debug logging.")
def cli(verbose: bool) -> None:
    """Gender Registry"""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


@cli.group()
def gender() -> None:
    """Manage genders."""


# Register subcommands
gender.add_command(gender_add)
gender.add_command(gender_list)
gender.add_command(gender_show)
