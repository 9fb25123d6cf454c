"""CLI commands for the Gender entity."""

from __future__ import annotations

import asyncio
from http import HTTPStatus
from uuid import UUID

import click

from registry.application.add_gender import AddGenderHandler
from registry.application.dto import ResponseDTO
from registry.application.list_genders import ListGendersHandler
from registry.application.show_gender import ShowGenderHandler
from registry.application.translate_outcome import to_response
from registry.domain.exceptions import DomainException
from registry.infrastructure.bootstrap import gender_repository
from registry.infrastructure.cli import exit_codes


class ServerError(click.ClickException):
    exit_code = exit_codes.SERVER_ERROR


def _render(gender_id: UUID, response: ResponseDTO) -> None:
    if response.is_success:
        gender = response.payload
        click.echo(f"{gender.id}  {gender.name}")
    elif response.status == HTTPStatus.NOT_FOUND:
        raise click.ClickException(f"Gender {gender_id} not found")
    else:
        error = response.payload
        raise ServerError(
            f"Server error ({int(response.status)}): {error.type}: {error.message}"
        )


@click.command("show")
@click.option("--id", "gender_id", required=True, type=click.UUID, help="Gender ID to display.")
def gender_show(gender_id: UUID) -> None:
    """Look up a gender by ID."""
    handler = ShowGenderHandler(gender_repo=gender_repository())
    outcome = asyncio.run(handler.handle(gender_id))
    _render(gender_id, to_response(outcome))


@click.command("add")
@click.option("--name", required=True, help="Display name of the gender.")
def gender_add(name: str) -> None:
    """Register a new gender."""
    handler = AddGenderHandler(gender_repo=gender_repository())

    try:
        dto = asyncio.run(handler.handle(name))
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Gender '{dto.name}' added  (id={dto.id})")


@click.command("list")
def gender_list() -> None:
    """List all registered genders."""
    handler = ListGendersHandler(gender_repo=gender_repository())

    try:
        genders = asyncio.run(handler.handle())
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not genders:
        click.echo("No genders registered.")
        return

    click.echo(f"  {'ID':<36}  {'Name':<20}")
    click.echo(f"  {'-'*58}")
    for g in genders:
        click.echo(f"  {g.id:<36}  {g.name:<20}")
