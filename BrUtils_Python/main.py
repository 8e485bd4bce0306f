#!/usr/bin/env python3
"""
BrUtils - Main entry point
"""
import asyncio
import sys
from typing import Optional

import click
from rich.console import Console

from .config import AppConfig, set_config
from .commands import BlobCommand, CleanCommand, CopyCommand, FormatCommand, JwtCommand, ValidateCommand

console = Console()


@click.group()
@click.option(
    "--config",
    type=click.Path(exists=True),
    help="Path to configuration file (config.json)",
)
def cli(config: Optional[str]):
    """BrUtils - Brazilian text, number and document (CPF/CNPJ) helpers."""
    # Load configuration
    app_config = AppConfig.load(config)
    set_config(app_config)


@cli.command()
@click.argument("valor")
@click.option(
    "--tipo",
    "-t",
    type=click.Choice(ValidateCommand.KINDS),
    help="cpf, cnpj ou email. Default: detectado pelo valor",
)
def validar(valor: str, tipo: Optional[str]):
    """Validate a CPF, CNPJ or e-mail."""
    try:
        command = ValidateCommand(valor, tipo)
    except ValueError as ex:
        console.print(f"[red]❌ {ex}[/]")
        sys.exit(1)
    sys.exit(command.execute())


@cli.command()
@click.argument("valor")
@click.option(
    "--tipo",
    "-t",
    type=click.Choice(FormatCommand.KINDS),
    default="documento",
    show_default=True,
    help="Tipo do valor a formatar",
)
def formatar(valor: str, tipo: str):
    """Format a CPF/CNPJ, CEP, phone, number or size in bytes."""
    try:
        command = FormatCommand(valor, tipo)
    except ValueError as ex:
        console.print(f"[red]❌ {ex}[/]")
        sys.exit(1)
    sys.exit(command.execute())


@cli.command()
@click.argument("texto")
@click.option("--espacos/--manter-espacos", default=None, help="Remove espaços repetidos")
@click.option("--acentos/--manter-acentos", default=None, help="Remove acentuação")
@click.option("--rigoroso/--simples", default=None, help="Remove qualquer marca diacrítica (NFD)")
def limpar(texto: str, espacos: Optional[bool], acentos: Optional[bool], rigoroso: Optional[bool]):
    """Clean repeated spaces and accents of a text."""
    command = CleanCommand(texto, espacos, acentos, rigoroso)
    sys.exit(command.execute())


@cli.command()
@click.argument("token")
def jwt(token: str):
    """Show the payload of a JWT (signature is not verified)."""
    command = JwtCommand(token)
    sys.exit(command.execute())


@cli.command()
@click.argument("origem")
@click.option("--base64", "as_base64", is_flag=True, help="Gera um data URL em base64")
@click.option("--mime", help="Tipo MIME do data URL. Default: detectado")
def blob(origem: str, as_base64: bool, mime: Optional[str]):
    """Read a file or http(s) URL as binary string or base64 data URL."""
    command = BlobCommand(origem, as_base64, mime)
    exit_code = asyncio.run(command.execute_async())
    sys.exit(exit_code)


@cli.command()
@click.argument("texto")
def copiar(texto: str):
    """Copy a text to the clipboard."""
    command = CopyCommand(texto)
    exit_code = asyncio.run(command.execute_async())
    sys.exit(exit_code)


def main():
    """Main entry point."""
    cli()


if __name__ == "__main__":
    main()
