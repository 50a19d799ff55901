"""
Point d'entrée CLI de tvmaze-client.

Initialise le container DI, configure le logging et fournit quelques
commandes de consultation de l'API TVmaze (recherche, fiche show, épisodes,
programme, personnes).
"""

import asyncio
import datetime
from functools import wraps
from typing import Annotated, Optional

import httpx
import typer
from loguru import logger
from rich.console import Console
from rich.table import Table

from . import __version__
from .container import Container
from .core.errors import TVMazeError
from .logging_config import configure_logging
from .utils.constants import DEFAULT_COUNTRY

app = typer.Typer(
    name="tvmaze",
    help="Consultation de l'API TVmaze",
)
container = Container()
console = Console()


def with_client(func):
    """
    Decorateur qui injecte un TVMazeClient en premier argument.

    Ferme le transport partage a la fin de la commande et convertit les
    erreurs du client en message + code de sortie 1.

    Usage:
        @with_client
        async def _my_command(client, ...):
            ...
    """

    @wraps(func)
    async def wrapper(*args, **kwargs):
        client = container.tvmaze_client()
        try:
            return await func(client, *args, **kwargs)
        except (TVMazeError, httpx.TransportError) as e:
            logger.debug("Echec de la commande", error=str(e))
            console.print(f"[red]Erreur:[/red] {e}")
            raise typer.Exit(code=1) from e
        finally:
            await container.http_client().aclose()
            container.http_client.reset()

    return wrapper


@app.callback()
def main_callback(
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Afficher les logs DEBUG (requetes HTTP)"),
    ] = False,
    quiet: Annotated[
        bool,
        typer.Option("--quiet", "-q", help="Mode silencieux (erreurs uniquement)"),
    ] = False,
) -> None:
    """tvmaze - Client de l'API TVmaze."""
    settings = container.config()
    log_level = settings.log_level
    if quiet:
        log_level = "ERROR"
    elif verbose:
        log_level = "DEBUG"
    configure_logging(
        log_level=log_level,
        log_file=settings.log_file,
        rotation_size=settings.log_rotation_size,
        retention_count=settings.log_retention_count,
    )


@app.command()
def info() -> None:
    """Affiche la configuration actuelle."""
    config = container.config()
    typer.echo(f"Adresse API : {config.api_address}")
    typer.echo(f"Clé API : {'configurée' if config.api_key_enabled else 'aucune'}")
    typer.echo(f"Produit : {config.product_name or '-'} {config.product_version or ''}")
    typer.echo(f"Niveau de log : {config.log_level}")


@app.command()
def version() -> None:
    """Affiche les informations de version."""
    typer.echo(f"tvmaze-client v{__version__}")


@app.command()
def search(
    query: Annotated[str, typer.Argument(help="Titre recherche")],
) -> None:
    """Recherche des shows par nom."""
    asyncio.run(_search_async(query))


@with_client
async def _search_async(client, query: str) -> None:
    results = await client.search_shows(query)
    if not results:
        console.print("[yellow]Aucun show trouve.[/yellow]")
        return

    table = Table(title=f"Recherche: {query}")
    table.add_column("ID", justify="right")
    table.add_column("Titre")
    table.add_column("Premiere")
    table.add_column("Score", justify="right")
    for result in results:
        show = result.show
        score = f"{result.score:.2f}" if result.score is not None else "-"
        table.add_row(str(show.id), show.name, str(show.premiered or "-"), score)
    console.print(table)


@app.command()
def show(
    show_id: Annotated[int, typer.Argument(help="ID TVmaze du show")],
    embed: Annotated[
        Optional[list[str]],
        typer.Option("--embed", "-e", help="Sous-ressource a inclure (repetable)"),
    ] = None,
) -> None:
    """Affiche la fiche d'un show."""
    asyncio.run(_show_async(show_id, embed or []))


@with_client
async def _show_async(client, show_id: int, embed: list[str]) -> None:
    result = await client.get_show(show_id, *embed)
    console.print(f"[bold cyan]{result.name}[/bold cyan] (#{result.id})")
    if result.genres:
        console.print(f"  Genres : {', '.join(result.genres)}")
    if result.status:
        console.print(f"  Statut : {result.status}")
    if result.premiered:
        console.print(f"  Premiere : {result.premiered}")
    channel = result.network or result.web_channel
    if channel:
        console.print(f"  Chaine : {channel.name}")
    if result.externals and result.externals.imdb:
        console.print(f"  IMDb : {result.externals.imdb}")


@app.command()
def episodes(
    show_id: Annotated[int, typer.Argument(help="ID TVmaze du show")],
    specials: Annotated[
        bool, typer.Option("--specials", help="Inclure les episodes speciaux")
    ] = False,
) -> None:
    """Liste les episodes d'un show."""
    asyncio.run(_episodes_async(show_id, specials))


@with_client
async def _episodes_async(client, show_id: int, specials: bool) -> None:
    items = await client.get_show_episodes(show_id, specials=specials)
    table = Table(title=f"Episodes du show #{show_id}")
    table.add_column("Episode")
    table.add_column("Titre")
    table.add_column("Diffusion")
    for episode in items:
        if episode.is_special:
            label = f"S{episode.season or 0:02d} special"
        else:
            label = f"S{episode.season or 0:02d}E{episode.number:02d}"
        table.add_row(label, episode.name, str(episode.airdate or "-"))
    console.print(table)


@app.command()
def schedule(
    date: Annotated[
        Optional[datetime.datetime],
        typer.Option("--date", "-d", formats=["%Y-%m-%d"], help="Date (defaut: aujourd'hui)"),
    ] = None,
    country: Annotated[
        Optional[str],
        typer.Option("--country", "-c", help=f"Code pays ISO (defaut: {DEFAULT_COUNTRY})"),
    ] = None,
    web: Annotated[
        bool, typer.Option("--web", help="Programme des plateformes web")
    ] = False,
) -> None:
    """Affiche le programme de diffusion d'un jour."""
    day = date.date() if date else None
    asyncio.run(_schedule_async(day, country, web))


@with_client
async def _schedule_async(
    client, day: Optional[datetime.date], country: Optional[str], web: bool
) -> None:
    if web:
        entries = await client.get_streaming_schedule(date=day, country=country)
    else:
        entries = await client.get_schedule(date=day, country=country)

    table = Table(title="Programme")
    table.add_column("Heure")
    table.add_column("Show")
    table.add_column("Episode")
    for entry in entries:
        aired_show = entry.aired_show
        table.add_row(
            entry.airtime or "-",
            aired_show.name if aired_show else "-",
            entry.name,
        )
    console.print(table)


@app.command()
def people(
    query: Annotated[str, typer.Argument(help="Nom recherche")],
) -> None:
    """Recherche des personnes par nom."""
    asyncio.run(_people_async(query))


@with_client
async def _people_async(client, query: str) -> None:
    results = await client.search_people(query)
    if not results:
        console.print("[yellow]Aucune personne trouvee.[/yellow]")
        return
    for result in results:
        person = result.person
        country = f" ({person.country.code})" if person.country else ""
        console.print(f"  #{person.id} {person.name}{country}")


def main() -> None:
    """Point d'entrée de l'application."""
    app()


if __name__ == "__main__":
    main()
