"""
Configuration du logging via loguru.

La librairie n'emet que des logs DEBUG (une ligne par requete, une par
reponse) avec le contexte dans ``extra`` (path, status). C'est a
l'application de choisir les sinks:
- console : ligne courte, contexte affiche seulement s'il existe
- fichier (optionnel) : JSON avec rotation, limite aux logs de tvmaze_client
"""

import sys
from pathlib import Path
from typing import Optional

from loguru import logger

LIBRARY_LOGGER = "tvmaze_client"

_CONSOLE_FORMAT = (
    "<green>{time:HH:mm:ss}</green> | "
    "<level>{level: <7}</level> | "
    "<cyan>{name}</cyan> | "
    "<level>{message}</level>"
)


def console_format(record: dict) -> str:
    """Format console: ajoute le contexte ``extra`` quand la ligne en porte."""
    template = _CONSOLE_FORMAT
    if record["extra"]:
        template += " <dim>{extra}</dim>"
    return template + "\n{exception}"


def configure_logging(
    log_level: str = "WARNING",
    log_file: Optional[Path] = None,
    rotation_size: str = "10 MB",
    retention_count: int = 5,
) -> None:
    """Remplace les sinks loguru par ceux de l'application.

    Args :
        log_level : Niveau minimum en console (DEBUG pour voir les requetes HTTP)
        log_file : Fichier JSON des requetes, aucun fichier si None
        rotation_size : Taille maximale du fichier avant rotation (ex: "10 MB")
        retention_count : Nombre de fichiers rotatifs conserves
    """
    logger.remove()
    logger.add(sys.stderr, level=log_level, format=console_format, colorize=True)

    if log_file is None:
        return

    log_file.parent.mkdir(parents=True, exist_ok=True)
    logger.add(
        log_file,
        level="DEBUG",
        filter=LIBRARY_LOGGER,
        serialize=True,
        rotation=rotation_size,
        retention=retention_count,
        compression="zip",
        enqueue=True,
    )
