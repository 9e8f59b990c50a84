"""
Inspect command: decode a MessagePack file and list its objects
"""

import importlib
import json
from pathlib import Path
from typing import Any, Dict, List, Optional

import typer
from msgpack import ExtType
from rich.console import Console
from rich.table import Table

from extpack.core.config import get_default_factory
from extpack.core.errors import ExtPackError
from extpack.core.factory import Factory
from extpack.core.utils.logger import get_logger

logger = get_logger(__name__)

console = Console()

PREVIEW_WIDTH = 60


def _ext_code_of(obj: Any, factory: Factory) -> Optional[int]:
    """Ext code an object was (or would be) written with, if any"""
    if isinstance(obj, ExtType):
        return obj.code
    for entry in factory.registered_types("packer"):
        if entry["class"] is type(obj):
            return entry["type"]
    return None


def _preview(obj: Any) -> str:
    text = repr(obj)
    if len(text) > PREVIEW_WIDTH:
        text = text[: PREVIEW_WIDTH - 3] + "..."
    return text


def describe_objects(objects: List[Any], factory: Factory) -> List[Dict[str, Any]]:
    """
    Build one summary row per decoded object

    Args:
        objects: Decoded top-level objects
        factory: Factory whose registrations identify ext values

    Returns:
        List of dicts with index, type, ext_code and preview
    """
    return [
        {
            "index": index,
            "type": type(obj).__name__,
            "ext_code": _ext_code_of(obj, factory),
            "preview": _preview(obj),
        }
        for index, obj in enumerate(objects)
    ]


def inspect(
    file: Path = typer.Argument(..., exists=True, dir_okay=False, readable=True, help="MessagePack file to decode"),
    modules: Optional[List[str]] = typer.Option(
        None, "--module", "-m", help="Module to import first, so its @ext_type classes get registered"
    ),
    allow_unknown: bool = typer.Option(
        True, "--allow-unknown/--strict", help="Show unregistered ext types instead of failing"
    ),
    as_json: bool = typer.Option(False, "--json", help="Print JSON instead of a table"),
):
    """
    Decode every object in a MessagePack file and list them
    """
    for module_name in modules or []:
        try:
            importlib.import_module(module_name)
        except ImportError as e:
            logger.error(f"Failed to import module '{module_name}': {e}")
            console.print(f"[red]Error:[/red] cannot import module '{module_name}': {e}")
            raise typer.Exit(1)

    factory = get_default_factory()
    data = file.read_bytes()
    unpacker = factory.unpacker(allow_unknown_ext=allow_unknown)
    unpacker.feed(data)

    try:
        objects = list(unpacker.each())
    except (ExtPackError, ValueError) as e:
        logger.error(f"Failed to decode {file}: {e}")
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)

    if unpacker.pending:
        logger.error(f"Failed to decode {file}: truncated object at byte {unpacker.tell()}")
        console.print(
            f"[red]Error:[/red] truncated object at byte {unpacker.tell()} "
            f"({unpacker.pending} trailing bytes)"
        )
        raise typer.Exit(1)

    rows = describe_objects(objects, factory)

    if as_json:
        typer.echo(json.dumps(rows, indent=2))
        return

    table = Table(title=f"{file.name} ({len(data)} bytes, {len(rows)} objects)")
    table.add_column("#", justify="right", style="cyan")
    table.add_column("Type", style="green")
    table.add_column("Ext", justify="right", style="magenta")
    table.add_column("Value")
    for row in rows:
        table.add_row(
            str(row["index"]),
            row["type"],
            "-" if row["ext_code"] is None else str(row["ext_code"]),
            row["preview"],
        )
    console.print(table)
