import logging
from importlib.metadata import PackageNotFoundError, version
from pathlib import Path
from typing import Any, Optional

import click
import yaml  # type: ignore
from dotenv import load_dotenv

from annodm.codec import AttributeCodec, Shape, default_registry, schema
from annodm.errors import DecodeError
from annodm.json_utils import json_dumps, json_loads

try:
    __version__ = version("annodm")
except PackageNotFoundError:
    __version__ = "0.0.1-dev"

SHAPES = [shape.value for shape in Shape]


@click.group()
@click.option("--debug/--no-debug", default=False)
@click.option("--trace/--no-trace", default=False)
@click.option(
    "--log-file",
    type=click.Path(file_okay=True, dir_okay=False),
    envvar="ANNODM_LOG_FILE",
)
@click.version_option(__version__, prog_name="annodm")
def cli(debug: bool, trace: bool, log_file: Optional[str] = None) -> None:
    """Configure logging and load environment variables.

    Args:
        debug: Toggle debug logging.
        trace: Toggle trace logging.
        log_file: Optional path to the log file.
    """
    if trace:
        level = 1
    elif debug:
        level = logging.DEBUG
    else:
        level = logging.INFO

    logging.basicConfig(
        filename=log_file,
        level=level,
        format="[%(levelname)s] %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    if trace:
        logging.debug("Trace mode is on")
    if debug:
        logging.debug("Debug mode is on")
    load_dotenv()


def _load_tree(path: Path) -> Any:
    """Read an encoded attribute map from ``path``.

    Args:
        path: Location of a JSON or YAML file.

    Returns:
        Parsed tree.
    """

    text = path.read_text(encoding="utf-8")

    # Decode JSON or YAML depending on file extension.
    if path.suffix == ".json":
        return json_loads(text)
    try:
        return yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise DecodeError(f"malformed YAML: {exc}") from exc


def _decode(path: Path, shape: str, strict: bool) -> dict[str, Any]:
    """Decode the attribute map in ``path``, aborting on malformed input."""

    codec = AttributeCodec(shape, strict=strict)
    try:
        return codec.decode_map(_load_tree(path))
    except DecodeError as exc:
        raise click.ClickException(f"{path}: {exc}") from exc


shape_from = click.option(
    "--from",
    "source_shape",
    type=click.Choice(SHAPES),
    default=Shape.OBJECT.value,
    show_default=True,
    envvar="ANNODM_SHAPE",
    help="Wire shape of the input.",
)
strict_option = click.option(
    "--strict/--lenient",
    default=False,
    envvar="ANNODM_STRICT",
    help="Reject unknown object-shape fields.",
)


@cli.command()
@click.argument("input_path", type=click.Path(exists=True, dir_okay=False))
@shape_from
@click.option(
    "--to",
    "target_shape",
    type=click.Choice(SHAPES),
    default=Shape.ARRAY.value,
    show_default=True,
    help="Wire shape of the output.",
)
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["json", "yaml"]),
    default="json",
    help="Output format.",
)
@click.option(
    "--output",
    "output_path",
    type=click.Path(file_okay=True, dir_okay=True),
    default=None,
    help="Write output to FILE or DIRECTORY instead of the console.",
)
@strict_option
def convert(
    input_path: str,
    source_shape: str = Shape.OBJECT.value,
    target_shape: str = Shape.ARRAY.value,
    output_format: str = "json",
    output_path: Optional[str] = None,
    strict: bool = False,
) -> None:
    """Re-encode an attribute map in another wire shape.

    Args:
        input_path: JSON or YAML file holding the attribute map.
        source_shape: Wire shape of the input.
        target_shape: Wire shape of the output.
        output_format: Format of the converted data.
        output_path: Optional file or directory path for the output.
            If a directory is provided, the file name is derived from
            the input name, the target shape and the format.
        strict: Reject unknown object-shape fields.
    """

    source = Path(input_path)
    attributes = _decode(source, source_shape, strict)
    tree = AttributeCodec(target_shape).encode_map(attributes)
    logging.debug(
        f"Converted {len(attributes)} attribute(s) from {source_shape} "
        f"to {target_shape} shape"
    )

    if output_format == "json":
        content = json_dumps(tree, indent=True)
    else:
        content = yaml.safe_dump(tree, allow_unicode=True, sort_keys=False)

    if output_path is None:
        click.echo(content)
        return

    final_path = Path(output_path)

    # If the provided path is a directory, build the file path inside it.
    if final_path.is_dir():
        name = f"{source.stem}.{target_shape}.{output_format}"
        final_path = final_path / name
    final_path.write_text(content, encoding="utf-8")


@cli.command()
@click.argument("input_path", type=click.Path(exists=True, dir_okay=False))
@shape_from
@strict_option
def validate(
    input_path: str,
    source_shape: str = Shape.OBJECT.value,
    strict: bool = False,
) -> None:
    """Check that a file decodes and report what it holds.

    Args:
        input_path: JSON or YAML file holding the attribute map.
        source_shape: Wire shape of the input.
        strict: Reject unknown object-shape fields.
    """

    attributes = _decode(Path(input_path), source_shape, strict)
    for key, attribute in attributes.items():
        count = len(getattr(attribute, "items", (attribute,)))
        click.echo(f"{key}: {count}")


@cli.command("schema")
@click.argument("type_name", required=False)
def schema_command(type_name: Optional[str] = None) -> None:
    """Print the array-shape field order of a type.

    Without a type name, list the registered types.

    Args:
        type_name: Registered attribute type name.
    """

    registry = default_registry()
    if type_name is None:
        for name in registry.names():
            click.echo(name)
        return

    try:
        cls = registry.resolve(type_name)
    except DecodeError as exc:
        raise click.UsageError(str(exc)) from exc
    for position, name in enumerate(schema(cls)):
        click.echo(f"{position}\t{name}")
