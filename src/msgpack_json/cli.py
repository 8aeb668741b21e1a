"""Command-line interface for the MessagePack/JSON converter."""

import base64
import logging
import sys
from pathlib import Path
from typing import Optional

import click

from . import __version__
from .converter import MessagePackJsonConverter
from .error_handler import ErrorHandler
from .profiler import PerformanceProfiler
from .transport import decide_encoding, encode_hex
from .types import ConversionResult, InputKind


@click.group()
@click.version_option(version=__version__)
@click.option('--verbose', '-v', is_flag=True, help='Enable verbose output')
@click.option('--profile', is_flag=True, help='Report timing and memory for the conversion')
@click.pass_context
def main(ctx: click.Context, verbose: bool, profile: bool):
    """msgpack-json - Convert between JSON and MessagePack text."""
    if verbose:
        level = logging.DEBUG
    elif profile:
        level = logging.INFO
    else:
        level = logging.WARNING
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")

    ctx.obj = {"profiler": PerformanceProfiler() if profile else None}


@main.command('to-msgpack')
@click.argument('input_file', type=click.File('r', encoding='utf-8'), default='-')
@click.option('--format', '-f', 'output_format', type=click.Choice(['base64', 'hex']),
              default='base64', help='Text encoding of the MessagePack output (default: base64)')
@click.option('--insertion-order', is_flag=True, help='Keep object keys in input order instead of sorting')
@click.option('--output', '-o', type=click.Path(dir_okay=False, path_type=Path),
              help='Write the result to a file instead of stdout')
@click.pass_context
def to_msgpack(ctx: click.Context, input_file, output_format: str,
               insertion_order: bool, output: Optional[Path]):
    """Convert a JSON document to MessagePack text."""
    json_text = input_file.read()
    _check_input(json_text, InputKind.JSON)

    converter = MessagePackJsonConverter(sort_keys=not insertion_order)
    result = _run(ctx, "json_to_messagepack", json_text, converter.json_to_messagepack)

    if result.success and output_format == 'hex':
        result.output = encode_hex(base64.b64decode(result.output))
    _emit(result, output)


@main.command('to-json')
@click.argument('input_file', type=click.File('r', encoding='utf-8'), default='-')
@click.option('--indent', '-i', type=click.IntRange(min=0), default=2,
              help='Spaces per indentation level (default: 2)')
@click.option('--insertion-order', is_flag=True, help='Keep object keys in wire order instead of sorting')
@click.option('--output', '-o', type=click.Path(dir_okay=False, path_type=Path),
              help='Write the result to a file instead of stdout')
@click.pass_context
def to_json(ctx: click.Context, input_file, indent: int,
            insertion_order: bool, output: Optional[Path]):
    """Convert hex or base64 MessagePack text to JSON."""
    encoded_text = input_file.read().strip()
    _check_input(encoded_text, InputKind.ENCODED)

    converter = MessagePackJsonConverter(indent=indent, sort_keys=not insertion_order)
    result = _run(ctx, "messagepack_to_json", encoded_text, converter.messagepack_to_json)
    _emit(result, output)


@main.command()
@click.argument('input_file', type=click.File('r', encoding='utf-8'), default='-')
def detect(input_file):
    """Print which alphabet (hex or base64) the input would be read as."""
    click.echo(decide_encoding(input_file.read().strip()).value)


def _check_input(text: str, kind: InputKind) -> None:
    validation = ErrorHandler().validate_input(text, kind)
    for warning in validation.warnings:
        click.echo(f"⚠️  {warning}", err=True)
    if not validation.is_valid:
        for error in validation.errors:
            click.echo(f"❌ {error.message}", err=True)
        sys.exit(1)


def _run(ctx: click.Context, operation: str, text: str, convert) -> ConversionResult:
    profiler = ctx.obj["profiler"]
    if profiler is None:
        return convert(text)

    input_size = len(text.encode('utf-8'))
    with profiler.profile_operation(operation, input_size):
        result = convert(text)
        profiler.record_output(len(result.output.encode('utf-8')), result.success)
    click.echo(profiler.export_metrics("summary"), err=True)
    return result


def _emit(result: ConversionResult, output: Optional[Path]) -> None:
    if not result.success:
        click.echo(f"❌ {result.error}", err=True)
        if result.hint:
            click.echo(f"   • {result.hint}", err=True)
        sys.exit(1)

    if output:
        output.write_text(result.output, encoding='utf-8')
        click.echo(f"✅ Successfully wrote {output}", err=True)
    else:
        click.echo(result.output)


if __name__ == '__main__':
    main()
