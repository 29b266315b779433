"""Command line adapter: encode or decode a file or standard input."""

import json
import sys
from pathlib import Path
from typing import Optional

import typer
from loguru import logger

from .config import load_config_file
from .decoder import ToonError
from .toon import Toon

app = typer.Typer(add_completion=False, help="Encode (or decode) a file/string to/from TOON format.")

EXIT_INPUT_ERROR = 1
EXIT_CONFIG_ERROR = 2
EXIT_CODEC_ERROR = 3
EXIT_UNEXPECTED_ERROR = 4
EXIT_OUTPUT_ERROR = 5


def _configure_logging(verbose: bool) -> None:
    logger.remove()
    logger.add(sys.stderr, level="DEBUG" if verbose else "WARNING")


@app.command()
def convert(
    file: Optional[Path] = typer.Argument(None, help="Path to input file; if omitted reads STDIN"),
    decode: bool = typer.Option(False, "--decode", "-d", help="Decode TOON to JSON (default)"),
    encode: bool = typer.Option(False, "--encode", "-e", help="Encode JSON to TOON"),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Output file (default: stdout)"),
    pretty: bool = typer.Option(False, "--pretty", "-p", help="Pretty-print JSON when decoding"),
    config: Optional[Path] = typer.Option(None, "--config", "-c", help="YAML file with codec options"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log debug output to stderr"),
) -> None:
    """Encode (or decode) a file/string to/from TOON format."""
    _configure_logging(verbose)
    decode_mode = decode or not encode

    toon = None
    if config is not None:
        if not config.exists():
            logger.error(f"Config file not found: {config}")
            typer.echo(f"Config file not found: {config}", err=True)
            raise typer.Exit(code=EXIT_CONFIG_ERROR)
        try:
            encode_options, decode_options = load_config_file(config)
            toon = Toon(encode_options, decode_options)
        except (OSError, ValueError) as e:
            logger.error(f"Failed to load config {config}: {e}")
            typer.echo(f"Failed to load config: {e}", err=True)
            raise typer.Exit(code=EXIT_CONFIG_ERROR)
    if toon is None:
        toon = Toon()

    try:
        if file is not None:
            if not file.exists():
                typer.echo(f"File not found: {file}", err=True)
                raise typer.Exit(code=EXIT_INPUT_ERROR)
            text = file.read_text(encoding="utf-8")
            logger.debug(f"Read {len(text)} chars from {file}")
        else:
            text = sys.stdin.read()
            logger.debug(f"Read {len(text)} chars from stdin")
    except (OSError, UnicodeDecodeError) as e:
        logger.error(f"Failed to read input: {e}")
        typer.echo(f"Failed to read input: {e}", err=True)
        raise typer.Exit(code=EXIT_INPUT_ERROR)

    try:
        if decode_mode:
            decoded = toon.decode(text)
            if pretty:
                out = json.dumps(decoded, indent=4, ensure_ascii=False)
            else:
                out = json.dumps(decoded, ensure_ascii=False, separators=(",", ":"))
        else:
            out = toon.encode(text)
    except ToonError as e:
        logger.error(f"Codec error: {e}")
        typer.echo(f"TOON parsing/serialization error: {e}", err=True)
        raise typer.Exit(code=EXIT_CODEC_ERROR)
    except (TypeError, ValueError) as e:
        logger.error(f"Unexpected error: {e}")
        typer.echo(f"Unexpected error: {e}", err=True)
        raise typer.Exit(code=EXIT_UNEXPECTED_ERROR)

    if output is not None:
        try:
            output.write_text(out, encoding="utf-8")
        except OSError as e:
            logger.error(f"Failed to write {output}: {e}")
            typer.echo(f"Failed to write output file: {e}", err=True)
            raise typer.Exit(code=EXIT_OUTPUT_ERROR)
        logger.debug(f"Wrote {len(out)} chars to {output}")
        typer.echo(f"Saved to {output}")
    else:
        typer.echo(out)


def main() -> None:
    app()
