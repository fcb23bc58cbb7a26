"""
irsource CLI.

Commands:
- annotate: Annotate the sources of a dumped method and print line flags
"""

from __future__ import annotations

import json
import sys
from pathlib import Path

import click

from irsource import __version__
from irsource.annotation.annotator import SourceAnnotator
from irsource.config import AnnotatorConfig, HoistPolicy
from irsource.ir.loader import load_method_dump
from irsource.ir.model import Method
from irsource.types.core import LineFlag
from irsource.types.errors import DumpFormatError, IRSourceError
from irsource.utils.logger import configure_logging
from irsource.utils.serialization import serialize_to_primitives


def _flag_columns(flags: LineFlag) -> str:
    """Three-column marker: D(ead), L(ive), H(oisted)."""
    live = LineFlag.LIVE in flags
    hoisted = LineFlag.LICM in flags
    return "".join(
        [
            "D" if not live and not hoisted else " ",
            "L" if live else " ",
            "H" if hoisted else " ",
        ]
    )


def render_text(method: Method) -> str:
    """Render every inlined function's lines with their flags."""
    out: list[str] = []
    for inline_id, function in enumerate(method.inlined):
        out.append(f"== {method.name} [inline {inline_id}, source {function.source.id}]")
        for number, (text, flags) in enumerate(
            zip(function.source.lines, function.annotations), start=1
        ):
            out.append(f"{_flag_columns(flags)} {number:4d} | {text}")
    return "\n".join(out)


def render_json(method: Method) -> str:
    """Render annotations and the source mapping as a JSON document."""
    document = {
        "name": method.name,
        "annotations": [
            {
                "inline_id": inline_id,
                "source_id": function.source.id,
                "lines": function.annotations,
            }
            for inline_id, function in enumerate(method.inlined)
        ],
        "src_mapping": method.src_mapping,
    }
    return json.dumps(serialize_to_primitives(document), indent=2)


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="irsource", message="%(prog)s v%(version)s")
@click.pass_context
def cli(ctx: click.Context) -> None:
    """irsource - Map compiler IR back onto JavaScript source.

    Marks source lines as dead, live, or hoisted out of their loop.
    """
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


@cli.command()
@click.argument("dump", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["text", "json"]),
    default="text",
    show_default=True,
    help="Output format",
)
@click.option(
    "--hoist-policy",
    type=click.Choice([p.value for p in HoistPolicy]),
    default=None,
    help="How hoisted instructions are detected (default: IRSOURCE_HOIST_POLICY or index)",
)
@click.option("--log-level", default=None, help="Log level (default: IRSOURCE_LOG_LEVEL or WARNING)")
def annotate(dump: Path, output_format: str, hoist_policy: str | None, log_level: str | None) -> None:
    """Annotate the sources of a method dump.

    DUMP is a JSON file with the method's sources, blocks and position tables.
    """
    configure_logging(log_level)

    try:
        if hoist_policy is not None:
            config = AnnotatorConfig(hoist_policy=HoistPolicy(hoist_policy))
        else:
            config = AnnotatorConfig.from_env()

        try:
            data = json.loads(dump.read_text(encoding="utf-8"))
        except json.JSONDecodeError as e:
            raise DumpFormatError(f"{dump} is not valid JSON: {e}", original_error=e) from e

        method, blocks, ir_info = load_method_dump(data)
        SourceAnnotator(config=config).annotate(method, blocks, ir_info)
    except IRSourceError as e:
        click.echo(e.get_formatted_message(), err=True)
        click.echo(str(e), err=True)
        sys.exit(1)

    if output_format == "json":
        click.echo(render_json(method))
    else:
        click.echo(render_text(method))


def main() -> None:
    """Main entry point."""
    cli()


if __name__ == "__main__":
    main()
