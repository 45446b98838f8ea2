"""Punycode command line interface.

Usage:
    punycode [global-options] <command> [options] [VALUE]

Examples:
    punycode encode bücher                    # bcher-kva
    punycode decode 6qq79v                    # 你好
    punycode encode --code-points "U+4F60 U+597D"
    punycode decode --code-points 6qq79v      # U+4F60 U+597D
    punycode trace --decode bcher-kva         # step by step report
    punycode encode -f labels.txt             # one label per line
    punycode serve --config config/config.yaml
"""

import sys

import click

from punycode_mcp_server.codec import decode, decode_text, encode, encode_text
from punycode_mcp_server.exceptions import PunycodeError, handle_codec_error
from punycode_mcp_server.server import DEFAULT_CONFIG_PATH, run_server
from punycode_mcp_server.tools import PunycodeTrace, format_code_points, parse_code_points


def read_values(value, path):
    """Return the values to convert: the argument, the file lines or stdin lines."""
    if value is not None:
        return [value]
    if path is not None:
        with open(path, encoding="utf-8") as f:
            lines = f.read().splitlines()
    else:
        lines = sys.stdin.read().splitlines()
    return [line.strip() for line in lines if line.strip()]


def input_options(f):
    """Decorator to add the common input options."""
    f = click.option("--code-points", "-c", is_flag=True,
                     help="Read or print code points (U+XXXX) instead of text")(f)
    f = click.option("--file", "-f", "path", type=click.Path(exists=True, dir_okay=False),
                     help="Read one value per line from a file")(f)
    f = click.argument("value", required=False)(f)
    return f


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output")
@click.pass_context
def cli(ctx, verbose):
    """Punycode (RFC 3492) encoder and decoder for single domain labels."""
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose


@cli.command("encode")
@input_options
@click.pass_context
def cmd_encode(ctx, value, path, code_points):
    """Encode Unicode labels into Punycode.

    VALUE is a single label. Without VALUE the labels are read from --file
    or from standard input. No xn-- prefix is added.
    """
    for item in read_values(value, path):
        try:
            if code_points:
                result = encode(parse_code_points(item))
            else:
                result = encode_text(item)
        except (PunycodeError, ValueError) as e:
            raise click.ClickException(handle_codec_error(e))
        if ctx.obj["verbose"]:
            click.echo(f"{item!r} -> {result!r}", err=True)
        click.echo(result)


@cli.command("decode")
@input_options
@click.pass_context
def cmd_decode(ctx, value, path, code_points):
    """Decode Punycode labels into Unicode.

    VALUE is a single label without the xn-- prefix. Without VALUE the labels
    are read from --file or from standard input.
    """
    for item in read_values(value, path):
        try:
            if code_points:
                result = " ".join(format_code_points(decode(item)))
            else:
                result = decode_text(item)
        except PunycodeError as e:
            raise click.ClickException(handle_codec_error(e))
        if ctx.obj["verbose"]:
            click.echo(f"{item!r} -> {result!r}", err=True)
        click.echo(result)


@cli.command("trace")
@click.argument("value")
@click.option("--decode", "-d", "decoding", is_flag=True,
              help="Trace decoding of a Punycode label instead of encoding")
def cmd_trace(value, decoding):
    """Show every step of a Punycode conversion."""
    tracer = PunycodeTrace(direction="decode" if decoding else "encode")
    try:
        tracer.perform_trace(value)
    except PunycodeError as e:
        raise click.ClickException(handle_codec_error(e))
    click.echo(tracer.get_text_report())


@cli.command("serve")
@click.option("--config", "config_path", default=DEFAULT_CONFIG_PATH, show_default=True,
              help="Path to the YAML configuration file")
@click.option("--host", default=None, help="Host to bind to (default: server.host from config)")
@click.option("--port", default=None, type=int, help="Port to listen on (default: server.port from config)")
def cmd_serve(config_path, host, port):
    """Run the Punycode MCP server over HTTP."""
    run_server(config_path, host, port)


if __name__ == "__main__":
    cli()
