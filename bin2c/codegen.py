import argparse
from pathlib import Path
from typing import Any, TypeAlias

from jinja2 import Environment, FileSystemLoader

from .common import dprint
from .encoder import encode
from .options import derive_symbol_name, strip_path
from .reader import read_binary_file
from .sink import print_lines, write_lines_to_file

ContextDict: TypeAlias = dict[str, Any]

# Setup Jinja2 environment
TEMPLATE_DIR = Path(__file__).parent / 'templates'
env = Environment(
    loader=FileSystemLoader(TEMPLATE_DIR),
    autoescape=False,
    keep_trailing_newline=True,
    trim_blocks=True,
    lstrip_blocks=True,
)


def render_template(template_name: str, context: ContextDict) -> list[str]:
    """Render *template_name* and return it as a list of lines."""
    template = env.get_template(template_name)
    return template.render(context).splitlines(keepends=True)


def build_header(name: str, is_static: bool, filename: str, length: int) -> list[str]:
    """
    Declaration block of the array: comments, the NAME_len constant and the
    opening of the NAME[length+1] array, whose extra element is the
    terminating 0 written by the encoders.
    """
    context = {
        'name': name,
        'is_static': is_static,
        'filename': filename,
        'length': length,
    }
    return render_template('header.c.jinja', context)


def prepend_header(lines: list[str], header: list[str]) -> list[str]:
    return header + lines


def generate(args: argparse.Namespace, data: bytes) -> list[str]:
    """Build the complete output of bin2c for *data*."""
    # original filename is only stripped from its path when deriving the name
    filename = args.input
    name = args.name
    if name is None:
        filename = strip_path(args.input)
        name = derive_symbol_name(args.input)

    lines, length = encode(data, args.mode, args.line_ending)
    dprint(f"Encoded {len(data)} bytes of '{args.input}' as {length} values")

    header = build_header(name, args.is_static, filename, length)
    return prepend_header(lines, header)


def cmd_bin2c(args: argparse.Namespace) -> bool:
    """
    Convert the input file and print it or write it to args.output.
    Returns True if something has been printed or written.
    """
    data = read_binary_file(args.input)
    lines = generate(args, data)

    if args.output is None:
        print_lines(lines)
        return True

    return write_lines_to_file(args.output, lines, args.overwrite)
