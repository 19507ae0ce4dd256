import argparse
import os
import re

from .errors import UsageError

USAGE = """\
bin2c converts a file to const unsigned char byte array for general use
  by any C/C++ program.

The output contains two variables, the data size and the data itself.
  const size_t stringname_len; // string length - 1 (excludes terminating NULL)
  const unsigned char stringname[] = { 123, 232, ... , 0 };
When converting text files you may want to use the -lf switch since many
  programs can easily parse Unix line endings and the output will be the same
  no matter what line endings the original file has.
Switches :
  -b    Binary dump for binary files, 80 columns wide (default)
  -t    Text dump where the original line structure is maintained
  -cr   Convert line endings to carriage returns CR='\\r' for Mac (use with -t)
  -lf   Convert line endings to line feeds LF='\\n' for Unix (use with -t)
  -crlf Convert line endings to CRLF='\\r\\n' for DOS (use with -t)
  -n    Name of the c string to create, else derive name from input file
  -s    Add the 'static' keyword to the const char array
  -o    Filename to output to, else output to stdout
  -w    When used with -o always overwrite the output file
Usage :
  bin2c [-b or -t] [-cr or -lf or -crlf] [-n cstringname] [-s]
        [-o outputfile.c] [-w] inputfile
"""

INVALID_SYMBOL_CHARS = re.compile(r'[^A-Za-z0-9_]')


def _switch(token: str) -> str | None:
    """Return the switch name of '-x' or '/x' tokens, None otherwise."""
    if len(token) > 1 and token[0] in '-/':
        return token[1:]
    return None


def strip_path(filename: str) -> str:
    """Remove any unix or DOS directory part of *filename*."""
    return re.split(r'[/\\]', filename)[-1]


def derive_symbol_name(filename: str) -> str:
    """
    Build a C identifier from the base name of *filename*, replacing every
    character not allowed in an identifier by '_'.
    """
    return INVALID_SYMBOL_CHARS.sub('_', strip_path(filename))


def is_readable_file(path: str | None) -> bool:
    return bool(path) and os.path.isfile(path) and os.access(path, os.R_OK)


def parse_options(argv: list[str]) -> argparse.Namespace:
    """
    Parse bin2c command line arguments.

    The last argument is the input file unless it is a known switch. -n and -o
    consume the following argument whatever it is. Unknown arguments are
    ignored.

    Raises:
        UsageError: on missing, conflicting or incomplete arguments
    """
    is_text = False
    is_binary = False
    line_endings = []
    set_name = False
    name = None
    is_static = False
    set_output = False
    output = None
    overwrite = False
    input_path = None

    n = 0
    while n < len(argv):
        token = argv[n]
        match _switch(token):
            case 't':
                is_text = True
            case 'b':
                is_binary = True
            case 'cr' | 'lf' | 'crlf' as ending:
                line_endings.append(ending)
            case 'w':
                overwrite = True
            case 'n':
                set_name = True
                n += 1
                name = argv[n] if n < len(argv) else None
            case 's':
                is_static = True
            case 'o':
                set_output = True
                n += 1
                output = argv[n] if n < len(argv) else None
            case _ if n == len(argv) - 1:
                input_path = token
        n += 1

    if not argv:
        raise UsageError('')
    if is_text and is_binary:
        raise UsageError('Error: Only use -b or -t flags, not both.')
    if is_binary and line_endings:
        raise UsageError('Error: Only use -cr, -lf, -crlf with text file -t '
                         'flag, not -b binary.')
    if len(line_endings) > 1:
        raise UsageError('Error: Only use one of -cr, -lf, -crlf at a time.')
    if set_name and not name:
        raise UsageError('Error: Missing name of the string to use for -n '
                         'flag.')
    if set_output and not output:
        raise UsageError('Error: Missing output filename to use for -o flag.')
    if not is_readable_file(input_path):
        raise UsageError('Error: Invalid or missing input filename : '
                         f"'{input_path}'")

    return argparse.Namespace(
        mode='text' if is_text else 'binary',
        line_ending=line_endings[0] if line_endings else None,
        name=name,
        is_static=is_static,
        output=output,
        overwrite=overwrite,
        input=input_path,
    )
