import sys

from .codegen import cmd_bin2c
from .common import dprint, eprint, load_env_config
from .errors import Bin2cError, UsageError
from .options import USAGE, parse_options


def main(argv: list[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    load_env_config()

    try:
        args = parse_options(argv)
    except UsageError as err:
        if str(err):
            eprint(f'{err}\n')
        eprint(USAGE, end='')
        return 2

    dprint(f"Generating code with {args}")

    try:
        cmd_bin2c(args)
    except Bin2cError as err:
        eprint(err)
        return 1

    return 0
