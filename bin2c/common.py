"""
Logging and environment helpers shared by the bin2c stages
"""

import logging
import os
import sys

CONFIG = {'debug': False}
LOGGER = logging.getLogger('bin2c')

# level-msg pairs issued before a log file is attached. They are replayed
# into the file once set_log_file() is called.
TMP_LOG_STRLIST = []


def str2bool(value: str) -> bool:
    """
    Convert an environment-style string to bool
    """
    return value.strip().lower() in ('1', 'yes', 'true', 'on')


def load_env_config(environ=None):
    """
    Update CONFIG and logging from BIN2C_DEBUG and BIN2C_LOG_FILE
    """
    if environ is None:
        environ = os.environ

    CONFIG['debug'] = str2bool(environ.get('BIN2C_DEBUG', ''))

    log_file = environ.get('BIN2C_LOG_FILE')
    if log_file:
        set_log_file(log_file)


def set_log_file(filename):
    """
    Init logger to also write to *filename*.
    """
    log_handler = logging.FileHandler(filename, mode='w')

    formatter = logging.Formatter("%(asctime)s: %(levelname)s: %(message)s",
                                  "%Y-%m-%d %H:%M:%S")
    log_handler.setFormatter(formatter)

    LOGGER.addHandler(log_handler)
    LOGGER.setLevel(logging.DEBUG)

    for level, line in TMP_LOG_STRLIST:
        LOGGER.log(level, line)
    TMP_LOG_STRLIST.clear()


def _log_or_store(level, *args):
    line = ' '.join(str(arg) for arg in args)
    if not LOGGER.handlers:
        TMP_LOG_STRLIST.append((level, line))
    else:
        LOGGER.log(level, line)


def eprint(*args, **kwargs):
    """
    error print: print to stderr
    """
    _log_or_store(logging.ERROR, *args)
    print(*args, file=sys.stderr, **kwargs)


def iprint(*args, **kwargs):
    """
    info print: status line on stdout
    """
    _log_or_store(logging.INFO, *args)
    print(*args, **kwargs)


def dprint(*args, **kwargs):
    """
    debug print: print to stderr only if debug is enabled
    """
    _log_or_store(logging.DEBUG, *args)
    if CONFIG['debug']:
        print(*args, file=sys.stderr, **kwargs)
