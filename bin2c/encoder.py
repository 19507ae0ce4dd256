"""
Conversion of raw bytes into the body of a C unsigned char array.

Every byte is rendered as a 3 columns wide decimal number followed by a comma.
The encoders return the list of output lines along with the number of tokens
written, which is the value of the NAME_len constant.
"""

import re

CR = 0x0D
LF = 0x0A

BYTES_PER_LINE = 20  # 80 columns

BINARY_CLOSING = '\n  0 };\n\n'
TEXT_CLOSING = '  0 };\n\n'

LINE_ENDINGS = {
    'cr': bytes([CR]),
    'lf': bytes([LF]),
    'crlf': bytes([CR, LF]),
}

TOKEN_PATTERN = re.compile(r'\s*(\d+)\s*,')


def format_bytes(data: bytes) -> str:
    return ''.join(f'{byte:3d},' for byte in data)


def encode_binary(data: bytes) -> tuple[list[str], int]:
    """Dump *data* 20 bytes per line."""
    lines = []
    count = len(data) - len(data) % BYTES_PER_LINE
    for start in range(0, count, BYTES_PER_LINE):
        lines.append(format_bytes(data[start:start + BYTES_PER_LINE]) + '\n')

    lines.append(format_bytes(data[count:]) + BINARY_CLOSING)
    return lines, len(data)


def encode_text(data: bytes, line_ending: str | None = None) -> tuple[list[str], int]:
    """
    Dump *data* keeping the line structure of the original file: an output
    line is terminated after each CR, LF or CRLF sequence. If *line_ending*
    is one of LINE_ENDINGS keys, every line terminator is replaced by it.
    """
    replacement = LINE_ENDINGS[line_ending] if line_ending else None

    lines = []
    length = 0
    current = []
    n = 0
    while n < len(data):
        byte = data[n]
        if byte in (CR, LF):
            terminator = data[n:n + 1]
            if byte == CR and data[n + 1:n + 2] == bytes([LF]):
                terminator = data[n:n + 2]
                n += 1
            if replacement is not None:
                terminator = replacement
            current.append(format_bytes(terminator))
            length += len(terminator)
        else:
            current.append(f'{byte:3d},')
            length += 1

        if byte in (CR, LF) or n >= len(data) - 1:
            lines.append(''.join(current) + '\n')
            current = []
        n += 1

    lines.append(TEXT_CLOSING)
    return lines, length


def encode(data: bytes, mode: str = 'binary', line_ending: str | None = None) -> tuple[list[str], int]:
    if mode == 'text':
        return encode_text(data, line_ending)
    return encode_binary(data)


def decode_tokens(lines: list[str]) -> bytes:
    """
    Parse back the bytes of encoded lines, dropping the terminating 0.
    """
    values = [int(tok) for tok in TOKEN_PATTERN.findall(''.join(lines))]
    return bytes(values)
