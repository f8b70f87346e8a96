# strip.py

import re
from typing import AnyStr

# strip-ansi grammar: OSC-like sequences terminated by BEL, or CSI
# parameter groups of up to 4 digits followed by a final character.
_BODY = (
    r'[\[\]()#;?]*'
    r'(?:(?:(?:[a-zA-Z\d]*(?:;[a-zA-Z\d]*)*)?\x07)'
    r'|(?:(?:\d{1,4}(?:;\d{0,4})*)?[\dA-PRZcf-ntqry=><~]))'
)

ANSI_PATTERN = r'[\x1b\x9b]' + _BODY
ANSI_REGEX = re.compile(ANSI_PATTERN, re.ASCII)

# U+009B is matched as its UTF-8 encoding, never as a bare 0x9b byte
ANSI_BYTES_REGEX = re.compile(rb'(?:\x1b|\xc2\x9b)' + _BODY.encode('ascii'))


def strip_ansi(data: AnyStr) -> AnyStr:
    """
    Remove every ANSI escape sequence from text or bytes.

    Content between sequences is returned untouched and in order; the
    result has the same type as the input.
    """
    if isinstance(data, (bytes, bytearray)):
        return ANSI_BYTES_REGEX.sub(b'', bytes(data))
    return ANSI_REGEX.sub('', data)


def visible_length(text: str) -> int:
    """Length of text as displayed, ignoring escape sequences."""
    return len(strip_ansi(text))
