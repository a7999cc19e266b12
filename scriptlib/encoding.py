# -*- coding: utf-8 -*-
#
#    ScriptLib - Bitcoin Script Interpreter
#    ENCODING - Methods for encoding and conversion
#    © 2026 October - 1200 Web Development <http://1200wd.com/>
#
#    This program is free software: you can redistribute it and/or modify
#    it under the terms of the GNU Affero General Public License as
#    published by the Free Software Foundation, either version 3 of the
#    License, or (at your option) any later version.
#
#    This program is distributed in the hope that it will be useful,
#    but WITHOUT ANY WARRANTY; without even the implied warranty of
#    MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
#    GNU Affero General Public License for more details.
#
#    You should have received a copy of the GNU Affero General Public License
#    along with this program.  If not, see <http://www.gnu.org/licenses/>.
#

import hashlib
from scriptlib.main import *
_logger = logging.getLogger(__name__)


class EncodingError(Exception):
    """ Log and raise encoding errors """
    def __init__(self, msg=''):
        self.msg = msg
        _logger.warning(msg)

    def __str__(self):
        return self.msg


def to_bytes(string, unhexlify=True):
    """
    Convert string, hexadecimal string  to bytes

    >>> to_bytes('88ac')
    b'\\x88\\xac'
    >>> to_bytes('pubkey')
    b'pubkey'

    :param string: String to convert
    :type string: str, bytes
    :param unhexlify: Try to unhexlify hexstring
    :type unhexlify: bool

    :return: Bytes var
    """
    if not string:
        return b''
    if unhexlify:
        try:
            if isinstance(string, bytes):
                string = string.decode()
            s = bytes.fromhex(string)
            return s
        except (TypeError, ValueError):
            pass
    if isinstance(string, bytes):
        return string
    else:
        return bytes(string, 'utf8')


def double_sha256(string, as_hex=False):
    """
    Get double SHA256 hash of string

    :param string: String to be hashed
    :type string: bytes
    :param as_hex: Return value as hexadecimal string. Default is False
    :type as_hex: bool

    :return bytes, str:
    """
    if not as_hex:
        return hashlib.sha256(hashlib.sha256(string).digest()).digest()
    else:
        return hashlib.sha256(hashlib.sha256(string).digest()).hexdigest()


def encode_num(num):
    """
    Encode number as byte used in Script language. Bitcoin specific little endian format with sign for negative
    integers.

    >>> encode_num(0)
    b''
    >>> encode_num(1)
    b'\\x01'
    >>> encode_num(16)
    b'\\x10'
    >>> encode_num(128)
    b'\\x80\\x00'
    >>> encode_num(-1)
    b'\\x81'
    >>> encode_num(1000)
    b'\\xe8\\x03'

    :param num: number to represent
    :type num: int

    :return bytes:
    """
    if num == 0:
        return b''
    abs_num = abs(num)
    negative = num < 0
    length = (abs_num.bit_length() + 7) // 8
    encoded = abs_num.to_bytes(length, byteorder='little')
    if encoded[-1] & 0x80:
        if negative:
            encoded += b'\x80'
        else:
            encoded += b'\0'
    elif negative:
        encoded = encoded[:-1] + (encoded[-1] | 0x80).to_bytes(1, 'big')
    return encoded


def decode_num(encoded):
    """
    Decode byte representation of number used in Script language to integer.

    >>> decode_num(b'')
    0
    >>> decode_num(b'\\x80\\x00')
    128
    >>> decode_num(b'\\x81')
    -1

    :param encoded: Number as bytes
    :type encoded: bytes

    :return int:
    """
    if encoded == b'':
        return 0
    negative = False
    if encoded[-1] & 0x80:
        negative = True
    element = encoded[:-1] + (encoded[-1] & 0x7f).to_bytes(1, 'big')
    num = int.from_bytes(element, 'little')
    if negative:
        return -num
    else:
        return num


def cast_to_bool(data):
    """
    Interpret a stack item as boolean. An empty item, an item with only zero bytes and the negative zero
    encoding (zero bytes followed by 0x80) are False, everything else is True.

    >>> cast_to_bool(b'')
    False
    >>> cast_to_bool(b'\\x00\\x80')
    False
    >>> cast_to_bool(b'\\x80\\x00')
    True

    :param data: Stack item
    :type data: bytes

    :return bool:
    """
    for i, byte in enumerate(data):
        if byte != 0:
            if i == len(data) - 1 and byte == 0x80:
                return False
            return True
    return False


def decode_literal_text(payload, charset=LITERAL_TEXT_CHARSET):
    """
    Decode the payload of a <literal> token as text

    >>> decode_literal_text('placeholder sig')
    b'placeholder sig'

    :param payload: Text between the literal delimiters
    :type payload: str
    :param charset: Character set used to encode the text, default is utf-8
    :type charset: str

    :return bytes:
    """
    try:
        return payload.encode(charset)
    except (UnicodeError, LookupError) as e:
        raise EncodingError("Cannot encode literal '%s' with %s: %s" % (payload, charset, e))


def decode_literal_hex(payload):
    """
    Decode the payload of a <literal> token as hexadecimal string. Whitespace between bytes is allowed.

    >>> decode_literal_hex('88ac')
    b'\\x88\\xac'
    >>> decode_literal_hex('')
    b''

    :param payload: Hexadecimal text between the literal delimiters
    :type payload: str

    :return bytes:
    """
    try:
        return bytes.fromhex(payload)
    except ValueError:
        raise EncodingError("Literal '%s' is not a valid hexadecimal string" % payload)


LITERAL_DECODERS = {
    'text': decode_literal_text,
    'hex': decode_literal_hex,
}


def get_literal_decoder(encoding=None):
    """
    Get method to decode <literal> tokens for given encoding name. Use the configured default if no encoding
    is specified. A callable is returned as is, so custom decoders can be used as well.

    :param encoding: Name of encoding as defined in LITERAL_DECODERS, or a callable str -> bytes
    :type encoding: str, callable

    :return callable:
    """
    if encoding is None:
        encoding = LITERAL_ENCODING
    if callable(encoding):
        return encoding
    if encoding not in LITERAL_DECODERS:
        raise EncodingError("Unknown literal encoding '%s', use one of %s" % (encoding, list(LITERAL_DECODERS)))
    return LITERAL_DECODERS[encoding]
