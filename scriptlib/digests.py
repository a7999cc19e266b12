# -*- coding: utf-8 -*-
#
#    ScriptLib - Bitcoin Script Interpreter
#    DIGESTS - Hash-160 strategies used by OP_HASH160
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
from Crypto.Hash import RIPEMD160
from scriptlib.main import *

_logger = logging.getLogger(__name__)


class ScriptEnvironmentError(Exception):
    """
    Raised when a cryptographic primitive or other part of the environment is not available. This is not a
    property of the script being evaluated, so it is no ScriptError and must never be read as a rejected script.

    """
    def __init__(self, msg=''):
        self.msg = msg
        _logger.error(msg)

    def __str__(self):
        return self.msg


class HashProvider(object):
    """
    Base class for Hash-160 strategies. Subclasses implement :func:`_digest`, the :func:`digest` method
    checks the result is exactly HASH_DIGEST_SIZE bytes long.
    """

    name = ''

    def digest(self, data):
        """
        Calculate Hash-160 digest of data

        :param data: Data to hash, any length
        :type data: bytes

        :return bytes: 20 bytes digest
        """
        result = self._digest(bytes(data))
        if len(result) != HASH_DIGEST_SIZE:
            raise ScriptEnvironmentError("Hash provider %s returned %d bytes, expected %d" %
                                         (self.name, len(result), HASH_DIGEST_SIZE))
        return result

    def _digest(self, data):
        raise NotImplementedError

    def __call__(self, data):
        return self.digest(data)

    def __repr__(self):
        return "<%s(%s)>" % (self.__class__.__name__, self.name)


class TruncatedHash160(HashProvider):
    """
    Approximation of Hash-160: a single hash truncated to 20 bytes. Default algorithm is sha256.

    >>> len(TruncatedHash160().digest(b''))
    20
    """

    def __init__(self, algorithm='sha256'):
        self.algorithm = algorithm
        self.name = 'truncated_%s' % algorithm

    def _digest(self, data):
        try:
            hasher = hashlib.new(self.algorithm)
        except ValueError as e:
            raise ScriptEnvironmentError("Hash algorithm %s not available: %s" % (self.algorithm, e))
        hasher.update(data)
        return hasher.digest()[:HASH_DIGEST_SIZE]


class Hash160(HashProvider):
    """
    Standard Bitcoin Hash-160: RIPEMD-160 of the SHA-256 hash of the data. RIPEMD-160 is taken from
    pycryptodome, because hashlib does not offer it on all OpenSSL versions.

    >>> Hash160().digest(bytes.fromhex('0298ddb14f0a9871c4755985f0ece53f99580d243474e5e300078f3dad809b3d45')).hex()
    'c8d26159052b4eddb5a945f0795f220366868189'
    """

    name = 'hash160'

    def _digest(self, data):
        return RIPEMD160.new(hashlib.sha256(data).digest()).digest()


HASH_PROVIDERS = {
    'truncated_sha256': TruncatedHash160,
    'hash160': Hash160,
}


def get_hash_provider(provider=None):
    """
    Get Hash-160 strategy by name. Use the configured default if no name is specified. HashProvider objects are
    returned as is.

    >>> get_hash_provider('hash160')
    <Hash160(hash160)>

    :param provider: Name as defined in HASH_PROVIDERS or a HashProvider object
    :type provider: str, HashProvider

    :return HashProvider:
    """
    if provider is None:
        provider = DEFAULT_HASH_PROVIDER
    if isinstance(provider, HashProvider):
        return provider
    if provider not in HASH_PROVIDERS:
        raise ScriptEnvironmentError("Unknown hash provider '%s', use one of %s" % (provider, list(HASH_PROVIDERS)))
    return HASH_PROVIDERS[provider]()
