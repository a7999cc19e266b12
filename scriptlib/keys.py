# -*- coding: utf-8 -*-
#
#    ScriptLib - Bitcoin Script Interpreter
#    KEYS - Signature verification strategies used by OP_CHECKSIG
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

import ecdsa
from ecdsa.util import sigdecode_der, sigdecode_string, MalformedSignature
from scriptlib.encoding import *
from scriptlib.digests import ScriptEnvironmentError

_logger = logging.getLogger(__name__)


class SignatureVerifier(object):
    """
    Base class for signature verification strategies. Implement the :func:`verify` method, which must return
    a boolean and should not raise exceptions for invalid signatures or keys.
    """

    name = ''

    def verify(self, signature, public_key, message=None):
        """
        Verify signature for public key and signed message

        :param signature: Signature as found on the stack
        :type signature: bytes
        :param public_key: Public key as found on the stack
        :type public_key: bytes
        :param message: Signed message digest, normally a transaction hash
        :type message: bytes

        :return bool:
        """
        raise NotImplementedError

    def __call__(self, signature, public_key, message=None):
        return self.verify(signature, public_key, message)

    def __repr__(self):
        return "<%s(%s)>" % (self.__class__.__name__, self.name)


class MockSignatureVerifier(SignatureVerifier):
    """
    Placeholder verifier for tests and demonstrations. Accepts every signature as long as signature and public key
    are not empty, no cryptographic check is done and the message is ignored. Never use to authorize real spends.

    >>> MockSignatureVerifier().verify(b'sig', b'pubkey')
    True
    >>> MockSignatureVerifier().verify(b'', b'pubkey')
    False
    """

    name = 'mock'

    def verify(self, signature, public_key, message=None):
        return len(signature) > 0 and len(public_key) > 0


class EcdsaSignatureVerifier(SignatureVerifier):
    """
    Verify secp256k1 ECDSA signatures with the ecdsa library.

    Signatures are accepted in DER format followed by a hash type byte, as found in Bitcoin scripts, or as 64 bytes
    r and s values. Public keys can be compressed or uncompressed SEC encoded.

    The message is the signed digest. If it is not 32 bytes long it is hashed with double SHA256 first.
    """

    name = 'ecdsa'

    def __init__(self, message=None):
        """
        Create verifier, optionally with a default message to use when OP_CHECKSIG does not provide one

        :param message: Signed message digest, normally a transaction hash
        :type message: bytes, str
        """
        self.message = message

    def verify(self, signature, public_key, message=None):
        message = self.message if message is None else message
        if message is None:
            raise ScriptEnvironmentError("No message supplied, cannot verify signature with %s verifier" % self.name)
        digest = to_bytes(message) if isinstance(message, str) else bytes(message)
        if len(digest) != 32:
            digest = double_sha256(digest)
        signature = bytes(signature)
        if len(signature) > 64 and signature.startswith(b'\x30'):
            sig_value = signature[:-1]
            sigdecode = sigdecode_der
        elif len(signature) == 64:
            sig_value = signature
            sigdecode = sigdecode_string
        else:
            _logger.info("Signature %s has unknown format" % signature.hex())
            return False

        try:
            ver_key = ecdsa.VerifyingKey.from_string(bytes(public_key), curve=ecdsa.SECP256k1)
        except (ecdsa.MalformedPointError, ValueError) as e:
            _logger.info("Invalid public key %s (error %s)" % (bytes(public_key).hex(), e))
            return False
        try:
            ver_key.verify_digest(sig_value, digest, sigdecode=sigdecode)
        except ecdsa.BadSignatureError:
            return False
        except (ecdsa.BadDigestError, ecdsa.der.UnexpectedDER, MalformedSignature) as e:
            _logger.info("Bad signature %s (error %s)" % (signature.hex(), e))
            return False
        return True


SIGNATURE_VERIFIERS = {
    'mock': MockSignatureVerifier,
    'ecdsa': EcdsaSignatureVerifier,
}


def get_signature_verifier(verifier=None):
    """
    Get signature verification strategy by name. Use the configured default if no name is specified.
    SignatureVerifier objects are returned as is.

    >>> get_signature_verifier('mock')
    <MockSignatureVerifier(mock)>

    :param verifier: Name as defined in SIGNATURE_VERIFIERS or a SignatureVerifier object
    :type verifier: str, SignatureVerifier

    :return SignatureVerifier:
    """
    if verifier is None:
        verifier = DEFAULT_SIGNATURE_VERIFIER
    if isinstance(verifier, SignatureVerifier):
        return verifier
    if verifier not in SIGNATURE_VERIFIERS:
        raise ScriptEnvironmentError("Unknown signature verifier '%s', use one of %s" %
                                     (verifier, list(SIGNATURE_VERIFIERS)))
    return SIGNATURE_VERIFIERS[verifier]()
