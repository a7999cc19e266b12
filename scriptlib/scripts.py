# -*- coding: utf-8 -*-
#
#    ScriptLib - Bitcoin Script Interpreter
#    Scripts class - Tokenize, Execute and Validate scripts
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

from collections import namedtuple
from scriptlib.encoding import *
from scriptlib.config.opcodes import *
from scriptlib.digests import get_hash_provider
from scriptlib.keys import get_signature_verifier


_logger = logging.getLogger(__name__)


class ScriptError(Exception):
    """
    Handle Script Exceptions. Base class of all errors caused by the script itself.

    """
    def __init__(self, msg='', opcode=None):
        self.msg = msg
        self.opcode = opcode
        _logger.warning(msg)

    def __str__(self):
        return self.msg


class StackUnderflowError(ScriptError):
    """ Not enough items on the stack to run an operation """
    def __init__(self, opcode, required=1, depth=0):
        self.required = required
        self.depth = depth
        super(StackUnderflowError, self).__init__(
            "Stack %s method requires minimum of %d stack item%s, found %d" %
            (opcode, required, '' if required == 1 else 's', depth), opcode)


class UnknownOpcodeError(ScriptError):
    """ Token is not a literal and not a known opcode """
    def __init__(self, token):
        self.token = token
        super(UnknownOpcodeError, self).__init__("Opcode %s not found" % token, token)


class VerificationError(ScriptError):
    """ A *VERIFY opcode found a false value """
    def __init__(self, opcode):
        super(VerificationError, self).__init__("%s failed, values are not equal" % opcode, opcode)


class EmptyFinalStackError(ScriptError):
    """ No items left on the stack after executing the scripts """
    def __init__(self):
        super(EmptyFinalStackError, self).__init__("Stack is empty after script execution", 'FINAL')


class ResourceLimitError(ScriptError):
    """ A resource ceiling of the interpreter is exceeded """
    def __init__(self, limit, maximum, opcode=None):
        self.limit = limit
        self.maximum = maximum
        super(ResourceLimitError, self).__init__("Limit %s exceeded, maximum is %d" % (limit, maximum), opcode)


class LiteralError(ScriptError, EncodingError):
    """ A <literal> in the script text cannot be decoded to bytes """
    def __init__(self, payload, msg):
        self.payload = payload
        super(LiteralError, self).__init__(msg, 'PUSHDATA')


class PushData(namedtuple('PushData', ['data'])):
    """ Literal data token, the data is pushed on the stack as is """
    __slots__ = ()

    @property
    def blueprint(self):
        return 'data-%d' % len(self.data)


class Opcode(namedtuple('Opcode', ['name'])):
    """ Opcode token, the name is looked up in the opcode table when the token is executed """
    __slots__ = ()

    @property
    def blueprint(self):
        return self.name


def _merge_literal(fields, start):
    # Join fields until one ends with '>', return merged text and index of next unconsumed field
    end = start
    while not fields[end].endswith('>') and end + 1 < len(fields):
        end += 1
    return ' '.join(fields[start:end + 1]), end + 1


def _decode_literal(decoder, payload):
    try:
        data = decoder(payload)
    except EncodingError as e:
        raise LiteralError(payload, e.msg)
    if not isinstance(data, (bytes, bytearray, memoryview)):
        raise EncodingError("Literal decoder returned %s for '%s', expected bytes" % (type(data).__name__, payload))
    return bytes(data)


def tokenize(script, literal_encoding=None, max_tokens=None):
    """
    Split script text in tokens. Fields are separated by whitespace. A field starting with '<' opens a literal
    which continues until a field ending with '>'. The text between the delimiters is decoded to bytes with the
    literal decoder.

    >>> tokenize('<sig one> <pubkey> OP_CHECKSIG')
    (PushData(data=b'sig one'), PushData(data=b'pubkey'), Opcode(name='OP_CHECKSIG'))
    >>> tokenize('')
    ()

    A literal which is never closed is returned as opcode and will be rejected when executed. A literal which
    cannot be decoded raises a LiteralError, which is a ScriptError. An unknown encoding name or a decoder which
    does not return bytes raises an EncodingError.

    :param script: Script text
    :type script: str
    :param literal_encoding: Name of literal encoding, i.e. 'text' or 'hex', or a method to decode literals. Leave empty to use default from config
    :type literal_encoding: str, callable
    :param max_tokens: Raise ResourceLimitError if script contains more tokens. Default is None, no limit
    :type max_tokens: int

    :return tuple: Tuple of PushData and Opcode tokens
    """
    decoder = get_literal_decoder(literal_encoding)
    fields = script.split()
    tokens = []
    i = 0
    while i < len(fields):
        if fields[i].startswith('<'):
            text, i = _merge_literal(fields, i)
            if len(text) >= 2 and text.endswith('>'):
                tokens.append(PushData(_decode_literal(decoder, text[1:-1])))
            else:
                tokens.append(Opcode(text))
        else:
            tokens.append(Opcode(fields[i]))
            i += 1
        if max_tokens is not None and len(tokens) > max_tokens:
            raise ResourceLimitError('max_script_tokens', max_tokens)
    return tuple(tokens)


def _to_token(item):
    if isinstance(item, (PushData, Opcode)):
        return item
    elif isinstance(item, str):
        return Opcode(item)
    elif isinstance(item, (bytes, bytearray, memoryview)):
        return PushData(bytes(item))
    raise ScriptError("Cannot convert %s to script token" % repr(item))


class Script(object):
    """
    Immutable list of script tokens. Use :func:`parse` to create a Script from text.

    >>> s = Script.parse('<sig> <pubkey> OP_DUP OP_HASH160 OP_DUP OP_EQUALVERIFY OP_CHECKSIG')
    >>> s
    <Script([data-3, data-6, op_dup, op_hash160, op_dup, op_equalverify, op_checksig])>
    >>> str(s)
    'data-3 data-6 OP_DUP OP_HASH160 OP_DUP OP_EQUALVERIFY OP_CHECKSIG'
    """

    def __init__(self, tokens=None):
        """
        Create a Script object with a list of tokens. Bytes are converted to PushData and strings to Opcode tokens.

        >>> Script([b'data', 'OP_DROP'])
        <Script([data-4, op_drop])>

        :param tokens: List of tokens
        :type tokens: list of PushData, Opcode, bytes, str
        """
        self.tokens = tuple(_to_token(t) for t in tokens) if tokens else ()

    @classmethod
    def parse(cls, script, literal_encoding=None, max_tokens=None):
        """
        Parse script text and return Script object. Wrapper for the :func:`tokenize` method.

        >>> Script.parse('<76a9> OP_DROP', literal_encoding='hex').view()
        '<76a9> OP_DROP'

        :param script: Script text
        :type script: str
        :param literal_encoding: Name of literal encoding or method to decode literals
        :type literal_encoding: str, callable
        :param max_tokens: Maximum number of tokens
        :type max_tokens: int

        :return Script:
        """
        return cls(tokenize(script, literal_encoding, max_tokens))

    @property
    def blueprint(self):
        return [t.blueprint for t in self.tokens]

    def __repr__(self):
        return '<Script([' + ', '.join(b.lower() for b in self.blueprint) + '])>'

    def __str__(self):
        return ' '.join(self.blueprint)

    def __add__(self, other):
        return Script(self.tokens + other.tokens)

    def __len__(self):
        return len(self.tokens)

    def __iter__(self):
        return iter(self.tokens)

    def __bool__(self):
        return bool(self.tokens)

    def __eq__(self, other):
        if not isinstance(other, Script):
            return NotImplemented
        return self.tokens == other.tokens

    def __hash__(self):
        return hash(self.tokens)

    def view(self):
        """
        Return script as text with literals shown as hexadecimal strings. Use the 'hex' literal encoding to parse
        the result again.

        :return str:
        """
        return ' '.join('<%s>' % t.data.hex() if isinstance(t, PushData) else t.name for t in self.tokens)


class Stack(list):
    """
    The Stack object is a child of the Python list object with extra operational (OP) methods. The operations as
    used in the Script language can be used to manipulate the stack / list.

    All items are stored as immutable bytes. Every operation checks the minimum number of stack items it needs
    before changing the stack, so a failing operation leaves the stack as it was.

    For documentation of the op-methods you could check https://en.bitcoin.it/wiki/Script
    """

    def __init__(self, items=None, max_size=None, max_element_size=None):
        """
        Create a new stack.

        >>> Stack([b'\\x01', bytearray(b'\\x02')])
        [b'\\x01', b'\\x02']

        :param items: Initial stack items, last item is top of the stack
        :type items: list of bytes
        :param max_size: Maximum number of items on the stack, None for no limit
        :type max_size: int
        :param max_element_size: Maximum size of an item in bytes, None for no limit
        :type max_element_size: int
        """
        super(Stack, self).__init__()
        self.max_size = max_size
        self.max_element_size = max_element_size
        for item in items or []:
            self.push(item)

    @classmethod
    def from_ints(cls, list_ints):
        """
        Create a Stack item with a list of integers.

        >>> Stack.from_ints([1, 2])
        [b'\\x01', b'\\x02']

        :param list_ints:
        :return:
        """
        return cls([encode_num(n) for n in list_ints])

    def as_ints(self):
        """
        Return the Stack as list of integers

        >>> st = Stack.from_ints([1, 2])
        >>> st.as_ints()
        [1, 2]

        :return list of int:
        """
        return [decode_num(x) for x in self]

    def push(self, item, opcode=None):
        """
        Push a copy of item on top of the stack. Raises ResourceLimitError if the stack is full or the item is
        too large.

        :param item: Item to push
        :type item: bytes, bytearray, memoryview
        :param opcode: Name of opcode, used in error messages
        :type opcode: str
        """
        item = bytes(memoryview(item))
        if self.max_element_size is not None and len(item) > self.max_element_size:
            raise ResourceLimitError('max_element_size', self.max_element_size, opcode)
        if self.max_size is not None and len(self) >= self.max_size:
            raise ResourceLimitError('max_stack_size', self.max_size, opcode)
        self.append(item)

    def require(self, items, opcode):
        """
        Check if stack contains at least the given number of items, raise StackUnderflowError otherwise

        :param items: Minimum number of items
        :type items: int
        :param opcode: Name of opcode, used in error messages
        :type opcode: str
        """
        if len(self) < items:
            raise StackUnderflowError(opcode, items, len(self))

    def snapshot(self):
        return tuple(self)

    def op_dup(self):
        self.require(1, 'OP_DUP')
        self.push(self[-1], 'OP_DUP')
        return True

    def op_drop(self):
        self.require(1, 'OP_DROP')
        self.pop()
        return True

    def op_equal(self, _opcode='OP_EQUAL'):
        self.require(2, _opcode)
        b = self.pop()
        a = self.pop()
        self.push(b'\x01' if a == b else b'', _opcode)
        return True

    def op_equalverify(self):
        self.op_equal('OP_EQUALVERIFY')
        if not cast_to_bool(self.pop()):
            raise VerificationError('OP_EQUALVERIFY')
        return True

    def op_hash160(self, hash_provider):
        self.require(1, 'OP_HASH160')
        digest = hash_provider.digest(self[-1])
        self.pop()
        self.push(digest, 'OP_HASH160')
        return True

    def op_checksig(self, signature_verifier, message=None):
        self.require(2, 'OP_CHECKSIG')
        valid = signature_verifier.verify(self[-2], self[-1], message)
        self.pop()
        self.pop()
        self.push(b'\x01' if valid else b'', 'OP_CHECKSIG')
        return True


class ScriptInterpreter(object):
    """
    Execute scripts on a single stack. An interpreter owns its stack, use a new interpreter for every validation.

    >>> si = ScriptInterpreter()
    >>> si.validate('<sig> <pubkey>', 'OP_DUP OP_HASH160 OP_DUP OP_EQUALVERIFY OP_CHECKSIG')
    True
    >>> si.instruction_count
    7
    """

    def __init__(self, hash_provider=None, signature_verifier=None, message=None, literal_encoding=None,
                 observer=None, final_stack_policy=None, max_script_tokens=MAX_SCRIPT_TOKENS,
                 max_stack_size=MAX_STACK_SIZE, max_element_size=MAX_ELEMENT_SIZE,
                 max_ops_per_script=MAX_OPS_PER_SCRIPT, max_instructions=MAX_INSTRUCTIONS):
        """
        Create a new script interpreter with an empty stack.

        :param hash_provider: Hash-160 strategy used by OP_HASH160, name or HashProvider object. Leave empty to use default from config
        :type hash_provider: str, HashProvider
        :param signature_verifier: Signature strategy used by OP_CHECKSIG, name or SignatureVerifier object. Leave empty to use default from config
        :type signature_verifier: str, SignatureVerifier
        :param message: Signed message to verify, normally a transaction hash. Passed to the signature verifier
        :type message: bytes
        :param literal_encoding: Name of literal encoding or method to decode literals in script text
        :type literal_encoding: str, callable
        :param observer: Method called after each executed token with the token and a snapshot of the stack
        :type observer: callable
        :param final_stack_policy: 'warn' accepts extra items on the final stack with a warning, 'clean' rejects them
        :type final_stack_policy: str
        :param max_script_tokens: Maximum number of tokens in a script, None for no limit
        :type max_script_tokens: int
        :param max_stack_size: Maximum number of stack items, None for no limit
        :type max_stack_size: int
        :param max_element_size: Maximum size of a stack item in bytes, None for no limit
        :type max_element_size: int
        :param max_ops_per_script: Maximum number of non-push opcodes in a script, None for no limit
        :type max_ops_per_script: int
        :param max_instructions: Maximum number of instructions executed by this interpreter, None for no limit
        :type max_instructions: int
        """
        self.hash_provider = get_hash_provider(hash_provider)
        self.signature_verifier = get_signature_verifier(signature_verifier)
        self.message = message
        self.literal_encoding = literal_encoding
        self.observer = observer
        self.final_stack_policy = FINAL_STACK_POLICY if final_stack_policy is None else final_stack_policy
        if self.final_stack_policy not in FINAL_STACK_POLICIES:
            raise ValueError("Unknown final stack policy %s, use one of %s" %
                             (self.final_stack_policy, FINAL_STACK_POLICIES))
        self.max_script_tokens = max_script_tokens
        self.max_ops_per_script = max_ops_per_script
        self.max_instructions = max_instructions
        self._stack = Stack(max_size=max_stack_size, max_element_size=max_element_size)
        self._instruction_count = 0

    def __repr__(self):
        return "<ScriptInterpreter(depth=%d, hash_provider=%s, signature_verifier=%s)>" % \
               (self.depth, self.hash_provider.name, self.signature_verifier.name)

    def __len__(self):
        return len(self._stack)

    @property
    def depth(self):
        return len(self._stack)

    @property
    def stack(self):
        return self._stack.snapshot()

    @property
    def instruction_count(self):
        return self._instruction_count

    def clear(self):
        """
        Remove all items from the stack and reset the instruction counter
        """
        del self._stack[:]
        self._instruction_count = 0

    def parse(self, script):
        """
        Convert script to tuple of tokens.

        :param script: Script text, Script object or list of tokens
        :type script: str, Script, list

        :return tuple:
        """
        if isinstance(script, str):
            return Script.parse(script, self.literal_encoding, self.max_script_tokens).tokens
        if isinstance(script, Script):
            tokens = script.tokens
        else:
            tokens = Script(script).tokens
        if self.max_script_tokens is not None and len(tokens) > self.max_script_tokens:
            raise ResourceLimitError('max_script_tokens', self.max_script_tokens)
        return tokens

    def execute(self, script):
        """
        Execute all tokens of a script on the stack of this interpreter. Stops at the first error, items already
        pushed or removed by earlier tokens are not restored.

        >>> si = ScriptInterpreter()
        >>> si.execute('<hello> <hello> OP_EQUAL')
        >>> si.stack
        (b'\\x01',)

        :param script: Script text, Script object or list of tokens
        :type script: str, Script, list
        """
        tokens = self.parse(script)
        ops_count = 0
        for token in tokens:
            if self.max_instructions is not None and self._instruction_count >= self.max_instructions:
                raise ResourceLimitError('max_instructions', self.max_instructions, getattr(token, 'name', None))
            self._instruction_count += 1
            _logger.debug("Instruction #%d: %s" % (self._instruction_count, token.blueprint))
            if self._is_counted_opcode(token):
                ops_count += 1
                if self.max_ops_per_script is not None and ops_count > self.max_ops_per_script:
                    raise ResourceLimitError('max_ops_per_script', self.max_ops_per_script, token.name)
            self._execute_token(token)
            if self.observer:
                self.observer(token, self._stack.snapshot())

    @staticmethod
    def _is_counted_opcode(token):
        # Data pushes and OP_0 to OP_16 do not count as operations
        return isinstance(token, Opcode) and token.name in opcodes and opcode_number(token.name) is None

    def _execute_token(self, token):
        if isinstance(token, PushData):
            self._stack.push(token.data, 'PUSHDATA')
            return
        name = token.name
        if name not in opcodes:
            raise UnknownOpcodeError(name)
        number = opcode_number(name)
        if number is not None:
            self._stack.push(encode_num(number), name)
            return
        method = getattr(self._stack, name.lower())
        if name == 'OP_HASH160':
            method(self.hash_provider)
        elif name == 'OP_CHECKSIG':
            method(self.signature_verifier, self.message)
        else:
            method()

    def validate(self, unlocking_script, locking_script):
        """
        Execute unlocking script followed by locking script on the same stack and check the result. The top item
        of the final stack must be True.

        >>> ScriptInterpreter().validate('<> <pubkey>', 'OP_DUP OP_HASH160 OP_DUP OP_EQUALVERIFY OP_CHECKSIG')
        False

        :param unlocking_script: Script which provides the data, i.e. signature and public key
        :type unlocking_script: str, Script, list
        :param locking_script: Script with the spending conditions
        :type locking_script: str, Script, list

        :return bool: Valid or not valid
        """
        self.execute(unlocking_script)
        self.execute(locking_script)
        return self._verify_final_stack()

    def _verify_final_stack(self):
        if not self.depth:
            raise EmptyFinalStackError()
        result = cast_to_bool(self._stack[-1])
        if self.depth > 1:
            if self.final_stack_policy == 'clean':
                _logger.warning("Stack holds %d items after script execution, clean stack requires 1" % self.depth)
                return False
            _logger.warning("Stack holds %d items after script execution, expected 1" % self.depth)
        return result


def validate(unlocking_script, locking_script, **kwargs):
    """
    Validate an unlocking and locking script pair with a new ScriptInterpreter.

    >>> validate('<sig> <pubkey>', 'OP_DUP OP_HASH160 OP_DUP OP_EQUALVERIFY OP_CHECKSIG')
    True

    :param unlocking_script: Script which provides the data, i.e. signature and public key
    :type unlocking_script: str, Script, list
    :param locking_script: Script with the spending conditions
    :type locking_script: str, Script, list
    :param kwargs: Arguments passed to the ScriptInterpreter, i.e. hash_provider, signature_verifier or message

    :return bool:
    """
    return ScriptInterpreter(**kwargs).validate(unlocking_script, locking_script)
