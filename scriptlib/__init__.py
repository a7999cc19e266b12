# -*- coding: utf-8 -*-
#
#    ScriptLib - Bitcoin Script Interpreter
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

import scriptlib.encoding
import scriptlib.digests
import scriptlib.keys
import scriptlib.scripts

from scriptlib.digests import ScriptEnvironmentError, HashProvider, TruncatedHash160, Hash160
from scriptlib.keys import SignatureVerifier, MockSignatureVerifier, EcdsaSignatureVerifier
from scriptlib.scripts import ScriptError, StackUnderflowError, UnknownOpcodeError, VerificationError, \
    EmptyFinalStackError, ResourceLimitError, LiteralError, PushData, Opcode, Script, Stack, ScriptInterpreter, \
    tokenize, validate

__all__ = ["encoding", "digests", "keys", "scripts"]
