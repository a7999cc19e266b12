# -*- coding: utf-8 -*-
#
#    ScriptLib - Bitcoin Script Interpreter
#    Script opcode definitions
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

# Supported subset of the Script language, values as used in serialized Bitcoin scripts.
# A tuple sets the counter, plain names continue counting from the previous value.
_opcodes = [
    ("OP_0", 0), ("OP_1", 81), "OP_2", "OP_3", "OP_4", "OP_5", "OP_6", "OP_7", "OP_8", "OP_9", "OP_10", "OP_11",
    "OP_12", "OP_13", "OP_14", "OP_15", "OP_16", ("OP_DROP", 117), "OP_DUP", ("OP_EQUAL", 135), "OP_EQUALVERIFY",
    ("OP_HASH160", 169), ("OP_CHECKSIG", 172),
]

# Alternative names which map to an opcode value above
_opcode_aliases = {
    "OP_FALSE": "OP_0",
}


def _set_opcodes():
    count = 0
    cds = {}
    for opcode in _opcodes:
        if isinstance(opcode, tuple):
            var, count = opcode
        else:
            var = opcode
        cds.update({var: count})
        count += 1
    for alias, name in _opcode_aliases.items():
        cds.update({alias: cds[name]})
    return cds


def opcode_number(name):
    """
    Return the small integer pushed by a numeric opcode, or None if name is not a numeric push opcode.

    >>> opcode_number('OP_7')
    7
    >>> opcode_number('OP_FALSE')
    0
    >>> opcode_number('OP_DUP') is None
    True

    :param name: Opcode name
    :type name: str

    :return int, None:
    """
    value = opcodes.get(name)
    if value == opcodes['OP_0']:
        return 0
    if value in OP_N_CODES:
        return value - OP_N_OFFSET
    return None


opcodes = _set_opcodes()

OP_N_OFFSET = opcodes['OP_1'] - 1
OP_N_CODES = range(opcodes['OP_1'], opcodes['OP_16'] + 1)
