# -*- test-case-name: microwave._test.test_keys -*-

"""
The microwave's control panel: which key does what.
"""

import enum

from ._appliance import Microwave


class Key(enum.Enum):
    """
    The keys the control panel responds to, by the character that sends them.
    """
    OPEN_DOOR = "o"
    CLOSE_DOOR = "c"
    START_COOKING = "s"
    STOP_COOKING = "x"


KEY_BINDINGS = {
    Key.OPEN_DOOR: Microwave.open_door,
    Key.CLOSE_DOOR: Microwave.close_door,
    Key.START_COOKING: Microwave.start_cooking,
    Key.STOP_COOKING: Microwave.stop_cooking,
}


def keyFor(character):
    """
    Look up the L{Key} sent by C{character}.

    @return: a L{Key}, or L{None} if C{character} is not bound to anything.
    """
    try:
        return Key(character.lower())
    except ValueError:
        return None


def dispatch(microwave, key, _bindings=KEY_BINDINGS):
    """
    Apply the operation bound to C{key} to C{microwave}.
    """
    _bindings[key](microwave)
