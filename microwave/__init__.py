# -*- test-case-name: microwave -*-
from ._machine import FlagMachine, NoTransition
from ._appliance import Microwave
from ._keys import Key, KEY_BINDINGS, keyFor, dispatch
from ._render import Frame, renderFrame, drawFrame

__all__ = [
    'FlagMachine',
    'NoTransition',
    'Microwave',
    'Key',
    'KEY_BINDINGS',
    'keyFor',
    'dispatch',
    'Frame',
    'renderFrame',
    'drawFrame',
]
