# -*- test-case-name: microwave._test.test_harness -*-

"""
A terminal to stand in front of the microwave with.
"""

import argparse
import logging
import sys

import attr

from ._appliance import Microwave
from ._keys import Key, dispatch, keyFor
from ._logging import LEVELS, defaultLevel, setupLogging
from ._render import MINIMUM_WIDTH, drawFrame, renderFrame

log = logging.getLogger(__name__)

QUIT = "q"

LEGEND = "  ".join(
    ["{}: {}".format(key.value, key.name.lower().replace("_", " "))
     for key in Key]
    + ["{}: quit".format(QUIT)]
)


def logTransition(oldState, inputName, newState):
    """
    A tracer for L{Microwave.setTrace} that logs every transition.
    """
    log.info("%s: %r -> %r", inputName, oldState, newState)


@attr.s
class Harness(object):
    """
    Read keys from C{inputStream} a line at a time, press them on
    C{microwave}, and draw it on C{outputStream} after every line.
    """
    microwave = attr.ib()
    inputStream = attr.ib()
    outputStream = attr.ib()
    width = attr.ib(default=32)
    quiet = attr.ib(default=False)

    def render(self):
        if self.quiet:
            return
        frame = renderFrame(self.microwave)
        self.outputStream.write(drawFrame(frame, self.width) + "\n")
        self.outputStream.flush()

    def press(self, character):
        """
        Press the key sent by C{character}, if there is one.
        """
        key = keyFor(character)
        if key is None:
            log.debug("ignoring unbound key %r", character)
            return
        dispatch(self.microwave, key)

    def run(self):
        """
        Poll and draw until a quit key or the end of input.
        """
        self.render()
        for line in iter(self.inputStream.readline, ""):
            for character in line.strip():
                if character.lower() == QUIT:
                    log.info("quit requested")
                    return
                self.press(character)
            self.render()
        log.info("end of input")


def main(argv=None, _stdin=None, _stdout=None):
    """
    Entry point for command line utility.

    @param argv: the arguments; C{sys.argv[1:]} if L{None}.
    @return: the exit status.
    """
    _stdin = sys.stdin if _stdin is None else _stdin
    _stdout = sys.stdout if _stdout is None else _stdout
    argumentParser = argparse.ArgumentParser(
        description="Stand in front of a microwave and press its keys.",
        epilog=LEGEND)
    argumentParser.add_argument('--log-level', '-l',
                                help="Logging threshold.",
                                default=defaultLevel(),
                                choices=LEVELS,
                                type=str.upper)
    argumentParser.add_argument('--trace', '-t',
                                help="Log every state transition.",
                                default=False,
                                action="store_true")
    argumentParser.add_argument('--width', '-w',
                                help="Width of the drawing, in characters.",
                                default=32,
                                type=int)
    argumentParser.add_argument('--quiet', '-q',
                                help="Don't draw the microwave.",
                                default=False,
                                action="store_true")
    args = argumentParser.parse_args(argv)
    if args.width < MINIMUM_WIDTH:
        argumentParser.error("--width must be at least {}"
                             .format(MINIMUM_WIDTH))

    level = args.log_level
    if args.trace and logging.getLevelName(level) > logging.INFO:
        level = "INFO"
    setupLogging(level)
    microwave = Microwave()
    if args.trace:
        microwave.setTrace(logTransition)
    if not args.quiet:
        _stdout.write(LEGEND + "\n")
    Harness(microwave, _stdin, _stdout,
            width=args.width, quiet=args.quiet).run()
    return 0
