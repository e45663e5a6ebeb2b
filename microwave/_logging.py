# -*- test-case-name: microwave._test.test_logging -*-

"""
Where log messages go, and how much of them.
"""

import logging
import os
import sys

LEVEL_ENVIRONMENT_VARIABLE = "MICROWAVE_LOG_LEVEL"
LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def defaultLevel(environ=os.environ):
    """
    The log level to use when none is given on the command line.
    """
    level = environ.get(LEVEL_ENVIRONMENT_VARIABLE, "WARNING").upper()
    if level not in LEVELS:
        return "WARNING"
    return level


def setupLogging(level=None, stream=None):
    """
    Configure the C{microwave} logger to write to C{stream} (standard error
    by default) at C{level}.

    Calling this again replaces the handler rather than adding another.

    @rtype: L{logging.Logger}
    """
    numericLevel = getattr(logging, (level or defaultLevel()).upper(),
                           logging.WARNING)

    formatter = logging.Formatter(
        fmt="%(asctime)s [%(levelname)-8s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )
    handler = logging.StreamHandler(stream if stream is not None
                                    else sys.stderr)
    handler.setFormatter(formatter)

    root = logging.getLogger("microwave")
    for existing in list(root.handlers):
        root.removeHandler(existing)
    root.setLevel(numericLevel)
    root.addHandler(handler)
    # our handler is the only one that should see these records
    root.propagate = False
    return root
