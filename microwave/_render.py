# -*- test-case-name: microwave._test.test_render -*-

"""
What the microwave looks like from the outside.
"""

import attr

MINIMUM_WIDTH = 24


@attr.frozen
class Frame:
    """
    Everything a single frame shows, read from the appliance once.
    """
    doorLabel: str
    statusText: str
    heating: bool


def renderFrame(microwave):
    """
    Read C{microwave}'s door and cooking flags and describe the frame that
    shows them.

    @type microwave: L{microwave.Microwave}
    @rtype: L{Frame}
    """
    doorOpen = microwave.door_open
    cooking = microwave.is_cooking
    return Frame(
        doorLabel="Door: OPEN" if doorOpen else "Door: CLOSED",
        statusText="Cooking..." if cooking else "Idle",
        heating=cooking,
    )


def _box(lines, width, fill=" "):
    """
    Draw a rectangle C{width} characters wide around C{lines}.
    """
    inner = width - 2
    rows = ["+" + "-" * inner + "+"]
    for line in lines:
        rows.append("|" + line.center(inner, fill)[:inner] + "|")
    rows.append("+" + "-" * inner + "+")
    return rows


def drawFrame(frame, width=32):
    """
    Draw C{frame} as a cabinet holding a door window and a control panel.

    @param frame: the frame to draw.
    @type frame: L{Frame}

    @param width: the width of the cabinet, in characters.

    @return: the drawing, one line per row, without a trailing newline.
    @rtype: L{str}

    @raise ValueError: if C{width} is too small to hold the labels.
    """
    if width < MINIMUM_WIDTH:
        raise ValueError("width must be at least {}, not {}"
                         .format(MINIMUM_WIDTH, width))
    window = _box(["", frame.statusText, ""], width - 4,
                  fill="~" if frame.heating else " ")
    panel = _box([frame.doorLabel], width - 4)
    return "\n".join(_box(window + panel, width))
