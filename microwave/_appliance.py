# -*- test-case-name: microwave._test.test_appliance -*-

"""
The microwave itself: a door and a heating element.
"""

import logging

from ._machine import FlagMachine

log = logging.getLogger(__name__)


class Microwave(object):
    """
    A microwave oven.

    The heating element may only be switched on while the door is shut.
    Opening the door while it is on does not switch it off.
    """

    machine = FlagMachine()

    @machine.flag(values=[False, True], initial=False)
    def door_open(self):
        "Is the door open?"

    @machine.flag(values=[False, True], initial=False)
    def is_cooking(self):
        "Is the heating element on?"

    @machine.input
    def open_door(self):
        "Open the door."

    @machine.input
    def close_door(self):
        "Close the door."

    @machine.input
    def start_cooking(self):
        "Press the start button."

    @machine.input
    def stop_cooking(self):
        "Press the stop button."

    def _startHeating(self):
        log.debug("%r: heating element on", self)

    def _refuseToStart(self):
        log.debug("%r: door is open, not starting", self)

    def _stopHeating(self):
        log.debug("%r: heating element off", self)

    machine.transition({}, {'door_open': True}, open_door)
    machine.transition({}, {'door_open': False}, close_door)
    machine.transition({'door_open': False}, {'is_cooking': True},
                       start_cooking, [_startHeating])
    machine.transition({'door_open': True}, {},
                       start_cooking, [_refuseToStart])
    machine.transition({}, {'is_cooking': False},
                       stop_cooking, [_stopHeating])

    def setTrace(self, tracer):
        """
        Call C{tracer(oldState, inputName, newState)} on every transition;
        see L{FlagMachine.setTrace}.
        """
        self.machine.setTrace(self, tracer)

    def snapshot(self):
        """
        Return the current flag values as a new C{dict}.
        """
        return self.machine.stateOf(self)

    @classmethod
    def fromSnapshot(cls, snapshot):
        """
        Create a L{Microwave} with the flag values in C{snapshot}.

        @raise ValueError: if C{snapshot} does not assign every flag one of
            its values.
        """
        self = cls()
        self.machine.restore(self, snapshot)
        return self

    def __repr__(self):
        return "<Microwave door_open={} is_cooking={}>".format(
            self.door_open, self.is_cooking)
