# -*- test-case-name: microwave._test.test_machine -*-

"""
Flag-based state machines.

A L{FlagMachine} is declared in a class body.  Each instance of that class is
in some combination of flag values; calling an input moves it to another
combination and runs that transition's outputs.
"""

import itertools

import attr

_serial = itertools.count()


class NoTransition(Exception):
    """
    An input was called in a state it has no transition from.

    @ivar state: the flag values at the time, as a C{dict}.
    @ivar symbol: the name of the input.
    """

    def __init__(self, state, symbol):
        self.state = state
        self.symbol = symbol
        super(NoTransition, self).__init__(
            "{} has no transition from {}".format(symbol, state))


@attr.s(frozen=True, eq=False)
class Flag(object):
    """
    One flag of a L{FlagMachine}.

    Read through an instance, it is that instance's current value.  Only
    inputs may change it.
    """
    machine = attr.ib(repr=False)
    name = attr.ib()
    values = attr.ib(converter=tuple)

    def declared(self, value):
        """
        Find the declared value equal to C{value}.

        @raise ValueError: if there is none.
        """
        for candidate in self.values:
            if candidate == value:
                return candidate
        raise ValueError("{!r} is not a value of {}; expected one of {!r}"
                         .format(value, self.name, self.values))

    def __get__(self, oself, owner=None):
        if oself is None:
            return self
        return self.machine.stateOf(oself)[self.name]

    def __set__(self, oself, value):
        raise AttributeError(
            "{}.{} is a flag; call an input to change it".format(
                type(oself).__name__, self.name))


@attr.s(eq=False)
class Input(object):
    """
    One input of a L{FlagMachine}.

    Looked up on the class it is a function of the instance; looked up on an
    instance it is already bound.
    """
    machine = attr.ib(repr=False)
    name = attr.ib()
    edges = attr.ib(default=attr.Factory(dict), repr=False)

    def __get__(self, oself, owner=None):
        if oself is None:
            return self

        def bound():
            self(oself)
        bound.__name__ = bound.__qualname__ = self.name
        return bound

    def __call__(self, oself):
        self.machine._fire(oself, self)


@attr.s
class _Record(object):
    state = attr.ib()
    tracer = attr.ib(default=None)


@attr.s(eq=False)
class FlagMachine(object):
    """
    The flags, inputs and transitions of a class.
    """
    flags = attr.ib(default=attr.Factory(list))
    inputs = attr.ib(default=attr.Factory(list))
    _sealed = attr.ib(default=False)
    _initial = attr.ib(default=attr.Factory(list))
    _key = attr.ib(default=attr.Factory(
        lambda: "_flagMachine{}".format(next(_serial))))

    def flag(self, values, initial):
        """
        Declare a flag: decorate a method whose name and docstring describe
        it.  The method is replaced with the flag.

        @param values: every value the flag can take.
        @param initial: the value every new instance starts with.
        """
        if self._sealed:
            raise RuntimeError("flags must be declared before transitions")
        values = tuple(values)
        if len(values) < 2:
            raise ValueError("a flag needs at least two values")
        if initial not in values:
            raise ValueError("initial value {!r} is not one of {!r}"
                             .format(initial, values))

        def decorator(method):
            flag = Flag(machine=self, name=method.__name__, values=values)
            self.flags.append(flag)
            self._initial.append(flag.declared(initial))
            return flag
        return decorator

    def input(self, method):
        """
        Declare an input: decorate a method whose name and docstring describe
        it.
        """
        input_ = Input(machine=self, name=method.__name__)
        self.inputs.append(input_)
        return input_

    def _checked(self, partial):
        """
        Replace each value in the flag-name-to-value mapping C{partial} with
        the declared one.

        @raise ValueError: for unknown flags or undeclared values.
        """
        byName = {flag.name: flag for flag in self.flags}
        checked = {}
        for name, value in partial.items():
            if name not in byName:
                raise ValueError("{!r} is not a flag".format(name))
            checked[name] = byName[name].declared(value)
        return checked

    def _matching(self, partial):
        """
        Every full state in which the flags named by C{partial} have the
        given values.
        """
        choices = [(partial[flag.name],) if flag.name in partial
                   else flag.values
                   for flag in self.flags]
        return list(itertools.product(*choices))

    def transition(self, from_, to, input, outputs=()):
        """
        When C{input} is called in any state matching C{from_}, set the flags
        named in C{to} and call each of C{outputs} with the instance.

        @type from_: C{dict} of flag name to value
        @type to: C{dict} of flag name to value
        @raise ValueError: if C{from_} or C{to} is not part of a valid state,
            or if C{input} already has a transition from a matching state.
        """
        self._sealed = True
        from_ = self._checked(from_)
        to = self._checked(to)
        for state in self._matching(from_):
            if state in input.edges:
                raise ValueError("{} already has a transition from {}"
                                 .format(input.name, self.asDict(state)))
            target = tuple(to.get(flag.name, value)
                           for flag, value in zip(self.flags, state))
            input.edges[state] = (target, tuple(outputs))

    def asDict(self, state):
        return {flag.name: value for flag, value in zip(self.flags, state)}

    def states(self):
        """
        Every combination of flag values, in declaration order.
        """
        return self._matching({})

    def initialState(self):
        return tuple(self._initial)

    def edges(self):
        """
        Every transition as C{(state, input, target, outputs)}.
        """
        for input_ in self.inputs:
            for state, (target, outputs) in input_.edges.items():
                yield state, input_, target, outputs

    def _record(self, oself):
        records = vars(oself)
        if self._key not in records:
            records[self._key] = _Record(state=self.initialState())
        return records[self._key]

    def stateOf(self, oself):
        """
        The current flag values of C{oself}, as a new C{dict}.
        """
        return self.asDict(self._record(oself).state)

    def restore(self, oself, values):
        """
        Put C{oself} into the state C{values} describes.

        @param values: a value for every flag, by name.
        @raise ValueError: if a flag is missing, unknown, or given a value it
            was not declared with.
        """
        checked = self._checked(values)
        missing = [flag.name for flag in self.flags
                   if flag.name not in checked]
        if missing:
            raise ValueError("no value for {}".format(", ".join(missing)))
        self._record(oself).state = tuple(checked[flag.name]
                                          for flag in self.flags)

    def setTrace(self, oself, tracer):
        """
        Call C{tracer(oldState, inputName, newState)} on every transition of
        C{oself}; if it returns a callable, that is called with the name of
        each output before it runs.  L{None} stops tracing.
        """
        self._record(oself).tracer = tracer

    def _fire(self, oself, input_):
        record = self._record(oself)
        try:
            target, outputs = input_.edges[record.state]
        except KeyError:
            raise NoTransition(self.asDict(record.state), input_.name)
        old, record.state = record.state, target
        outputTracer = None
        if record.tracer is not None:
            outputTracer = record.tracer(self.asDict(old), input_.name,
                                         self.asDict(target))
        for output in outputs:
            if outputTracer is not None:
                outputTracer(output.__name__)
            output(oself)

