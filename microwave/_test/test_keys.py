"""
Tests for L{microwave._keys}.
"""
from unittest import TestCase

from .. import KEY_BINDINGS, Key, Microwave, dispatch, keyFor


class KeyForTests(TestCase):

    def test_boundCharacters(self):
        self.assertIs(keyFor("o"), Key.OPEN_DOOR)
        self.assertIs(keyFor("c"), Key.CLOSE_DOOR)
        self.assertIs(keyFor("s"), Key.START_COOKING)
        self.assertIs(keyFor("x"), Key.STOP_COOKING)

    def test_caseInsensitive(self):
        self.assertIs(keyFor("O"), Key.OPEN_DOOR)

    def test_unboundCharacters(self):
        for character in ["a", " ", "q", "", "oc"]:
            self.assertIsNone(keyFor(character))


class DispatchTests(TestCase):

    def test_everyKeyIsBound(self):
        """
        Each of the four keys is bound to a distinct operation.
        """
        self.assertEqual(set(KEY_BINDINGS), set(Key))
        self.assertEqual(len(set(map(id, KEY_BINDINGS.values()))), 4)

    def test_dispatch(self):
        m = Microwave()
        dispatch(m, Key.START_COOKING)
        self.assertIs(m.is_cooking, True)
        dispatch(m, Key.OPEN_DOOR)
        self.assertIs(m.door_open, True)
        dispatch(m, Key.STOP_COOKING)
        self.assertIs(m.is_cooking, False)
        dispatch(m, Key.CLOSE_DOOR)
        self.assertIs(m.door_open, False)

    def test_customBindings(self):
        pressed = []
        dispatch(Microwave(), Key.OPEN_DOOR,
                 _bindings={Key.OPEN_DOOR: pressed.append})
        self.assertEqual(len(pressed), 1)
