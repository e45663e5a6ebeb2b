"""
Tests for L{microwave._harness}.
"""
import logging
from io import StringIO
from unittest import TestCase

from .. import Microwave
from .._harness import LEGEND, Harness, logTransition, main


def run(keys, **kw):
    microwave = Microwave()
    output = StringIO()
    Harness(microwave, StringIO(keys), output, **kw).run()
    return microwave, output.getvalue()


class HarnessTests(TestCase):

    def test_rendersBeforeFirstPoll(self):
        _, output = run("")
        self.assertIn("Door: CLOSED", output)
        self.assertIn("Idle", output)

    def test_rendersOncePerLine(self):
        _, output = run("o\nc\n")
        self.assertEqual(output.count("Door:"), 3)

    def test_keysDriveTheMicrowave(self):
        microwave, output = run("cs\n")
        self.assertEqual(microwave.snapshot(),
                         {"door_open": False, "is_cooking": True})
        self.assertIn("Cooking...", output)

    def test_unboundKeysIgnored(self):
        microwave, _ = run("zz 9\n")
        self.assertEqual(microwave.snapshot(),
                         {"door_open": False, "is_cooking": False})

    def test_quitStopsImmediately(self):
        microwave, output = run("oqs\ns\n")
        self.assertEqual(microwave.snapshot(),
                         {"door_open": True, "is_cooking": False})
        self.assertEqual(output.count("Door:"), 1)

    def test_quiet(self):
        microwave, output = run("o\n", quiet=True)
        self.assertEqual(output, "")
        self.assertIs(microwave.door_open, True)

    def test_width(self):
        _, output = run("", width=40)
        self.assertEqual({len(row) for row in output.splitlines()}, {40})


class LogTransitionTests(TestCase):

    def test_logsAtInfo(self):
        with self.assertLogs("microwave._harness", "INFO") as cm:
            logTransition({"door_open": False}, "open_door",
                          {"door_open": True})
        self.assertIn("open_door", cm.output[0])


class MainTests(TestCase):

    def tearDown(self):
        logger = logging.getLogger("microwave")
        for handler in list(logger.handlers):
            logger.removeHandler(handler)
        logger.setLevel(logging.NOTSET)
        logger.propagate = True

    def test_main(self):
        stdout = StringIO()
        status = main(argv=[],
                      _stdin=StringIO("cs\nx\n"), _stdout=stdout)
        self.assertEqual(status, 0)
        output = stdout.getvalue()
        self.assertTrue(output.startswith(LEGEND + "\n"))
        self.assertIn("Cooking...", output)

    def test_quiet(self):
        stdout = StringIO()
        main(argv=["--quiet"],
             _stdin=StringIO("o\n"), _stdout=stdout)
        self.assertEqual(stdout.getvalue(), "")

    def test_traceRaisesLevelToInfo(self):
        main(argv=["--quiet", "--trace"],
             _stdin=StringIO(""), _stdout=StringIO())
        self.assertEqual(logging.getLogger("microwave").level, logging.INFO)

    def test_tooNarrow(self):
        with self.assertRaises(SystemExit):
            main(argv=["--width", "3"],
                 _stdin=StringIO(""), _stdout=StringIO())
