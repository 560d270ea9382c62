import logging
import os
import tempfile
import unittest

from power4.debug import TRACE, DebugLevel, DebugManager


class TestDebugManager(unittest.TestCase):
    def setUp(self):
        self.manager = DebugManager(name="power4.tests")

    def test_messages_above_level_are_dropped(self):
        self.manager.configure(level=DebugLevel.INFO)
        with self.assertLogs("power4.tests", level=logging.DEBUG) as logs:
            self.manager.info("kept", "match")
            self.manager.debug("dropped", "match")
        self.assertEqual(logs.output, ["INFO:power4.tests:[match] kept"])

    def test_trace_level_reaches_the_logger(self):
        self.manager.configure(level=DebugLevel.TRACE)
        with self.assertLogs("power4.tests", level=TRACE) as logs:
            self.manager.trace("fine grained", "board")
        self.assertEqual(logs.output, ["TRACE:power4.tests:[board] fine grained"])

    def test_component_filter(self):
        self.manager.configure(level=DebugLevel.DEBUG, components=["board"])
        with self.assertLogs("power4.tests", level=logging.DEBUG) as logs:
            self.manager.debug("kept", "board")
            self.manager.debug("dropped", "match")
        self.assertEqual(len(logs.records), 1)

    def test_set_from_string(self):
        self.assertTrue(self.manager.set_from_string("Debug"))
        self.assertEqual(self.manager.level, DebugLevel.DEBUG)
        self.assertFalse(self.manager.set_from_string("loud"))
        self.assertEqual(self.manager.level, DebugLevel.DEBUG)

    def test_none_level_silences_everything(self):
        self.manager.configure(level=DebugLevel.NONE)
        with self.assertLogs("power4.tests", level=logging.DEBUG) as logs:
            self.manager.error("dropped")
            self.manager.logger.warning("sentinel")
        self.assertEqual(logs.output, ["WARNING:power4.tests:sentinel"])

    def test_log_file(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, "power4.log")
            self.manager.configure(level=DebugLevel.INFO, log_file=path)
            self.manager.info("written to file", "cli")
            self.manager.configure(log_file="")

            with open(path) as f:
                self.assertIn("[cli] written to file", f.read())

    def test_timer(self):
        self.manager.start_timer("work")
        elapsed = self.manager.end_timer("work")
        self.assertGreaterEqual(elapsed, 0.0)
        self.assertIsNone(self.manager.end_timer("work"))


if __name__ == "__main__":
    unittest.main()
