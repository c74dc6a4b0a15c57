import unittest
from persistent_queue.signals import EMPTY, INVALID_SPLIT, Signal, Value, is_signal

class TestSignals(unittest.TestCase):

    def test_signals_are_singletons(self):
        self.assertIs(Signal("empty"), EMPTY)
        self.assertIs(Signal("invalid_split"), INVALID_SPLIT)
        self.assertIsNot(EMPTY, INVALID_SPLIT)

    def test_repr(self):
        self.assertEqual(repr(EMPTY), "EMPTY")
        self.assertEqual(repr(INVALID_SPLIT), "INVALID_SPLIT")
        self.assertEqual(repr(Value(1)), "Value(1)")
        self.assertEqual(repr(Value("a")), "Value('a')")

    def test_value_wraps_any_item(self):
        """Value(None) es un resultado presente, no una señal."""
        v = Value(None)
        self.assertIsNone(v.item)
        self.assertFalse(is_signal(v))
        self.assertEqual(Value(1), Value(1))
        self.assertNotEqual(Value(1), Value(2))

    def test_value_is_immutable(self):
        v = Value(1)
        with self.assertRaises(AttributeError):
            v.item = 2

    def test_is_signal(self):
        self.assertTrue(is_signal(EMPTY))
        self.assertTrue(is_signal(INVALID_SPLIT))
        self.assertFalse(is_signal("empty"))
        self.assertFalse(is_signal(None))

if __name__ == '__main__':
    unittest.main()
