from __future__ import annotations

from pathlib import Path
import sys
import unittest

ROOT = Path(__file__).resolve().parents[2]
sys.path.insert(0, str(ROOT / "src"))

from transform.parse.hex_to_int import NOT_A_NUMBER, hex_to_int


class TestHexToInt(unittest.TestCase):
    def test_plain_and_prefixed_digits(self) -> None:
        self.assertEqual(hex_to_int("ff"), 255)
        self.assertEqual(hex_to_int("FF"), 255)
        self.assertEqual(hex_to_int("0xFF"), 255)
        self.assertEqual(hex_to_int("0Xff"), 255)
        self.assertEqual(hex_to_int("0"), 0)
        self.assertEqual(hex_to_int("00010"), 16)

    def test_signs(self) -> None:
        self.assertEqual(hex_to_int("-1a"), -26)
        self.assertEqual(hex_to_int("+1a"), 26)
        self.assertEqual(hex_to_int("-0x1A"), -26)
        self.assertEqual(hex_to_int("-0"), 0)

    def test_leading_whitespace_is_skipped(self) -> None:
        self.assertEqual(hex_to_int(" -1a"), -26)
        self.assertEqual(hex_to_int("\t\n 0x10"), 16)
        self.assertEqual(hex_to_int("\u00a0\u3000\ufeffa"), 10)
        self.assertEqual(hex_to_int("\u2028ff"), 255)
        self.assertEqual(hex_to_int("\u2029\u202f-ff"), -255)

    def test_trailing_garbage_is_ignored(self) -> None:
        self.assertEqual(hex_to_int("1g"), 1)
        self.assertEqual(hex_to_int("ff  "), 255)
        self.assertEqual(hex_to_int("12 34"), 0x12)
        self.assertEqual(hex_to_int("0x1.5"), 1)

    def test_no_digits_yields_sentinel(self) -> None:
        for value in ["", "   ", "zz", "-", "+", "0x", "-0x", "0xg", "+-1", "- 1", "x1", "\x1c1", "\x85ff", "\u180eff"]:
            with self.subTest(value=value):
                self.assertIs(hex_to_int(value), NOT_A_NUMBER)

    def test_zero_is_distinct_from_sentinel(self) -> None:
        self.assertEqual(hex_to_int("0"), 0)
        self.assertIsNotNone(hex_to_int("0"))
        self.assertIsNone(hex_to_int("g"))

    def test_large_values_are_exact(self) -> None:
        self.assertEqual(hex_to_int("ffffffffffffffffffff"), 2**80 - 1)

    def test_repeated_calls_are_deterministic(self) -> None:
        self.assertEqual({hex_to_int(" -0xBEEF tail") for _ in range(5)}, {-0xBEEF})


if __name__ == "__main__":
    unittest.main()
