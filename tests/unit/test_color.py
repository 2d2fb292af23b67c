import sys
import unittest
from pathlib import Path

ROOT = Path(__file__).resolve().parents[2]
sys.path.insert(0, str(ROOT / "packages" / "renderer"))

from identiconic_renderer.color import (
    DerivedColor,
    FixedColor,
    color_source,
    extract_color,
    extract_hsv,
    format_hex_color,
    parse_hex_color,
)
from identiconic_renderer.digest import digest_hex
from identiconic_renderer.errors import HSVRangeError, InvalidInputError
from identiconic_renderer.models import IdenticonConfig


class ExtractHsvTests(unittest.TestCase):
    def test_zero_bytes_hit_lower_bounds(self):
        hsv = extract_hsv("000000")
        self.assertEqual(hsv.hue, 0.0)
        self.assertEqual(hsv.saturation, 45.0)
        self.assertEqual(hsv.value, 45.0)

    def test_normalized_ranges(self):
        hsv = extract_hsv("80ffff")
        self.assertAlmostEqual(hsv.hue, 182.5)
        self.assertGreaterEqual(hsv.saturation, 45.0)
        self.assertLess(hsv.saturation, 100.0)
        self.assertGreaterEqual(hsv.value, 45.0)
        self.assertLess(hsv.value, 80.0)

    def test_reads_only_first_three_bytes(self):
        self.assertEqual(extract_hsv("102030"), extract_hsv("102030ffffff"))

    def test_uppercase_hex_accepted(self):
        self.assertEqual(extract_hsv("ABCDEF"), extract_hsv("abcdef"))

    def test_short_input_rejected(self):
        with self.assertRaises(InvalidInputError):
            extract_hsv("abcd")

    def test_non_hex_rejected(self):
        for bad in ("zz0000", "00zz00", "0000zz", "+f0000", " f0000"):
            with self.subTest(bad=bad):
                with self.assertRaises(InvalidInputError):
                    extract_hsv(bad)


class ExtractColorTests(unittest.TestCase):
    def test_zero_bytes(self):
        self.assertEqual(extract_color("000000"), (115, 63, 63))

    def test_highest_hue_bytes_exceed_360(self):
        # 253/256 * 365 is just above 360.
        for prefix in ("fd", "fe", "ff"):
            with self.subTest(prefix=prefix):
                with self.assertRaises(HSVRangeError):
                    extract_color(prefix + "8080")

    def test_hue_byte_252_still_valid(self):
        r, g, b = extract_color("fc8080")
        for channel in (r, g, b):
            self.assertGreaterEqual(channel, 0)
            self.assertLessEqual(channel, 255)

    def test_all_channels_in_byte_range(self):
        for hue in range(0, 253, 11):
            for sat in (0, 127, 255):
                hex_str = f"{hue:02x}{sat:02x}{255 - sat:02x}"
                with self.subTest(hex_str=hex_str):
                    for channel in extract_color(hex_str):
                        self.assertTrue(0 <= channel <= 255)


class ColorSourceTests(unittest.TestCase):
    def test_default_config_derives(self):
        self.assertIsInstance(color_source(IdenticonConfig()), DerivedColor)

    def test_override_is_fixed(self):
        source = color_source(IdenticonConfig(color=(13, 117, 255)))
        self.assertEqual(source, FixedColor((13, 117, 255)))

    def test_fixed_ignores_digest(self):
        source = FixedColor((1, 2, 3))
        self.assertEqual(source.resolve(digest_hex("a")), (1, 2, 3))
        self.assertEqual(source.resolve("ff" * 64), (1, 2, 3))

    def test_fixed_white_is_honored(self):
        source = color_source(IdenticonConfig(color=(255, 255, 255)))
        self.assertEqual(source.resolve(digest_hex("a")), (255, 255, 255))

    def test_derived_uses_digest_prefix(self):
        digest = "000000" + "ab" * 61
        self.assertEqual(DerivedColor().resolve(digest), extract_color("000000"))

    def test_derived_surfaces_range_error(self):
        with self.assertRaises(HSVRangeError):
            DerivedColor().resolve("ff" + "00" * 63)


class HexColorTests(unittest.TestCase):
    def test_parse_with_and_without_hash(self):
        self.assertEqual(parse_hex_color("#0D75FF"), (13, 117, 255))
        self.assertEqual(parse_hex_color("0d75ff"), (13, 117, 255))

    def test_parse_rejects_bad_values(self):
        for bad in ("#FFF", "#GGGGGG", "", "#0D75FF00"):
            with self.subTest(bad=bad):
                with self.assertRaises(InvalidInputError):
                    parse_hex_color(bad)

    def test_format(self):
        self.assertEqual(format_hex_color((13, 117, 255)), "#0D75FF")


if __name__ == "__main__":
    unittest.main()
