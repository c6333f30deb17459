import unittest

from unity_markup import is_valid_xml_name
from unity_markup.xml_name import is_valid_name


class XmlNameTests(unittest.TestCase):
    def test_simple_names(self):
        for name in ["element", "Element", "ELEMENT", "x", "X", "e1e2e3", "a-b-c", "a.b.c"]:
            self.assertTrue(is_valid_name(name), name)

    def test_underscore_and_colon_start(self):
        for name in ["_element", "_", "__double", ":element", "ns:element", "xml:lang"]:
            self.assertTrue(is_valid_name(name), name)

    def test_unicode_names(self):
        for name in ["élément", "元素", "στοιχείο"]:
            self.assertTrue(is_valid_name(name), name)

    def test_name_only_characters_after_start(self):
        for name in ["名前-1", "x\u00b7y", "a\u0301", "a\u203fb", "a\u2040b"]:
            self.assertTrue(is_valid_name(name), repr(name))

    def test_astral_code_points(self):
        self.assertTrue(is_valid_name("\U00010000"))
        self.assertTrue(is_valid_name("x\U000effff"))
        self.assertFalse(is_valid_name("\U000f0000"))   # beyond U+EFFFF

    def test_lone_surrogate_rejected(self):
        self.assertFalse(is_valid_name("\ud800"))
        self.assertFalse(is_valid_name("x\udc00"))

    def test_bad_first_character(self):
        bad = ["1x", "-x", ".x", "0", "123", "-", ".", "\u00b7x", "\u0300x", "\u203fx"]
        for name in bad:
            self.assertFalse(is_valid_name(name), repr(name))

    def test_spaces_rejected(self):
        for name in ["x y", " element", "element ", "\t"]:
            self.assertFalse(is_valid_name(name), repr(name))

    def test_special_characters_rejected(self):
        for ch in "!@#$%^&*+=/\\":
            self.assertFalse(is_valid_name(ch), ch)
            self.assertFalse(is_valid_name(f"element{ch}name"), ch)

    def test_range_boundaries(self):
        self.assertTrue(is_valid_name("\u00c0"))
        self.assertFalse(is_valid_name("\u00d7"))    # multiplication sign
        self.assertFalse(is_valid_name("\u00f7"))    # division sign
        self.assertFalse(is_valid_name("\u037e"))    # Greek question mark
        self.assertTrue(is_valid_name("\u200c"))
        self.assertFalse(is_valid_name("\u200e"))
        self.assertFalse(is_valid_name("\u3000"))    # ideographic space
        self.assertTrue(is_valid_name("\u3001"))
        self.assertFalse(is_valid_name("\ufdd0"))
        self.assertTrue(is_valid_name("\ufdf0"))
        self.assertFalse(is_valid_name("\ufffe"))

    def test_empty_none_and_non_strings(self):
        for value in ["", None, 42, ["x"], b"x"]:
            self.assertFalse(is_valid_name(value), repr(value))

    def test_package_alias(self):
        self.assertIs(is_valid_xml_name, is_valid_name)
