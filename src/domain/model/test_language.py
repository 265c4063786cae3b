"""Unit tests for language detection and language code helpers."""

import unittest

from domain.model.language import (
    ENGLISH,
    JAPANESE,
    TRANSLATION_LANGUAGES,
    detect_language,
    is_translation_language,
    omw_display_name,
    omw_short_code,
)


class TestDetectLanguage(unittest.TestCase):
    """Script-based Japanese/English partition."""

    def test_hiragana_is_japanese(self):
        """Test hiragana detection."""
        self.assertIs(detect_language("ありがとう"), JAPANESE)

    def test_katakana_is_japanese(self):
        """Test katakana detection."""
        self.assertIs(detect_language("コンピュータ"), JAPANESE)

    def test_kanji_is_japanese(self):
        """Test CJK ideograph detection."""
        self.assertIs(detect_language("自由"), JAPANESE)

    def test_mixed_script_with_one_kanji_is_japanese(self):
        """A single Japanese character anywhere is enough."""
        self.assertIs(detect_language("freedom自"), JAPANESE)

    def test_latin_is_english(self):
        """Test Latin script falls to English."""
        self.assertIs(detect_language("freedom"), ENGLISH)

    def test_digits_and_punctuation_are_english(self):
        self.assertIs(detect_language("42!"), ENGLISH)

    def test_other_scripts_are_english(self):
        """Test Hangul and Cyrillic fall to English."""
        self.assertIs(detect_language("свобода"), ENGLISH)
        self.assertIs(detect_language("자유"), ENGLISH)

    def test_empty_is_english(self):
        self.assertIs(detect_language(""), ENGLISH)

    def test_only_japanese_has_local_dictionary(self):
        self.assertTrue(JAPANESE.has_local_dictionary)
        self.assertFalse(ENGLISH.has_local_dictionary)


class TestTranslationLanguages(unittest.TestCase):
    """Test the phrase-translation language set."""

    def test_seventeen_languages(self):
        self.assertEqual(len(TRANSLATION_LANGUAGES), 17)
        self.assertEqual(TRANSLATION_LANGUAGES[:2], ("en", "ja"))

    def test_is_translation_language(self):
        self.assertTrue(is_translation_language("pl"))
        self.assertFalse(is_translation_language("xx"))
        self.assertFalse(is_translation_language("EN"))


class TestOmwLanguageIds(unittest.TestCase):
    """Test OMW lexicon id helpers."""

    def test_short_code_strips_prefix(self):
        self.assertEqual(omw_short_code("omw-cmn"), "cmn")
        self.assertEqual(omw_short_code("omw-en"), "en")

    def test_short_code_without_prefix_unchanged(self):
        self.assertEqual(omw_short_code("en"), "en")

    def test_display_name(self):
        """Test lexicon ids map to readable names."""
        self.assertEqual(omw_display_name("omw-ja"), "日本語")
        self.assertEqual(omw_display_name("omw-xx"), "omw-xx")


if __name__ == "__main__":
    unittest.main()
