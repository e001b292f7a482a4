import sys
import os
import shutil
import tempfile
import unittest
from unittest.mock import patch
from datetime import datetime, date, timezone, timedelta

# Add the parent directory to sys.path to import the easyformat package
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))
from babel import Locale
from babel.dates import LOCALTZ, get_timezone

from easyformat.errors import UnsupportedLocale
from easyformat.utils.config import load_environment, get_default_timezone, get_default_locale
from easyformat.utils.date_utils import to_instant, localize, parse_iso_datetime
from easyformat.utils.locale_utils import parse_locale, locale_tag
from easyformat.utils.file_utils import write_csv, write_markdown, count_rendered_tables


class TestDateUtils(unittest.TestCase):
    """Test point-in-time normalization."""

    def setUp(self):
        """Set up test fixtures."""
        self.utc = get_timezone("UTC")
        self.seoul = get_timezone("Asia/Seoul")
        self.instant = datetime(2025, 7, 30, 15, 30, 45, tzinfo=timezone.utc)

    def test_aware_datetime_is_kept(self):
        """Test that an aware datetime is already an instant."""
        self.assertIs(to_instant(self.instant, self.seoul), self.instant)

    def test_naive_datetime_uses_zone(self):
        """Test that a civil date-time is read in the given zone."""
        self.assertEqual(to_instant(datetime(2025, 7, 30, 15, 30, 45), self.utc), self.instant)
        self.assertEqual(to_instant(datetime(2025, 7, 31, 0, 30, 45), self.seoul), self.instant)

    def test_date_is_midnight(self):
        """Test that a date is civil midnight."""
        result = to_instant(date(2025, 7, 30), self.seoul)
        self.assertEqual(result, datetime(2025, 7, 29, 15, 0, tzinfo=timezone.utc))

    def test_timestamp(self):
        """Test POSIX timestamps."""
        test_cases = [
            (self.instant.timestamp(), self.instant),
            (int(self.instant.timestamp()), self.instant),
            (0, datetime(1970, 1, 1, tzinfo=timezone.utc)),
        ]

        for value, expected in test_cases:
            with self.subTest(value=value):
                self.assertEqual(to_instant(value, self.seoul), expected)

    def test_unsupported_types(self):
        """Test values that are not points in time."""
        for value in ["2025-07-30", None, False, [2025, 7, 30]]:
            with self.subTest(value=value):
                with self.assertRaises(TypeError):
                    to_instant(value, self.utc)

    def test_parse_iso_datetime(self):
        """Test ISO 8601 parsing with and without offsets."""
        self.assertEqual(parse_iso_datetime("2025-07-30T15:30:45Z"), self.instant)
        self.assertEqual(parse_iso_datetime("2025-07-31T00:30:45+09:00"), self.instant)
        self.assertIsNone(parse_iso_datetime("2025-07-30T15:30:45").tzinfo)
        self.assertEqual(
            parse_iso_datetime("2025-07-30T08:30:45-07:00").utcoffset(), timedelta(hours=-7))
        with self.assertRaises(ValueError):
            parse_iso_datetime("yesterday")


class TestLocaleUtils(unittest.TestCase):
    """Test locale identifier parsing."""

    def test_parse_locale(self):
        """Test the accepted identifier forms."""
        test_cases = [
            ("en-US", Locale("en", "US")),
            ("en_US", Locale("en", "US")),
            (" ko-KR ", Locale("ko", "KR")),
            ("ja", Locale("ja")),
            ("zh-Hant-TW", Locale("zh", "TW", script="Hant")),
        ]

        for identifier, expected in test_cases:
            with self.subTest(identifier=identifier):
                self.assertEqual(parse_locale(identifier), expected)

        locale = Locale("fr")
        self.assertIs(parse_locale(locale), locale)

    def test_unsupported_locales(self):
        """Test identifiers without CLDR data."""
        for identifier in ["", "xx-YY", "not a locale", None, 42]:
            with self.subTest(identifier=identifier):
                with self.assertRaises(UnsupportedLocale):
                    parse_locale(identifier)

    def test_locale_tag(self):
        """Test BCP 47 style display tags."""
        self.assertEqual(locale_tag("ko_KR"), "ko-KR")
        self.assertEqual(locale_tag(Locale("en", "US")), "en-US")


class TestConfig(unittest.TestCase):
    """Test environment configuration."""

    def setUp(self):
        """Set up test fixtures."""
        self.tmpdir = tempfile.mkdtemp()

    def tearDown(self):
        """Tear down test fixtures."""
        shutil.rmtree(self.tmpdir)

    def test_default_timezone(self):
        """Test the zone override and the system fallback."""
        with patch.dict('os.environ', {'EASYFORMAT_TIMEZONE': 'Asia/Seoul'}):
            zone = get_default_timezone()
            self.assertEqual(localize(datetime(2025, 1, 1), zone).utcoffset(), timedelta(hours=9))

        with patch.dict('os.environ', {'EASYFORMAT_TIMEZONE': ''}):
            self.assertIs(get_default_timezone(), LOCALTZ)

        with patch.dict('os.environ', {'EASYFORMAT_TIMEZONE': 'Mars/Olympus_Mons'}):
            with self.assertRaises(LookupError):
                get_default_timezone()

    def test_default_locale(self):
        """Test the CLI locale default."""
        with patch.dict('os.environ', {'EASYFORMAT_LOCALE': 'ko-KR'}):
            self.assertEqual(get_default_locale(), 'ko-KR')

        with patch.dict('os.environ', {'EASYFORMAT_LOCALE': ''}):
            self.assertTrue(get_default_locale())

    def test_load_environment(self):
        """Test loading an env file."""
        env_file = os.path.join(self.tmpdir, 'easyformat.env')
        self.assertFalse(load_environment(env_file))

        with open(env_file, 'w') as f:
            f.write("EASYFORMAT_LOCALE=ja-JP\n")

        with patch.dict('os.environ', {}, clear=True):
            self.assertTrue(load_environment(env_file))
            self.assertEqual(get_default_locale(), 'ja-JP')


class TestFileUtils(unittest.TestCase):
    """Test CSV and Markdown export."""

    def setUp(self):
        """Set up test fixtures."""
        self.tmpdir = tempfile.mkdtemp()

    def tearDown(self):
        """Tear down test fixtures."""
        shutil.rmtree(self.tmpdir)

    def test_write_csv(self):
        """Test that headers and rows are written."""
        path = os.path.join(self.tmpdir, 'out.csv')
        write_csv(path, ["Mnemonic", "Result"], [["yMMMd", "2025년 7월 30일"]])

        with open(path, encoding='utf-8') as f:
            lines = f.read().splitlines()
        self.assertEqual(lines, ["Mnemonic,Result", "yMMMd,2025년 7월 30일"])

    @patch('builtins.print')
    def test_write_markdown_create_append_overwrite(self, mock_print):
        """Test the three file modes."""
        path = os.path.join(self.tmpdir, 'out.md')

        write_markdown(path, "first\n", "Showcase")
        write_markdown(path, "second\n", "Showcase")
        with open(path, encoding='utf-8') as f:
            self.assertEqual(f.read(), "# Showcase\n\nfirst\nsecond\n")

        write_markdown(path, "third\n", "Showcase", overwrite=True)
        with open(path, encoding='utf-8') as f:
            self.assertEqual(f.read(), "# Showcase\n\nthird\n")

    @patch('builtins.print')
    def test_write_markdown_checks_tables(self, mock_print):
        """Test that a section without a renderable table is not written."""
        path = os.path.join(self.tmpdir, 'out.md')
        table = "\n### 1. Dates:\n| Mnemonic   | Result       |\n|------------|--------------|\n| yMMMd      | Jul 30, 2025 |\n"
        self.assertEqual(count_rendered_tables(table), 1)

        write_markdown(path, table, "Showcase")
        self.assertTrue(os.path.exists(path))

        broken = "\n### 1. Dates:\nyMMMd Jul 30, 2025\n"
        with self.assertRaises(SystemExit) as ctx:
            write_markdown(os.path.join(self.tmpdir, 'broken.md'), broken, "Showcase")
        self.assertEqual(ctx.exception.code, 3)
        self.assertFalse(os.path.exists(os.path.join(self.tmpdir, 'broken.md')))


if __name__ == '__main__':
    unittest.main()
