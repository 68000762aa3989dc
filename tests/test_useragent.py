"""Tests for humanizer/useragent.py"""

import unittest

from humanizer.useragent import parse_user_agent

CHROME = 'Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/96.0.4664.110 Safari/537.36'


class TestParseUserAgent(unittest.TestCase):
    def test_desktop_browser(self):
        ua = parse_user_agent(CHROME)
        self.assertEqual(ua.browser, 'Chrome')
        self.assertTrue(ua.version.startswith('96.0'))
        self.assertTrue(ua.os.startswith('Windows'))
        self.assertFalse(ua.is_bot)

    def test_crawler_is_bot(self):
        ua = parse_user_agent('Googlebot/2.1 (+http://www.google.com/bot.html)')
        self.assertTrue(ua.is_bot)

    def test_plain_word_has_no_version(self):
        ua = parse_user_agent('hello')
        self.assertIsNone(ua.version)
        self.assertIsNone(ua.os)


if __name__ == "__main__":
    unittest.main()
