import unittest
from datetime import timedelta

from PySubrip.Helpers.Time import FormatTimestamp, ParseSubripTimestamp, TimedeltaToTimestamp, TimestampToTimedelta
from PySubrip.Helpers.TestCases import LoggedTestCase
from PySubrip.Helpers.Tests import log_input_expected_error, skip_if_debugger_attached
from PySubrip.SubtitleError import SubtitleParseError, SubtitleTimestampError


class TestParseSubripTimestamp(LoggedTestCase):
    test_cases = [
        ("01:02:03,004", 3_723_004_000),
        ("02:03,004", 123_004_000),
        ("00:00:00,000", 0),
        ("00:00:01,000", 1_000_000),
        ("10:00:00,000", 36_000_000_000),
        ("123:00:00,000", 442_800_000_000),
        ("00:01:00,500", 60_500_000),
        ("00:00:01,5", 1_005_000),
        ("00:00:01,1234", 2_234_000),
        ("00:99:99,999", 6_039_999_000),
    ]

    def test_ParseSubripTimestamp(self):
        for token, expected in self.test_cases:
            with self.subTest(token=token):
                result = ParseSubripTimestamp(token)
                self.assertLoggedEqual(f"microseconds for {token}", expected, result, input_value=token)

    normalised_cases = [
        ("00:00:01,5", 1_500_000),
        ("00:00:01,05", 1_050_000),
        ("00:00:01,500", 1_500_000),
        ("00:00:01,1234", 1_123_000),
    ]

    def test_ParseSubripTimestampNormalised(self):
        for token, expected in self.normalised_cases:
            with self.subTest(token=token):
                result = ParseSubripTimestamp(token, normalise_fraction=True)
                self.assertLoggedEqual(f"normalised microseconds for {token}", expected, result, input_value=token)

    invalid_cases = [
        "",
        "abc",
        "00:00:01.000",
        "00:00:01",
        "1,000",
        " 00:00:01,000",
        "00:00:01,000 ",
        "00:00:01,000 X1:100",
        "-00:00:01,000",
        "00:00:00:01,000",
        "aa:00:01,000",
        "\u0660\u0660:\u0660\u0660:\u0660\u0661,\u0665\u0660\u0660",
        "\uff10\uff10:\uff10\uff11,\uff10\uff10\uff10",
    ]

    @skip_if_debugger_attached
    def test_InvalidTimestamps(self):
        for token in self.invalid_cases:
            with self.subTest(token=token):
                with self.assertRaises(SubtitleTimestampError) as e:
                    ParseSubripTimestamp(token)
                log_input_expected_error(token, SubtitleTimestampError, e.exception)
                self.assertIsInstance(e.exception, SubtitleParseError)
                self.assertIsInstance(e.exception, ValueError)
                self.assertLoggedEqual("offending token", token, e.exception.line)


class TestTimeConversions(LoggedTestCase):
    def test_TimestampToTimedelta(self):
        result = TimestampToTimedelta(3_723_004_000)
        self.assertLoggedEqual("timedelta", timedelta(hours=1, minutes=2, seconds=3, milliseconds=4), result)

    def test_TimedeltaToTimestamp(self):
        result = TimedeltaToTimestamp(timedelta(days=1, seconds=1, microseconds=7))
        self.assertLoggedEqual("microseconds", 86_401_000_007, result)

    format_cases = [
        (0, "00:00:00,000"),
        (3_723_004_000, "01:02:03,004"),
        (-1_500_000, "-00:00:01,500"),
        (100_000_000_000, "27:46:40,000"),
    ]

    def test_FormatTimestamp(self):
        for value, expected in self.format_cases:
            with self.subTest(value=value):
                result = FormatTimestamp(value)
                self.assertLoggedEqual(f"formatted {value}", expected, result, input_value=value)


if __name__ == '__main__':
    unittest.main()
