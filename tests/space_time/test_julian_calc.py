"""Tests for Julian date calculation functions."""

import math
import unittest

from jdcalendar.space_time.calendar import CalendarSystem, leap_year_gregorian
from jdcalendar.space_time.julian_calc import (
    calendar_for_jd,
    calendar_gregorian_to_jd,
    calendar_julian_to_jd,
    calendar_to_jd,
    jd_to_calendar,
    jd_to_calendar_gregorian,
    jd_to_calendar_julian,
)


def meeus_float_jd(year: int, month: int, day: float, gregorian: bool) -> float:
    """Reference oracle: eq. 7.1 of Meeus evaluated in floating point."""
    if month <= 2:
        year -= 1
        month += 12
    b = 0
    if gregorian:
        a = math.floor(year / 100)
        b = 2 - a + math.floor(a / 4)
    return (
        math.floor(365.25 * (year + 4716))
        + math.floor(30.6001 * (month + 1))
        + day
        + b
        - 1524.5
    )


class TestCalendarToJD(unittest.TestCase):
    """Test cases for calendar to Julian date conversion."""

    def test_calendar_gregorian_to_jd(self):
        """Test Gregorian dates from Meeus, p. 62."""
        cases = [
            (2000, 1, 1.5, 2451545.0),
            (1999, 1, 1, 2451179.5),
            (1987, 1, 27, 2446822.5),
            (1987, 6, 19.5, 2446966.0),
            (1988, 1, 27, 2447187.5),
            (1988, 6, 19.5, 2447332.0),
            (1900, 1, 1, 2415020.5),
            (1600, 1, 1, 2305447.5),
            (1600, 12, 31, 2305812.5),
        ]
        for year, month, day, jd in cases:
            self.assertAlmostEqual(
                calendar_gregorian_to_jd(year, month, day), jd, places=6
            )

    def test_sputnik(self):
        """Test example 7.a, the launch of Sputnik 1."""
        self.assertAlmostEqual(calendar_gregorian_to_jd(1957, 10, 4.81), 2436116.31, places=2)

    def test_halley(self):
        """Test example 7.c, days between two perihelia of Halley's comet."""
        jd1 = calendar_gregorian_to_jd(1910, 4, 20)
        jd2 = calendar_gregorian_to_jd(1986, 2, 9)
        self.assertEqual(jd2 - jd1, 27689)

    def test_calendar_julian_to_jd(self):
        """Test Julian calendar dates from Meeus, pp. 61-62."""
        cases = [
            (333, 1, 27.5, 1842713.0),
            (837, 4, 10.3, 2026871.8),
            (-123, 12, 31, 1676496.5),
            (-122, 1, 1, 1676497.5),
            (-1000, 7, 12.5, 1356001.0),
            (-1000, 2, 29, 1355866.5),
            (-1001, 8, 17.9, 1355671.4),
            (-4712, 1, 1.5, 0.0),
        ]
        for year, month, day, jd in cases:
            self.assertAlmostEqual(calendar_julian_to_jd(year, month, day), jd, places=6)

    def test_calendar_to_jd_dispatch(self):
        """Test selecting the calendar explicitly."""
        self.assertEqual(calendar_to_jd(2000, 1, 1.5), 2451545.0)
        self.assertEqual(calendar_to_jd(-4712, 1, 1.5, CalendarSystem.JULIAN), 0.0)
        self.assertEqual(
            calendar_to_jd(1582, 10, 4, CalendarSystem.JULIAN) + 1,
            calendar_to_jd(1582, 10, 15, CalendarSystem.GREGORIAN),
        )
        with self.assertRaises(ValueError):
            calendar_to_jd(2000, 1, 1, "hebrew")

    def test_float_oracle_agrees(self):
        """Test the integer formula against the floating-point one."""
        for year in range(1, 3000, 7):
            for month in range(1, 13):
                gregorian = calendar_gregorian_to_jd(year, month, 1.25)
                julian = calendar_julian_to_jd(year, month, 1.25)
                self.assertEqual(gregorian, meeus_float_jd(year, month, 1.25, True))
                self.assertEqual(julian, meeus_float_jd(year, month, 1.25, False))

    def test_negative_years_use_floor(self):
        """Test continuity across year 0 where truncation would be off by one."""
        self.assertEqual(
            calendar_julian_to_jd(1, 1, 1) - calendar_julian_to_jd(0, 1, 1), 366
        )
        self.assertEqual(
            calendar_julian_to_jd(0, 1, 1) - calendar_julian_to_jd(-1, 1, 1), 365
        )
        self.assertEqual(
            calendar_gregorian_to_jd(-99, 1, 1) - calendar_gregorian_to_jd(-100, 1, 1), 365
        )


class TestJDToCalendar(unittest.TestCase):
    """Test cases for Julian date to calendar conversion."""

    def test_jd_to_calendar(self):
        """Test example 7.c and the dates from Meeus, p. 64."""
        cases = [
            (2436116.31, 1957, 10, 4.81),
            (1842713.0, 333, 1, 27.5),
            (1507900.13, -584, 5, 28.63),
        ]
        for jd, year, month, day in cases:
            date = jd_to_calendar(jd)
            self.assertEqual(date.year, year)
            self.assertEqual(date.month, month)
            self.assertAlmostEqual(date.day, day, delta=0.01)

    def test_epoch(self):
        """Test JD 0."""
        self.assertEqual(jd_to_calendar(0.0), (-4712, 1, 1.5))

    def test_calendar_reform(self):
        """Test that 1582-10-04 (Julian) is followed by 1582-10-15 (Gregorian)."""
        self.assertEqual(jd_to_calendar(2299159.5), (1582, 10, 4.0))
        self.assertEqual(jd_to_calendar(2299160.5), (1582, 10, 15.0))

        late = jd_to_calendar(2299160.25)
        self.assertEqual((late.year, late.month), (1582, 10))
        self.assertAlmostEqual(late.day, 4.75, places=6)

        self.assertEqual(calendar_for_jd(2299159.5), CalendarSystem.JULIAN)
        self.assertEqual(calendar_for_jd(2299160.49), CalendarSystem.JULIAN)
        self.assertEqual(calendar_for_jd(2299160.5), CalendarSystem.GREGORIAN)
        self.assertEqual(calendar_for_jd(0.0), CalendarSystem.JULIAN)

    def test_jd_to_calendar_gregorian(self):
        """Test proleptic Gregorian output before the reform."""
        self.assertEqual(jd_to_calendar_gregorian(2299159.5), (1582, 10, 14.0))
        self.assertEqual(jd_to_calendar_gregorian(2299160.5), (1582, 10, 15.0))
        self.assertEqual(jd_to_calendar_gregorian(1721425.5), (1, 1, 1.0))
        self.assertEqual(jd_to_calendar_gregorian(2451545.0), (2000, 1, 1.5))

    def test_jd_to_calendar_julian(self):
        """Test proleptic Julian output after the reform."""
        self.assertEqual(jd_to_calendar_julian(2299160.5), (1582, 10, 5.0))
        self.assertEqual(jd_to_calendar_julian(2299159.5), (1582, 10, 4.0))
        # 2000-01-01 Gregorian is 1999-12-19 Julian
        self.assertEqual(jd_to_calendar_julian(2451544.5), (1999, 12, 19.0))


class TestRoundTrip(unittest.TestCase):
    """Test converting calendar date -> Julian date -> calendar date."""

    def _assert_round_trip(self, to_jd, from_jd, year, month, day):
        result = from_jd(to_jd(year, month, day))
        self.assertEqual((result.year, result.month), (year, month), (year, month, day))
        self.assertAlmostEqual(result.day, day, delta=0.01)

    def test_julian_calendar_before_reform(self):
        """Test Julian calendar dates from the first year after JD 0 to 1581."""
        for year in range(-4711, 1582, 37):
            for month in range(1, 13):
                for day in (1.0, 15.25, 28.75):
                    self._assert_round_trip(
                        calendar_julian_to_jd, jd_to_calendar, year, month, day
                    )

    def test_gregorian_calendar_after_reform(self):
        """Test Gregorian calendar dates from 1583 onward."""
        for year in range(1583, 4000, 29):
            for month in range(1, 13):
                for day in (1.0, 15.25, 28.75):
                    self._assert_round_trip(
                        calendar_gregorian_to_jd, jd_to_calendar, year, month, day
                    )

    def test_every_day_around_reform(self):
        """Test each day of 1582 and 1583 in the calendar in force."""
        jd = calendar_julian_to_jd(1582, 1, 1)
        end = calendar_gregorian_to_jd(1584, 1, 1)
        previous = None
        while jd < end:
            date = jd_to_calendar(jd)
            if calendar_for_jd(jd) is CalendarSystem.JULIAN:
                self.assertEqual(calendar_julian_to_jd(*date), jd)
            else:
                self.assertEqual(calendar_gregorian_to_jd(*date), jd)
            if previous is not None and previous.month == date.month:
                self.assertIn(date.day - previous.day, (1.0, 11.0))
            previous = date
            jd += 1

    def test_proleptic_gregorian(self):
        """Test Gregorian-only output for every month end from year 1."""
        for year in range(1, 2500, 13):
            february = 29 if leap_year_gregorian(year) else 28
            for month, day in ((1, 31), (2, february), (3, 1), (12, 31)):
                self._assert_round_trip(
                    calendar_gregorian_to_jd, jd_to_calendar_gregorian, year, month, day
                )


if __name__ == "__main__":
    unittest.main()
