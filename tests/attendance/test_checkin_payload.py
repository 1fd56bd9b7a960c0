from datetime import datetime, time, timedelta

import pytest

from src.lecture_attendance.lecture_attendance.attendance.model import CheckIn, format_clock
from src.lecture_attendance.lecture_attendance.core.exceptions import ValidationError


def test_only_ids_are_required():
    check_in = CheckIn.from_payload({"studentId": "S1", "lectureId": "CS101_L1"})

    assert check_in == CheckIn(student_id="S1", lecture_id="CS101_L1")


@pytest.mark.parametrize("payload", [{}, {"studentId": "S1"}, {"lectureId": "CS101_L1"}, {"studentId": "", "lectureId": "X"}])
def test_missing_ids_rejected(payload):
    with pytest.raises(ValidationError) as info:
        CheckIn.from_payload(payload)

    assert info.value.message == "Missing student ID or lecture ID."


def test_numeric_student_id_is_accepted_as_text():
    assert CheckIn.from_payload({"studentId": 20231, "lectureId": "CS101_L1"}).student_id == "20231"


def test_coordinates_are_parsed_and_range_checked():
    check_in = CheckIn.from_payload({"studentId": "S1", "lectureId": "L", "latitude": "-33.9249", "longitude": 18.4241})
    assert (check_in.latitude, check_in.longitude) == (-33.9249, 18.4241)

    with pytest.raises(ValidationError):
        CheckIn.from_payload({"studentId": "S1", "lectureId": "L", "latitude": 91})
    with pytest.raises(ValidationError):
        CheckIn.from_payload({"studentId": "S1", "lectureId": "L", "longitude": "east"})


def test_null_coordinates_stay_null():
    check_in = CheckIn.from_payload({"studentId": "S1", "lectureId": "L", "latitude": None, "longitude": ""})

    assert check_in.latitude is None and check_in.longitude is None


def test_format_clock_accepts_driver_time_types():
    assert format_clock(datetime(2026, 2, 2, 8, 5, 9)) == "08:05:09"
    assert format_clock(time(17, 0)) == "17:00:00"
    assert format_clock(timedelta(hours=9, minutes=1, seconds=2)) == "09:01:02"
    assert format_clock(None) is None
