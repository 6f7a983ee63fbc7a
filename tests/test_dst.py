from datetime import datetime, timedelta, timezone

from ninestar.services.dst import (
    FALL_BACK_AMBIGUOUS,
    NO_ISSUE,
    SPRING_FORWARD_MISSING,
    check_dst_transition,
    detect_dst_issues,
    get_dst_transitions,
    time_zone_observes_dst,
)


def test_no_timezone_means_no_issue():
    result = detect_dst_issues(datetime(2024, 3, 10, 2, 30))
    assert result == NO_ISSUE
    assert result.affected_hour == -1
    assert result.time_exists is True


def test_zone_without_dst_is_never_flagged():
    assert detect_dst_issues(datetime(2024, 3, 10, 2, 30), "Asia/Tokyo") == NO_ISSUE


def test_spring_forward_hour_is_flagged():
    result = detect_dst_issues(datetime(2024, 3, 10, 2, 30), "America/New_York")
    assert result.has_dst_issue is True
    assert result.issue_type == SPRING_FORWARD_MISSING
    assert result.time_exists is False
    assert result.affected_hour == 2
    assert result.warning == (
        "This time (02:30) doesn't exist in America/New_York on this date due to DST spring forward."
    )
    assert [a.time for a in result.alternatives] == ["01:30", "03:30"]
    assert [a.solar_year for a in result.alternatives] == [2024, 2024]
    assert result.alternatives[0].description == "Standard Time (before the transition)"


def test_fall_back_hour_is_flagged_with_two_occurrences():
    result = detect_dst_issues(datetime(2024, 11, 3, 1, 15), "America/New_York")
    assert result.issue_type == FALL_BACK_AMBIGUOUS
    assert result.time_exists is True
    assert result.affected_hour == 1
    assert [a.time for a in result.alternatives] == ["01:15", "01:15"]
    assert result.alternatives[1].description == "Second occurrence (Standard Time, after fall back)"


def test_spring_alternatives_can_straddle_li_chun():
    # Helsinki is UTC+2 in February: 01:30 local is still Feb 3 in UTC
    result = detect_dst_issues(datetime(2024, 2, 4, 2, 30), "Europe/Helsinki")
    assert [a.solar_year for a in result.alternatives] == [2023, 2024]


def test_aware_datetime_is_read_in_zone():
    # 06:30 UTC in July is 02:30 EDT
    moment = datetime(2024, 7, 1, 6, 30, tzinfo=timezone.utc)
    assert detect_dst_issues(moment, "America/New_York").affected_hour == 2


def test_unknown_zone_degrades_to_no_issue():
    assert detect_dst_issues(datetime(2024, 3, 10, 2, 30), "Mars/Olympus_Mons") == NO_ISSUE


def test_observes_dst():
    assert time_zone_observes_dst("America/New_York", 2024) is True
    assert time_zone_observes_dst("Asia/Tokyo", 2024) is False
    assert time_zone_observes_dst("Nope/Nowhere", 2024) is False


def test_transitions_northern_hemisphere():
    transitions = get_dst_transitions("America/New_York", 2024)
    assert transitions.spring_forward.wall_time == datetime(2024, 3, 10, 2, 0)
    assert transitions.spring_forward.shift == timedelta(hours=1)
    assert transitions.fall_back.wall_time == datetime(2024, 11, 3, 2, 0)
    assert transitions.fall_back.shift == timedelta(hours=-1)


def test_transitions_southern_hemisphere():
    transitions = get_dst_transitions("Australia/Sydney", 2024)
    assert transitions.spring_forward.wall_time == datetime(2024, 10, 6, 2, 0)
    assert transitions.fall_back.wall_time == datetime(2024, 4, 7, 3, 0)


def test_transitions_for_zone_without_dst_are_empty():
    transitions = get_dst_transitions("Asia/Tokyo", 2024)
    assert transitions.spring_forward is None
    assert transitions.fall_back is None


def test_check_transition_inside_spring_gap():
    result = check_dst_transition("2024-03-10", "02:30", "America/New_York")
    assert result.has_dst is True
    assert result.is_transition_date is True
    transition = result.transition
    assert transition.type == "spring_forward"
    assert transition.affected_hours == (2, 3)
    assert [a.time for a in transition.alternatives] == ["01:30", "03:30"]
    assert transition.alternatives[0].description == "01:30 Standard Time (before DST transition)"
    assert "spring forward" in transition.message


def test_check_transition_inside_fall_back_overlap():
    result = check_dst_transition("2024-11-03", "01:30", "America/New_York")
    transition = result.transition
    assert transition.type == "fall_back"
    assert transition.affected_hours == (1, 2)
    assert transition.alternatives[0].description == "First 01:30 (Daylight Time, before fall back)"
    assert [a.solar_year for a in transition.alternatives] == [2024, 2024]


def test_check_transition_date_outside_window():
    result = check_dst_transition("2024-03-10", "05:00", "America/New_York")
    assert result.has_dst is True
    assert result.is_transition_date is True
    assert result.transition is None


def test_check_ordinary_date():
    result = check_dst_transition("2024-06-01", "02:30", "America/New_York")
    assert result.has_dst is True
    assert result.is_transition_date is False


def test_check_requires_time_and_zone():
    assert check_dst_transition("2024-03-10", None, "America/New_York").has_dst is False
    assert check_dst_transition("2024-03-10", "02:30", None).has_dst is False
    assert check_dst_transition("2024-03-10", "02:30", "Asia/Tokyo").has_dst is False
