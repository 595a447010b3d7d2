from datetime import datetime

import pytest

from src.gym_admin.gym_admin.checkin.classifier import AnomalyClassifier
from src.gym_admin.gym_admin.checkin.rules.base import OperatingHours
from src.gym_admin.gym_admin.core.enums import AnomalyKind, MembershipStatus


def _classify(scanned_at, status=MembershipStatus.ACTIVE, last=None, hours=None):
    classifier = AnomalyClassifier(hours=hours) if hours else AnomalyClassifier()
    return classifier.classify(scanned_at=scanned_at, member_status=status, last_check_in=last)


def test_first_scan_in_hours_is_valid(fixed_now):
    result = _classify(fixed_now)
    assert result.anomaly is None
    assert result.admitted is True
    assert result.message == "Check-in successful"


def test_expired_wins_over_duplicate_and_unusual_hours():
    late = datetime(2026, 2, 2, 23, 30)
    result = _classify(late, MembershipStatus.EXPIRED, last=datetime(2026, 2, 2, 6, 0))
    assert result.anomaly == AnomalyKind.EXPIRED_MEMBERSHIP
    assert result.admitted is False
    assert result.message == "Membership expired"


def test_duplicate_wins_over_unusual_hours():
    result = _classify(datetime(2026, 2, 2, 4, 0), last=datetime(2026, 2, 2, 3, 30))
    assert result.anomaly == AnomalyKind.DUPLICATE_SCAN
    assert result.admitted is True


def test_scan_on_a_new_day_is_not_duplicate(fixed_now):
    result = _classify(fixed_now, last=datetime(2026, 2, 1, 22, 50))
    assert result.anomaly is None


def test_expiring_soon_is_admitted(fixed_now):
    assert _classify(fixed_now, MembershipStatus.EXPIRING_SOON).anomaly is None


@pytest.mark.parametrize("hour, flagged", [(4, True), (5, False), (22, False), (23, True)])
def test_operating_hours_window(hour, flagged):
    result = _classify(datetime(2026, 2, 2, hour, 59))
    assert (result.anomaly == AnomalyKind.UNUSUAL_HOURS) is flagged
    if flagged:
        assert result.message == "Check-in successful (unusual hours)"


def test_custom_hours():
    hours = OperatingHours(open_hour=6, close_hour=22)
    assert _classify(datetime(2026, 2, 2, 5, 30), hours=hours).anomaly == AnomalyKind.UNUSUAL_HOURS
    assert _classify(datetime(2026, 2, 2, 21, 30), hours=hours).anomaly is None


def test_invalid_hours_rejected():
    with pytest.raises(ValueError):
        OperatingHours(open_hour=22, close_hour=6)
