"""
Unit Tests for the local notification center.

Pending list persistence, replacement by identifier, removal and delivery.
"""

from datetime import datetime, timezone
from unittest.mock import MagicMock

import pytest

from modules.backend.core.exceptions import NotificationError, StorageError
from modules.backend.core.preferences import PreferenceStore
from modules.backend.schemas.notification import (
    CalendarTrigger,
    NotificationContent,
    NotificationRequest,
)
from modules.backend.services.notifications import DEFAULT_PENDING_KEY, LocalNotificationCenter


def make_request(identifier: str, when: datetime, body: str = "body") -> NotificationRequest:
    return NotificationRequest(
        identifier=identifier,
        content=NotificationContent(title="Note Reminder", body=body),
        trigger=CalendarTrigger.matching(when),
    )


@pytest.fixture
def center(memory_store):
    return LocalNotificationCenter(memory_store, tz=timezone.utc)


class TestPending:
    """Tests for registering and listing requests."""

    def test_empty_when_nothing_registered(self, center):
        assert center.pending() == []

    def test_add_persists_under_pending_key(self, center, memory_store):
        center.add(make_request("n1", datetime(2030, 1, 1, 9, 0)))

        assert memory_store.get(DEFAULT_PENDING_KEY) is not None

    def test_pending_survives_new_center(self, memory_store):
        LocalNotificationCenter(memory_store, tz=timezone.utc).add(
            make_request("n1", datetime(2030, 1, 1)),
        )

        pending = LocalNotificationCenter(memory_store, tz=timezone.utc).pending()

        assert [r.identifier for r in pending] == ["n1"]

    def test_add_replaces_same_identifier(self, center):
        center.add(make_request("n1", datetime(2030, 1, 1), body="old"))
        center.add(make_request("n1", datetime(2030, 2, 1), body="new"))

        pending = center.pending()

        assert len(pending) == 1
        assert pending[0].content.body == "new"

    def test_pending_ordered_by_fire_date(self, center):
        center.add(make_request("late", datetime(2030, 3, 1)))
        center.add(make_request("early", datetime(2030, 1, 1)))

        assert [r.identifier for r in center.pending()] == ["early", "late"]


class TestPassedTriggers:
    """One-shot triggers whose time has passed are never registered."""

    def test_add_returns_true_for_future_trigger(self, center):
        assert center.add(make_request("n1", datetime(2030, 1, 1)), now=datetime(2029, 1, 1)) is True

    def test_passed_trigger_is_not_registered(self, center):
        registered = center.add(
            make_request("n1", datetime(2030, 1, 1, 9, 0)), now=datetime(2030, 1, 1, 9, 5),
        )

        assert registered is False
        assert center.pending() == []

    def test_trigger_at_now_is_not_registered(self, center):
        at = datetime(2030, 1, 1, 9, 0)

        assert center.add(make_request("n1", at), now=at) is False

    def test_delivered_request_is_not_queued_again(self, center):
        request = make_request("n1", datetime(2030, 1, 1, 9, 0))
        center.add(request, now=datetime(2030, 1, 1, 8, 0))
        later = datetime(2030, 1, 1, 9, 5)
        assert len(center.deliver_due(later)) == 1

        center.add(request, now=later)

        assert center.deliver_due(later) == []

    def test_defaults_to_current_time(self, center):
        assert center.add(make_request("old", datetime(2000, 1, 1))) is False


class TestRemove:
    """Tests for cancelling requests."""

    def test_remove_existing(self, center):
        center.add(make_request("n1", datetime(2030, 1, 1)))

        assert center.remove("n1") is True
        assert center.pending() == []

    def test_remove_missing(self, center):
        assert center.remove("nope") is False


class TestDeliverDue:
    """Tests for delivery of due requests."""

    def test_delivers_only_due_requests(self, center):
        center.add(make_request("past", datetime(2030, 1, 1, 8, 0)))
        center.add(make_request("now", datetime(2030, 1, 1, 9, 0)))
        center.add(make_request("future", datetime(2030, 1, 1, 9, 1)))

        delivered = center.deliver_due(datetime(2030, 1, 1, 9, 0, 30))

        assert [r.identifier for r in delivered] == ["past", "now"]
        assert [r.identifier for r in center.pending()] == ["future"]

    def test_delivered_requests_do_not_fire_again(self, center):
        center.add(make_request("n1", datetime(2030, 1, 1)))
        now = datetime(2030, 1, 2)

        assert len(center.deliver_due(now)) == 1
        assert center.deliver_due(now) == []

    def test_nothing_due_leaves_store_untouched(self, memory_store):
        store = MagicMock(wraps=memory_store)
        center = LocalNotificationCenter(store, tz=timezone.utc)
        center.add(make_request("n1", datetime(2030, 1, 1)))
        store.set.reset_mock()

        assert center.deliver_due(datetime(2029, 1, 1)) == []
        store.set.assert_not_called()


class TestFailures:
    """Tests for unreadable or unwritable pending lists."""

    def test_corrupt_pending_list_raises(self, memory_store):
        memory_store.set(DEFAULT_PENDING_KEY, "not json")
        center = LocalNotificationCenter(memory_store)

        with pytest.raises(NotificationError):
            center.pending()

    def test_store_write_failure_raises_notification_error(self):
        store = MagicMock(spec=PreferenceStore)
        store.get.return_value = None
        store.set.side_effect = StorageError("read-only")
        center = LocalNotificationCenter(store)

        with pytest.raises(NotificationError):
            center.add(make_request("n1", datetime(2030, 1, 1)))
