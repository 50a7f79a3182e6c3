from unittest.mock import MagicMock

import pytest

from assetlens.notifications.channel import NotificationChannel


class TestNotificationChannel:
    def test_latest_is_none_initially(self) -> None:
        channel = NotificationChannel()
        assert channel.latest is None

    def test_success_sets_latest(self) -> None:
        channel = NotificationChannel()
        channel.success("Added 1 file(s) to queue.")
        latest = channel.latest
        assert latest is not None
        assert latest.type == "success"
        assert latest.message == "Added 1 file(s) to queue."

    def test_history_keeps_order(self) -> None:
        channel = NotificationChannel()
        channel.info("one")
        channel.error("two")
        assert [n.message for n in channel.history()] == ["one", "two"]

    def test_listener_receives_notification(self) -> None:
        channel = NotificationChannel()
        listener = MagicMock()
        channel.subscribe(listener)
        notification = channel.error("boom")
        listener.assert_called_once_with(notification)

    def test_unknown_type_raises(self) -> None:
        channel = NotificationChannel()
        with pytest.raises(ValueError, match="Unknown notification type"):
            channel.emit("warning", "nope")
