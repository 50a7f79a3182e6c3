from pathlib import Path

from assetlens.config.settings import Settings
from assetlens.ingestion.file_loader import list_inbox
from assetlens.logging.logger import Log
from assetlens.notifications.channel import Notification
from assetlens.session import build_session


def _log_notification(notification: Notification) -> None:
    if notification.type == "error":
        Log.warning(notification.message)
    else:
        Log.info(notification.message)


def main() -> None:
    """Entry point: queue the inbox -> drain the queue -> export the record set."""
    settings = Settings()
    Log.configure(settings.log_level)
    session = build_session(settings)
    session.notifications.subscribe(_log_notification)

    try:
        if settings.persistence_enabled:
            session.load_saved_assets()

        paths = list_inbox(Path(settings.inbox_dir))
        if not paths:
            Log.warning(f"No files found in {settings.inbox_dir}")
            return

        session.add_paths(paths)
        session.worker.run(stop_when_idle=True)

        counts = session.queue.counts()
        Log.info(
            f"Queue finished: {counts['completed']} completed, {counts['error']} failed, "
            f"{len(session.store)} record(s) in session"
        )
        for path in session.export_all():
            Log.info(f"Exported {path}")
    finally:
        session.close()


if __name__ == "__main__":
    main()
