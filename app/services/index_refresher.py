import logging
import threading

from app.errors import PostsError
from app.services.post_index import SharedPostIndex

logger = logging.getLogger(__name__)

STOP_REFRESHER_EVENT = threading.Event()  # thread-safe shutdown signal


def refresh_loop(shared_index: SharedPostIndex, interval: float):
    logger.info("Post index refresher thread started")

    while not STOP_REFRESHER_EVENT.is_set():
        refresh_once(shared_index)
        STOP_REFRESHER_EVENT.wait(interval)

    logger.info("Post index refresher stopping...")


def refresh_once(shared_index: SharedPostIndex) -> bool:
    """Refresh the shared index, logging failures instead of raising."""
    try:
        shared_index.refresh()
        return True
    except PostsError as e:
        logger.error(f"Failed to refresh post index: {e}")
    except Exception as e:
        logger.error(f"Unexpected refresher error: {e}")
    return False


def start_refresher(shared_index: SharedPostIndex, interval: float):
    """Start refresher in a daemon thread"""
    STOP_REFRESHER_EVENT.clear()
    thread = threading.Thread(
        target=refresh_loop,
        args=(shared_index, interval),
        daemon=True,
        name="PostIndexRefresher",
    )
    thread.start()
    return thread


def stop_refresher():
    """Signal refresher to stop"""
    STOP_REFRESHER_EVENT.set()
    logger.info("Post index refresher stopping...")
