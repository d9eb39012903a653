"""
Latest-value channel between the capture thread and the frame loop
"""
import logging
import queue

logger = logging.getLogger(__name__)


class DetectionChannel:
    """
    Single-slot queue holding the newest detections

    The capture thread publishes, the frame loop reads. A publish replaces any
    value the reader has not picked up yet, so the reader always sees the most
    recent complete list and never a stale backlog.
    """

    def __init__(self):
        self._queue = queue.Queue(maxsize=1)
        self.published = 0
        self.dropped = 0

    def publish(self, detections):
        """Store a complete detections list, replacing any unread one."""
        value = list(detections or [])
        while True:
            try:
                self._queue.put_nowait(value)
                break
            except queue.Full:
                try:
                    self._queue.get_nowait()
                    self.dropped += 1
                except queue.Empty:
                    pass
        self.published += 1
        logger.debug("Published %d detection(s)", len(value))

    def latest(self, default=None):
        """Return the newest unread detections without blocking, or default."""
        try:
            return self._queue.get_nowait()
        except queue.Empty:
            return default
