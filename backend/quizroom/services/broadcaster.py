import itertools
import queue
import threading
from typing import Dict, Iterator, Optional

from flask import current_app, render_template

SCOREBOARD_EVENT = 'scoreboard-update'


def format_event(data: str, event: Optional[str] = None, event_id: Optional[int] = None) -> str:
    """Serialize one server-sent event frame."""
    lines = []
    if event_id is not None:
        lines.append(f'id: {event_id}')
    if event:
        lines.append(f'event: {event}')
    for line in (data.splitlines() or ['']):
        lines.append(f'data: {line}')
    return '\n'.join(lines) + '\n\n'


class Broadcaster:
    """Fan-out of server-sent events, one named stream per room.

    Every subscriber gets its own bounded queue. Publishing never blocks:
    a subscriber whose queue is full misses that event.
    """

    def __init__(self, queue_size: int = 50, logger=None):
        self.queue_size = queue_size
        self.logger = logger
        self._streams: Dict[str, dict] = {}
        self._lock = threading.Lock()

    def create_stream(self, name: str) -> None:
        with self._lock:
            self._streams.setdefault(name, {'subscribers': set(), 'ids': itertools.count(1)})

    def has_stream(self, name: str) -> bool:
        with self._lock:
            return name in self._streams

    def subscribe(self, name: str) -> Optional[queue.Queue]:
        with self._lock:
            stream = self._streams.get(name)
            if stream is None:
                return None
            q: queue.Queue = queue.Queue(maxsize=self.queue_size)
            stream['subscribers'].add(q)
            return q

    def unsubscribe(self, name: str, q: queue.Queue) -> None:
        with self._lock:
            stream = self._streams.get(name)
            if stream is not None:
                stream['subscribers'].discard(q)

    def subscriber_count(self, name: str) -> int:
        with self._lock:
            stream = self._streams.get(name)
            return len(stream['subscribers']) if stream else 0

    def publish(self, name: str, event: str, data: str) -> int:
        """Queue an event for every subscriber of ``name``. Returns how many got it."""
        with self._lock:
            stream = self._streams.get(name)
            if stream is None:
                return 0
            frame = format_event(data, event=event, event_id=next(stream['ids']))
            # enqueue under the lock so subscribers see ids in order
            delivered = 0
            for q in stream['subscribers']:
                try:
                    q.put_nowait(frame)
                    delivered += 1
                except queue.Full:
                    if self.logger:
                        self.logger.warning(f"[sse-drop] stream={name} event={event} subscriber queue full")
        return delivered

    def listen(self, name: str, q: queue.Queue, first: Optional[str] = None,
               keepalive: float = 15) -> Iterator[str]:
        """Yield frames for one subscriber until the client goes away."""
        try:
            if first is not None:
                yield first
            while True:
                try:
                    yield q.get(timeout=keepalive)
                except queue.Empty:
                    yield ': keepalive\n\n'
        finally:
            self.unsubscribe(name, q)
            if self.logger:
                self.logger.info(f"[sse-unsubscribe] stream={name}")


def get_broadcaster() -> Broadcaster:
    return current_app.extensions['quizroom.broadcaster']


def render_scoreboard(room) -> str:
    """Render a room's scoreboard as a single-line HTML fragment."""
    html = render_template('scoreboard.html', room=room, scores=room.scoreboard.snapshot())
    return html.replace('\r', '').replace('\n', '')


def emit_scoreboard_update(room) -> int:
    return get_broadcaster().publish(room.slug, SCOREBOARD_EVENT, render_scoreboard(room))
