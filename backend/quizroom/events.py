from flask import Blueprint, Response, abort, current_app, request, stream_with_context

from quizroom import get_state
from quizroom.services.broadcaster import SCOREBOARD_EVENT, format_event, get_broadcaster, render_scoreboard

events = Blueprint('events', __name__)


@events.route('/events')
def stream():
    """Server-sent scoreboard updates for one room (``?stream=<slug>``)."""
    name = request.args.get('stream', '')
    if not name:
        abort(400, 'Please specify a stream')

    broadcaster = get_broadcaster()
    room = get_state().find_room(name)
    q = broadcaster.subscribe(name) if room is not None else None
    if q is None:
        abort(404, 'Stream not found')
    current_app.logger.info(f"[sse-subscribe] stream={name} subscribers={broadcaster.subscriber_count(name)}")

    # Late joiners see the current board straight away
    first = format_event(render_scoreboard(room), event=SCOREBOARD_EVENT)
    keepalive = float(current_app.config.get('SSE_KEEPALIVE_SEC', 15))

    return Response(
        stream_with_context(broadcaster.listen(name, q, first=first, keepalive=keepalive)),
        content_type='text/event-stream',
        headers={'Cache-Control': 'no-cache', 'X-Accel-Buffering': 'no'},
    )
