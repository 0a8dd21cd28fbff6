from flask import Blueprint, abort, current_app, g, render_template, request

from quizroom import get_state
from quizroom.services.broadcaster import emit_scoreboard_update

main = Blueprint('main', __name__)


@main.before_app_request
def load_player():
    # Unknown or missing tokens leave the caller anonymous
    token = request.headers.get(current_app.config['AUTH_HEADER'])
    g.player = get_state().find_player_by_token(token)


@main.url_value_preprocessor
def pull_room(endpoint, values):
    slug = (values or {}).pop('slug', None)
    if slug is None:
        g.room = None
        return
    g.room = get_state().find_room(slug)
    if g.room is None:
        abort(404, 'Room not found')


@main.route('/')
def home():
    return render_template('home.html', rooms=get_state().rooms)


@main.route('/room/<slug>', methods=['GET'])
def room_view():
    room, player = g.room, g.player
    if player is None:
        return render_template('login.html', room=room)

    body = render_template('game.html', room=room, player=player)

    get_state().find_or_create_score(room, player)
    for row in room.scoreboard.snapshot():
        current_app.logger.info(f"[view] room={room.slug} player={row['name']} points={row['points']}")
    emit_scoreboard_update(room)
    return body


@main.route('/room/<slug>/join', methods=['POST'])
def join_room():
    room = g.room
    name = request.form.get('name', '')
    player = get_state().register_player(room, name)
    current_app.logger.info(f"[join] room={room.slug} player={player.id} name={player.name!r}")

    emit_scoreboard_update(room)
    return '', 201, {current_app.config['AUTH_RESPONSE_HEADER']: player.token}


@main.route('/room/<slug>/answer', methods=['POST'])
def answer():
    room, player = g.room, g.player
    if player is None:
        abort(404, 'Player not found')

    answer_text = request.form.get('answer', '')
    current_app.logger.info(f"[answer] room={room.slug} player={player.id} answer={answer_text!r}")

    score = get_state().update_score(room, player, 1)
    current_app.logger.info(f"[score] room={room.slug} player={player.id} points={score.points}")

    emit_scoreboard_update(room)
    return '', 204
