from flask import Flask, current_app
from flask_cors import CORS
from werkzeug.exceptions import HTTPException
import click
from config import Config

from quizroom.services.state import QuizState
from quizroom.services.broadcaster import Broadcaster


def get_state() -> QuizState:
    return current_app.extensions['quizroom.state']


def create_app(config_class=Config):
    flask_app = Flask(__name__)
    flask_app.config.from_object(config_class)

    CORS(
        flask_app,
        origins=flask_app.config.get('CORS_ORIGINS', []),
        expose_headers=[flask_app.config['AUTH_RESPONSE_HEADER']],
    )

    # One state object and one broadcaster per app; handlers reach them via current_app
    state = QuizState(flask_app.config['ROOMS'])
    broadcaster = Broadcaster(
        queue_size=int(flask_app.config.get('SSE_QUEUE_SIZE', 50)),
        logger=flask_app.logger,
    )
    for room in state.rooms:
        broadcaster.create_stream(room.slug)
    flask_app.extensions['quizroom.state'] = state
    flask_app.extensions['quizroom.broadcaster'] = broadcaster

    # Import and register blueprints here
    from quizroom.main import main
    flask_app.register_blueprint(main)

    from quizroom.events import events
    flask_app.register_blueprint(events)

    from quizroom.assets import assets
    flask_app.register_blueprint(assets, url_prefix='/web')

    @flask_app.errorhandler(HTTPException)
    def handle_http_error(error):
        if error.code is None or error.code < 400:
            # routing redirects pass through untouched
            return error
        return error.description or error.name, error.code, {'Content-Type': 'text/plain; charset=utf-8'}

    @flask_app.errorhandler(Exception)
    def handle_unexpected_error(error):
        flask_app.logger.exception(f"[error] unhandled {type(error).__name__}: {error}")
        return 'Internal Server Error', 500, {'Content-Type': 'text/plain; charset=utf-8'}

    @click.command('rooms')
    def rooms_command():
        """Lists rooms and their current scoreboards."""
        for room in state.rooms:
            click.echo(f"{room.slug}\t{room.name}")
            for row in room.scoreboard.snapshot():
                click.echo(f"  {row['name']}\t{row['points']}")

    flask_app.cli.add_command(rooms_command)

    return flask_app
