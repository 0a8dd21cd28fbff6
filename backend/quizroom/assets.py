from flask import Blueprint, current_app, send_from_directory

assets = Blueprint('assets', __name__)


def content_type_for(path: str) -> str:
    if path.endswith('js'):
        return 'text/javascript'
    if path.endswith('css'):
        return 'text/css'
    return 'image/svg+xml'


@assets.route('/<string:dir>/<path:filepath>')
def static_file(dir, filepath):
    content_type = content_type_for(filepath)
    response = send_from_directory(current_app.config['WEB_DIR'], f'{dir}/{filepath}', mimetype=content_type)
    # no charset suffix on text types
    response.headers['Content-Type'] = content_type
    return response
