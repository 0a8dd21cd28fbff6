import os

BASE_DIR = os.path.abspath(os.path.dirname(__file__))


class Config:
    SECRET_KEY = os.environ.get('SECRET_KEY') or 'you-will-never-guess'
    HOST = os.environ.get('HOST', '127.0.0.1')
    PORT = int(os.environ.get('PORT', '3000'))
    CORS_ORIGINS = [o.strip() for o in os.environ.get(
        'CORS_ORIGINS', 'http://localhost:3000,http://127.0.0.1:3000').split(',') if o.strip()]
    # Request header carrying a player's token, and the response header issuing it on join
    AUTH_HEADER = os.environ.get('AUTH_HEADER', 'Authentication-Token')
    AUTH_RESPONSE_HEADER = os.environ.get('AUTH_RESPONSE_HEADER', 'Dbmq-Auth-Token')
    # SSE: idle seconds before a keepalive comment, and per-subscriber queue bound
    SSE_KEEPALIVE_SEC = int(os.environ.get('SSE_KEEPALIVE_SEC', '15'))
    SSE_QUEUE_SIZE = int(os.environ.get('SSE_QUEUE_SIZE', '50'))
    WEB_DIR = os.environ.get('WEB_DIR') or os.path.join(BASE_DIR, 'quizroom', 'web')
    ROOMS = [
        {'name': 'Classic Rock', 'slug': 'classic-rock', 'image': '/web/images/guitar.svg'},
        {'name': 'Pop Hits', 'slug': 'pop-hits', 'image': '/web/images/pop.svg'},
    ]
