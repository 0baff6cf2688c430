"""
Daily Wordle Session Server Package

Game engine and statistics at the core, surrounded by persistence, identity,
Socket.IO text sessions and a small HTTP API.
"""

from flask import Flask
from flask_cors import CORS
from flask_socketio import SocketIO
from .config import Config


def create_app(config_class=Config, repository=None, word_book=None, today=None):
    """
    Application factory pattern for creating Flask app instances.

    Args:
        config_class: Configuration class to use
        repository: Game history store; MongoDB when MONGO_URI is set, in-memory otherwise
        word_book: Dictionary and daily answer source; the bundled word list by default
        today: Callable returning the current date, for the daily rotation

    Returns:
        Tuple of (Flask application, SocketIO instance)
    """
    from .services.auth_service import initialize_auth_service
    from .services.dictionary_service import default_word_book
    from .services.history_service import InMemoryGameRepository, MongoGameRepository
    from .services.session_service import initialize_session_service

    app = Flask(__name__)
    app.config.from_object(config_class)

    # Initialize extensions
    CORS(app)
    socketio = SocketIO(app, cors_allowed_origins="*", logger=False, engineio_logger=False)

    # Initialize services
    if repository is None:
        if config_class.MONGO_URI:
            repository = MongoGameRepository.connect(config_class.MONGO_URI, config_class.MONGO_DB)
        else:
            repository = InMemoryGameRepository()
    if word_book is None:
        word_book = default_word_book(config_class.ANSWER_EPOCH)

    initialize_auth_service(config_class.JWT_SECRET, config_class.JWT_EXPIRATION_DAYS)
    initialize_session_service(repository, word_book, config_class.STRICT_LETTER_COUNTS, today)

    # Register blueprints
    from .controllers.game_controller import game_bp
    app.register_blueprint(game_bp, url_prefix='/api')

    # Register WebSocket handlers
    from .websocket.handlers import register_websocket_handlers
    register_websocket_handlers(socketio)

    # Store socketio instance for use in other modules
    app.socketio = socketio

    return app, socketio
