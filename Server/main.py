"""
Wordle Session Server - Main Entry Point

Initializes all services and starts the Flask-SocketIO application.
"""

from wordle import create_app
from wordle.config import Config, validate_word_list_integrity
from wordle.services.session_service import get_session_service
from wordle.utils.game_logger import game_logger
from wordle.websocket.handlers import idle_session_worker


def main():
    """Main function to initialize services and start the server."""
    session_service = None
    try:
        print("Validating word list...")
        validate_word_list_integrity()

        print("Creating Flask application...")
        app, socketio = create_app(Config)
        print("✓ Flask application created successfully")

        session_service = get_session_service()
        storage = "MongoDB" if Config.MONGO_URI else "in-memory (history is lost on restart)"
        print(f"✓ Game history storage: {storage}")
        print(f"✓ Token authentication: {'enabled' if Config.JWT_SECRET else 'disabled'}")
        print(f"✓ Word list: {len(session_service.word_book.answers)} answers")

        # Disconnect sessions that stop sending input
        if Config.IDLE_TIMEOUT_SECONDS > 0:
            socketio.start_background_task(idle_session_worker, socketio,
                                           Config.IDLE_TIMEOUT_SECONDS,
                                           Config.IDLE_SWEEP_INTERVAL_SECONDS)
            print(f"✓ Idle sessions disconnected after {Config.IDLE_TIMEOUT_SECONDS} seconds")

        game_logger.logger.info("Wordle Server Starting")

        print(f"\nStarting Wordle Game Server on {Config.HOST}:{Config.PORT}")
        print(f"Debug mode: {Config.DEBUG}")
        print("=" * 50)

        socketio.run(app, host=Config.HOST, port=Config.PORT, debug=Config.DEBUG)

    except KeyboardInterrupt:
        print("\nServer shutting down...")
        game_logger.logger.info("Wordle Server shutting down (KeyboardInterrupt)")
    except Exception as e:
        print(f"Error starting server: {e}")
        game_logger.logger.error(f"Error starting server: {e}")
        raise
    finally:
        if session_service:
            session_service.repository.close_connection()


if __name__ == '__main__':
    main()
