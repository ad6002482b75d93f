"""
Multi-Wordle Server - Main Entry Point

Reads the secret sentence from the command line, validates it and starts
the Flask-SocketIO application.

Usage: python main.py 'WORD1 WORD2 ...' (all 5-letter words)
"""

import sys
from multiwordle import create_app
from multiwordle.config import Config, WORD_LENGTH, parse_secret_sentence
from multiwordle.services.game_service import GameService
from multiwordle.utils.game_logger import game_logger


def main(argv=None):
    """Main function to validate the secret sentence and start the server."""
    if argv is None:
        argv = sys.argv

    raw_secret = " ".join(argv[1:]) or Config.SECRET_SENTENCE
    if not raw_secret:
        print(f"Usage: python main.py 'WORD1 WORD2 ...' (all {WORD_LENGTH}-letter words)")
        sys.exit(1)

    try:
        secret_words = parse_secret_sentence(raw_secret)
        game_service = GameService(secret_words, max_attempts=Config.MAX_ATTEMPTS)
    except ValueError as config_error:
        print(config_error)
        game_logger.log_error(None, config_error, 'startup')
        sys.exit(1)

    try:
        print("Creating Flask application...")
        app, socketio = create_app(Config, game_service=game_service)
        print("✓ Flask application created successfully")

        game_logger.logger.info(
            f"Multi-Wordle Server Starting - {len(secret_words)} word(s), "
            f"{game_service.max_attempts} attempts"
        )

        print(f"\nStarting Multi-Wordle server on http://{Config.HOST}:{Config.PORT}")
        print(f"Debug mode: {Config.DEBUG}")
        print("=" * 50)

        socketio.run(app, host=Config.HOST, port=Config.PORT, debug=Config.DEBUG,
                     allow_unsafe_werkzeug=True)

    except KeyboardInterrupt:
        print("\nServer shutting down...")
        game_logger.logger.info("Multi-Wordle Server shutting down (KeyboardInterrupt)")
    except Exception as e:
        print(f"Error starting server: {e}")
        game_logger.logger.error(f"Error starting server: {e}")
        raise


if __name__ == '__main__':
    main()
