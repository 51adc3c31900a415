"""
Rheumatexto Game Server - Main Entry Point

Loads the ranking dataset, initializes the game service and starts the
Flask-SocketIO application.
"""

import sys
from rheumatexto import create_app
from rheumatexto.config import Config
from rheumatexto.services.game_service import initialize_game_service
from rheumatexto.services.storage_service import create_store
from rheumatexto.services.word_data import DatasetLoadFailure, load_word_data
from rheumatexto.utils.game_logger import game_logger


def main():
    """Main function to initialize services and start the server."""
    try:
        print("Initializing services...")

        # The game cannot start without its dataset
        try:
            word_data = load_word_data(Config.WORDS_FILE)
        except DatasetLoadFailure as e:
            print(f"✗ Failed to load game data: {e}")
            game_logger.logger.critical(f"Failed to load game data: {e}")
            sys.exit(1)
        print(f"✓ Word data loaded: {word_data.statistics()}")

        store = create_store(Config)
        print(f"✓ Storage initialized ({type(store).__name__})")

        initialize_game_service(word_data, store, Config)
        print("✓ Game service initialized successfully")

        # Create Flask app
        print("Creating Flask application...")
        app, socketio = create_app(Config)
        print("✓ Flask application created successfully")

        game_logger.logger.info("Rheumatexto Server Starting")

        print(f"\nStarting Rheumatexto Server on {Config.HOST}:{Config.PORT}")
        print(f"Debug mode: {Config.DEBUG}")
        print("=" * 50)

        socketio.run(app, host=Config.HOST, port=Config.PORT, debug=Config.DEBUG)

    except KeyboardInterrupt:
        print("\nServer shutting down...")
        game_logger.logger.info("Rheumatexto Server shutting down (KeyboardInterrupt)")
    except Exception as e:
        print(f"Error starting server: {e}")
        game_logger.logger.error(f"Error starting server: {e}")
        raise


if __name__ == '__main__':
    main()
