"""
Amount Words WSGI Entry Point
Module-level application for WSGI servers.
"""

from amount_words.app import create_app
from amount_words.config import get_config

app = create_app()


def main() -> None:
    """Run the development server."""
    config = get_config()
    app.run(
        host=config.host,
        port=config.port,
        debug=config.debug
    )


if __name__ == '__main__':
    main()
