"""Entry point for the Dash application."""
from config import get_dashboard_config


def main():
    from dash_app.app import app

    server_config = get_dashboard_config().server
    app.run(debug=server_config.debug, host=server_config.host, port=server_config.port)


if __name__ == "__main__":
    main()
