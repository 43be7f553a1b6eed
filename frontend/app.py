# frontend/app.py

from flask import Flask, current_app, jsonify

from agents import AGENT_REGISTRY
from backend.config import configure_logging, load_config
from frontend.api import api_blueprint


def create_app(config=None):
    app = Flask(__name__)
    app.config["MINESWEEPER"] = config if config is not None else load_config()
    app.register_blueprint(api_blueprint, url_prefix="/api")

    @app.route("/")
    def index():
        return jsonify({
            "presets": current_app.config["MINESWEEPER"]["presets"],
            "agents": sorted(AGENT_REGISTRY),
        })

    return app


def main():
    import argparse

    parser = argparse.ArgumentParser()
    parser.add_argument("--config", type=str, default=None, help="YAML file merged over the packaged defaults")
    parser.add_argument("--port", type=int, default=None, help="Port to run the server on")
    parser.add_argument("--host", type=str, default=None, help="Host IP")
    parser.add_argument("--debug", action="store_true", help="Enable debug mode")
    args = parser.parse_args()

    config = load_config(args.config)
    configure_logging(config)
    server = config["server"]
    host = args.host or server["host"]
    port = args.port or server["port"]

    print(f"Running on http://{host}:{port}/")
    create_app(config).run(debug=args.debug or server["debug"], host=host, port=port)


if __name__ == "__main__":
    main()
