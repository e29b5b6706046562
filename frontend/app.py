# frontend/app.py

import logging

from flask import Flask, jsonify

from frontend.api import api_blueprint

logger = logging.getLogger(__name__)

app = Flask(__name__)
app.register_blueprint(api_blueprint, url_prefix="/api")


@app.route("/")
def index():
    return jsonify({"endpoints": ["/api/new_game", "/api/step", "/api/state"]})


def main():
    import argparse

    parser = argparse.ArgumentParser()
    parser.add_argument("--port", type=int, default=5000, help="Port to run the server on")
    parser.add_argument("--host", type=str, default="127.0.0.1", help="Host IP")
    parser.add_argument("--debug", action="store_true", help="Enable debug mode")
    args = parser.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.debug else logging.INFO)
    logger.info("Running on http://%s:%s/", args.host, args.port)
    app.run(debug=args.debug, host=args.host, port=args.port)


if __name__ == "__main__":
    main()
