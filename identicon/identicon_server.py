"""
Identicon server — Flask entrypoint, GET /<text>.png
"""

import logging
import os
import sys
from flask import Flask
from identicon.api.routes import bp as api_bp

DEFAULT_PORT = 8080

app = Flask(__name__)
app.register_blueprint(api_bp)

def get_port(argv=None, environ=None) -> int:
    argv = sys.argv if argv is None else argv
    environ = os.environ if environ is None else environ
    port = DEFAULT_PORT
    if environ.get("PORT"):
        port = int(environ["PORT"])
    if "--port" in argv:
        i = argv.index("--port")
        port = int(argv[i+1])
    return port

def main():
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(name)s %(message)s")
    port = get_port()
    print(f"[identicon] listening on http://0.0.0.0:{port}")
    app.run(host="0.0.0.0", port=port, debug=False)

if __name__ == "__main__":
    main()
