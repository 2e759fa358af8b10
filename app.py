import logging
import os
import socket

from movie_records.ui.dash_app import create_dash_app
from movie_records.logging_config import configure_logging

configure_logging()
logger = logging.getLogger("movie_records.app")

app = create_dash_app()
server = app.server


def find_free_port(start_port: int) -> int:
    """Finds an available port starting from start_port."""
    for port in range(start_port, start_port + 100):
        with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as s:
            if s.connect_ex(("localhost", port)) != 0:
                return port
    return start_port


if __name__ == "__main__":
    preferred_port = int(os.getenv("PORT", "8050"))
    final_port = find_free_port(preferred_port)
    debug = os.getenv("DEBUG", "0") == "1"

    if final_port != preferred_port:
        logger.warning(
            "Preferred port taken",
            extra={"preferred_port": preferred_port, "port": final_port},
        )
    logger.info("Starting dashboard", extra={"port": final_port, "debug": debug})

    app.run(host="0.0.0.0", port=final_port, debug=debug)
