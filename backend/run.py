import logging
import socket

from config import Config
from productapi import create_app

logging.basicConfig(
    level=getattr(logging, Config.LOG_LEVEL, logging.INFO),
    format='%(asctime)s %(levelname)s %(name)s: %(message)s',
)
logger = logging.getLogger(__name__)

app = create_app()


def _can_bind(port: int) -> bool:
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as sock:
        sock.settimeout(0.2)
        return sock.connect_ex(("127.0.0.1", port)) != 0


if __name__ == '__main__':
    preferred_port = Config.PORT
    fallback_port = Config.PORT_FALLBACK
    run_port = preferred_port

    if not _can_bind(preferred_port) and fallback_port != preferred_port and _can_bind(fallback_port):
        logger.warning("Port %s is in use, fallback to %s", preferred_port, fallback_port)
        run_port = fallback_port

    logger.info("Server is running on http://localhost:%s", run_port)
    app.run(debug=Config.FLASK_ENV == 'development', host='0.0.0.0', port=run_port)
