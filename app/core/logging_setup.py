import logging
import sys

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(level: str = "INFO") -> None:
    """Configure le logger racine une seule fois (appelé au démarrage de l'app)."""
    root = logging.getLogger()
    root.setLevel(getattr(logging, level.upper(), logging.INFO))

    # Evite les doublons si l'app est importée plusieurs fois (tests, reload)
    if any(getattr(h, "_todo_handler", False) for h in root.handlers):
        return

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, DATE_FORMAT))
    handler._todo_handler = True
    root.addHandler(handler)

    # SQLAlchemy est trop bavard en INFO
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
