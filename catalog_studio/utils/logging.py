import logging, os
from datetime import datetime

logger = logging.getLogger("catalog_studio")

def _log_dir() -> str:
    base = os.environ.get("CATALOG_STUDIO_CONFIG_DIR") or "~/.config/catalog-studio"
    return os.path.join(os.path.expanduser(base), "logs")

def init(level: int = logging.INFO) -> None:
    if logger.handlers:
        return
    logger.setLevel(level)

    ch = logging.StreamHandler()
    ch.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(message)s"))
    logger.addHandler(ch)

    log_dir = _log_dir()
    os.makedirs(log_dir, exist_ok=True)
    fh = logging.FileHandler(os.path.join(log_dir, f"catalog_studio_{datetime.now():%Y%m%d}.log"))
    fh.setLevel(logging.DEBUG)
    fh.setFormatter(logging.Formatter("%(asctime)s %(levelname)s [%(name)s] %(message)s"))
    logger.addHandler(fh)

    # httpx logs every request at INFO
    logging.getLogger("httpx").setLevel(logging.WARNING)

    logger.info("Catalog Studio logging initialized")
