"""Application entry point — initializes the store and serves the local web API."""

from __future__ import annotations

import json
import logging
import sys
from pathlib import Path

import uvicorn

from jobtracker.config import load_config
from jobtracker.storage import DEFAULT_DATABASE_PATH, init_db
from jobtracker.web.app import create_app

logger = logging.getLogger("jobtracker")


class _JsonFormatter(logging.Formatter):
    """One JSON object per line; the message is escaped like any other value."""

    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "time": self.formatTime(record),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload)


def _setup_logging(log_level: str, log_format: str) -> None:
    """Configure root logger based on config."""
    level = getattr(logging, log_level.upper(), logging.INFO)

    if log_format == "json":
        formatter = _JsonFormatter()
    else:
        formatter = logging.Formatter("%(asctime)s [%(levelname)s] %(name)s: %(message)s")

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(formatter)

    root = logging.getLogger()
    root.setLevel(level)
    root.addHandler(handler)


def main() -> None:
    """Load config, set up logging, prepare the store, and start the web server."""
    config = load_config()
    _setup_logging(config.log_level, config.log_format)

    logger.info(
        "Jobtracker starting (env=%s, db=%s)", config.app_env, DEFAULT_DATABASE_PATH
    )

    # The store itself never creates directories; the shell does it once here.
    Path(DEFAULT_DATABASE_PATH).parent.mkdir(parents=True, exist_ok=True)
    init_db(DEFAULT_DATABASE_PATH)

    app = create_app(DEFAULT_DATABASE_PATH)
    uvicorn.run(app, host=config.web_host, port=config.web_port)


if __name__ == "__main__":
    main()
