"""logging.py
Holds configured loggers.
"""
from dataclasses import dataclass
from typing import Dict, Literal
import logging
import os
import sys
from datetime import datetime
from dotenv import load_dotenv

load_dotenv()  # load .env

ENV = os.getenv("ENV", "development")  # development | local | test | staging | production

LoggerType = Literal["default", "pytest", "tailor", "render_error"]

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

FILE_LOG_ENVS = ("development", "local", "test")
CLOUD_LOG_ENVS = ("staging", "production")


@dataclass(frozen=True)
class LogDestination:
    """Where records of one logger type end up."""
    subfolder: str
    level: int
    log_group: str


LOG_DESTINATIONS: Dict[str, LogDestination] = {
    "default": LogDestination("", logging.DEBUG, "resume_tailor_logs"),
    "pytest": LogDestination("tests", logging.DEBUG, "resume_tailor_logs"),
    "tailor": LogDestination("tailor_runs", logging.INFO, "resume_tailor_run_logs"),
    "render_error": LogDestination("render_errors", logging.INFO, "resume_tailor_render_error_logs"),
}


class LoggerFactory:
    """
    Builds loggers for the resume tailor.

    What a logger writes to depends on ENV:
      - development / local / test: a timestamped file under
        ``<base_log_folder>/<type folder>/`` (``tests/`` for every logger
        while pytest runs), plus the console when requested.
      - staging / production: AWS CloudWatch through watchtower when it is
        installed, plus the console when requested.

    A logger is configured once. Asking again for the same name returns the
    existing logger untouched, and records never propagate to the root logger.
    """

    def __init__(self, env: str = ENV, base_log_folder: str = "logs"):
        self.env = env
        self.base_log_folder = base_log_folder

    def get_logger(
        self,
        name: str,
        logger_type: LoggerType = "default",
        console: bool = True
    ) -> logging.Logger:
        logger = logging.getLogger(name)
        if logger.hasHandlers():
            return logger

        destination = LOG_DESTINATIONS.get(logger_type, LOG_DESTINATIONS["default"])
        logger.propagate = False
        logger.setLevel(destination.level)
        formatter = logging.Formatter(LOG_FORMAT)

        if console:
            self._attach(logger, logging.StreamHandler(), formatter)

        if self.env in FILE_LOG_ENVS:
            self._attach(logger, self._file_handler(name, destination), formatter)
        elif self.env in CLOUD_LOG_ENVS:
            self._add_cloudwatch_handler(logger, destination, formatter)

        # Never leave a logger silent
        if not logger.handlers:
            self._attach(logger, logging.StreamHandler(), formatter)

        return logger

    @staticmethod
    def _attach(logger: logging.Logger, handler: logging.Handler, formatter: logging.Formatter):
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    def _log_folder(self, destination: LogDestination) -> str:
        if any("pytest" in arg for arg in sys.argv):
            return os.path.join(self.base_log_folder, "tests")
        return os.path.join(self.base_log_folder, destination.subfolder)

    def _file_handler(self, name: str, destination: LogDestination) -> logging.FileHandler:
        folder = self._log_folder(destination)
        os.makedirs(folder, exist_ok=True)
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        return logging.FileHandler(
            os.path.join(folder, f"{name}_{timestamp}.log"), mode="a", encoding="utf-8"
        )

    def _add_cloudwatch_handler(
        self,
        logger: logging.Logger,
        destination: LogDestination,
        formatter: logging.Formatter,
    ):
        """CloudWatch logging for staging/production (``pip install .[cloud]``)."""
        try:
            import watchtower
        except ImportError:
            logger.warning("watchtower not installed, skipping cloud logging.")
            return

        self._attach(logger, watchtower.CloudWatchLogHandler(log_group=destination.log_group), formatter)
