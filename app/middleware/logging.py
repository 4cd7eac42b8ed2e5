import logging
from logging.config import dictConfig
from pydantic import BaseModel
from typing import Any, Dict

from app.core.config import Settings, settings as default_settings

LOG_FORMAT = "%(levelprefix)s | %(asctime)s | %(name)s | %(funcName)s | %(lineno)d | %(message)s"


class LogConfig(BaseModel):
    """Journalisation du service catalogue : loggers ``app.*``, SQLAlchemy et uvicorn"""

    level: str = "INFO"
    sql_echo: bool = False

    @classmethod
    def from_settings(cls, settings: Settings) -> "LogConfig":
        return cls(level=settings.LOG_LEVEL.upper(), sql_echo=settings.SQL_ECHO)

    def to_dict_config(self) -> Dict[str, Any]:
        handler = {"handlers": ["default"], "propagate": False}
        return {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "default": {
                    "()": "uvicorn.logging.DefaultFormatter",
                    "fmt": LOG_FORMAT,
                    "datefmt": "%Y-%m-%d %H:%M:%S",
                },
            },
            "handlers": {
                "default": {
                    "formatter": "default",
                    "class": "logging.StreamHandler",
                    "stream": "ext://sys.stderr",
                },
            },
            "loggers": {
                "app": {**handler, "level": self.level},
                # SQL statements only when SQL_ECHO is on
                "sqlalchemy.engine": {
                    **handler,
                    "level": "INFO" if self.sql_echo else "WARNING",
                },
                "uvicorn": {**handler, "level": "INFO"},
                "uvicorn.error": {"level": "INFO", "propagate": True},
                "uvicorn.access": {**handler, "level": "INFO"},
            },
        }


def configure_logging(settings: Settings = default_settings) -> LogConfig:
    """Applique la configuration de journalisation"""
    config = LogConfig.from_settings(settings)
    dictConfig(config.to_dict_config())
    logging.getLogger(__name__).debug(f"Logging configured at level {config.level}")
    return config
