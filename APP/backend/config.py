"""Configuration for the Ticket Queue"""
import os
import logging
from pathlib import Path
from typing import Literal

from dotenv import load_dotenv
from pydantic import BaseModel, Field

from data_structures import DEFAULT_CAPACITY

ROOT_DIR = Path(__file__).parent
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


class Settings(BaseModel):
    queue_capacity: int = Field(default=DEFAULT_CAPACITY, gt=0)
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "WARNING"


def load_settings() -> Settings:
    """Read settings from .env and the environment"""
    load_dotenv(ROOT_DIR / '.env')
    return Settings(
        queue_capacity=os.getenv('TICKET_QUEUE_CAPACITY', DEFAULT_CAPACITY),
        log_level=os.getenv('LOG_LEVEL', 'WARNING').upper()
    )


def configure_logging(settings: Settings):
    logging.basicConfig(level=settings.log_level, format=LOG_FORMAT)
