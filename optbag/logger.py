# OptBag Option Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""Global logger instance for OptBag."""
import logging

logger: logging.Logger = logging.getLogger("optbag")
