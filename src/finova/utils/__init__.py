"""Utility functions for finova."""

from finova.utils.date_parser import parse_date
from finova.utils.amount_parser import parse_amount
from finova.utils.logging_utils import configure_logging, get_app_logger

__all__ = ["parse_date", "parse_amount", "configure_logging", "get_app_logger"]
