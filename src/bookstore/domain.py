"""Bookstore domain — composition root.

Books are ordered by customers, orders are confirmed against a payment check,
stock is reserved from inventory when an order ships, and every order moves
forward through a small status lifecycle.
"""

import os

from protean.domain import Domain

from bookstore.utils.logging import configure_logging, get_logger

# Configure logging for the application; LOG_DIR adds rotating log files
configure_logging(log_dir=os.getenv("LOG_DIR"), log_file_prefix="bookstore")

logger = get_logger(__name__)

bookstore = Domain(name="bookstore")
