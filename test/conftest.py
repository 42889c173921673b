"""
Test Configuration

Environment setup MUST happen before any application import: settings and
the loguru sinks read these variables at import time.
"""

import os
from pathlib import Path


def _early_setup_test_environment() -> None:
    """Set test environment variables before any module imports."""
    os.environ['POSTGRES_DB'] = 'hotel_booking_test_db'
    os.environ.setdefault('DB_POOL_SIZE', '2')
    os.environ.setdefault('DB_POOL_MAX_OVERFLOW', '2')
    os.environ.setdefault('SECRET_KEY', 'hotel_booking_test_secret_key_at_least_32_bytes')

    test_log_dir = Path(__file__).parent / 'test_log'
    test_log_dir.mkdir(exist_ok=True)
    os.environ['TEST_LOG_DIR'] = str(test_log_dir)


# Call immediately to set env vars before any imports
_early_setup_test_environment()
