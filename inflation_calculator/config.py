# Configuration file for the Philippine Inflation Calculator

import os
from pathlib import Path

# Application Settings
APP_NAME = "Philippine Inflation Calculator"
APP_VERSION = "1.0.0"
APP_DESCRIPTION = (
    "Estimate how much an amount from a past year would cost in another year "
    "using average annual inflation."
)

# Data Settings
PACKAGE_DIR = Path(__file__).parent
DEFAULT_DATA_FILE = PACKAGE_DIR / 'data' / 'inflation_by_year.json'
DATA_FILE = Path(os.environ.get('INFLATION_DATA_FILE', DEFAULT_DATA_FILE))
DATA_SOURCE_NOTE = "Note: Uses average annual inflation per year. Source: BSP and public datasets."

# Currency Settings
CURRENCY_SYMBOL = "₱"

# Default Values
DEFAULT_AMOUNT = "100"

# Table Settings
GRID_COLUMNS = 3
UNKNOWN_RATE_LABEL = "—"
MINUS_SIGN = "−"

# Messages
INVALID_AMOUNT_MESSAGE = "Please enter a valid non-negative number for the amount."
SAME_YEAR_MESSAGE = "Picking the same year shows no change."
UNDEFINED_RESULT_MESSAGE = "A -100% inflation year in this range makes the result undefined."
NO_RESULT_MESSAGE = "Enter a valid amount to see the result."

# Logging Settings
LOG_LEVEL = os.environ.get('INFLATION_LOG_LEVEL', 'INFO').upper()
LOG_FORMAT = '%(asctime)s - %(levelname)s - [%(funcName)s] - %(message)s'
