"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

MINUTES_PER_DAY = 24 * 60

DEFAULT_MEAL_WINDOWS = {
    "breakfast_start": "09:00",
    "breakfast_end": "09:30",
    "am_snack": "11:00",
    "lunch": "13:00",
    "pm_snack": "15:00",
}

DEFAULT_EXPORT_FILENAME = "daycare.xlsx"
SHEET_RECORDS = "Records"
SHEET_MONTHLY = "Monthly Summary"
SHEET_ANNUAL = "Annual Summary"

DEFAULT_RATE_YEAR_MIN = 2000
DEFAULT_RATE_YEAR_MAX = 2100
# Matches DECIMAL(10,2) in reimbursement_rates.
RATE_DECIMALS = 2

REASON_CHECK_IN = "Check-in button"
REASON_CHECK_OUT = "Check-out button"
REASON_CLEARED = "Cleared times"

# Collection names, shared by repositories and the snapshot hub.
KIDS = "kids"
RECORDS = "records"
RATES = "reimbursementRates"
