"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DEFAULT_RECENT_LIMIT = 5
DEFAULT_SESSION_MINUTES = 8 * 60
MESSAGE_CLEAR_MS = 3000
MAX_CLASSES_PER_DAY = 7

NOT_APPLICABLE = "N/A"

DEFAULT_CLASS_LABEL = "II-BCA"
AVATAR_URL_TEMPLATE = "https://i.pravatar.cc/150?u={id}"

FETCH_ERROR_MESSAGE = "Failed to fetch data from the server."
SUBMISSION_ERROR_MESSAGE = "Submission failed. Please try again."
LOGIN_FALLBACK_MESSAGE = "Invalid credentials."
LOGIN_UNEXPECTED_MESSAGE = "An unexpected error occurred. Please try again."
FORGOT_PASSWORD_MESSAGE = "If you forgot your password, please contact an administrator."

# Subject codes offered by the schedule form, in display order.
SUBJECTS = (
    ("LANG", "Language Arts"),
    ("AI", "Artificial Intelligence"),
    ("AI Lab", "AI Lab"),
    ("DBMS", "Database Management"),
    ("DBMS Lab", "Database Lab"),
    ("ENG", "Engineering"),
    ("PS", "Problem Solving"),
)
SUBJECT_CODES = frozenset(code for code, _ in SUBJECTS)
