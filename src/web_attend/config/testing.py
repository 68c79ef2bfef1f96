SECRET_KEY = "test-secret"

API_BASE_URL = "http://api.test"
API_TIMEOUT = 5.0

SESSION_LIFETIME_MINUTES = 60
RECENT_ACTIVITY_LIMIT = 5

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"
