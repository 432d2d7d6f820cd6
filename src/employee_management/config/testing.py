SECRET_KEY = "test-secret"

COMPANY_NAME = "Test Company"
DEFAULT_VACATION_DAYS = 20

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"
