import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

COMPANY_NAME = os.getenv("COMPANY_NAME", "My Company")
DEFAULT_VACATION_DAYS = int(os.getenv("DEFAULT_VACATION_DAYS", "20"))

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")
