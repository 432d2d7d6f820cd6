import os

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

COMPANY_NAME = os.getenv("COMPANY_NAME", "My Company")
DEFAULT_VACATION_DAYS = int(os.getenv("DEFAULT_VACATION_DAYS", "20"))

DEBUG = False
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
