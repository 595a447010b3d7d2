import os

SECRET_KEY = "test-secret"

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "gym_admin_test"),
}

RAZORPAY_KEY_ID = "rzp_test_key"
RAZORPAY_KEY_SECRET = "test-secret"

RESEND_API_KEY = ""
NOTIFY_FROM = "GymSync <notifications@gymsync.com>"
STAFF_EMAIL = None

APP_URL = "http://testserver"

OPEN_HOUR = 5
CLOSE_HOUR = 23

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"

AUTO_INIT_DB = False
AUTO_SEED_DB = False
