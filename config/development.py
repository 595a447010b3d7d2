import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "gym_admin"),
}

# Payment gateway (Razorpay test keys in development)
RAZORPAY_KEY_ID = os.getenv("RAZORPAY_KEY_ID", "")
RAZORPAY_KEY_SECRET = os.getenv("RAZORPAY_KEY_SECRET", "")

# Email: without RESEND_API_KEY notifications are only logged
RESEND_API_KEY = os.getenv("RESEND_API_KEY", "")
NOTIFY_FROM = os.getenv("NOTIFY_FROM", "GymSync <notifications@gymsync.com>")
STAFF_EMAIL = os.getenv("STAFF_EMAIL") or None

# Base URL encoded into member/staff QR codes
APP_URL = os.getenv("APP_URL", "http://localhost:5000")

# Check-ins outside [OPEN_HOUR, CLOSE_HOUR) are flagged as unusual hours
OPEN_HOUR = int(os.getenv("OPEN_HOUR", "5"))
CLOSE_HOUR = int(os.getenv("CLOSE_HOUR", "23"))

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

# If enabled, app will apply schema.sql on startup (idempotent: CREATE IF NOT EXISTS)
AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "1")))
# Optional: also seed demo data on startup
AUTO_SEED_DB = bool(int(os.getenv("AUTO_SEED_DB", "0")))
