import os
import yaml

ROOT_PATH = os.path.dirname(__file__)
CONFIG_FILE_PATH = os.path.join(ROOT_PATH, "env.yaml")

if os.path.exists(CONFIG_FILE_PATH):
    with open(CONFIG_FILE_PATH, "r") as r_file:
        data = yaml.safe_load(r_file)
else:
    data = dict()


class ApplicationConfig:
    DB_URI = data.get("DB_URI", "sqlite+aiosqlite:///./taskflow.db")
    API_PREFIX = data.get("API_PREFIX", "/api")
    API_PORT = data.get("API_PORT", 8000)
    API_HOST = data.get("API_HOST", "0.0.0.0")
    CORS_ORIGINS = data.get("CORS_ORIGINS", [])
    CORS_ALLOW_CREDENTIALS = data.get("CORS_ALLOW_CREDENTIALS", True)
    LOG_LEVEL = data.get("LOG_LEVEL", "INFO")
    JWT_SECRET = data.get("JWT_SECRET", "dev-secret-key-change-in-production")
    JWT_EXPIRE_MINUTES = int(data.get("JWT_EXPIRE_MINUTES", 60 * 24 * 7))
    FRONTEND_URL = data.get("FRONTEND_URL", "http://localhost:3000")
    RESEND_API_KEY = data.get("RESEND_API_KEY", "")
    RESEND_API_URL = data.get("RESEND_API_URL", "https://api.resend.com/emails")
    EMAIL_FROM = data.get("EMAIL_FROM", "Task Manager <noreply@makv.in>")
    EMAIL_TIMEOUT_SECONDS = float(data.get("EMAIL_TIMEOUT_SECONDS", 10))
    INVITE_TTL_DAYS = int(data.get("INVITE_TTL_DAYS", 7))
    # "takeover": last starter wins, "reject": refuse while another user times the task
    TIMER_CONFLICT_POLICY = data.get("TIMER_CONFLICT_POLICY", "takeover")
    TEMP_PASSWORD_LENGTH = int(data.get("TEMP_PASSWORD_LENGTH", 12))
