import os
from dotenv import load_dotenv
load_dotenv()

class Config:
    SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret")
    SQLALCHEMY_DATABASE_URI = os.getenv("DATABASE_URL", "sqlite:///press_kits.db")
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    # JSON API only, forms are fed from request bodies
    WTF_CSRF_ENABLED = False
    REDIS_URL = os.getenv("REDIS_URL", "redis://localhost:6379/0")
    JOB_RETRY_MAX = int(os.getenv("JOB_RETRY_MAX", "0"))
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
    PRESS_KITS_SERVICE_API_KEY = os.getenv("PRESS_KITS_SERVICE_API_KEY")
    APP_ID = os.getenv("APP_ID", "press-kits-service")
    GENERATION_WORKFLOW_NAME = os.getenv("GENERATION_WORKFLOW_NAME", "generate-press-kit")
    STALE_AFTER_DAYS = int(os.getenv("STALE_AFTER_DAYS", "30"))
    HTTP_TIMEOUT = float(os.getenv("HTTP_TIMEOUT", "30"))
    # collaborator calls made while a request waits (jobs run without Redis)
    INLINE_HTTP_TIMEOUT = float(os.getenv("INLINE_HTTP_TIMEOUT", "5"))
    RUNS_SERVICE_URL = os.getenv("RUNS_SERVICE_URL", "http://localhost:3003")
    RUNS_SERVICE_API_KEY = os.getenv("RUNS_SERVICE_API_KEY", "")
    WORKFLOW_SERVICE_URL = os.getenv("WORKFLOW_SERVICE_URL", "http://localhost:3002")
    WORKFLOW_SERVICE_API_KEY = os.getenv("WORKFLOW_SERVICE_API_KEY", "")
    TRANSACTIONAL_EMAIL_SERVICE_URL = os.getenv("TRANSACTIONAL_EMAIL_SERVICE_URL", "http://localhost:3005")
    TRANSACTIONAL_EMAIL_SERVICE_API_KEY = os.getenv("TRANSACTIONAL_EMAIL_SERVICE_API_KEY", "")


class TestConfig(Config):
    TESTING = True
    SQLALCHEMY_DATABASE_URI = "sqlite://"
    # no redis in tests: jobs run inline
    REDIS_URL = None
    PRESS_KITS_SERVICE_API_KEY = "test-api-key"
    RUNS_SERVICE_API_KEY = "runs-key"
    WORKFLOW_SERVICE_API_KEY = "workflow-key"
    TRANSACTIONAL_EMAIL_SERVICE_API_KEY = "email-key"
