from datetime import datetime, timezone

USER_ID = "user-abc-123"
USER_EMAIL = "lisa@example.com"
USER_NAME = "lisa_lifts"
USER_PASSWORD = "correct-horse"

ADMIN_EMAIL = "admin@exercises.com"
ADMIN_PASSWORD = "Admin123!"

BASE_URL = "http://api.test/exercise-logging"
TOKEN = "token-xyz"

TEST_ISO_TIMESTAMP = "2025-12-15T10:30:00Z"
TEST_DISPLAY_TIMESTAMP = "15/12/2025 10:30:00"
TEST_DATETIME = datetime(2025, 12, 15, 10, 30, 0, tzinfo=timezone.utc)
