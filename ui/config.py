import os

BASE_URL = os.environ.get("SPENDBOARD_API_BASE", "http://localhost:5000/spendboard/v1")
OWNER_ID = os.environ.get("SPENDBOARD_OWNER_ID", "")
REQUEST_TIMEOUT = 10
