import os
from dotenv import load_dotenv

# Load .env from project root
load_dotenv()

STRUCTURIZR_API_URL = os.getenv("STRUCTURIZR_API_URL", "https://api.structurizr.com")
STRUCTURIZR_API_KEY = os.getenv("STRUCTURIZR_API_KEY", "")
STRUCTURIZR_API_SECRET = os.getenv("STRUCTURIZR_API_SECRET", "")
STRUCTURIZR_WORKSPACE_ID = os.getenv("STRUCTURIZR_WORKSPACE_ID", "")
STRUCTURIZR_TIMEOUT = float(os.getenv("STRUCTURIZR_TIMEOUT", "60"))

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
