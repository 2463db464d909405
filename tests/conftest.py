import os
import sys

# Set required environment variables for testing
# These must be set before importing any module that instantiates Settings
os.environ.setdefault("TWILIO_ACCOUNT_SID", "ACtest-sid")
os.environ.setdefault("TWILIO_AUTH_TOKEN", "test-token")
os.environ.setdefault("API_ENVIRONMENT", "test")

# Ensure project root is in pythonpath
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))
