import os

SALESFORCE_INSTANCE_URL = os.getenv("SALESFORCE_INSTANCE_URL", "")
SALESFORCE_ACCESS_TOKEN = os.getenv("SALESFORCE_ACCESS_TOKEN", "")
SALESFORCE_API_VERSION = os.getenv("SALESFORCE_API_VERSION", "59.0")
SALESFORCE_TIMEOUT_SECONDS = float(os.getenv("SALESFORCE_TIMEOUT_SECONDS", "30"))

MCP_SERVER_HOST = os.getenv("MCP_SERVER_HOST", "0.0.0.0")
MCP_SERVER_PORT = int(os.getenv("MCP_SERVER_PORT", "8006"))

LOG_LEVEL = os.getenv("LOG_LEVEL", "info")

# Sessions idle for longer than this are dropped
MCP_SESSION_TTL_SECONDS = float(os.getenv("MCP_SESSION_TTL_SECONDS", "3600"))
