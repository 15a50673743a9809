"""Package metadata sent to the API."""

NAME = "cloudcraft-python"
VERSION = "1.1.0"
USER_AGENT = f"{NAME}/{VERSION}"
