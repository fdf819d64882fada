"""Interview Board - weekly interview calendar service."""
