"""socialpass - GitHub social login for FastAPI applications."""
