"""
HTTP API for DateIO.

FastAPI application serving calendar structures and formatting to picker
frontends.
"""
