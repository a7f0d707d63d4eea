"""
Mock items service (FastAPI) used for local development and tests.
"""
