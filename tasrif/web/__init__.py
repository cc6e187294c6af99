"""Tasrif web application (FastAPI)."""
