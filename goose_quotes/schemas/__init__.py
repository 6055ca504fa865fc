"""Pydantic schemas: the JSON contract of the API."""
