"""Pydantic schemas shared by the extraction, resolution and advisor layers."""
