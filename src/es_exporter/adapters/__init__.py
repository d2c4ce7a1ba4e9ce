"""Adapters – Elasticsearch REST stat source and FastAPI exposition router."""
