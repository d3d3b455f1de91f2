# tests/__init__.py
"""
Test Suite for the vocabulary collector.

Organization:
- `core`: tokenizer and services, against in-memory SQLite or mocked stores.
- `adapters`: SQLAlchemy stores.
- `http_api`: end-to-end API tests through the FastAPI TestClient.
"""
