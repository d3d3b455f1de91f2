# vocab_http_api/domain/__init__.py
"""
Domain value objects and exceptions.

These types describe words, edits and batch results independently of the
HTTP layer and the database engine.
"""
