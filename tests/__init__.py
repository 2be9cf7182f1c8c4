"""
Test suite for the orders RRP feed.

Run all tests: pytest
Run unit tests only: pytest tests/unit/
Run specific file: pytest tests/unit/test_enrichment_service.py -v
"""
