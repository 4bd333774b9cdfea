"""
Blog Backend: root package.

This package contains the FastAPI app entry point (main.py), the GraphQL
schema and REST image routes, the domain model and use cases, and the
MongoDB / filesystem infrastructure behind them.
"""
