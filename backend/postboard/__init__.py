# backend/postboard/__init__.py
"""
Postboard backend application package.

This package contains:
- main: FastAPI application entrypoint
- posts: post CRUD modules (store, service, router)
- notifications: post update notifiers (log / email / LINE)
"""
