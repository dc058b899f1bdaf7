# gateway/__init__.py

"""
Collection Gateway

FastAPI-based REST gateway exposing generic read, insert and update
endpoints over the collections of one MongoDB database.
"""

__version__ = "1.0.0"
