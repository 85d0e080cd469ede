"""
OpenNotionAI Applications Package.

Contains:
- chat_api: FastAPI application (connector, tools and chat endpoints)
"""

__version__ = "0.1.0"
