"""
OpenNotionAI Configuration Package.

Provides Pydantic Settings loaded from environment variables.
"""

from ona_config.settings import Settings

__all__ = ["Settings"]
