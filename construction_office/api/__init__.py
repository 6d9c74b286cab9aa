# Expose api submodules as package attributes so code that does
# `from .api import health` works as expected.
from . import auth, health, records

__all__ = ["auth", "health", "records"]
