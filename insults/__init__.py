# insults/__init__.py
# Re-exports the stable surface: InsultRegistry, InsultsLoadError
from .errors import InsultsLoadError
from .registry import InsultRegistry

__all__ = ["InsultRegistry", "InsultsLoadError"]
