from .cutoff_matcher import DEFAULT_LIMIT, match

__all__ = ["DEFAULT_LIMIT", "match"]
