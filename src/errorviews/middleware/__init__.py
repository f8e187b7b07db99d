from .locale import LocaleMiddleware

__all__ = ["LocaleMiddleware"]
