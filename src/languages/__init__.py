"""
Languages: общий контракт, стратегии декомпозиции и данные локалей.
"""

from src.languages.contract import LanguageContract

__all__ = ["LanguageContract"]
