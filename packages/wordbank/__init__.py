from .catalog import Difficulty, WordCatalog, load_catalog, normalize_words, is_word
from .validator import validate_wordbank, pretty_summary

__all__ = [
    "Difficulty", "WordCatalog", "load_catalog", "normalize_words", "is_word",
    "validate_wordbank", "pretty_summary",
]
