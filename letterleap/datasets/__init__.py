from .dictionary import Dictionary, DictionaryLoader, load_dictionary, parse_words
from .validator import validate_wordlist, pretty_summary

__all__ = [
    "Dictionary", "DictionaryLoader", "load_dictionary", "parse_words",
    "validate_wordlist", "pretty_summary",
]
