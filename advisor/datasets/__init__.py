from .dictionary import (
    Dictionary, DictionaryEntry, DictionaryFormatError, NounType, VerbType,
    load_dictionary, parse_entry,
)
from .used_words import (
    UsedWordsFetchError, fetch_used_words_page, get_used_words, load_used_words,
    parse_used_words, save_used_words,
)
from .validator import validate_dictionary, pretty_summary
from .io import read_words, write_words

__all__ = [
    "Dictionary", "DictionaryEntry", "DictionaryFormatError", "NounType", "VerbType",
    "load_dictionary", "parse_entry",
    "UsedWordsFetchError", "fetch_used_words_page", "get_used_words", "load_used_words",
    "parse_used_words", "save_used_words",
    "validate_dictionary", "pretty_summary", "read_words", "write_words",
]
