from .validator import validate_wordlist, pretty_summary, is_valid_word
from .io import read_lines, write_lines, split_records, load_dictionary, unique_preserve_order

__all__ = [
    "validate_wordlist", "pretty_summary", "is_valid_word",
    "read_lines", "write_lines", "split_records", "load_dictionary", "unique_preserve_order",
]
