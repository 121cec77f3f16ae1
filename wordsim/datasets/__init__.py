from .validator import validate_dictionary, pretty_summary
from .io import read_lines, read_raw_words, load_dictionary

__all__ = ["validate_dictionary", "pretty_summary", "load_dictionary", "read_lines", "read_raw_words"]
