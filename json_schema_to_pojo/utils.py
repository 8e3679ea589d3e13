"""
Utility functions for JSON Schema to POJO generator.
"""

import re

_SINGULAR_RULES = [
    (re.compile(r"(?i)(quiz)zes$"), r"\1"),
    (re.compile(r"(?i)(matr|vert|ind)ices$"), r"\1ix"),
    (re.compile(r"(?i)(alias|status|bus)es$"), r"\1"),
    (re.compile(r"(?i)(x|ch|ss|sh)es$"), r"\1"),
    (re.compile(r"(?i)([^aeiouy]|qu)ies$"), r"\1y"),
    (re.compile(r"(?i)(movie)s$"), r"\1"),
    (re.compile(r"(?i)([lr])ves$"), r"\1f"),
    (re.compile(r"(?i)(tive)s$"), r"\1"),
    (re.compile(r"(?i)(analy|ba|diagno|parenthe|progno|synop|the)ses$"), r"\1sis"),
    (re.compile(r"(?i)([ti])a$"), r"\1um"),
    (re.compile(r"(?i)(n)ews$"), r"\1ews"),
    (re.compile(r"(?i)(ss|us|is)$"), r"\1"),
    (re.compile(r"(?i)s$"), ""),
]

_UNCOUNTABLE = {"equipment", "information", "rice", "money", "species", "series", "fish", "sheep", "data"}


def make_singular(word: str) -> str:
    """Return the singular form of an English plural noun.

    Examples:
        "addresses" -> "address"
        "categories" -> "category"
        "items" -> "item"
        "data" -> "data"
    """
    if not word or word.lower() in _UNCOUNTABLE:
        return word
    for pattern, replacement in _SINGULAR_RULES:
        if pattern.search(word):
            return pattern.sub(replacement, word)
    return word


def capitalize(text: str) -> str:
    """Upper-case the first character, leaving the rest untouched."""
    return text[:1].upper() + text[1:]


def uncapitalize(text: str) -> str:
    """Lower-case the first character, leaving the rest untouched."""
    return text[:1].lower() + text[1:]
