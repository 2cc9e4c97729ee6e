"""Common literal values used across docsite.

These constants keep output filenames and default interface strings
centralized so templates, builders, and tests import the same values without
drifting. Intended for internal use within the docsite package.

Examples
--------
>>> from docsite import _constants
>>> _constants.OUTPUT_FILENAME
'index.html'
>>> _constants.DEFAULT_MESSAGES["next_page"]
'Next page'
"""

OUTPUT_FILENAME = "index.html"

DEFAULT_MESSAGES: dict[str, str] = {
    "home": "Home",
    "table_of_contents": "On this page",
    "previous_page": "Previous page",
    "next_page": "Next page",
    "original_article": "Open the original (English) article",
    "translation_rate": "Translation progress",
    "translated": "Translated",
    "translated_message": "This page has been fully translated.",
    "partially_translated": "Partially translated",
    "partially_translated_message": (
        "This page is partially translated and still contains original text."
    ),
    "untranslated": "Untranslated",
    "untranslated_message": (
        "This page has not been translated yet; the original text is shown."
    ),
    "community": "Community original",
    "community_message": (
        "This page is not part of the official documentation; it was added by "
        "the community."
    ),
    "constructor": "Constructor",
    "definitions": "Definitions",
    "parameters": "Parameters",
    "default_value": "Default value",
    "string_values": "Available string values",
    "show_example": "Show example",
    "element_function": "Element",
    "contextual_function": "Contextual",
    "required": "Required",
    "positional": "Positional",
    "variadic": "Variadic",
    "settable": "Settable",
}
