# src/semdex/parsing.py
"""Line-oriented parsing of delimited records.

Two flavours are provided:

- parse_fields: quote-aware splitting (quotes toggle, are dropped)
- parse_bracketed_fields: additionally keeps ``[...]`` spans intact, which is
  needed for the embedding column whose text form is itself a comma list

Quotes cannot be escaped inside a quoted span: every quote character toggles
the in-quotes state. Source data must not contain embedded quote characters
within quoted text.
"""

DEFAULT_SEPARATOR = ","
DEFAULT_QUOTE = '"'


def parse_fields(
    line: str,
    separator: str = DEFAULT_SEPARATOR,
    quote: str = DEFAULT_QUOTE,
) -> list[str]:
    """Split a line into fields, ignoring separators inside quoted spans.

    Args:
        line: A single line of text (without trailing newline)
        separator: Field separator character
        quote: Quote character; toggles quoting and is stripped from output

    Returns:
        Fields in input order. The trailing field is always emitted.
    """
    fields: list[str] = []
    current: list[str] = []
    in_quotes = False

    for char in line:
        if char == quote:
            in_quotes = not in_quotes
        elif char == separator and not in_quotes:
            fields.append("".join(current))
            current = []
        else:
            current.append(char)

    fields.append("".join(current))
    return fields


def parse_bracketed_fields(
    line: str,
    separator: str = DEFAULT_SEPARATOR,
    quote: str = DEFAULT_QUOTE,
    open_bracket: str = "[",
    close_bracket: str = "]",
) -> list[str]:
    """Split a line into fields, keeping bracketed spans intact.

    Inside ``open_bracket ... close_bracket`` every character, including the
    separator and the quote character, is copied verbatim. Quote characters
    only toggle quoting while outside brackets. The brackets themselves are
    kept in the field.

    Example:
        >>> parse_bracketed_fields('a,"[1,2,3]",b')
        ['a', '[1,2,3]', 'b']
    """
    fields: list[str] = []
    current: list[str] = []
    in_quotes = False
    in_brackets = False

    for char in line:
        if char == quote and not in_brackets:
            in_quotes = not in_quotes
        elif char == open_bracket:
            in_brackets = True
            current.append(char)
        elif char == close_bracket:
            in_brackets = False
            current.append(char)
        elif char == separator and not in_quotes and not in_brackets:
            fields.append("".join(current))
            current = []
        else:
            current.append(char)

    fields.append("".join(current))
    return fields


def clean_field(value: str, quote: str = DEFAULT_QUOTE) -> str:
    """Remove quote characters left over in a parsed field."""
    return value.replace(quote, "")
