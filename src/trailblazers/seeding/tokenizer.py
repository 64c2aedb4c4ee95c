"""
Line Tokenizer

Splits one line of comma-delimited text into raw field values.

Quoting follows the usual spreadsheet-export conventions: a field may be
wrapped in double quotes, inside which commas are literal and a doubled
quote ("") stands for one literal quote character. The tokenizer never
raises: an unterminated quote consumes the rest of the line into the
current field. Whitespace is preserved; trimming is the mappers' job.
"""
from typing import List

DELIMITER = ","
QUOTE = '"'


def tokenize(line: str) -> List[str]:
    """
    Tokenize a single physical line.

    Args:
        line: Line text without its line terminator

    Returns:
        Field values in column order. Always contains at least one element.

    Example:
        >>> tokenize('a,"b,c","d""e",f')
        ['a', 'b,c', 'd"e', 'f']
    """
    fields: List[str] = []
    current: List[str] = []
    in_quotes = False
    i = 0
    length = len(line)

    while i < length:
        char = line[i]

        if char == QUOTE:
            if in_quotes and i + 1 < length and line[i + 1] == QUOTE:
                current.append(QUOTE)
                i += 2
                continue
            in_quotes = not in_quotes
        elif char == DELIMITER and not in_quotes:
            fields.append("".join(current))
            current = []
        else:
            current.append(char)
        i += 1

    fields.append("".join(current))
    return fields
