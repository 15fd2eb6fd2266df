# parser/exceptions.py
# This file is part of Tabula - A Truth Table Tutor
#
# Custom exceptions for formula tokenization and parsing

"""Domain-specific exceptions for propositional formula processing.

Both exceptions are terminal for the parse attempt that raised them: the
caller treats the formula as entirely unparsed and shows the message as is.
There is no partial AST and no error resynchronization.
"""


class FormulaError(RuntimeError):
    """Base class for every error raised while reading a formula."""

    pass


class LexError(FormulaError):
    """Raised when the input contains a character the lexer does not accept.

    Accepted characters are whitespace, uppercase letters, parentheses and
    the ASCII or Unicode spellings of the five connectives.
    """

    pass


class ParseError(FormulaError):
    """Exception raised when a token sequence is not a well-formed formula.

    Covers unexpected end of input, a token of the wrong type where a
    specific one was required, a missing closing parenthesis, and tokens
    left over after a complete formula.
    """

    pass
