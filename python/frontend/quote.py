"""Text revealed once the puzzle is solved."""

QUOTE_TEXT = "We are all in the gutter, but some of us are looking at the stars."
QUOTE_AUTHOR = "Oscar Wilde"
