"""Tokenize CSS-like declarations with a handful of cursor calls."""

from textcursor import Cursor, is_quote, is_white_space

source = 'color: red; font-family: "Fira Code", monospace; width: 100px'
cursor = Cursor(source)

while not cursor.eof():
    cursor.eat_while(is_white_space)
    name = cursor.consume(lambda c: c.isalnum() or c == "-")
    if not (colon := cursor.expect(":")):
        raise colon

    cursor.eat_while(is_white_space)
    cursor.save()
    while not cursor.eof() and cursor.peek() != ";":
        if is_quote(quote := cursor.next()) and not cursor.eat_quoted(quote):
            raise cursor.error("Unterminated string")
    print(f"{name} = {cursor.current()}")
    cursor.eat(";")
