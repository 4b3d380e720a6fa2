"""Splitting of comma-delimited parameter lists."""

ESCAPE = "\\"
DELIMITER = ","


def tokenize(values: str) -> list[str]:
    """
    Split a comma-delimited list of parameter values into its tokens.

    ``\\,`` and ``\\\\`` produce a literal comma and backslash respectively.
    Any other backslash sequence, including a trailing backslash, is kept
    verbatim. The final token is always emitted, so an empty string yields
    ``[""]`` and a leading or trailing comma yields an empty token.

    Parameters
    ----------
    values : str
        The raw list, eg the value of a ``--parameter-list`` flag.

    Returns
    -------
    list[str]
        The tokens, in input order.

    Example
    -------
    >>> tokenize(r"foo,hello\\, world,bar")
    ['foo', 'hello, world', 'bar']
    """
    tokens: list[str] = []
    buf: list[str] = []

    chars = iter(values)
    for c in chars:
        if c == ESCAPE:
            nxt = next(chars, None)
            if nxt is None:
                buf.append(ESCAPE)
            elif nxt == DELIMITER or nxt == ESCAPE:
                buf.append(nxt)
            else:
                buf.append(ESCAPE)
                buf.append(nxt)
        elif c == DELIMITER:
            tokens.append("".join(buf))
            buf = []
        else:
            buf.append(c)

    tokens.append("".join(buf))
    return tokens
