# Recursive placeholder substitution over a parsed JSON template

from substitutions import registry


def fill_string(text, lookup=registry.lookup):
    """Replace every ``{key}`` token in ``text`` with fresh generator output.

    Scanning rules:

    - ``\\`` swallows itself and the character after it; neither is written
      and the swallowed character is never treated as a delimiter.
    - ``{`` opens a token, the key starts at the next character.
    - ``}`` inside a token looks the key up. A known key writes its value
      and closes the token. An unknown key leaves the token open with the
      same start, so everything up to the next ``{`` or a later ``}`` that
      completes a known key is dropped.
    - An unterminated token at the end of the string is discarded.
    - Outside a token every other character is copied as-is, including a
      stray ``}``.
    """

    out = []

    in_placeholder = False
    start = 0

    i = 0
    n = len(text)

    while i < n:
        char = text[i]

        if char == "\\":
            i += 2
            continue

        if char == "{":
            in_placeholder = True
            start = i + 1

        elif in_placeholder:
            if char == "}":
                generate = lookup(text[start:i])

                if generate is not None:
                    out.append(generate())
                    in_placeholder = False
                    start = 0

        else:
            out.append(char)

        i += 1

    return "".join(out)


def fill(value, lookup=registry.lookup):
    """Return a filled copy of ``value``.

    Objects are rebuilt key by key to any depth, strings are substituted,
    and everything else (numbers, booleans, null, arrays) comes back as-is.
    Array elements are not visited.
    """

    if isinstance(value, dict):
        return {
            key: fill(sub, lookup)
            for key, sub in value.items()
        }

    if isinstance(value, str):
        return fill_string(value, lookup)

    return value
