STAK_GRAMMAR = r"""
    start: token*

    token: SIGNED_INT -> literal
         | WORD       -> word

    // A literal must span the whole whitespace-delimited token, so "5abc"
    // lexes as a single WORD rather than 5 followed by abc.
    SIGNED_INT.2: /[+-]?[0-9]+(?!\S)/
    WORD: /\S+/

    %ignore /\s+/
"""
