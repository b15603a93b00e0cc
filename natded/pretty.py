"""

Sigils used when turning propositions back into text.

The pretty_* names are the canonical ASCII spellings, which the
tokenizer reads back in; the display_* names are the LaTeX-like
markup handed to whatever renders formulas for people.

"""

pretty_OPEN    = '('
pretty_CLOSE   = ')'
pretty_IMPLIES = '->'
pretty_IFF     = '<->'
pretty_OR      = '|'
pretty_AND     = '^'
pretty_NOT     = '~'
pretty_TRUE    = 'T'
pretty_FALSE   = 'F'

display_IMPLIES = '\\to'
display_IFF     = '\\leftrightarrow'
display_OR      = '\\lor'
display_AND     = '\\land'
display_NOT     = '\\neg'
display_TRUE    = '\\top'
display_FALSE   = '\\bot'

# Binding strength, loosest first. Must agree with the parser's ladder.
precedence_IFF     = 1
precedence_IMPLIES = 2
precedence_OR      = 3
precedence_AND     = 4
precedence_NOT     = 5
precedence_ATOM    = 6
