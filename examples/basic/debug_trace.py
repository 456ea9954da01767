"""Watch the lexer work — debug trace through logging."""

import logging

from owl import ScanConfig, Verbosity, tokenize

logging.basicConfig(level=logging.DEBUG, format="%(message)s")

tokenize(
    'list {\n  item; "one"\n  item; "two \\{braced\\}"\n}',
    config=ScanConfig(verbosity=Verbosity.DEBUG),
)
