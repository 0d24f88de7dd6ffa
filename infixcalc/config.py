import os

DEBUG = bool(os.getenv("INFIXCALC_DEBUG", False))

# How deeply function calls may nest inside one another, e.g. f(g(h(1))) is 3.
MAX_CALL_DEPTH = int(os.getenv("INFIXCALC_MAX_CALL_DEPTH", 64))
