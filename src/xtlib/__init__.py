from xtlib._cli import main
from xtlib._errors import NotFoundError
from xtlib._iterable import all_match, any_match, contains, index
from xtlib._random import DEFAULT_CHARSET, RandomString, new_random_string
from xtlib._set import Set
from xtlib._strategies import random_strings, register_strategies, sets

__all__ = [
    "DEFAULT_CHARSET",
    "NotFoundError",
    "RandomString",
    "Set",
    "all_match",
    "any_match",
    "contains",
    "index",
    "main",
    "new_random_string",
    "random_strings",
    "register_strategies",
    "sets",
]
