r"""
'   .____       _____  __________.___ _______   ________
'   |    |     /  _  \ \____    /|   |\      \  \_____  \
'   |    |    /  /_\  \  /     / |   |/   |   \  /  / \  \
'   |    |___/    |    \/     /_ |   /    |    \/   \_/.  \
'   |_______ \____|__  /_______ \|___\____|__  /\_____\ \_/
'           \/       \/        \/            \/        \__>
"""
import logging

# expose the main classes
from .enumerable import Enumerable, OrderedEnumerable

# expose the factory functions
from .factories import (
    as_linq,
    from_iterable,
    from_range,
    repeat,
    empty,
    generate,
    P
)

# expose the source adapter and comparer helpers
from .source import to_iterable, iterate_iterator
from .comparers import compare, make_comparer, combine_comparers

# library logging stays silent unless the application configures it
logging.getLogger(__name__).addHandler(logging.NullHandler())

# define what `import *` does
__all__ = [
    "Enumerable",
    "OrderedEnumerable",
    "as_linq",
    "from_iterable",
    "from_range",
    "repeat",
    "empty",
    "generate",
    "P",
    "to_iterable",
    "iterate_iterator",
    "compare",
    "make_comparer",
    "combine_comparers"
]
