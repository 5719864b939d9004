"""Functional surface of pyoiter: every combinator as a plain function over iterables.

```python
>>> from pyoiter import tools
>>> tools.materialize(tools.islice(tools.cycle("ab"), 5), "".join)
'ababa'

```
"""

from ._tools import *  # noqa: F403
from ._tools import __all__  # noqa: F401
