from __future__ import annotations

import itertools
from collections.abc import Iterable, Iterator, Sized
from dataclasses import dataclass
from typing import Any


@dataclass(slots=True)
class Config:
    """Process-wide runtime settings.

    Attributes:
        repr_max_items (int): Number of elements shown by `Seq`, `Vec` and `Matrix` reprs before truncating.
        max_workers (int | None): Thread pool size used by operators called with `parallel=True`. `None` lets `concurrent.futures` decide.
    """

    repr_max_items: int = 20
    max_workers: int | None = None

    def iter_repr(self, data: Iterable[Any]) -> str:
        """Render the elements of a countable store, comma separated.

        Single-pass iterators are never consumed, their own repr is used instead.

        ```python
        >>> from seqchain import get_config
        >>> get_config().iter_repr((1, 2, 3))
        '1, 2, 3'
        >>> get_config().iter_repr((1,))
        '1,'
        >>> get_config().iter_repr(range(30)).endswith('19, ...')
        True

        ```
        """
        if isinstance(data, Iterator) or not isinstance(data, Sized):
            return repr(data)
        items = tuple(itertools.islice(data, self.repr_max_items))
        body = ", ".join(repr(item) for item in items)
        if len(data) > self.repr_max_items:
            return f"{body}, ..."
        if len(items) == 1:
            return f"{body},"
        return body


_CONFIG = Config()


def get_config() -> Config:
    """Return the shared `Config` instance. Mutate its attributes to change the settings."""
    return _CONFIG
