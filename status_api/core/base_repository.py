import threading
from contextlib import contextmanager
from typing import Generic, Iterator, TypeVar

TModel = TypeVar("TModel")


class BaseRepository(Generic[TModel]):
    """In-memory repository whose state is guarded by a single re-entrant lock."""

    def __init__(self) -> None:
        self._lock = threading.RLock()

    @contextmanager
    def session(self) -> Iterator["BaseRepository[TModel]"]:
        # segura o lock durante toda a sequência "verifica e grava" do service
        with self._lock:
            yield self
