from collections.abc import Callable
from functools import wraps
import threading
from typing import Any, Generic, TypeVar, cast

from design_patterns.core.errors.exceptions import InitializationFailure
from loggers import get_logger

logger = get_logger(__name__)

T = TypeVar("T")


class Once:
    """
    Runs a function exactly once, no matter how many threads call ``do``.

    Threads arriving while the function runs block on the lock until it
    returns. If the function raises, the failure is kept and re-raised to
    every caller, current and future. It is never retried.
    """

    def __init__(self, name: str = "once") -> None:
        self.name = name
        self._lock = threading.Lock()
        self._done = False
        self._failure: InitializationFailure | None = None

    @property
    def done(self) -> bool:
        return self._done

    def do(self, func: Callable[[], None]) -> None:
        if not self._done:
            with self._lock:
                if not self._done:
                    try:
                        func()
                    except Exception as e:
                        logger.error(f"Initialization of '{self.name}' failed: {e}")
                        failure = InitializationFailure(
                            f"Initialization of '{self.name}' failed",
                            {"name": self.name, "cause": repr(e)},
                        )
                        failure.__cause__ = e
                        self._failure = failure
                    finally:
                        self._done = True

        if self._failure is not None:
            # fresh traceback per caller; the factory error stays in __cause__
            raise self._failure.with_traceback(None)

    def _reset(self) -> None:
        """Test-only: forget the previous run. Never called by production code."""
        with self._lock:
            self._done = False
            self._failure = None


class LazySingleton(Generic[T]):
    """
    Process-wide holder of a single lazily built instance.

    The factory runs on the first ``get_instance`` call. Every caller gets
    the same fully constructed instance; a failing factory poisons the guard.
    """

    def __init__(self, factory: Callable[[], T], *, name: str | None = None) -> None:
        self._factory = factory
        self._name = name or getattr(factory, "__name__", "singleton")
        self._once = Once(self._name)
        self._instance: T | None = None

    @property
    def initialized(self) -> bool:
        return self._once.done

    def get_instance(self) -> T:
        self._once.do(self._initialize)
        return cast(T, self._instance)

    def _initialize(self) -> None:
        self._instance = self._factory()
        logger.debug(f"Singleton '{self._name}' constructed")

    def _reset(self) -> None:
        """Test-only: drop the instance so the next call builds a new one."""
        self._once._reset()
        self._instance = None


def singleton(cls: type[T]) -> Callable[..., T]:
    """
    A decorator to make a class a thread-safe singleton.
    Arguments of the first call are used to build the instance; later ones are ignored.
    """
    instances: dict[type[Any], Any] = {}
    once = Once(cls.__name__)

    @wraps(cls)
    def get_instance(*args: Any, **kwargs: Any) -> T:
        def build() -> None:
            instances[cls] = cls(*args, **kwargs)

        once.do(build)
        return cast(T, instances[cls])

    get_instance._once = once  # type: ignore[attr-defined]
    return get_instance


class SingleInstance:
    """The demo singleton. Carries no state; identity is what matters."""

    def __repr__(self) -> str:
        return f"<SingleInstance at {id(self):#x}>"


def _build_single_instance() -> SingleInstance:
    logger.info("Initialize singleton")
    return SingleInstance()


_single_instance = LazySingleton(_build_single_instance, name="single_instance")


def get_singleton() -> SingleInstance:
    return _single_instance.get_instance()
