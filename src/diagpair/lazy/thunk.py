from collections.abc import Callable, Generator
from enum import Enum, auto
from functools import partial
from types import TracebackType
from typing import Any, final

type Demand[T] = Generator["Thunk[Any]", Any, T]
"""A suspended computation: yields the thunks it needs, receives their values, returns its own."""


class CyclicDemandError(RuntimeError):
    """A thunk was demanded while it was still being forced."""


class _State(Enum):
    PENDING = auto()
    RUNNING = auto()
    DONE = auto()
    FAILED = auto()


def _immediately[T](compute: Callable[[], T]) -> Demand[T]:
    return compute()
    yield  # unreachable, but makes this a generator


@final
class Thunk[T]:
    """
    A memoised deferred value.

    Plain thunks wrap a zero-argument callable. Demanding thunks wrap a
    generator function which, instead of forcing its dependencies directly,
    yields them and is sent their values back:

        def steps():
            node = yield seq.node
            return node is None

    `force` drives these generators on an explicit stack, so a chain of
    thunks each demanding the next costs heap, not Python frames. Whatever the
    computation produces, value or exception, is kept and handed out again on
    every later force.
    """

    __slots__ = ("_state", "_start", "_value", "_error", "_traceback")

    def __init__(self, compute: Callable[[], T]):
        self._state: _State = _State.PENDING
        self._start: Callable[[], Demand[T]] | None = partial(_immediately, compute)
        self._value: T | None = None
        self._error: BaseException | None = None
        self._traceback: TracebackType | None = None

    @classmethod
    def demanding(cls, steps: Callable[[], Demand[T]]) -> "Thunk[T]":
        thunk = cls.__new__(cls)
        thunk._state = _State.PENDING
        thunk._start = steps
        thunk._value = None
        thunk._error = None
        thunk._traceback = None
        return thunk

    @classmethod
    def ready(cls, value: T) -> "Thunk[T]":
        thunk = cls.__new__(cls)
        thunk._state = _State.DONE
        thunk._start = None
        thunk._value = value
        thunk._error = None
        thunk._traceback = None
        return thunk

    @property
    def is_forced(self) -> bool:
        """True once a value or an error has been settled."""
        return self._state in (_State.DONE, _State.FAILED)

    @property
    def is_ready(self) -> bool:
        """True once a value (not an error) has been settled."""
        return self._state is _State.DONE

    def force(self) -> T:
        if self._state is _State.PENDING:
            _drive(self)
        elif self._state is _State.RUNNING:
            raise CyclicDemandError("thunk forced while it is still being computed")
        return self._outcome()

    def _outcome(self) -> T:
        if self._state is _State.FAILED:
            raise self._failure()
        return self._value  # pyright: ignore[reportReturnType]

    def _failure(self) -> BaseException:
        # the traceback as it was when the failure settled, so re-raising
        # does not keep growing it
        assert self._error is not None
        return self._error.with_traceback(self._traceback)

    def _begin(self) -> Demand[T]:
        assert self._start is not None
        self._state = _State.RUNNING
        return self._start()

    def _settle(self, value: T):
        self._state = _State.DONE
        self._value = value
        self._start = None

    def _reset(self):
        # back to pending: `_start` is only cleared once the thunk settles
        self._state = _State.PENDING

    def _fail(self, error: BaseException):
        self._state = _State.FAILED
        self._error = error
        self._traceback = error.__traceback__
        self._start = None

    def __repr__(self) -> str:
        if self._state is _State.DONE:
            return f"Thunk({self._value!r})"
        return f"Thunk(<{self._state.name.lower()}>)"


def _drive(root: Thunk[Any]):
    """
    Trampoline: run `root` to completion, descending into every pending thunk
    it demands. Each frame on `stack` is a suspended demanding computation.

    An interrupt (anything outside `Exception`, such as KeyboardInterrupt) is
    not a failure of the computation: every thunk still on the stack goes back
    to pending so a later force starts it afresh, and the interrupt propagates.
    """
    stack: list[tuple[Thunk[Any], Demand[Any]]] = [(root, root._begin())]
    ok, payload = True, None

    try:
        while stack:
            thunk, steps = stack[-1]

            try:
                wanted = steps.send(payload) if ok else steps.throw(payload)
            except StopIteration as stop:
                stack.pop()
                thunk._settle(stop.value)
                ok, payload = True, stop.value
                continue
            except Exception as error:
                stack.pop()
                thunk._fail(error)
                ok, payload = False, error
                continue

            if not isinstance(wanted, Thunk):
                ok = False
                payload = TypeError(f"demanding computation yielded {wanted!r}, not a Thunk")
            elif wanted._state is _State.PENDING:
                stack.append((wanted, wanted._begin()))
                ok, payload = True, None
            elif wanted._state is _State.RUNNING:
                ok = False
                payload = CyclicDemandError("thunk demanded itself while being computed")
            elif wanted._state is _State.FAILED:
                ok, payload = False, wanted._failure()
            else:
                ok, payload = True, wanted._value
    except BaseException:
        for thunk, steps in reversed(stack):
            steps.close()
            thunk._reset()
        raise
