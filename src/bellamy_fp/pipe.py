"""
Pure function composition utilities.

``pipe`` threads a single value through a chain of calls, ``compose`` and
``flow`` build new functions out of existing ones (right-to-left and
left-to-right respectively), and ``curry``/``partial`` fix arguments ahead of
the call.
"""

import functools
import inspect
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

_POSITIONAL_KINDS = (
    inspect.Parameter.POSITIONAL_ONLY,
    inspect.Parameter.POSITIONAL_OR_KEYWORD,
)

# Wrappers take different arguments than the function they wrap, so only the
# naming attributes are copied; __wrapped__ and __annotations__ are not.
_NAMING_ATTRIBUTES = ("__module__", "__name__", "__qualname__", "__doc__")


def identity[T](value: T) -> T:
    return value


def _named_after[F: Callable[..., Any]](wrapper: F, fn: Callable[..., Any]) -> F:
    return functools.update_wrapper(wrapper, fn, assigned=_NAMING_ATTRIBUTES, updated=())


@dataclass(frozen=True, slots=True)
class Pipe[T]:
    """A value waiting to be threaded through further calls."""

    value: T

    def then[U](self, fn: Callable[[T], U]) -> "Pipe[U]":
        """Apply ``fn`` to the wrapped value and wrap the result."""
        return Pipe(fn(self.value))

    def value_of(self) -> T:
        """Return the wrapped value."""
        return self.value


def pipe[T](value: T) -> Pipe[T]:
    """Start a chain: ``pipe(3).then(inc).then(double).value``."""
    return Pipe(value)


def compose(*fns: Callable[[Any], Any]) -> Callable[[Any], Any]:
    """Compose right to left: ``compose(g, f)(x) == g(f(x))``."""

    def composed(value: Any) -> Any:
        return functools.reduce(lambda acc, fn: fn(acc), reversed(fns), value)

    return composed


def flow(*fns: Callable[[Any], Any]) -> Callable[[Any], Any]:
    """Compose left to right: ``flow(f, g)(x) == g(f(x))``."""

    def flowed(value: Any) -> Any:
        return functools.reduce(lambda acc, fn: fn(acc), fns, value)

    return flowed


def _arity(fn: Callable[..., Any]) -> int:
    """Count the required positional parameters of ``fn``.

    Parameters with defaults and variadics are not counted, mirroring how the
    declared length of a function is usually measured.
    """
    try:
        signature = inspect.signature(fn)
    except (TypeError, ValueError) as e:
        raise TypeError(
            f"Cannot infer arity of {fn!r}; pass arity= explicitly"
        ) from e
    return sum(
        1
        for param in signature.parameters.values()
        if param.kind in _POSITIONAL_KINDS and param.default is inspect.Parameter.empty
    )


def curry[R](fn: Callable[..., R], arity: int | None = None) -> Callable[..., Any]:
    """
    Turn an n-ary function into a chain of calls.

    Arguments accumulate across calls; once at least ``arity`` of them have
    been supplied, ``fn`` runs with all of them. Each call may pass one or
    several arguments, so ``curry(add3)(1)(2)(3)``, ``curry(add3)(1, 2)(3)`` and
    ``curry(add3)(1, 2, 3)`` are equivalent.

    Args:
        fn: The function to curry.
        arity: How many positional arguments to wait for. Inferred from the
            signature of ``fn`` when omitted.

    Returns:
        A curried version of ``fn``.
    """
    expected = _arity(fn) if arity is None else arity

    def accumulate(*collected: Any) -> Any:
        if len(collected) >= expected:
            return fn(*collected)

        def next_call(*more: Any) -> Any:
            return accumulate(*collected, *more)

        return _named_after(next_call, fn)

    return _named_after(accumulate, fn)


def partial[R](fn: Callable[..., R], *partial_args: Any, **partial_kwargs: Any) -> Callable[..., R]:
    """
    Fix leading arguments: ``partial(f, a)(b, c) == f(a, b, c)``.

    Keyword arguments given at call time override the fixed ones. The result
    reports the parameters still missing, so it can be curried further.
    """
    return functools.partial(fn, *partial_args, **partial_kwargs)


__all__ = ["Pipe", "compose", "curry", "flow", "identity", "partial", "pipe"]
