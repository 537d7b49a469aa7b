"""
branching combinators and failure values. a failure is any Exception instance
flowing through a pipeline as an ordinary value; `attempt` produces them and
`success`, `failure` and `trycatch` branch on them.
"""
import logging
from ..types import *
from ..errors import Rejected
from .predicates import defined, is_none

log = logging.getLogger(__name__)


def ifelse(condition: Predicate[T], good: Selector[T, Any], bad: Selector[T, Any]) -> Callable[[T], Any]:
    return lambda x: good(x) if condition(x) else bad(x)


def when(condition: Predicate[T], then: Selector[T, Any]) -> Callable[[T], Any]:
    """apply `then` only when the condition holds, pass x through otherwise"""
    return lambda x: then(x) if condition(x) else x


def _is_success(x: Any) -> bool:
    return not isinstance(x, Exception)


def _is_failure(x: Any) -> bool:
    return isinstance(x, Exception)


def maybeor(good: Selector[T, Any], bad: Selector[T, Any]) -> Callable[[T], Any]:
    return ifelse(defined, good, bad)


def maybe(f: Selector[T, Any]) -> Callable[[T], Any]:
    return when(defined, f)


def nothing(f: Callable[[Any], Any]) -> Callable[[Any], Any]:
    return when(is_none, f)


def success(f: Selector[T, Any]) -> Callable[[T], Any]:
    return when(_is_success, f)


def failure(f: Callable[[Exception], Any]) -> Callable[[Any], Any]:
    return when(_is_failure, f)


def trycatch(good: Selector[T, Any], bad: Callable[[Exception], Any]) -> Callable[[Any], Any]:
    return ifelse(_is_success, good, bad)


def valmap(*pairs: Any) -> Callable[[Any], Any]:
    """
    lookup table over alternating (match, result) arguments. a trailing odd
    argument is the fallback, without one unmatched values pass through.
    """
    paired = len(pairs) - len(pairs) % 2

    def lookup(x: Any) -> Any:
        for i in range(0, paired, 2):
            if pairs[i] == x:
                return pairs[i + 1]
        return x if paired == len(pairs) else pairs[-1]
    return lookup


def cond(*clauses: Callable[[Any], Any]) -> Callable[[Any], Any]:
    """
    alternating (predicate, handler) arguments. the first matching predicate's
    handler runs; a trailing odd handler is the fallback.
    """
    paired = len(clauses) - len(clauses) % 2

    def dispatch(x: Any) -> Any:
        for i in range(0, paired, 2):
            if clauses[i](x):
                return clauses[i + 1](x)
        return x if paired == len(clauses) else clauses[-1](x)
    return dispatch


def attempt(f: Callable[[], T]) -> Union[T, Exception]:
    """call f, returning the raised exception instead of propagating it"""
    try:
        return f()
    except Exception as e:
        log.debug("attempt caught %s: %s", type(e).__name__, e)
        return e


def reject(predicate: Predicate[T], message: Callable[[T], Any]) -> Callable[[T], T]:
    """
    validation step: raise message(x) when the predicate matches, else pass x on.
    non-exception messages are wrapped in Rejected.
    """
    def check(x: T) -> T:
        if predicate(x):
            failure_value = message(x)
            if isinstance(failure_value, BaseException):
                raise failure_value
            raise Rejected(failure_value)
        return x
    return check


def assert_(condition: Any, message: str = "assert failed") -> Any:
    if not condition:
        raise AssertionError(message)
    return condition


def print_(x: T) -> T:
    """log x at info level and pass it through"""
    log.info("%r", x)
    return x
