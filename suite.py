import asyncio
import time
from contextlib import contextmanager
from functools import wraps
from typing import List, Dict, Any, Callable, Coroutine, Iterator, Type

_suite_state: Dict[str, List[Dict[str, Any]]] = {
    'tests': [],
    'results': []
}

PASS_MARK = '(^ ω ^)'
FAIL_MARK = '(ﾉಥДಥ)ﾉ'


class _c:
    """terminal color codes."""
    ok = '\033[92m'
    fail = '\033[91m'
    warn = '\033[93m'
    info = '\033[94m'
    grey = '\033[90m'
    reset = '\033[0m'


class TestAssertionError(AssertionError):
    """an assert_that failure, as opposed to an unexpected exception."""
    __test__ = False


# --- public api ---

def test(description: str) -> Callable:
    """
    register a function as a test case. the wrapped function keeps its name, so
    pytest collects the same functions when the suites run under it.
    """

    def decorator(func: Callable) -> Callable:
        _suite_state['tests'].append({'func': func, 'description': description})

        @wraps(func)
        def wrapper(*args, **kwargs):
            return func(*args, **kwargs)

        return wrapper

    return decorator


def assert_that(condition: Any, message: str = "assertion failed") -> None:
    if not condition:
        raise TestAssertionError(message)


@contextmanager
def assert_raises(error_type: Type[BaseException], message: str = "expected an exception") -> Iterator[Dict[str, Any]]:
    """
    context manager failing unless the block raises error_type.
    the yielded dict receives the caught exception under 'error'.
    """
    caught: Dict[str, Any] = {}
    try:
        yield caught
    except error_type as e:
        caught['error'] = e
        return
    raise TestAssertionError(f"{message}: {error_type.__name__} not raised")


def run_async(coroutine: Coroutine) -> Any:
    """drive a coroutine to completion on a fresh event loop."""
    return asyncio.run(coroutine)


def run(title: str = "test run") -> None:
    """executes all registered tests and prints a report."""
    print(f"\n{_c.info}--- starting: {title} ---{_c.reset}")
    start_time = time.perf_counter()

    _suite_state['results'] = []

    for test_item in _suite_state['tests']:
        description = test_item['description']
        error = None

        try:
            test_item['func']()
        except TestAssertionError as e:
            error = f"assertion failed: {e}"
        except Exception as e:
            error = f"{type(e).__name__}: {e}"

        passed = error is None
        _suite_state['results'].append({'passed': passed, 'description': description, 'error': error})

        if passed:
            print(f"  {_c.ok}✔ pass{_c.reset}  {PASS_MARK}  {description}")
        else:
            print(f"  {_c.fail}✖ fail{_c.reset}  {FAIL_MARK}  {description}")
            print(f"    {_c.grey}└─> {error}{_c.reset}")

    _print_summary(start_time)

    # clear tests so several suites can run from one script
    _suite_state['tests'] = []


def _print_summary(start_time: float) -> None:
    duration = (time.perf_counter() - start_time) * 1000
    results = _suite_state['results']

    total = len(results)
    passed_count = sum(1 for r in results if r['passed'])
    failed_count = total - passed_count

    summary_color = _c.ok if failed_count == 0 else _c.fail

    print(f"\n{summary_color}--- summary ---{_c.reset}")
    print(f"  ran {_c.info}{total}{_c.reset} tests in {_c.warn}{duration:.2f}ms{_c.reset}")
    print(f"  {_c.ok}passed: {passed_count}{_c.reset}, {_c.fail}failed: {failed_count}{_c.reset}")
    print(f"{summary_color}---------------{_c.reset}\n")
