import sys
import time
from contextlib import contextmanager
from functools import wraps
from typing import List, Dict, Any, Callable, Iterator, Type

from lazinq import as_linq

_registry: Dict[str, List[Dict[str, Any]]] = {
    'tests': [],
    'results': []
}

PASS_MARK = '(^ ω ^)'
FAIL_MARK = '(ﾉಥДಥ)ﾉ'


class _c:
    """ansi color codes."""
    ok = '\033[92m'
    fail = '\033[91m'
    warn = '\033[93m'
    info = '\033[94m'
    grey = '\033[90m'
    reset = '\033[0m'


class TestAssertionError(AssertionError):
    """raised by assert_that, so reports can tell failed checks from crashes."""


# --- public api ---

def test(description: str) -> Callable:
    """register a function as a test case. the function stays callable, so pytest can collect it too."""

    def decorator(func: Callable) -> Callable:
        _registry['tests'].append({'func': func, 'description': description})

        @wraps(func)
        def wrapper(*args, **kwargs):
            return func(*args, **kwargs)

        return wrapper

    return decorator


def assert_that(condition: Any, message: str = "assertion failed") -> None:
    if not condition:
        raise TestAssertionError(message)


@contextmanager
def raises(exc_type: Type[BaseException], message: str = "expected an exception") -> Iterator[None]:
    """assert that the block raises exc_type"""
    try:
        yield
    except exc_type:
        return
    raise TestAssertionError(f"{message}: {exc_type.__name__} not raised")


def run(title: str = "test run") -> bool:
    """executes all registered tests, prints a report and returns True when everything passed."""
    print(f"\n{_c.info}--- starting: {title} ---{_c.reset}")
    start_time = time.perf_counter()

    results = []
    for entry in _registry['tests']:
        error = None
        try:
            entry['func']()
        except TestAssertionError as e:
            error = f"assertion failed: {e}"
        except Exception as e:
            error = f"{type(e).__name__}: {e}"

        results.append({'passed': error is None, 'description': entry['description'], 'error': error})
        if error is None:
            print(f"  {_c.ok}✔ pass{_c.reset}  {PASS_MARK}  {entry['description']}")
        else:
            print(f"  {_c.fail}✖ fail{_c.reset}  {FAIL_MARK}  {entry['description']}")
            print(f"    {_c.grey}└─> {error}{_c.reset}")

    _registry['results'] = results
    # clear so several suites can run from one script
    _registry['tests'] = []
    return _print_summary(results, start_time)


def _print_summary(results: List[Dict[str, Any]], start_time: float) -> bool:
    duration = (time.perf_counter() - start_time) * 1000
    outcomes = as_linq(results)
    total = outcomes.count()
    failed_count = outcomes.count(lambda r: not r['passed'])

    color = _c.ok if failed_count == 0 else _c.fail
    print(f"\n{color}--- summary ---{_c.reset}")
    print(f"  ran {_c.info}{total}{_c.reset} tests in {_c.warn}{duration:.2f}ms{_c.reset}")
    print(f"  {_c.ok}passed: {total - failed_count}{_c.reset}, {_c.fail}failed: {failed_count}{_c.reset}")
    print(f"{color}---------------{_c.reset}\n")
    return failed_count == 0


def main(title: str) -> None:
    """entry point for `python <module>_test.py`; exit status reflects the run."""
    sys.exit(0 if run(title) else 1)
