import sys
import time
from functools import wraps
from typing import List, Dict, Any, Callable, Optional, Type

_suite_state: Dict[str, List[Dict[str, Any]]] = {
    'tests': [],
    'results': []
}


class _c:
    """color codes for the report."""
    ok = '\033[92m'
    fail = '\033[91m'
    warn = '\033[93m'
    info = '\033[94m'
    grey = '\033[90m'
    reset = '\033[0m'


# --- custom exception for assertions ---

class SuiteAssertionError(AssertionError):
    """distinguishes assertion failures from other exceptions in the report."""
    pass

# --- public api ---

def test(description: str) -> Callable:
    """
    decorator registering a function as a test case. the function is returned
    wrapped but otherwise unchanged, so pytest collects it as well.
    """

    def decorator(func: Callable) -> Callable:
        _suite_state['tests'].append({'func': func, 'description': description})

        @wraps(func)
        def wrapper(*args, **kwargs):
            return func(*args, **kwargs)

        return wrapper

    return decorator


def assert_that(condition: Any, message: str = "assertion failed") -> None:
    """raise a suite assertion error when the condition is falsy."""
    if not condition:
        raise SuiteAssertionError(message)


def assert_equal(actual: Any, expected: Any, message: Optional[str] = None) -> None:
    """assert_that for equality, reporting both sides."""
    if actual != expected:
        raise SuiteAssertionError(f"{message or 'values differ'}: got {actual!r}, expected {expected!r}")


def assert_raises(error_type: Type[BaseException], func: Callable, *args, match: Optional[str] = None, **kwargs) -> BaseException:
    """call func and require it to raise error_type; returns the caught error."""
    try:
        func(*args, **kwargs)
    except error_type as e:
        if match is not None and match not in str(e):
            raise SuiteAssertionError(f"{error_type.__name__} raised without '{match}': {e}")
        return e
    raise SuiteAssertionError(f"expected {error_type.__name__} to be raised")


def run(title: str = "test run") -> bool:
    """executes all registered tests, prints a report and returns whether all passed."""
    print(f"\n{_c.info}--- {title} ---{_c.reset}")
    start_time = time.perf_counter()

    _suite_state['results'] = []

    for test_item in _suite_state['tests']:
        func = test_item['func']
        description = test_item['description']

        error = None
        try:
            func()
        except SuiteAssertionError as e:
            error = f"assertion failed: {e}"
        except Exception as e:
            error = f"{type(e).__name__}: {e}"

        _suite_state['results'].append({'passed': error is None, 'description': description, 'error': error})

        if error is None:
            print(f"  {_c.ok}pass{_c.reset}  {description}")
        else:
            print(f"  {_c.fail}FAIL{_c.reset}  {description}")
            print(f"    {_c.grey}-> {error}{_c.reset}")

    all_passed = _print_summary(start_time)

    # clear tests after run to allow for multiple, separate suite runs in a single script
    _suite_state['tests'] = []
    return all_passed


def main(title: str) -> None:
    """run the registered tests and exit non-zero on failure."""
    sys.exit(0 if run(title) else 1)


def _print_summary(start_time: float) -> bool:
    """prints the final summary of the test run."""
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
    return failed_count == 0
