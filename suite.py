import sys
import time
import importlib
from functools import wraps
from pathlib import Path
from typing import List, Dict, Any, Callable, Optional, Type

_registry: List[Dict[str, Any]] = []

PASS_FACE = '(^ ω ^)'
FAIL_FACE = '(ﾉಥДಥ)ﾉ'


class _c:
    """a tiny, silent class for holding color codes."""
    ok = '\033[92m'
    fail = '\033[91m'
    warn = '\033[93m'
    info = '\033[94m'
    grey = '\033[90m'
    reset = '\033[0m'


class TestAssertionError(AssertionError):
    """custom error to distinguish assertion failures from other exceptions."""
    pass

# --- registration and assertions ---

def test(description: str) -> Callable:
    """decorator to register a function as a test case. the function stays callable as-is."""

    def decorator(func: Callable) -> Callable:
        _registry.append({'func': func, 'description': description, 'module': func.__module__})

        @wraps(func)
        def wrapper(*args, **kwargs):
            return func(*args, **kwargs)

        return wrapper

    return decorator


def assert_that(condition: Any, message: str = "assertion failed") -> None:
    if not condition:
        raise TestAssertionError(message)


def assert_equal(actual: Any, expected: Any, message: str = "") -> None:
    if actual != expected:
        prefix = f"{message}: " if message else ""
        raise TestAssertionError(f"{prefix}expected {expected!r}, got {actual!r}")


def assert_raises(error_type: Type[BaseException], func: Callable[[], Any],
                  message: Optional[str] = None) -> BaseException:
    """call func and require it to raise error_type. returns the caught error."""
    try:
        func()
    except error_type as e:
        return e
    raise TestAssertionError(message or f"expected {error_type.__name__} to be raised")

# --- running ---

def run(title: str = "test run", module: Optional[str] = None) -> bool:
    """run registered tests (optionally only one module's) and print a report. returns overall success."""
    print(f"\n{_c.info}--- starting: {title} ---{_c.reset}")
    start_time = time.perf_counter()

    selected = [t for t in _registry if module is None or t['module'] == module]
    failures = 0
    for entry in selected:
        try:
            entry['func']()
        except TestAssertionError as e:
            failures += 1
            _report(False, entry['description'], f"assertion failed: {e}")
        except Exception as e:
            failures += 1
            _report(False, entry['description'], f"{type(e).__name__}: {e}")
        else:
            _report(True, entry['description'])

    duration = (time.perf_counter() - start_time) * 1000
    colour = _c.ok if failures == 0 else _c.fail
    print(f"\n{colour}--- summary ---{_c.reset}")
    print(f"  ran {_c.info}{len(selected)}{_c.reset} tests in {_c.warn}{duration:.2f}ms{_c.reset}")
    print(f"  {_c.ok}passed: {len(selected) - failures}{_c.reset}, {_c.fail}failed: {failures}{_c.reset}\n")
    return failures == 0


def _report(passed: bool, description: str, error: Optional[str] = None) -> None:
    if passed:
        print(f"  {_c.ok}✔ pass{_c.reset}  {PASS_FACE}  {description}")
    else:
        print(f"  {_c.fail}✖ fail{_c.reset}  {FAIL_FACE}  {description}")
        print(f"    {_c.grey}└─> {error}{_c.reset}")


if __name__ == "__main__":
    # python suite.py -> import every lazyq_tests/*_test.py and run them all
    tests_dir = Path(__file__).parent / "lazyq_tests"
    sys.path[:0] = [str(tests_dir), str(tests_dir.parent)]
    # test modules register into the importable `suite`, not this __main__ copy
    registry = importlib.import_module("suite")
    for path in sorted(tests_dir.glob("*_test.py")):
        importlib.import_module(path.stem)
    sys.exit(0 if registry.run(title="lazyq test suite") else 1)
