import time
import pytest

try:
    import gmpy2
except ImportError:
    gmpy2 = None

test_durations = []


def pytest_configure(config):
    config.addinivalue_line("markers", "gmpy2: test requires the gmpy2 module")


def pytest_collection_modifyitems(config, items):
    if gmpy2 is not None:
        return
    skip_gmpy2 = pytest.mark.skip(reason="gmpy2 is not installed")
    for item in items:
        if item.get_closest_marker("gmpy2"):
            item.add_marker(skip_gmpy2)


@pytest.hookimpl(hookwrapper=True)
def pytest_runtest_call(item):
    start = time.perf_counter()
    yield
    duration = time.perf_counter() - start
    test_durations.append((item.nodeid, duration))


def pytest_sessionfinish(session, exitstatus):
    print("\nTest durations:")
    total_time = sum(d for _, d in test_durations)
    if test_durations:
        avg = total_time / len(test_durations)
        print(f"\nAverage test duration: {avg:.4f} seconds")
