"""
Summary runner used when a test module is executed as a script.
"""

import pytest

# pytest.raises() reports a missing exception with Failed, a BaseException
FAILURES = (Exception, pytest.fail.Exception)


def run_tests(title, namespace):
    """
    Run every test_* callable in a module namespace and print a summary.

    Args:
        title: Banner text
        namespace: Usually the calling module's globals()

    Returns:
        Process exit code: 0 if every test passed, else 1
    """
    print("\n" + "#"*60)
    print(f"# {title}")
    print("#"*60)

    tests = [(name, fn) for name, fn in list(namespace.items())
             if name.startswith("test_") and callable(fn)]
    failed = 0
    for name, fn in tests:
        try:
            fn()
            print(f"  {name}: [PASS]")
        except FAILURES as e:
            failed += 1
            print(f"  {name}: [FAIL] {type(e).__name__}: {e}")

    print()
    if failed:
        print(f"{failed} test(s) FAILED!")
        return 1
    print("All tests PASSED!")
    return 0
