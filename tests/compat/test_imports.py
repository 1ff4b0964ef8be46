"""
Public API import tests.

Every name in membytes.__all__ (and each subpackage's __all__) must resolve.
"""

import importlib

import pytest


@pytest.mark.parametrize("module_name", ["membytes", "membytes.view", "membytes.exceptions"])
def test_all_names_resolve(module_name):
    """Each exported name is an attribute of its module."""
    module = importlib.import_module(module_name)

    missing = [name for name in module.__all__ if not hasattr(module, name)]

    assert not missing, f"{module_name} is missing {missing}"


def test_version():
    """__version__ is a dotted string."""
    import membytes

    assert membytes.__version__.count(".") == 2


def test_sum_type_states_importable():
    """The view states are importable for pattern matching."""
    from membytes.view import Bound, Empty, from_buffer

    match from_buffer(bytearray(1)).state:
        case Bound(offset=0, length=1):
            matched = "bound"
        case Empty():
            matched = "empty"
        case _:
            matched = "other"

    assert matched == "bound"
