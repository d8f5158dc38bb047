import unit_test_utils


def test_public_api_exports():
    # Submodules and the comparison functions are available from the package root
    for name in ("arrays", "config", "exceptions", "floats"):
        assert hasattr(unit_test_utils, name), f"unit_test_utils does not export '{name}'"
    for name in (
        "nearly_equal",
        "assert_nearly_equal",
        "nearly_equal_array",
        "assert_nearly_equal_array",
        "is_any_nan",
        "assert_none_is_nan",
        "assert_all_ge",
        "assert_all_le",
        "Tolerance",
    ):
        assert name in unit_test_utils.__all__, f"unit_test_utils does not export '{name}'"
