import numpy as np
import pytest
from pydantic import ValidationError

from unit_test_utils.config import ConfigError, Tolerance, load_tolerances
from unit_test_utils.exceptions import LengthMismatchError, NotNearlyEqualError


def test_tolerance_valid():
    tol = Tolerance(rel_tol=1e-4, abs_tol=1e-5)
    assert tol.rel_tol == 1e-4
    assert tol.abs_tol == 1e-5


@pytest.mark.parametrize("rel_tol, abs_tol", [(0.0, 1e-5), (1e-4, 0.0), (-1.0, 1.0), (1.0, -1.0)])
def test_tolerance_rejects_nonpositive(rel_tol, abs_tol):
    with pytest.raises(ValidationError):
        Tolerance(rel_tol=rel_tol, abs_tol=abs_tol)


def test_tolerance_forbids_extra_fields():
    with pytest.raises(ValidationError):
        Tolerance(rel_tol=1e-4, abs_tol=1e-5, ulps=4)


def test_tolerance_is_frozen():
    tol = Tolerance(rel_tol=1e-4, abs_tol=1e-5)
    with pytest.raises(ValidationError):
        tol.rel_tol = 1.0


def test_tolerance_scalar_helpers():
    tol = Tolerance(rel_tol=0.01, abs_tol=0.001)
    assert tol.nearly_equal(1.0, 1.0005)
    assert tol.nearly_equal(5.0, 6.0) is False
    with pytest.raises(NotNearlyEqualError, match=r"\(five\)"):
        tol.assert_nearly_equal(5.0, 6.0, "five")


def test_tolerance_array_helpers():
    tol = Tolerance(rel_tol=1e-4, abs_tol=1e-5)
    x = np.array([1.0, 2.0, 3.0])
    assert tol.nearly_equal_array(x, x + 1e-7)
    assert tol.nearly_equal_array(x, x + 1e-4) is False
    with pytest.raises(NotNearlyEqualError) as exc_info:
        tol.assert_nearly_equal_array([1.0, 2.0], [1.0, 2.1], "pair")
    assert exc_info.value.index == 1
    with pytest.raises(LengthMismatchError):
        tol.assert_nearly_equal_array([1.0], [1.0, 2.0], "pair")


def test_load_tolerances(tmp_path, monkeypatch):
    monkeypatch.setenv("COARSE_REL_TOL", "0.01")
    config_file = tmp_path / "tolerances.yaml"
    config_file.write_text(
        "tolerances:\n"
        "  solver:\n"
        "    rel_tol: 1.0e-8\n"
        "    abs_tol: 1e-10\n"
        "  coarse:\n"
        "    rel_tol: ${COARSE_REL_TOL}\n"
        "    abs_tol: 0.001\n",
        encoding="utf-8",
    )

    presets = load_tolerances(config_file)
    assert presets == {
        "solver": Tolerance(rel_tol=1e-8, abs_tol=1e-10),
        "coarse": Tolerance(rel_tol=0.01, abs_tol=0.001),
    }


def test_load_tolerances_custom_section(tmp_path):
    config_file = tmp_path / "tolerances.yaml"
    config_file.write_text("checks:\n  tight:\n    rel_tol: 1.0e-12\n    abs_tol: 1.0e-12\n", encoding="utf-8")

    presets = load_tolerances(config_file, section="checks")
    assert list(presets) == ["tight"]


def test_load_tolerances_missing_section(tmp_path):
    config_file = tmp_path / "tolerances.yaml"
    config_file.write_text("other: 1\n", encoding="utf-8")

    with pytest.raises(ConfigError, match="must be a mapping of named tolerances"):
        load_tolerances(config_file)


def test_load_tolerances_invalid_preset(tmp_path):
    config_file = tmp_path / "tolerances.yaml"
    config_file.write_text("tolerances:\n  broken:\n    rel_tol: 0.0\n    abs_tol: 1.0e-3\n", encoding="utf-8")

    with pytest.raises(ConfigError, match="Invalid tolerance 'broken'"):
        load_tolerances(config_file)


def test_load_tolerances_missing_env_var(tmp_path, monkeypatch):
    monkeypatch.delenv("UNSET_TOL", raising=False)
    config_file = tmp_path / "tolerances.yaml"
    config_file.write_text("tolerances:\n  t:\n    rel_tol: ${UNSET_TOL}\n    abs_tol: 1.0e-3\n", encoding="utf-8")

    with pytest.raises(ConfigError):
        load_tolerances(config_file)


def test_load_tolerances_file_not_found():
    with pytest.raises(ConfigError, match="Config file not found"):
        load_tolerances("non_existent.yaml")
