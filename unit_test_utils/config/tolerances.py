"""
Named tolerance presets.

A test suite can declare the tolerances it compares with once, either in code
or in a YAML file such as

    tolerances:
      solver:
        rel_tol: 1.0e-8
        abs_tol: 1.0e-10
      coarse:
        rel_tol: ${COARSE_REL_TOL}
        abs_tol: 1.0e-3

and pass the resulting presets explicitly to its assertions.
"""

from __future__ import annotations

from pathlib import Path

from beartype import beartype
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from unit_test_utils import arrays, floats
from unit_test_utils.arrays import Values
from unit_test_utils.config.loader import ConfigError, load_from_yaml
from unit_test_utils.floats import Real
from unit_test_utils.logs.structlog import logger


@beartype
class Tolerance(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")
    rel_tol: float = Field(gt=0.0)
    abs_tol: float = Field(gt=0.0)

    def nearly_equal(self, a: Real, b: Real) -> bool:
        return floats.nearly_equal(a, b, self.rel_tol, self.abs_tol)

    def assert_nearly_equal(self, a: Real, b: Real, msg: str) -> None:
        floats.assert_nearly_equal(a, b, self.rel_tol, self.abs_tol, msg)

    def nearly_equal_array(self, a: Values, b: Values) -> bool:
        return arrays.nearly_equal_array(a, b, self.rel_tol, self.abs_tol)

    def assert_nearly_equal_array(self, a: Values, b: Values, msg: str) -> None:
        arrays.assert_nearly_equal_array(a, b, self.rel_tol, self.abs_tol, msg)


@beartype
def load_tolerances(path: str | Path, section: str = "tolerances") -> dict[str, Tolerance]:
    """
    Load named tolerance presets from a YAML file.

    Args:
        path: Path to the YAML config file.
        section: Top-level key holding the presets.

    Returns:
        Presets keyed by name.

    Raises:
        ConfigError: If the file cannot be loaded, the section is missing or
            not a mapping, or a preset fails validation.
    """
    data = load_from_yaml(path)
    raw = data.get(section)
    if not isinstance(raw, dict):
        raise ConfigError(f"Config section '{section}' must be a mapping of named tolerances.")

    presets: dict[str, Tolerance] = {}
    for name, values in raw.items():
        try:
            presets[str(name)] = Tolerance.model_validate(values)
        except ValidationError as err:
            raise ConfigError(f"Invalid tolerance '{name}': {err}") from err

    logger.debug("loaded tolerance presets", path=str(path), names=sorted(presets))
    return presets
