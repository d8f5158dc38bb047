from unit_test_utils.config.loader import ConfigError, EnvVarLoader, load_from_yaml
from unit_test_utils.config.tolerances import Tolerance, load_tolerances

__all__ = ["ConfigError", "EnvVarLoader", "Tolerance", "load_from_yaml", "load_tolerances"]
