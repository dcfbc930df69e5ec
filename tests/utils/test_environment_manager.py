import os

import pytest
from unittest.mock import patch

from timelock_storage.protocol_constants import BIT_SIZE, DELAY_DEPTH
from timelock_storage.utils import EnvironmentManager, EnvironmentVariables, SystemSpecs
from timelock_storage.utils.EnvironmentManager import EnvVarType


@pytest.fixture
def clean_environment():
    """Fixture removing every known variable from the environment."""
    names = [variable.env_name for variable in EnvironmentVariables]
    with patch.dict(os.environ, clear=False):
        for name in names:
            os.environ.pop(name, None)
        yield


def test_defaults(clean_environment):
    assert EnvironmentManager.get_int(EnvironmentVariables.PARALLELISM_DIVISOR) == 2
    assert EnvironmentManager.get_int(EnvironmentVariables.BIT_SIZE) == BIT_SIZE
    assert EnvironmentManager.get_int(EnvironmentVariables.DELAY_DEPTH) == DELAY_DEPTH
    assert EnvironmentManager.get_string(EnvironmentVariables.LOG_LEVEL) == "WARNING"


def test_override_default(clean_environment):
    assert EnvironmentManager.get_int(EnvironmentVariables.DELAY_DEPTH, 10) == 10


def test_reads_environment(clean_environment):
    os.environ["TLS_DELAY_DEPTH"] = "12"
    os.environ["TLS_LOG_LEVEL"] = "debug"
    assert EnvironmentManager.get_int(EnvironmentVariables.DELAY_DEPTH) == 12
    assert EnvironmentManager.get_string(EnvironmentVariables.LOG_LEVEL) == "debug"


def test_invalid_integer_falls_back(clean_environment):
    os.environ["TLS_BIT_SIZE"] = "large"
    assert EnvironmentManager.get_int(EnvironmentVariables.BIT_SIZE) == BIT_SIZE


def test_parallel_processes(clean_environment):
    os.environ["PARALLELISM_DIVISOR"] = "4"
    with patch("multiprocessing.cpu_count", return_value=16):
        assert SystemSpecs.get_num_parallel_processes() == 4
        assert SystemSpecs.get_num_parallel_processes(num_jobs=3) == 3


def test_parallel_processes_minimum(clean_environment):
    with patch("multiprocessing.cpu_count", return_value=1):
        assert SystemSpecs.get_num_parallel_processes() == 1


def test_variable_types_are_int_or_string():
    assert {variable.var_type for variable in EnvironmentVariables} <= set(EnvVarType)
    assert [member.name for member in EnvVarType] == ["INT", "STRING"]


def test_library_does_not_load_dotenv():
    import timelock_storage.utils.EnvironmentManager as module

    assert not hasattr(module, "load_dotenv")
