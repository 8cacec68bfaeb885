import pytest

from rotcal.config import CaliperConfig, get_caliper_config, resolve_config, set_caliper_config
from rotcal.kernel import ExactKernel, RobustKernel


def test_defaults():
    config = CaliperConfig()

    assert config.unit_length == 100.0
    assert config.kernel == 'robust'
    assert not config.validate_inputs
    assert isinstance(config.make_kernel(), RobustKernel)


def test_get_returns_a_copy():
    config = get_caliper_config()
    config.unit_length = 1.0

    assert get_caliper_config().unit_length == 100.0


def test_set_replaces_process_default():
    saved = get_caliper_config()
    try:
        set_caliper_config(CaliperConfig(kernel='exact'))
        assert isinstance(resolve_config(None).make_kernel(), ExactKernel)
    finally:
        set_caliper_config(saved)

    assert get_caliper_config().kernel == 'robust'


def test_resolve_prefers_explicit_config():
    config = CaliperConfig(unit_length=5.0)

    assert resolve_config(config) is config


def test_unknown_kernel_name():
    with pytest.raises(ValueError):
        CaliperConfig(kernel='interval').make_kernel()
