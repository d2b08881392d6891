import pytest

from graphpick import (
    DEFAULT_MAX_DISTANCE,
    DEFAULT_MAX_RETRIES,
    AccessorConfig,
    RadiusElementAccessor,
    get_accessor_config,
    set_accessor_config,
)


@pytest.fixture
def restore_config():
    saved = get_accessor_config()
    yield
    set_accessor_config(saved)


def test_defaults():
    config = AccessorConfig()
    assert config.max_distance == DEFAULT_MAX_DISTANCE
    assert config.max_retries == DEFAULT_MAX_RETRIES
    accessor = RadiusElementAccessor()
    assert accessor.max_distance == DEFAULT_MAX_DISTANCE
    assert accessor.max_retries == DEFAULT_MAX_RETRIES


def test_process_default_applies_to_new_accessors(restore_config):
    set_accessor_config(AccessorConfig(max_distance=5.0, max_retries=None))
    accessor = RadiusElementAccessor()
    assert accessor.max_distance == 5.0
    assert accessor.max_retries is None


def test_get_returns_a_copy(restore_config):
    config = get_accessor_config()
    config.max_distance = 1.0
    assert get_accessor_config().max_distance == DEFAULT_MAX_DISTANCE


def test_explicit_arguments_override_config():
    config = AccessorConfig(max_distance=5.0, max_retries=7)
    accessor = RadiusElementAccessor(3.0, config=config)
    assert accessor.max_distance == 3.0
    assert accessor.max_retries == 7

    accessor = RadiusElementAccessor(config=config, max_retries=None)
    assert accessor.max_distance == 5.0
    assert accessor.max_retries is None


def test_repr_mentions_settings():
    assert repr(RadiusElementAccessor(2.0, max_retries=4)) == (
        "RadiusElementAccessor(max_distance=2.0, max_retries=4)"
    )


@pytest.mark.parametrize(
    "kwargs",
    [
        {"max_distance": -0.5},
        {"max_distance": float("nan")},
        {"max_retries": -1},
    ],
)
def test_invalid_config_rejected(kwargs):
    with pytest.raises(ValueError):
        AccessorConfig(**kwargs)
