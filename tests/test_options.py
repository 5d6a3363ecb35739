import pytest

from formatkit import ConfigurationError, IndexedOptions, InvalidMarkError, MarkedOptions


def test_defaults():
    assert IndexedOptions().default_precision == 6
    assert MarkedOptions().mark == "%"


@pytest.mark.parametrize("value", [-1, 1.5, "3", True, None])
def test_invalid_precision(value):
    with pytest.raises(ConfigurationError):
        IndexedOptions(default_precision=value)


def test_options_are_frozen():
    opts = IndexedOptions()
    with pytest.raises(AttributeError):
        opts.default_precision = 2


def test_from_mapping():
    assert IndexedOptions.from_mapping({"default_precision": 2}) == IndexedOptions(2)
    assert IndexedOptions.from_mapping(None) == IndexedOptions()
    assert MarkedOptions.from_mapping({"mark": "@"}).mark == "@"
    assert MarkedOptions.from_mapping({}) == MarkedOptions()


def test_from_mapping_validates():
    with pytest.raises(InvalidMarkError):
        MarkedOptions.from_mapping({"mark": "@@"})


@pytest.mark.parametrize("cls, data", [
    (IndexedOptions, {"defaultPrecision": 2}),
    (IndexedOptions, {"default_precision": 2, "other": 1}),
    (MarkedOptions, {"marker": "@"}),
])
def test_from_mapping_rejects_unknown_keys(cls, data):
    with pytest.raises(ConfigurationError) as exc_info:
        cls.from_mapping(data)
    assert "unknown option" in str(exc_info.value)
