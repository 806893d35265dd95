import pyparkinglot


def test_public_exports() -> None:
    for name in pyparkinglot.__all__:
        assert hasattr(pyparkinglot, name)


def test_top_level_usage() -> None:
    lot = pyparkinglot.Registry({pyparkinglot.Category.MEDIUM: 1})
    assert lot.park(pyparkinglot.CAR) is True
    assert lot.park(pyparkinglot.CAR) is False
