import pytest

from termage.cli import main


@pytest.mark.parametrize("mode", ["-g3", "g1", "", "--help"])
def test_unknown_mode_returns_zero(mode):
    assert main([mode]) == 0


@pytest.mark.parametrize("argv", [["-g9"], ["nothing", "-g1"], ["-g0", "-g2"]])
def test_main_with_unknown_mode_returns_zero(argv):
    assert main(argv) == 0