# tests/test_cli.py

import pytest

from celnav import cli


def test_deltat(capsys):
    assert cli.main(["deltat", "2000"]) == 0
    assert "ΔT(2000) = 63.860 s" in capsys.readouterr().out


def test_jd(capsys):
    assert cli.main(["jd", "2000-01-01T12:00:00Z"]) == 0
    out = capsys.readouterr().out
    assert "JD_UT = 2451545.000000" in out
    assert "JD_TT" in out


def test_sun(capsys):
    assert cli.main(["sun", "-0.1807", "-78.4678", "2024-03-20T12:00-05:00"]) == 0
    out = capsys.readouterr().out
    assert "State: RISEN_AND_SET" in out
    assert "RISE" in out and "SET" in out


def test_sun_polar(capsys):
    assert cli.main(["sun", "68.9585", "33.0827", "2024-12-21T12:00+03:00"]) == 0
    out = capsys.readouterr().out
    assert "State: POLAR_NIGHT" in out
    assert "(no crossings)" in out


def test_moon(capsys):
    assert cli.main(["moon", "52.52", "13.405", "2024-04-23T00:00+02:00"]) == 0
    out = capsys.readouterr().out
    assert "Illumination (%)" in out
    assert "Age (days)" in out


def test_ring(capsys):
    assert cli.main(["ring", "52.52", "13.405", "2024-03-20T00:00+01:00", "--profile", "civil_twilight"]) == 0
    out = capsys.readouterr().out
    assert out.count("CIVIL_TWILIGHT:") == 2


def test_next(capsys):
    assert cli.main(["next", "sun", "-0.1807", "-78.4678", "2024-03-20T03:00-05:00"]) == 0
    out = capsys.readouterr().out
    assert "RISE" in out
    assert "Previous day state: RISEN_AND_SET" in out

    assert cli.main(["next", "sun", "-0.1807", "-78.4678", "2024-03-20T03:00-05:00", "--absolute"]) == 0
    assert "2024-03-20T06:" in capsys.readouterr().out


def test_profiles(capsys):
    assert cli.main(["profiles"]) == 0
    out = capsys.readouterr().out
    assert "sunrise" in out
    assert "nautical_twilight" in out


def test_naive_datetime_rejected():
    with pytest.raises(SystemExit):
        cli.main(["sun", "0", "0", "2024-03-20T12:00"])


def test_verbose_enables_debug_logging(capsys):
    assert cli.main(["--verbose", "deltat", "1800"]) == 0
    assert "ΔT(1800) = 13.720 s" in capsys.readouterr().out
