import wave

import pytest

from noisedrift import SynthesisConfig, cli


def test_main_writes_configured_file(tmp_path, monkeypatch, capsys):
    output = tmp_path / "noise.wav"
    config = SynthesisConfig(sample_rate=200, duration_seconds=1, waves_per_type=1, output_path=str(output))
    monkeypatch.setattr(cli, "DEFAULT_CONFIG", config)

    assert cli.main([]) == 0

    assert f"Audio file saved as {output}" in capsys.readouterr().out
    with wave.open(str(output), "rb") as wf:
        assert wf.getnframes() == 200


def test_main_reports_write_failure(tmp_path, monkeypatch):
    blocker = tmp_path / "blocker"
    blocker.write_text("not a directory")
    config = SynthesisConfig(
        sample_rate=200,
        duration_seconds=1,
        waves_per_type=1,
        output_path=str(blocker / "noise.wav"),
    )
    monkeypatch.setattr(cli, "DEFAULT_CONFIG", config)

    assert cli.main([]) == 1


def test_main_rejects_arguments():
    with pytest.raises(SystemExit) as excinfo:
        cli.main(["--duration", "5"])

    assert excinfo.value.code == 2
