import pytest

import main
from config_paths import ConfigError


def test_version_flag(monkeypatch, capsys):
    monkeypatch.setattr(main.sys, "argv", ["csvdesk", "-v"])
    main.main()
    assert capsys.readouterr().out.strip() == main.__version__


@pytest.mark.parametrize(
    "args, expected",
    [
        ([], None),
        (["-c", "/tmp/cfg.json"], "/tmp/cfg.json"),
    ],
)
def test_config_path_arg(args, expected):
    assert main._config_path_arg(args) == expected


def test_config_path_arg_requires_value():
    with pytest.raises(ConfigError):
        main._config_path_arg(["-c"])


def test_malformed_config_exits(monkeypatch, tmp_path, capsys):
    cfg = tmp_path / "config.json"
    cfg.write_text("{oops")
    monkeypatch.setattr(main.sys, "argv", ["csvdesk", "-c", str(cfg)])
    with pytest.raises(SystemExit) as exc:
        main.main()
    assert exc.value.code == 1
    assert "Config error" in capsys.readouterr().err


def test_load_failure_exits(monkeypatch, tmp_path, capsys):
    master = tmp_path / "master"
    master.mkdir()
    (master / "bad.csv").write_bytes(b"\xff\xfe\x00bad")
    monkeypatch.setattr(main.sys, "argv", ["csvdesk"])
    monkeypatch.setattr(
        main,
        "load_config",
        lambda _path: {
            "MASTER_DIRECTORY": str(master),
            "ARCHIVE_DIRECTORY": str(tmp_path / "history"),
            "EXTENSION": "csv",
            "INFER_SAMPLE_LIMIT": 100,
        },
    )
    with pytest.raises(SystemExit) as exc:
        main.main()
    assert exc.value.code == 1
    assert "Load failed" in capsys.readouterr().err
