import importlib.util
import sys
from pathlib import Path

import pytest

_script = Path(__file__).parent.parent / "scripts" / "why_encrypt.py"


def _load_why_encrypt():
    spec = importlib.util.spec_from_file_location("why_encrypt", _script)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


def test_why_encrypt_prints_reference_digest(monkeypatch, capsys):
    cli = _load_why_encrypt()
    monkeypatch.setattr(sys, "argv", ["why_encrypt.py", "--data", "Wh?", "--key", "42,17,99",
                                      "--format", "hex", "--profile", "standard", "--hash", "sha256"])
    assert cli.main() == 0
    out = capsys.readouterr().out.strip()
    assert out == "89d400b75448b5829fee121ae460ab5553211484a0ad7e108cf410e8e73f1499"


@pytest.mark.parametrize(
    "extra",
    [["--data-hex", "zz"], ["--key", "1,300"], ["--key", "abc"]],
)
def test_why_encrypt_reports_bad_input_as_usage_error(monkeypatch, capsys, extra):
    cli = _load_why_encrypt()
    monkeypatch.setattr(sys, "argv", ["why_encrypt.py", *extra])
    with pytest.raises(SystemExit) as exc:
        cli.main()
    assert exc.value.code == 2
    assert "error:" in capsys.readouterr().err


def test_why_encrypt_reports_pipeline_errors(monkeypatch, capsys):
    cli = _load_why_encrypt()
    monkeypatch.setattr(sys, "argv", ["why_encrypt.py", "--hash", "sha384"])
    assert cli.main() == 1
    assert "InvalidKeySize" in capsys.readouterr().err
