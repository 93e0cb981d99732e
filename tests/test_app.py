import json

from app import get_data_file_path, main


def test_default_data_file_next_to_app():
    assert get_data_file_path().endswith("tool_shop.json")


def test_main_prints_report(tmp_path, capsys, monkeypatch):
    monkeypatch.setattr("app.setup_logging", lambda: None)
    path = tmp_path / "shop.json"
    path.write_text(json.dumps({
        "items": [{"id": 1, "name": "Hammer", "quantity": 10, "price": 12.5}],
    }), encoding="utf-8")

    assert main([str(path)]) == 0
    out = capsys.readouterr().out
    assert "Name: Hammer" in out
    assert "Total inventory value: 125.00" in out
    assert "No order exists" in out


def test_main_reports_bad_file(tmp_path, capsys, monkeypatch):
    monkeypatch.setattr("app.setup_logging", lambda: None)
    path = tmp_path / "shop.json"
    path.write_text(json.dumps({"items": [{"id": 1}]}), encoding="utf-8")

    assert main([str(path)]) == 1
    assert "could not load" in capsys.readouterr().err


def test_main_reports_malformed_records(tmp_path, capsys, monkeypatch):
    monkeypatch.setattr("app.setup_logging", lambda: None)
    path = tmp_path / "shop.json"
    path.write_text(json.dumps({"customers": [["x"]]}), encoding="utf-8")

    assert main([str(path)]) == 1
    assert "customer record #0: not an object" in capsys.readouterr().err
