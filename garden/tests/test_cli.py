from garden.client import cli


def test_save_and_history(api, capsys):
    assert cli.main(["save", "tomato=2", "Basil=1", "--name", "Patio"], api=api) == 0
    out = capsys.readouterr().out
    assert "Estimated savings: $130.00" in out
    assert "Garden Plan Saved!" in out

    assert cli.main(["history"], api=api) == 0
    out = capsys.readouterr().out
    assert "2x Tomato, 1x Basil" in out
    assert "$130.00" in out


def test_dry_run_does_not_save(api, capsys):
    assert cli.main(["save", "carrot=3", "--dry-run"], api=api) == 0
    assert "$2.70" in capsys.readouterr().out
    assert api.get_gardens() == []


def test_unknown_plant(api, capsys):
    assert cli.main(["save", "pumpkin=3"], api=api) == 2
    assert "Unknown plant" in capsys.readouterr().err


def test_plants_filter(api, capsys):
    assert cli.main(["plants", "--category", "Fruit"], api=api) == 0
    out = capsys.readouterr().out
    assert "Strawberry" in out
    assert "Tomato" not in out


def test_delete_unknown_reports_failure(api, capsys):
    assert cli.main(["delete", "nope", "--yes"], api=api) == 1
    assert "Failed to delete the plan." in capsys.readouterr().err


def test_stats_trend_clear_export(api, capsys, tmp_path):
    cli.main(["save", "t1=1"], api=api)
    cli.main(["save", "c1=5"], api=api)
    capsys.readouterr()

    assert cli.main(["stats"], api=api) == 0
    out = capsys.readouterr().out
    assert "Plans: 2" in out
    assert "Total harvest: 16.00 lbs" in out

    assert cli.main(["trend"], api=api) == 0
    assert len(capsys.readouterr().out.strip().splitlines()) == 2

    target = tmp_path / "out.csv"
    assert cli.main(["export", "--format", "csv", "--file", str(target)], api=api) == 0
    assert len(target.read_text(encoding="utf-8").splitlines()) == 3

    assert cli.main(["clear", "--yes"], api=api) == 0
    assert "Deleted 2 plans." in capsys.readouterr().out
