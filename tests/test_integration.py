"""Integration tests for end-to-end workflows."""

import json

from adtrack.cli.main import cli


def test_full_workflow(cli_runner, temp_db, tmp_path):
    """Test complete workflow: add → summary → backup → delete → restore → export."""
    base = ["--db-path", temp_db.database_path, "--today", "2024-03-15"]

    # Step 1: Record a week of spend for one project
    created = []
    for day, platform, spend, purchases in [
        ("2024-03-15", "meta", "100", "10"),
        ("2024-03-15", "google", "50", "20"),
        ("2024-03-12", "snapchat", "60", "2"),
        ("2024-02-20", "tiktok", "500", "5"),
    ]:
        result = cli_runner.invoke(
            cli,
            base + ["add", "--date", day, "--project", "azza", "--platform", platform,
                    "--spend", spend, "--purchases", purchases],
        )
        assert result.exit_code == 0, result.output
        created.append(result.output.splitlines()[0].split()[-1])

    # Step 2: Last 7 days summary leaves out February
    result = cli_runner.invoke(cli, base + ["summary", "--project", "azza", "--range", "last-7-days", "--platforms"])
    assert result.exit_code == 0
    section = result.output.split("Azza Al-Mutamayeza (Last 7 days)")[1]
    assert "SAR 210.00" in section
    assert "Google Ads" in section
    assert "Snapchat" in section

    # Step 3: Back everything up
    backup_path = tmp_path / "backup.json"
    result = cli_runner.invoke(cli, base + ["export", "backup", "--output", str(backup_path)])
    assert result.exit_code == 0
    assert len(json.loads(backup_path.read_text(encoding="utf-8"))) == 4

    # Step 4: Delete an entry
    result = cli_runner.invoke(cli, base + ["entry", "delete", created[0], "--yes"])
    assert result.exit_code == 0
    result = cli_runner.invoke(cli, base + ["entry", "list"])
    assert "Found 3 entries" in result.output

    # Step 5: Restore from the backup
    result = cli_runner.invoke(cli, base + ["import", str(backup_path), "--yes"])
    assert result.exit_code == 0
    assert "Imported: 4 entries" in result.output
    assert "Replaced: 3 entries" in result.output

    result = cli_runner.invoke(cli, base + ["entry", "show", created[0]])
    assert result.exit_code == 0
    assert "Spend: SAR 100.00" in result.output

    # Step 6: Export this month for a spreadsheet
    result = cli_runner.invoke(cli, base + ["export", "tsv", "--range", "this-month"])
    assert result.exit_code == 0
    lines = result.output.splitlines()
    assert len(lines) == 4
    assert all(line.startswith("2024-03-") for line in lines[1:])
