"""Test the command-line runner end to end on a temporary job file"""

import asyncio
import json
import os
import sys

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from main import main


def write_jobs(tmp_path, jobs):
    path = tmp_path / "jobs.json"
    path.write_text(json.dumps(jobs), encoding="utf-8")
    return str(path)


def test_lists_filtered_sorted_jobs(tmp_path, capsys):
    path = write_jobs(
        tmp_path,
        [
            {"Title": "Old", "Posted": "2 months ago", "Type": "Fixed"},
            {"Title": "New", "Posted": "10 minutes ago", "Type": "Fixed"},
            {"Title": "Hourly", "Posted": "1 hour ago", "Type": "Hourly"},
        ],
    )
    code = asyncio.run(main([path, "--type", "Fixed", "--sort", "posted-old", "--details", "1"]))
    out = capsys.readouterr().out

    assert code == 0
    assert "1. Old (2 month(s) ago)\n2. New (10 minute(s) ago)" in out
    assert "Hourly" not in out
    assert "Posted: 2 month(s) ago" in out


def test_bad_file_exits_with_error(tmp_path, capsys):
    path = write_jobs(tmp_path, {"Title": "A"})
    code = asyncio.run(main([path]))
    assert code == 1
    assert "Error processing file" in capsys.readouterr().out


def test_no_file_is_noop(capsys):
    assert asyncio.run(main([])) == 0
    assert "No jobs available." not in capsys.readouterr().out


def test_empty_result_message(tmp_path, capsys):
    path = write_jobs(tmp_path, [{"Title": "A", "Posted": "1 day"}])
    assert asyncio.run(main([path, "--skill", "Rust"])) == 0
    assert "No jobs available." in capsys.readouterr().out
