import csv
import json
from pathlib import Path
from wordlebot.engine import build_index
from wordlebot.harness import run_case, run_batch, write_csv, write_manifest

WORDS = ["crane", "raise", "stare", "trace", "cared"]


def test_run_case_smoke():
    index = build_index(WORDS)
    r = run_case(index, "crane", seed=42)
    assert r["success"] is True and r["error"] is None
    word, patt, pool = r["history"][-1]
    assert word == "crane" and patt == "GGGGG"
    assert r["history"][0][2] == len(WORDS)
    assert r["guesses"] == len(r["history"])


def test_run_case_goal_missing():
    index = build_index(WORDS)
    r = run_case(index, "zzzzz", picker_id="letter_freq", seed=1)
    assert r["success"] is False
    assert r["error"] in {"exhausted", "singleton_mismatch"}


def test_run_batch_and_csv(tmp_path: Path):
    index = build_index(WORDS)
    results = run_batch(index, WORDS + ["zzzzz"], seed=7, sample=4)
    assert [r["answer"] for r in results] == WORDS[:4]
    assert all(r["success"] for r in results)

    path = write_csv(results, str(tmp_path / "out" / "run.csv"), N=5)
    with open(path, newline="", encoding="utf-8") as f:
        rows = list(csv.DictReader(f))
    assert len(rows) == 4
    assert rows[0]["answer"] == "crane"
    assert rows[0]["patt_1"].startswith("'")
    assert rows[0]["pool_1"] == str(len(WORDS))


def test_write_manifest(tmp_path: Path):
    path = write_manifest({"run_id": "x", "num_cases": 3}, str(tmp_path / "m.json"))
    assert json.loads(Path(path).read_text(encoding="utf-8"))["num_cases"] == 3
