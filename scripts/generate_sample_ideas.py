#!/usr/bin/env python3
"""
Generate sample idea files for trying the layout CLI.

Sets:
  ideas_small.json   - 8 short goals (roomy board)
  ideas_medium.json  - 25 mixed-length goals
  ideas_dense.json   - 80 goals, more than a default board can hold without overlap
  scores_small.json  - model-style similarity reply for ideas_small.json
"""

from __future__ import annotations

import json
from pathlib import Path

import numpy as np

OUTPUT_DIR = Path(__file__).parent.parent / "docs" / "samples"

VERBS = ["Learn", "Practice", "Finish", "Start", "Plan", "Train for", "Read about", "Build", "Cook", "Write"]
TOPICS = [
    "a half marathon", "Thai curry", "the guitar solo", "a side project", "Spanish verbs",
    "a weekly budget", "the garden beds", "a blog post", "morning stretches", "the tax return",
    "a photo book", "home-made bread", "chess openings", "the bike commute", "a short story",
]
TAILS = ["", "this week", "before summer", "every day", "with a friend", "in under an hour"]


def make_ideas(n: int, seed: int) -> list[dict]:
    rng = np.random.default_rng(seed)
    out: list[dict] = []
    for k in range(n):
        verb = VERBS[int(rng.integers(len(VERBS)))]
        topic = TOPICS[int(rng.integers(len(TOPICS)))]
        tail = TAILS[int(rng.integers(len(TAILS)))]
        text = " ".join(part for part in (verb, topic, tail) if part)
        out.append({"id": f"sample-{seed}-{k:03d}", "text": text, "status": "active"})
    return out


def save_json(filename: str, data: object) -> None:
    path = OUTPUT_DIR / filename
    path.write_text(json.dumps(data, indent=2), encoding="utf-8")
    print(f"Saved: {path}")


def main() -> None:
    OUTPUT_DIR.mkdir(parents=True, exist_ok=True)
    save_json("ideas_small.json", make_ideas(8, seed=1))
    save_json("ideas_medium.json", make_ideas(25, seed=2))
    save_json("ideas_dense.json", make_ideas(80, seed=3))
    save_json(
        "scores_small.json",
        {"similarities": [{"i": 0, "j": 1, "score": 0.82}, {"i": 2, "j": 5, "score": 0.64}, {"i": 3, "j": 7, "score": 0.1}]},
    )


if __name__ == "__main__":
    main()
