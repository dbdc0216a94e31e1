import csv
import json
import os
from typing import Dict, Iterable, List, Optional, Tuple

CANDIDATE_TEXT_COLS = ["text", "post", "status", "message", "comment_text", "comment", "content", "body"]
LABEL_COLS = ["label", "labels", "target", "flagged", "toxic"]
FLAGGED_LABELS = {"1", "true", "yes", "toxic", "flagged", "offensive", "abuse", "insult", "profanity"}


def _open(path: str):
    return open(path, "r", encoding="utf-8-sig", newline="")


def load_csv(path: str) -> List[Dict]:
    delim = "\t" if path.lower().endswith(".tsv") else ","
    with _open(path) as f:
        return [
            {k.strip(): (v if v is not None else "") for k, v in row.items() if k is not None}
            for row in csv.DictReader(f, delimiter=delim)
        ]


def load_jsonl(path: str) -> List[Dict]:
    out = []
    with _open(path) as f:
        for n, line in enumerate(f, 1):
            line = line.strip()
            if not line:
                continue
            rec = json.loads(line)
            if not isinstance(rec, dict):
                raise ValueError(f"{path}:{n}: expected a JSON object per line")
            out.append(rec)
    return out


def as_records(path: str) -> List[Dict]:
    if not os.path.exists(path):
        raise FileNotFoundError(path)
    ext = os.path.splitext(path)[1].lower()
    if ext in (".jsonl", ".ndjson"):
        return load_jsonl(path)
    return load_csv(path)


def guess_text_col(headers: Iterable[str]) -> str:
    headers = list(headers)
    if not headers:
        raise ValueError("dataset has no columns")
    low = [h.lower() for h in headers]
    for c in CANDIDATE_TEXT_COLS:
        if c in low:
            return headers[low.index(c)]
    for h in headers:
        if h.lower() not in {"id", *LABEL_COLS}:
            return h
    return headers[0]


def is_flagged_label(value) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, float)):
        return value >= 1
    return str(value or "").strip().lower() in FLAGGED_LABELS


def _label_of(rec: Dict):
    for c in LABEL_COLS:
        if c in rec:
            return rec[c]
    return None


def load_labeled_texts(path: str, text_col: Optional[str] = None, limit: Optional[int] = None) -> List[Tuple[str, bool]]:
    """(text, flagged) pairs from a CSV/TSV/JSONL dataset."""
    recs = as_records(path)
    if not recs:
        return []
    col = text_col or guess_text_col(recs[0].keys())
    if limit:
        recs = recs[:limit]
    return [(str(r.get(col, "") or ""), is_flagged_label(_label_of(r))) for r in recs]


if __name__ == "__main__":
    import argparse
    ap = argparse.ArgumentParser()
    ap.add_argument("--path", required=True, help="CSV or JSONL")
    ap.add_argument("--text-col", default=None)
    args = ap.parse_args()

    rows = load_labeled_texts(args.path, args.text_col)
    print(f"loaded: {len(rows)} rows; sample: {rows[0] if rows else '[]'}")
