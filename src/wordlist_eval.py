import argparse
import json
import logging
import os
from collections import Counter
from datetime import datetime
from typing import Dict, Optional

from data_loader import load_labeled_texts
from fuzzy_match import MATCH_KINDS
from logging_config import configure_logging
from post_filter import PostFilter

log = logging.getLogger(__name__)


def evaluate(
    dataset_path: str,
    config_path: str = "config.yaml",
    limit: Optional[int] = None,
    out_dir: Optional[str] = "eval_reports",
    text_col: Optional[str] = None,
    post_filter: Optional[PostFilter] = None,
) -> Dict:
    """Run the word list over a labeled dataset and report how well it separates posts."""
    rows = load_labeled_texts(dataset_path, text_col=text_col, limit=limit)
    pf = post_filter or PostFilter(config_path)

    kinds = Counter({k: 0 for k in MATCH_KINDS})
    terms = Counter()
    tp = fp = fn = tn = 0

    for text, flagged in rows:
        verdict = pf.check(text)
        if verdict.blocked:
            kinds[verdict.kind] += 1
            terms[verdict.term] += 1
        if verdict.blocked and flagged:
            tp += 1
        elif verdict.blocked:
            fp += 1
            log.debug("false positive %r on %r", verdict.term, text)
        elif flagged:
            fn += 1
        else:
            tn += 1

    total = len(rows)
    prec = tp / (tp + fp) if (tp + fp) else 0.0
    rec = tp / (tp + fn) if (tp + fn) else 0.0
    f1 = 2 * prec * rec / (prec + rec) if (prec + rec) else 0.0

    report = {
        "dataset": dataset_path,
        "rows": total,
        "dictionary_size": len(pf.dictionary),
        "blocked": tp + fp,
        "match_kinds": dict(kinds),
        "top_terms": terms.most_common(10),
        "confusion": {"tp": tp, "fp": fp, "fn": fn, "tn": tn},
        "accuracy": (tp + tn) / total if total else 0.0,
        "precision": prec,
        "recall": rec,
        "f1": f1,
        "timestamp": datetime.now().isoformat(),
    }

    if out_dir:
        os.makedirs(out_dir, exist_ok=True)
        out_file = os.path.join(out_dir, datetime.now().strftime("%Y%m%d_%H%M%S_report.json"))
        with open(out_file, "w", encoding="utf-8") as f:
            json.dump(report, f, indent=2, ensure_ascii=False)
        report["report_path"] = out_file
        log.info("saved report to %s", out_file)

    return report


def main(argv=None) -> int:
    ap = argparse.ArgumentParser(description="Evaluate the bad-word list against a labeled dataset.")
    ap.add_argument("--csv", required=True, help="dataset CSV/TSV/JSONL with text + label")
    ap.add_argument("--config", default="config.yaml")
    ap.add_argument("--text-col", default=None)
    ap.add_argument("--limit", type=int, default=None)
    ap.add_argument("--out-dir", default="eval_reports")
    args = ap.parse_args(argv)
    configure_logging("INFO")

    report = evaluate(args.csv, args.config, args.limit, args.out_dir, text_col=args.text_col)
    print(json.dumps(report, indent=2, ensure_ascii=False))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
