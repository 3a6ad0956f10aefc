# src/goal_categorizer/tools/check_lexicon.py
from __future__ import annotations
import argparse
import json
import logging
import sys
from collections import Counter

import pandas as pd
import yaml

from goal_categorizer.config import Settings
from goal_categorizer.logging_setup import setup_logging
from goal_categorizer.taxonomy.lexicon import LexiconError, load_lexicon
from goal_categorizer.taxonomy.rules_engine import classify_batch
from goal_categorizer.taxonomy.scoring import load_scoring_config
from goal_categorizer.evaluation.metrics import report_detection_metrics

log = logging.getLogger("goals.check_lexicon")


def main(argv=None) -> int:
    ap = argparse.ArgumentParser(description="Validate a goal lexicon and optionally score it on labeled goals.")
    ap.add_argument("--lexicon", default=None, help="YAML lexicon path (defaults to LEXICON_PATH / bundled resource)")
    ap.add_argument("--scoring", default=None, help="YAML/JSON scoring knob snapshot")
    ap.add_argument("--labels_csv", default=None,
                    help="CSV with title[,description,time_slot],true_category[,true_subcategory]")
    ap.add_argument("--out_csv", default=None, help="Write predictions next to labels")
    ap.add_argument("--log_level", default=None)
    args = ap.parse_args(argv)

    cfg = Settings.from_overrides(
        lexicon_path=args.lexicon, scoring_config_path=args.scoring, log_level=args.log_level,
    )
    setup_logging(cfg.log_level)
    log.info("Settings: %s", json.dumps(cfg.to_dict()))

    try:
        lexicon = load_lexicon(cfg)
    except (LexiconError, OSError, yaml.YAMLError) as e:
        log.error("Could not load lexicon: %s", e)
        return 1
    try:
        scoring = load_scoring_config(cfg.scoring_config_path)
    except (OSError, ValueError, yaml.YAMLError) as e:
        log.error("Could not load scoring knobs: %s", e)
        return 1

    per_cat = Counter(e.category.value for e in lexicon)
    for cat, n in sorted(per_cat.items()):
        log.info("  %-22s %5d entries", cat, n)

    if args.labels_csv:
        df = pd.read_csv(args.labels_csv)
        out = classify_batch(df, lexicon=lexicon, cfg=scoring)
        report_detection_metrics(out)
        if args.out_csv:
            out.to_csv(args.out_csv, index=False)
            log.info("Wrote predictions to %s", args.out_csv)
    return 0


if __name__ == "__main__":
    sys.exit(main())
