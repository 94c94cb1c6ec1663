"""
CLI entry point for evaluating the intent classifier on a labelled dataset.

Usage:
    python -m carbon_assistant.evaluation.run_eval --dataset data/labelled_utterances.json
    python -m carbon_assistant.evaluation.run_eval --dataset data.json --report report.txt --verbose
"""

import argparse
import logging
import sys
from pathlib import Path

from pydantic import ValidationError

from carbon_assistant.evaluation.metrics import ClassifierEvaluator, load_dataset

logger = logging.getLogger(__name__)


def main() -> None:
    parser = argparse.ArgumentParser(
        description="Evaluate intent classification and entity extraction on labelled utterances."
    )
    parser.add_argument(
        "--dataset",
        type=str,
        required=True,
        help="Path to a JSON list of {text, expected_intent, expected_entities} objects.",
    )
    parser.add_argument(
        "--report",
        type=str,
        default=None,
        help="Path to write the evaluation report (default: stdout).",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable verbose logging and list misclassified examples.",
    )

    args = parser.parse_args()

    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    dataset_path = Path(args.dataset)
    if not dataset_path.exists():
        logger.error("Dataset not found: %s", dataset_path)
        sys.exit(1)

    try:
        examples = load_dataset(dataset_path)
    except (ValueError, ValidationError) as e:
        logger.error("Invalid dataset %s: %s", dataset_path, e)
        sys.exit(1)

    if not examples:
        logger.error("No examples found in %s", dataset_path)
        sys.exit(1)

    logger.info("Loaded %d example(s) from %s", len(examples), dataset_path)

    evaluator = ClassifierEvaluator()
    metrics = evaluator.evaluate(examples)
    output = evaluator.format_report(metrics, verbose=args.verbose)

    if args.report:
        report_path = Path(args.report)
        report_path.write_text(output, encoding="utf-8")
        logger.info("Report written to %s", report_path)
    else:
        sys.stdout.write(output + "\n")


if __name__ == "__main__":
    main()
