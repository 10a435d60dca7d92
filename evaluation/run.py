"""Main evaluation script - generates JSON results."""

import argparse
import asyncio
import json
import logging
import sys
from pathlib import Path
from typing import Any

sys.path.insert(0, str(Path(__file__).parent.parent))

from docverify.services.verification.classifier import classify_document, score_keywords
from docverify.services.verification.extractor import MockDocumentExtractor, TextExtractor
from evaluation.config import EvalConfig
from evaluation.loader import Case, load_cases

logger = logging.getLogger(__name__)


async def evaluate_case(extractor: TextExtractor, case: Case) -> dict[str, Any]:
    """Evaluate a single case."""
    text = await extractor.extract(b"", case.mime_type)
    result = classify_document(text, case.filename)
    education_score, suspicious_score = score_keywords(text, case.filename)

    status_ok = result.status.value == case.expected_status
    confidence_ok = (
        case.expected_confidence is None or result.confidence == case.expected_confidence
    )

    return {
        "id": case.id,
        "filename": case.filename,
        "mime_type": case.mime_type,
        "expected_status": case.expected_status,
        "expected_confidence": case.expected_confidence,
        "predicted_status": result.status.value,
        "predicted_confidence": result.confidence,
        "education_score": education_score,
        "suspicious_score": suspicious_score,
        "correct": status_ok and confidence_ok,
    }


async def run_evaluation(
    config: EvalConfig, extractor: TextExtractor | None = None
) -> dict[str, Any]:
    """Run evaluation and return results."""
    cases = load_cases(config.data_path)
    extractor = extractor or MockDocumentExtractor()

    results = [await evaluate_case(extractor, case) for case in cases]
    correct = sum(1 for r in results if r["correct"])

    return {
        "run_id": config.run_id,
        "total": len(results),
        "correct": correct,
        "accuracy": correct / len(results) if results else 0.0,
        "results": results,
    }


def main() -> None:
    parser = argparse.ArgumentParser(description="Evaluate the document classifier")
    parser.add_argument("--data", type=Path, help="CSV of labeled cases")
    parser.add_argument("--output", type=Path, help="Where to write the JSON report")
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(levelname)s - %(message)s",
    )

    config = EvalConfig()
    if args.data:
        config.data_path = args.data

    report = asyncio.run(run_evaluation(config))

    output = args.output or config.output_path
    output.write_text(json.dumps(report, indent=2, ensure_ascii=False), encoding="utf-8")

    logger.info(f"Accuracy: {report['correct']}/{report['total']} ({report['accuracy']:.1%})")
    logger.info(f"Results saved to {output}")

    for r in report["results"]:
        if not r["correct"]:
            logger.warning(
                f"[{r['id']}] {r['filename']}: expected {r['expected_status']}"
                f"/{r['expected_confidence']}, got {r['predicted_status']}/{r['predicted_confidence']}"
            )


if __name__ == "__main__":
    main()
