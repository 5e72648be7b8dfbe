import logging
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from pgnudge.errors import MutationExhaustedError, ParseError  # noqa: E402
from pgnudge.pipeline.nudge_pipeline import NudgePipeline  # noqa: E402

from driver.app.config import AppConfig  # noqa: E402
from driver.app.loaders.game_loader import load_game, save_game  # noqa: E402


def main(config: AppConfig | None = None) -> int:
    config = config or AppConfig()
    logging.basicConfig(
        level=str(config.log_level).upper(),
        format="%(asctime)s %(levelname)s %(message)s",
        stream=sys.stderr,
    )
    logger = logging.getLogger("pgnudge.run")

    try:
        graph = load_game(config.input_path)
    except ParseError as exc:
        logger.error("parsing error: %s", exc)
        return 1

    pipeline = NudgePipeline(config=config.nudge)
    try:
        pipeline.run(graph)
    except MutationExhaustedError as exc:
        logger.error("%s", exc)
        return 2

    if pipeline.last_report is not None:
        report = pipeline.last_report
        logger.info(
            "applied %s edits in %s attempts: %s",
            report.successes,
            report.attempts,
            report.applied,
        )

    save_game(graph, config.output_path)
    return 0


if __name__ == "__main__":
    sys.exit(main())
