from pgnudge.pipeline.nudge_pipeline import NudgePipeline

__all__ = ["NudgePipeline"]
