# RevenueCat payload to display frame transformation

from .extraction import extract_metric_value
from .overview import OVERVIEW_METRIC_PRESETS, build_overview_bundle_frames
from .pipeline import OVERVIEW_BUNDLE_METRIC, FramePipeline, FrameQuery
from .single import build_single_metric_frames
from .upstream import RevenueCatClient, build_upstream_url

__all__ = [
    "extract_metric_value",
    "OVERVIEW_METRIC_PRESETS",
    "build_overview_bundle_frames",
    "OVERVIEW_BUNDLE_METRIC",
    "FramePipeline",
    "FrameQuery",
    "build_single_metric_frames",
    "RevenueCatClient",
    "build_upstream_url",
]
