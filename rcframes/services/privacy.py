"""Privacy policy document loading."""

import json
import logging
from functools import lru_cache
from pathlib import Path

from rcframes.models.frames import PrivacyPolicy

logger = logging.getLogger(__name__)

DEFAULT_POLICY_PATH = Path(__file__).resolve().parent.parent / "privacy-policy.json"


@lru_cache
def load_privacy_policy(path: Path | None = None) -> PrivacyPolicy:
    """Load and validate the policy document once per process."""
    policy_path = path or DEFAULT_POLICY_PATH
    with policy_path.open(encoding="utf-8") as f:
        policy = PrivacyPolicy.model_validate(json.load(f))
    logger.info(f"Loaded privacy policy effective {policy.effective_date}")
    return policy
