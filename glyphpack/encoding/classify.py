from __future__ import annotations

from .types import ChromaKeyMode, ChromaKeyPolicy, Color, ForegroundPolicy, ThresholdPolicy
from ..errors import ConfigurationError


def classify(color: Color, policy: ForegroundPolicy) -> bool:
    """Return True if the pixel counts as foreground under the policy."""
    if isinstance(policy, ThresholdPolicy):
        return color[policy.channel] == policy.value
    if isinstance(policy, ChromaKeyPolicy):
        if policy.reference is None:
            raise ConfigurationError("Chroma key reference color has not been sampled")
        equal = tuple(color) == tuple(policy.reference)
        return equal == (policy.mode is ChromaKeyMode.EQUAL_IS_FOREGROUND)
    raise ConfigurationError(f"Unsupported foreground policy: {policy!r}")
