"""Risk tier classification for vault candidates."""

from typing import Optional, Union

from vault_allocator.core.constants import (
    HIGH_RISK_MAX_SCORE,
    HIGH_RISK_MIN_APY,
    LOW_RISK_MAX_APY,
    LOW_RISK_MIN_SCORE,
)
from vault_allocator.core.models import RiskPreference, RiskTier


class RiskClassifier:
    """
    Maps external risk data and user input onto RiskTier.

    Two independent sources are supported:
    - an upstream risk score (0-10, higher is safer)
    - the vault APY, used as a proxy when no score is published
    """

    @staticmethod
    def risk_from_score(score: Optional[float]) -> Optional[RiskTier]:
        """
        Classify an upstream risk score.

        Args:
            score: Risk score, higher is safer. None or 0 means unscored.

        Returns:
            RiskTier, or None when there is no usable score
        """
        if not score:
            return None
        if score >= LOW_RISK_MIN_SCORE:
            return RiskTier.LOW
        if score <= HIGH_RISK_MAX_SCORE:
            return RiskTier.HIGH
        return RiskTier.MEDIUM

    @staticmethod
    def risk_from_apy(apy: float) -> RiskTier:
        """
        Infer a tier from APY bands.

        Args:
            apy: APY in percentage units

        Returns:
            LOW below 5%, HIGH above 15%, MEDIUM otherwise
        """
        if apy < LOW_RISK_MAX_APY:
            return RiskTier.LOW
        if apy > HIGH_RISK_MIN_APY:
            return RiskTier.HIGH
        return RiskTier.MEDIUM

    @classmethod
    def resolve(cls, score: Optional[float], apy: float) -> RiskTier:
        """Use the score tier when a score exists, the APY band otherwise."""
        tier = cls.risk_from_score(score)
        if tier is not None:
            return tier
        return cls.risk_from_apy(apy)

    @staticmethod
    def for_preference(preference: Union[RiskPreference, str, None]) -> RiskTier:
        """
        Map an investor preference to the tier its vaults are drawn from.

        Conservative -> Low, Aggressive -> High, anything else -> Medium.
        """
        if isinstance(preference, str):
            preference = RiskClassifier.parse_preference(preference)
        if preference == RiskPreference.CONSERVATIVE:
            return RiskTier.LOW
        if preference == RiskPreference.AGGRESSIVE:
            return RiskTier.HIGH
        return RiskTier.MEDIUM

    @staticmethod
    def parse_tier(
        value: Optional[str],
        default: RiskTier = RiskTier.MEDIUM,
    ) -> RiskTier:
        """Parse a user-supplied tier name, falling back to ``default``."""
        if not value:
            return default
        text = value.strip().lower()
        for tier in RiskTier:
            if tier.value.lower() == text:
                return tier
        return default

    @staticmethod
    def parse_preference(
        value: Optional[str],
        default: RiskPreference = RiskPreference.BALANCED,
    ) -> RiskPreference:
        """Parse a user-supplied preference name, falling back to ``default``."""
        if not value:
            return default
        text = value.strip().lower()
        for pref in RiskPreference:
            if pref.value.lower() == text:
                return pref
        return default
