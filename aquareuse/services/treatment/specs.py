# aquareuse/services/treatment/specs.py
# Fixed domain constants for the stage decision engine.

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Dict, Optional

from pydantic.alias_generators import to_camel


@dataclass(frozen=True)
class PrimaryThresholds:
    turbidity_ntu: float = 50.0
    tss_mg_l: float = 100.0


@dataclass(frozen=True)
class SecondaryThresholds:
    cod_mg_l: float = 150.0
    bod_mg_l: float = 30.0


@dataclass(frozen=True)
class TertiaryThresholds:
    nitrogen_mg_l: float = 10.0
    phosphorus_mg_l: float = 1.0
    ph_min: float = 6.5
    ph_max: float = 8.5


@dataclass(frozen=True)
class TreatmentThresholds:
    primary: PrimaryThresholds = PrimaryThresholds()
    secondary: SecondaryThresholds = SecondaryThresholds()
    tertiary: TertiaryThresholds = TertiaryThresholds()

    def as_dict(self) -> Dict[str, Dict[str, float]]:
        """Stage -> limits, with camelCase limit keys as in every JSON response."""
        return {
            stage: {to_camel(key): value for key, value in limits.items()}
            for stage, limits in asdict(self).items()
        }


THRESHOLDS = TreatmentThresholds()

# TSS (mg/L) ~ 1.5 x Turbidity (NTU)
TSS_PER_NTU = 1.5
# typical BOD/COD ratio is 0.4-0.6
BOD_COD_RATIO = 0.5


def estimate_tss(turbidity: float) -> float:
    return turbidity * TSS_PER_NTU


def estimate_bod(cod: float) -> float:
    return cod * BOD_COD_RATIO


def resolve_tss(tss: Optional[float], turbidity: float) -> float:
    """Explicit TSS wins; the turbidity correlation is only a fallback."""
    return tss if tss is not None else estimate_tss(turbidity)


def resolve_bod(bod: Optional[float], cod: float) -> float:
    """Explicit BOD wins; the COD ratio is only a fallback."""
    return bod if bod is not None else estimate_bod(cod)
