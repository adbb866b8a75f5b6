from dataclasses import dataclass
from typing import Any, Dict


def flag_to_bool(value: Any) -> bool:
    """Upstream 0/1 flags: exactly 1 is true, anything else is false."""
    return value == 1


@dataclass(frozen=True)
class Astronomy:
    """Sun and moon times for one day at one location."""

    sunrise: str
    sunset: str
    moonrise: str
    moonset: str
    moon_phase: str
    moon_illumination_percent: int
    is_moon_up: bool
    is_sun_up: bool

    @classmethod
    def from_astro(cls, astro: Dict[str, Any]) -> "Astronomy":
        """Map the inner `astro` object, as found in astronomy and forecast-day payloads."""
        return cls(
            sunrise=str(astro["sunrise"]),
            sunset=str(astro["sunset"]),
            moonrise=str(astro["moonrise"]),
            moonset=str(astro["moonset"]),
            moon_phase=str(astro["moon_phase"]),
            moon_illumination_percent=int(astro["moon_illumination"]),
            is_moon_up=flag_to_bool(astro["is_moon_up"]),
            is_sun_up=flag_to_bool(astro["is_sun_up"]),
        )

    @classmethod
    def from_response(cls, payload: Dict[str, Any]) -> "Astronomy":
        """Map `{"astronomy": {"astro": {...}}}`; raises on a malformed payload."""
        return cls.from_astro(payload["astronomy"]["astro"])
