"""Age on the planets of the solar system."""

from enum import Enum

EARTH_YEAR_SECONDS = 365.25 * 24 * 60 * 60


class Planet(Enum):
    """Planets, valued by their orbital period in Earth years."""

    MERCURY = 0.2408467
    VENUS = 0.61519726
    EARTH = 1.0
    MARS = 1.8808158
    JUPITER = 11.862615
    SATURN = 29.447498
    URANUS = 84.016846
    NEPTUNE = 164.79132

    @property
    def orbital_period(self) -> float:
        return self.value

    def years_during(self, seconds: float) -> float:
        """Number of this planet's years that pass in ``seconds``."""
        return seconds / (self.orbital_period * EARTH_YEAR_SECONDS)