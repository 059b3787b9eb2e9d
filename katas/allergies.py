"""Decode an allergy score into allergens."""

from enum import Enum


class Allergen(Enum):
    """Known allergens, each valued by its bit in the score."""

    EGGS = 1
    PEANUTS = 2
    SHELLFISH = 4
    STRAWBERRIES = 8
    TOMATOES = 16
    CHOCOLATE = 32
    POLLEN = 64
    CATS = 128


class Allergies:
    """Allergies encoded in a score."""

    def __init__(self, score: int) -> None:
        self.score = score

    def is_allergic_to(self, allergen: Allergen) -> bool:
        """Whether the score includes ``allergen``."""
        return bool(self.score & allergen.value)

    def allergies(self) -> list[Allergen]:
        """All allergens included in the score, in declaration order."""
        return [allergen for allergen in Allergen if self.is_allergic_to(allergen)]